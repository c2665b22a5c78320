"""Locating and loading the sprites the game draws with."""

from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

import pygame

from solong.game import Direction

__all__ = ["AssetError", "Textures", "asset_paths", "load_textures"]

_COIN_FRAMES = 8

_BASE_PATHS = {
    "player_start": "images/player/player_start.png",
    "ground": "images/other/ground.png",
    "wall": "images/other/wall.png",
    "player_right": "images/player/player_right.png",
    "player_left": "images/player/player_left.png",
    "player_up": "images/player/player_up.png",
    "player_down": "images/player/player_down.png",
    "coins": "images/coins/coins1.png",
    "exit": "images/other/exit.png",
}


class AssetError(Exception):
    """Raised when a sprite file is missing or cannot be decoded."""


@dataclass(frozen=True)
class Textures:
    """Every sprite the renderer needs.

    ``coins`` holds the coin animation frames in order: a single frame
    for the plain game, eight in bonus mode. ``enemy`` is only loaded in
    bonus mode.
    """

    ground: pygame.Surface
    wall: pygame.Surface
    exit: pygame.Surface
    player_start: pygame.Surface
    player_up: pygame.Surface
    player_down: pygame.Surface
    player_left: pygame.Surface
    player_right: pygame.Surface
    coins: tuple[pygame.Surface, ...]
    enemy: pygame.Surface | None = None

    def player(self, facing: Direction | None) -> pygame.Surface:
        """Return the player sprite for the way the player last faced."""
        if facing is None:
            return self.player_start
        return {
            Direction.UP: self.player_up,
            Direction.DOWN: self.player_down,
            Direction.LEFT: self.player_left,
            Direction.RIGHT: self.player_right,
        }[facing]

    def coin(self, frame: int = 1) -> pygame.Surface:
        """Return coin animation frame ``frame``, counted from 1.

        Frames past the last one wrap around to the first.
        """
        if frame < 1:
            raise ValueError("frame must be at least 1")
        return self.coins[(frame - 1) % len(self.coins)]


def asset_paths(bonus: bool = False) -> dict[str, str]:
    """Return sprite names mapped to their paths, in loading order.

    Paths are relative to the game's base directory. In bonus mode the
    coin sprite is the first animation frame, and the enemy and the other
    seven coin frames are added.
    """
    paths = dict(_BASE_PATHS)
    if not bonus:
        return paths
    paths["coins"] = "images/frame/coins_frame1.png"
    paths["enemy"] = "images/enemy/enemy1.png"
    for index in range(2, _COIN_FRAMES + 1):
        paths[f"coins_frame{index}"] = f"images/frame/coins_frame{index}.png"
    return paths


def _load(base: Path, relative: str) -> pygame.Surface:
    try:
        return pygame.image.load(os.fspath(base / relative))
    except (pygame.error, OSError) as exc:
        raise AssetError(f"cannot load {relative}") from exc


def load_textures(
    base_dir: str | os.PathLike[str] = ".", bonus: bool = False
) -> Textures:
    """Load every sprite found under ``base_dir``.

    Raises :class:`AssetError` at the first sprite that cannot be loaded.
    """
    base = Path(base_dir)
    surfaces = {name: _load(base, rel) for name, rel in asset_paths(bonus).items()}
    coins = [surfaces["coins"]]
    if bonus:
        coins.extend(
            surfaces[f"coins_frame{index}"] for index in range(2, _COIN_FRAMES + 1)
        )
    return Textures(
        ground=surfaces["ground"],
        wall=surfaces["wall"],
        exit=surfaces["exit"],
        player_start=surfaces["player_start"],
        player_up=surfaces["player_up"],
        player_down=surfaces["player_down"],
        player_left=surfaces["player_left"],
        player_right=surfaces["player_right"],
        coins=tuple(coins),
        enemy=surfaces.get("enemy"),
    )