"""Command line entry point: load a map and play it in a window."""

from __future__ import annotations

import os
import sys
from collections.abc import Sequence

import pygame

from solong.assets import AssetError, Textures, load_textures
from solong.display import Renderer
from solong.game import Action, Game
from solong.mapfile import MapError, check_extension, read_map
from solong.validation import check_map

__all__ = ["load_game", "run", "main"]

_FPS = 60
_BONUS_FLAG = "--bonus"


def load_game(path: str | os.PathLike[str], bonus: bool = False) -> Game:
    """Read and validate the map at ``path`` and start a game on it.

    Raises :class:`MapError` when the file or its map is not usable.
    """
    check_extension(path)
    rows = read_map(path)
    check_map(rows, bonus)
    return Game.from_rows(rows, bonus)


def run(game: Game, textures: Textures) -> int:
    """Open a window and play ``game`` until it ends; return the exit status."""
    pygame.display.init()
    try:
        renderer = Renderer(game, textures)
        screen = pygame.display.set_mode(renderer.window_size())
        pygame.display.set_caption("so_long_bonus" if game.bonus else "so_long")
        clock = pygame.time.Clock()
        tick = 0
        while True:
            for event in pygame.event.get():
                if event.type == pygame.QUIT:
                    return 0
                if event.type != pygame.KEYDOWN:
                    continue
                moves = game.moves
                action = game.handle_key(pygame.key.name(event.key))
                if not game.bonus and game.moves != moves:
                    print(f"Move : {game.moves}", flush=True)
                if action is not Action.CONTINUE:
                    return 0
            renderer.draw(screen, tick)
            pygame.display.flip()
            if game.bonus:
                tick = 1 if tick >= 24 else tick + 1
            clock.tick(_FPS)
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Play the map named on the command line; ``--bonus`` plays bonus mode."""
    args = list(sys.argv[1:] if argv is None else argv)
    bonus = _BONUS_FLAG in args
    args = [arg for arg in args if arg != _BONUS_FLAG]
    if len(args) != 1:
        sys.stderr.write("Error\nProvide a map !")
        return 1
    try:
        game = load_game(args[0], bonus)
    except MapError as exc:
        sys.stderr.write(f"Error\n{exc}\n")
        return 1
    try:
        textures = load_textures(".", bonus)
    except AssetError:
        return 1
    return run(game, textures)


if __name__ == "__main__":
    sys.exit(main())