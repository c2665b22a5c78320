"""Drawing a game onto a pygame surface."""

from __future__ import annotations

import pygame

from solong.assets import Textures
from solong.game import Game, coin_frame, move_label
from solong.validation import COIN, ENEMY, PLAYER, WALL

__all__ = ["TILE_SIZE", "Renderer"]

TILE_SIZE = 40

_LABEL_POSITION = (15, 10)
_LABEL_COLOUR = (255, 255, 255)
_LABEL_SIZE = 24


class Renderer:
    """Draws the tiles of a game with a set of textures.

    In bonus mode coins are animated, walls are drawn without ground under
    them, enemies are shown and the move counter is written on screen.
    """

    def __init__(self, game: Game, textures: Textures) -> None:
        self.game = game
        self.textures = textures
        self.coin_frame = 1
        self._font: pygame.font.Font | None = None

    def window_size(self) -> tuple[int, int]:
        """Return the ``(width, height)`` in pixels the map needs."""
        return self.game.width * TILE_SIZE, self.game.height * TILE_SIZE

    def sprite_for(self, tile: str) -> pygame.Surface | None:
        """Return the sprite drawn over the ground for ``tile``, if any.

        The exit has none here: it is drawn on its own once every coin is
        taken.
        """
        if tile == WALL:
            return self.textures.wall
        if tile == PLAYER:
            return self.textures.player(self.game.facing)
        if tile == COIN:
            return self.textures.coin(self.coin_frame)
        if tile == ENEMY and self.game.bonus:
            return self.textures.enemy
        return None

    def draw(self, surface: pygame.Surface, tick: int = 0) -> None:
        """Draw the whole map onto ``surface`` as it is at frame ``tick``."""
        game = self.game
        if game.bonus:
            self.coin_frame = coin_frame(tick)
        for y, row in enumerate(game.grid):
            for x, tile in enumerate(row):
                position = (x * TILE_SIZE, y * TILE_SIZE)
                if not (game.bonus and tile == WALL):
                    surface.blit(self.textures.ground, position)
                sprite = self.sprite_for(tile)
                if sprite is not None:
                    surface.blit(sprite, position)
        if game.coins == 0:
            surface.blit(
                self.textures.exit,
                (game.exit.x * TILE_SIZE, game.exit.y * TILE_SIZE),
            )
        if game.bonus:
            self._draw_label(surface)

    def _draw_label(self, surface: pygame.Surface) -> None:
        if self._font is None:
            if not pygame.font.get_init():
                pygame.font.init()
            self._font = pygame.font.Font(None, _LABEL_SIZE)
        text = self._font.render(move_label(self.game.moves), True, _LABEL_COLOUR)
        surface.blit(text, _LABEL_POSITION)