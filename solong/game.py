"""Game state: the player moving over a map, collecting coins to the exit."""

from __future__ import annotations

from collections.abc import Sequence
from dataclasses import dataclass, field
from enum import Enum

from solong.validation import COIN, ENEMY, EXIT, FLOOR, NEWLINE, PLAYER, WALL, count_element

__all__ = [
    "Position",
    "Direction",
    "Action",
    "Game",
    "direction_for_key",
    "coin_frame",
    "move_label",
]

_FRAME_TICKS = 3
_FRAME_COUNT = 8
_CYCLE = _FRAME_TICKS * _FRAME_COUNT

_QUIT_KEYS = frozenset({"escape", "q"})


@dataclass(frozen=True)
class Position:
    """A tile position: ``x`` is the column, ``y`` the row."""

    x: int
    y: int

    def step(self, direction: Direction) -> Position:
        """Return the neighbouring position in ``direction``."""
        return Position(self.x + direction.dx, self.y + direction.dy)


class Direction(Enum):
    """The four ways the player can move."""

    UP = (0, -1)
    DOWN = (0, 1)
    LEFT = (-1, 0)
    RIGHT = (1, 0)

    @property
    def dx(self) -> int:
        return self.value[0]

    @property
    def dy(self) -> int:
        return self.value[1]


class Action(Enum):
    """What the game should do after a key press."""

    CONTINUE = "continue"
    QUIT = "quit"
    WIN = "win"
    LOSE = "lose"


_KEY_DIRECTIONS = {
    "w": Direction.UP,
    "up": Direction.UP,
    "s": Direction.DOWN,
    "down": Direction.DOWN,
    "a": Direction.LEFT,
    "left": Direction.LEFT,
    "d": Direction.RIGHT,
    "right": Direction.RIGHT,
}


def direction_for_key(key: str) -> Direction | None:
    """Return the direction a key name moves in, or ``None`` for other keys."""
    return _KEY_DIRECTIONS.get(key.lower())


def coin_frame(tick: int) -> int:
    """Return the coin animation frame (1 to 8) shown at frame ``tick``.

    Each frame lasts three ticks; tick 0 starts the first cycle and later
    cycles run over ticks 1 to 24 again.
    """
    if tick < 0:
        raise ValueError("tick must not be negative")
    step = tick if tick <= _CYCLE else (tick - 1) % _CYCLE + 1
    if step <= _FRAME_TICKS:
        return 1
    return (step - 1) // _FRAME_TICKS + 1


def move_label(count: int) -> str:
    """Return the on-screen move counter text."""
    return f"Move :{count}"


def _last_position(grid: Sequence[Sequence[str]], tile: str) -> Position | None:
    found = None
    for y, row in enumerate(grid):
        for x, cell in enumerate(row):
            if cell == tile:
                found = Position(x, y)
    return found


@dataclass
class Game:
    """A running game on a validated map.

    ``exit`` and ``enemy`` keep the last place the exit and an enemy were
    seen on the grid: the player stepping on a tile overwrites it, and the
    exit then keeps its remembered place.
    """

    grid: list[list[str]]
    player: Position
    exit: Position
    enemy: Position | None = None
    coins: int = 0
    moves: int = 0
    bonus: bool = False
    facing: Direction | None = None
    _enemies_allowed: bool = field(default=False, repr=False)

    @classmethod
    def from_rows(cls, rows: Sequence[str], bonus: bool = False) -> Game:
        """Build a game from map lines as read from a map file."""
        grid = [list(row.rstrip(NEWLINE)) for row in rows]
        player = _last_position(grid, PLAYER) or Position(0, 0)
        exit_ = _last_position(grid, EXIT) or Position(0, 0)
        enemy = _last_position(grid, ENEMY) if bonus else None
        return cls(
            grid=grid,
            player=player,
            exit=exit_,
            enemy=enemy,
            coins=count_element(rows, COIN),
            bonus=bonus,
            _enemies_allowed=bonus,
        )

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    @property
    def height(self) -> int:
        return len(self.grid)

    def cell(self, x: int, y: int) -> str:
        """Return the tile at column ``x``, row ``y``."""
        if y < 0 or y >= len(self.grid) or x < 0 or x >= len(self.grid[y]):
            raise IndexError(f"no tile at ({x}, {y})")
        return self.grid[y][x]

    def move(self, direction: Direction) -> bool:
        """Face ``direction`` and step that way unless a wall is in the way.

        Returns whether the player moved.
        """
        self.facing = direction
        target = self.player.step(direction)
        try:
            tile = self.cell(target.x, target.y)
        except IndexError:
            return False
        if tile == WALL:
            return False
        if tile == COIN:
            self.coins -= 1
        self.grid[self.player.y][self.player.x] = FLOOR
        self.grid[target.y][target.x] = PLAYER
        self.player = target
        self.moves += 1
        self._refresh_landmarks()
        return True

    def _refresh_landmarks(self) -> None:
        exit_ = _last_position(self.grid, EXIT)
        if exit_ is not None:
            self.exit = exit_
        if self._enemies_allowed:
            enemy = _last_position(self.grid, ENEMY)
            if enemy is not None:
                self.enemy = enemy

    def handle_key(self, key: str) -> Action:
        """Apply a pressed key and return what should happen next."""
        direction = direction_for_key(key)
        if direction is not None:
            self.move(direction)
        if key.lower() in _QUIT_KEYS:
            return Action.QUIT
        if self.is_won():
            return Action.WIN
        if self.hit_enemy():
            return Action.LOSE
        return Action.CONTINUE

    def is_won(self) -> bool:
        """Return whether the player stands on the exit with every coin taken."""
        return self.player == self.exit and self.coins == 0

    def hit_enemy(self) -> bool:
        """Return whether the player stands on the enemy."""
        return self.bonus and self.enemy is not None and self.player == self.enemy