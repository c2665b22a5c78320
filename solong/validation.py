"""Checks that a map is playable: size, shape, borders, elements and path."""

from __future__ import annotations

from collections.abc import Sequence

from solong.mapfile import MapError

__all__ = [
    "count_element",
    "map_dimensions",
    "check_lines",
    "check_walls",
    "check_elements",
    "find_player",
    "flood_fill",
    "check_path",
    "check_map",
]

MAX_WIDTH = 64
MAX_HEIGHT = 34

WALL = "1"
FLOOR = "0"
COIN = "C"
EXIT = "E"
PLAYER = "P"
ENEMY = "H"
NEWLINE = "\n"

_BASE_TILES = frozenset({WALL, FLOOR, COIN, EXIT, PLAYER, NEWLINE})
_BONUS_TILES = _BASE_TILES | {ENEMY}


def count_element(rows: Sequence[str], char: str) -> int:
    """Return how many times ``char`` appears in the map."""
    return sum(row.count(char) for row in rows)


def map_dimensions(rows: Sequence[str]) -> tuple[int, int]:
    """Return ``(width, height)`` of the map in tiles.

    The width is taken from the first row, less its last character (its
    newline). Raises :class:`MapError` when the map is too small or too large.
    """
    height = len(rows)
    width = max(len(rows[0]) - 1, 0) if rows else 0
    if width < 1 or height < 1:
        raise MapError("Map dimensions are too small!")
    if width > MAX_WIDTH or height > MAX_HEIGHT:
        raise MapError("Map dimensions are too large!")
    return width, height


def check_lines(rows: Sequence[str], width: int) -> None:
    """Check that every row is ``width`` tiles long.

    Every row but the last carries a newline; the last must carry none.
    """
    last = len(rows) - 1
    for index, row in enumerate(rows):
        expected = width if index == last else width + 1
        if len(row) != expected:
            raise MapError("Invalid map check your lines!")


def check_walls(rows: Sequence[str]) -> None:
    """Check that the map is enclosed by walls on every side."""
    last_row = len(rows) - 1
    for i, row in enumerate(rows):
        last_col = len(row) - 1
        for j, tile in enumerate(row):
            if i == 0 and j < last_col and tile != WALL:
                raise MapError("Invalid map check your walls!")
            elif j == 0 and tile != WALL:
                raise MapError("Invalid map check your walls!")
            if j > 0 and j == last_col and row[j - 1] != WALL:
                raise MapError("Invalid map check your walls!")
            if i == last_row and tile != WALL:
                raise MapError("Invalid map check your walls!")


def check_elements(rows: Sequence[str], bonus: bool = False) -> None:
    """Check for one player, one exit, some coins and only known tiles.

    In ``bonus`` mode enemies (``H``) are allowed as well.
    """
    if count_element(rows, PLAYER) != 1:
        raise MapError("Invalid map check your 'Player'!")
    if count_element(rows, EXIT) != 1:
        raise MapError("Invalid map check your 'Exit'!")
    if not count_element(rows, COIN):
        raise MapError("Invalid map check your 'Coins'!")
    allowed = _BONUS_TILES if bonus else _BASE_TILES
    if any(tile not in allowed for row in rows for tile in row):
        raise MapError("Invalid map check your elements!")


def find_player(rows: Sequence[str]) -> tuple[int, int]:
    """Return the ``(x, y)`` of the player.

    When several rows hold a player, the last such row wins; within a row
    the first player counts. Without any player ``(0, 0)`` is returned.
    """
    found = (0, 0)
    for y, row in enumerate(rows):
        x = row.find(PLAYER)
        if x >= 0:
            found = (x, y)
    return found


def flood_fill(
    rows: Sequence[str], start: tuple[int, int], bonus: bool = False
) -> tuple[int, int]:
    """Return ``(coins, exits)`` reachable from ``start`` without crossing walls.

    In ``bonus`` mode enemies block the way too. The given rows are not
    changed.
    """
    grid = [list(row) for row in rows]
    blocking = {WALL, ENEMY} if bonus else {WALL}
    coins = exits = 0
    stack = [start]
    while stack:
        x, y = stack.pop()
        if x < 0 or y < 0 or y >= len(grid) or x >= len(grid[y]):
            continue
        tile = grid[y][x]
        if tile in blocking:
            continue
        if tile == COIN:
            coins += 1
        elif tile == EXIT:
            exits += 1
        grid[y][x] = WALL
        stack.extend(((x, y - 1), (x, y + 1), (x - 1, y), (x + 1, y)))
    return coins, exits


def check_path(rows: Sequence[str], bonus: bool = False) -> None:
    """Check that every coin and exit can be reached from the player."""
    coins, exits = flood_fill(rows, find_player(rows), bonus)
    if coins != count_element(rows, COIN) or exits != count_element(rows, EXIT):
        raise MapError("Path Invalid !")


def check_map(rows: Sequence[str], bonus: bool = False) -> tuple[int, int]:
    """Run every check on the map and return its ``(width, height)``.

    The checks run in order: size, lines, path, walls, elements.
    """
    width, height = map_dimensions(rows)
    check_lines(rows, width)
    check_path(rows, bonus)
    check_walls(rows)
    check_elements(rows, bonus)
    return width, height