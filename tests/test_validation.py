import pytest

from solong.mapfile import MapError
from solong.validation import (
    MAX_HEIGHT,
    MAX_WIDTH,
    check_elements,
    check_lines,
    check_map,
    check_path,
    check_walls,
    count_element,
    find_player,
    flood_fill,
    map_dimensions,
)

VALID = ["11111\n", "1PCE1\n", "11111"]
BLOCKED_COIN = ["1111111\n", "1P01C01\n", "1E11111\n", "1111111"]
ENEMY_MAP = ["11111\n", "1PHC1\n", "1E111\n", "11111"]


def test_count_element():
    assert count_element(VALID, "1") == sum(r.count("1") for r in VALID)
    assert count_element(VALID, "P") == 1
    assert count_element(VALID, "H") == 0


def test_map_dimensions_valid():
    assert map_dimensions(VALID) == (len(VALID[0]) - 1, len(VALID))


def test_map_dimensions_too_small():
    with pytest.raises(MapError, match="too small"):
        map_dimensions(["1"])


def test_map_dimensions_too_wide():
    row = "1" * (MAX_WIDTH + 1)
    rows = [row + "\n", row + "\n", row]
    with pytest.raises(MapError, match="too large"):
        map_dimensions(rows)


def test_map_dimensions_too_tall():
    rows = ["111\n"] * MAX_HEIGHT + ["111"]
    with pytest.raises(MapError, match="too large"):
        map_dimensions(rows)


def test_map_dimensions_limits_accepted():
    row = "1" * MAX_WIDTH
    rows = [row + "\n"] * (MAX_HEIGHT - 1) + [row]
    assert map_dimensions(rows) == (MAX_WIDTH, MAX_HEIGHT)


def test_check_lines_accepts_rectangle():
    check_lines(VALID, 5)
    with pytest.raises(MapError):
        check_lines(VALID, 4)


def test_check_lines_ragged():
    with pytest.raises(MapError, match="lines"):
        check_lines(["11111\n", "1PCE11\n", "11111"], 5)


def test_check_lines_trailing_newline_on_last_row():
    with pytest.raises(MapError, match="lines"):
        check_lines(["11111\n", "1PCE1\n", "11111\n"], 5)


@pytest.mark.parametrize(
    "rows",
    [
        ["11011\n", "1PCE1\n", "11111"],
        ["11111\n", "0PCE1\n", "11111"],
        ["11111\n", "1PCE0\n", "11111"],
        ["11111\n", "1PCE1\n", "11101"],
    ],
)
def test_check_walls_open_border(rows):
    with pytest.raises(MapError, match="walls"):
        check_walls(rows)


def test_check_walls_closed():
    check_walls(VALID)
    with pytest.raises(MapError, match="walls"):
        check_walls(VALID[:-1] + ["11111\n"])


@pytest.mark.parametrize(
    "rows, reason",
    [
        (["11111\n", "1PPC1\n", "1E111\n", "11111"], "Player"),
        (["11111\n", "10CE1\n", "11111"], "Player"),
        (["11111\n", "1PC01\n", "11111"], "Exit"),
        (["11111\n", "1PEE1\n", "1C111\n", "11111"], "Exit"),
        (["11111\n", "1P0E1\n", "11111"], "Coins"),
        (["11111\n", "1PCEX\n", "11111"], "elements"),
    ],
)
def test_check_elements_errors(rows, reason):
    with pytest.raises(MapError, match=reason):
        check_elements(rows)


def test_check_elements_enemy_only_in_bonus():
    check_elements(ENEMY_MAP, bonus=True)
    with pytest.raises(MapError, match="elements"):
        check_elements(ENEMY_MAP)


def test_find_player():
    assert find_player(VALID) == (VALID[1].index("P"), 1)


def test_find_player_missing():
    assert find_player(["111\n", "101\n", "111"]) == (0, 0)


def test_find_player_last_row_wins():
    rows = ["1111\n", "1P01\n", "10P1\n", "1111"]
    assert find_player(rows) == (2, 2)


def test_flood_fill_reaches_all():
    assert flood_fill(VALID, find_player(VALID)) == (
        count_element(VALID, "C"),
        count_element(VALID, "E"),
    )


def test_flood_fill_blocked_coin():
    coins, exits = flood_fill(BLOCKED_COIN, find_player(BLOCKED_COIN))
    assert coins < count_element(BLOCKED_COIN, "C")
    assert exits == count_element(BLOCKED_COIN, "E")


def test_flood_fill_leaves_rows_untouched():
    rows = list(VALID)
    flood_fill(rows, find_player(rows))
    assert rows == VALID


def test_flood_fill_start_on_wall():
    assert flood_fill(VALID, (0, 0)) == (0, 0)


def test_flood_fill_enemy_blocks_only_in_bonus():
    start = find_player(ENEMY_MAP)
    assert flood_fill(ENEMY_MAP, start, bonus=False)[0] == 1
    assert flood_fill(ENEMY_MAP, start, bonus=True)[0] == 0


def test_check_path():
    check_path(VALID)
    with pytest.raises(MapError, match="Path Invalid"):
        check_path(BLOCKED_COIN)


def test_check_path_enemy_in_bonus():
    check_path(ENEMY_MAP)
    with pytest.raises(MapError, match="Path Invalid"):
        check_path(ENEMY_MAP, bonus=True)


def test_check_map_valid():
    assert check_map(VALID) == map_dimensions(VALID)


def test_check_map_bonus_enemy():
    rows = ["111111\n", "1PCH01\n", "1E0001\n", "111111"]
    assert check_map(rows, bonus=True) == map_dimensions(rows)
    with pytest.raises(MapError, match="elements"):
        check_map(rows)


def test_check_map_lines_checked_before_elements():
    rows = ["11111\n", "1XX1\n", "11111"]
    with pytest.raises(MapError, match="lines"):
        check_map(rows)


def test_check_map_path_checked_before_walls():
    rows = ["1111111\n", "1P01C00\n", "1E11111\n", "1111111"]
    with pytest.raises(MapError, match="Path Invalid"):
        check_map(rows)