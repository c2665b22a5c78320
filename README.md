# solong

A small top-down 2D tile game. You walk a character around a walled map, pick
up every coin, and then step onto the exit to win. An optional bonus mode adds
enemies that end the game on contact, an animated coin sprite and an on-screen
move counter.

## Installing

```
pip install .
```

This installs the `solong` command and pulls in `pygame` for the window and
sprites.

## Playing

```
solong path/to/level.ber
solong --bonus path/to/level.ber
```

Exactly one map path must be given (besides the optional `--bonus` flag);
otherwise `Error` and `Provide a map !` are written to standard error and the
command exits with status 1.

Controls:

- `W` / `Up`, `S` / `Down`, `A` / `Left`, `D` / `Right`: face that way and move
  one tile, unless a wall is in the way
- `Esc` or `Q`: quit

The game ends, with exit status 0, when you stand on the exit with every coin
taken, when you quit, when you close the window, or in bonus mode when you step
onto an enemy. The exit sprite only appears once every coin has been taken.

In plain mode every successful move is printed to standard output as
`Move : N`. In bonus mode the count is drawn in the window as `Move :N`, walls
are drawn without ground beneath them, and coins cycle through eight animation
frames.

### Sprites

Sprites are PNG files loaded from an `images/` directory relative to the
current working directory:

- always: `images/player/player_start.png`, `player_up.png`,
  `player_down.png`, `player_left.png`, `player_right.png`, and
  `images/other/ground.png`, `wall.png`, `exit.png`;
- plain mode: `images/coins/coins1.png`;
- bonus mode: `images/frame/coins_frame1.png` to `coins_frame8.png` and
  `images/enemy/enemy1.png`.

If any of them cannot be loaded the command exits with status 1.

## Map format

A map is a plain-text file. Each line is one row of tiles:

| Char | Meaning                    |
|------|----------------------------|
| `1`  | wall                       |
| `0`  | floor                      |
| `P`  | player start (exactly one) |
| `E`  | exit (exactly one)         |
| `C`  | coin (at least one)        |
| `H`  | enemy (bonus mode only)    |

Example:

```
1111111111
1P0C00C0E1
1111111111
```

Every row has the same width; the last row must not end with a newline.

A map is refused, with `Error` and a reason on standard error and exit status
1, when:

- the file cannot be opened, is empty, has a name no longer than four
  characters, or has a name that does not end in `ber`;
- the map is wider than 64 or taller than 34 tiles, or has no tiles;
- rows differ in width;
- some coin or the exit cannot be reached from the player's start
  (in bonus mode, enemies block the path too);
- it is not closed by walls on every side;
- it has other than one player, other than one exit, or no coins;
- it holds characters other than those above.

## Using it as a library

```python
from solong.mapfile import read_map
from solong.validation import check_map
from solong.game import Game, Direction

rows = read_map("level.ber")
check_map(rows, False)
game = Game.from_rows(rows, False)
game.move(Direction.RIGHT)
print(game.is_won())
```

The modules:

- `solong.mapfile`: `read_map`, `iter_lines`, `check_extension`, and the
  `MapError` raised for unusable files and maps.
- `solong.validation`: `check_map` and the individual checks
  (`map_dimensions`, `check_lines`, `check_walls`, `check_elements`,
  `check_path`), plus `count_element`, `find_player` and `flood_fill`.
- `solong.game`: the `Game` state with `move`, `handle_key` (returning an
  `Action`), `is_won`, `hit_enemy` and `cell`; also `Position`, `Direction`,
  `direction_for_key`, `coin_frame` and `move_label`.
- `solong.assets`: `asset_paths`, `load_textures`, `Textures` and `AssetError`.
- `solong.display`: `Renderer`, which draws a game onto a pygame surface.
- `solong.cli`: `load_game(path, bonus)` reads and validates a map and starts a
  game; `run(game, textures)` opens the window and runs the game loop;
  `main(argv)` is the `solong` command.

## Limitations

Enemies stand still; there is no sound, no level sequence and no saved
progress. Sprites are not bundled with the package and must be supplied under
`images/` as described above.