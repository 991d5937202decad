# desertrun

A small top-down puzzle game. You are a cowboy in the desert. Pick up every
piece of gold on the map, then reach the horse to leave. Cacti block the way.

## Installing

```
pip install .
```

## Playing

```
desertrun maps/level.ber
```

The one argument is a map file. Its name must end in `.ber`, and it must not be
a directory. On any error the message is printed and the command exits with
status 1.

Controls:

- `W` / `↑` moves up, `S` / `↓` moves down, `A` / `←` moves left and
  `D` / `→` moves right (a move happens when the key is released)
- `Esc` (on press) or closing the window quits

Every move prints the running movement count on the terminal. The horse will
not let you on until all the gold is collected; stepping onto it after that
counts as the last move and ends the game.

## Map format

A map is a plain-text grid made of these characters:

| Char | Meaning          |
|------|------------------|
| `1`  | cactus (wall)    |
| `0`  | sand (floor)     |
| `P`  | player start     |
| `C`  | gold to collect  |
| `E`  | horse (exit)     |

A map is rejected with an error message when:

- the file cannot be read or is empty, starts with a newline, or holds two
  newlines in a row;
- it is not a rectangle closed in by cacti on every side;
- it uses any other character, or does not have exactly one `P`, exactly one
  `E` and at least one `C`;
- some gold cannot be reached from the start (the horse counts as a wall
  during this check);
- it is bigger than 2560×1440 pixels once drawn (tiles are 80×80).

Example:

```
1111111
1P0C0E1
1111111
```

## Tiles

The tiles are XPM images read from an `images/` directory in the working
directory: `sand.xpm`, `cactus.xpm`, `cowboy.xpm`, `gold.xpm` and
`horse.xpm`. A missing or unreadable tile stops the game with an error.

The package has its own XPM reader (`desertrun.xpm`). It understands the `c`
colour key, `#rrggbb` colours and the X11 colour names; unknown names read as
black. Pixels whose colour is `None` get the value `desertrun.xpm.TRANSPARENT`.

## Using it as a library

```python
from desertrun.mapfile import load_map, MapError
from desertrun.game import Game, Direction

grid = load_map("maps/level.ber")
game = Game(grid)
game.move(Direction.RIGHT)
print(game.count, game.remaining_collectibles(), game.won)
```

- `desertrun.mapfile`: `load_map`, `parse_map`, `read_map_text` and the
  individual checks (`check_rectangle`, `check_items`, `check_path`, ...);
  all failures raise `MapError`.
- `desertrun.game`: `Game` with `move`, `handle_key` (takes X keysym codes),
  `rows`, `player`, `count`, `won`, `quit` and `over`; `key_to_direction`.
- `desertrun.xpm`: `load_xpm`, `parse_xpm`, `parse_xpm_lines` returning an
  `XpmImage`; failures raise `XpmError`.
- `desertrun.colors.lookup_color` maps a colour name to its `0xRRGGBB` value.

## What it does not do

The game draws tiles only: there is no on-screen move counter, no sound, no
animation, and transparent XPM pixels are drawn as black. Scores are not kept
between games.

## Tests

```
pip install .[test]
pytest
```