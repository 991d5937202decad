"""Loading and validation of ``.ber`` map files.

A map is a rectangle of tiles: ``1`` walls, ``0`` floor, ``P`` the player,
``C`` collectibles and ``E`` the exit. It must be closed by walls, hold
exactly one player and one exit and at least one collectible, and every
collectible must be reachable from the player without crossing the exit.
"""

from __future__ import annotations

from collections.abc import Sequence
from pathlib import Path

VALID_TILES = frozenset("ECP01")


class MapError(ValueError):
    """Raised when a map file cannot be read or describes an invalid map."""


def count_items(grid: Sequence[str], elem: str) -> int:
    """Count ``elem`` tiles; any tile outside ``ECP01`` makes the count 0."""
    count = 0
    for row in grid:
        for tile in row:
            if tile not in VALID_TILES:
                return 0
            if tile == elem:
                count += 1
    return count


def check_items(grid: Sequence[str]) -> bool:
    """Require one exit, one player and at least one collectible."""
    exits = count_items(grid, "E")
    collectibles = count_items(grid, "C")
    players = count_items(grid, "P")
    if exits == 1 and collectibles >= 1 and players == 1:
        return True
    raise MapError("Error: invalid items on the map")


def check_backslash(text: str) -> None:
    """Reject text starting with a newline or holding an empty line."""
    if text.startswith("\n"):
        raise MapError("Error: first character cannot be a newline.")
    if "\n\n" in text:
        raise MapError("Error: more than 2 consecutives newlines.")


def check_first_line(grid: Sequence[str]) -> bool:
    """True when the top row is made of walls only."""
    return bool(grid) and all(tile == "1" for tile in grid[0])


def check_last_line(grid: Sequence[str]) -> bool:
    """True when the bottom row is made of walls only."""
    return bool(grid) and all(tile == "1" for tile in grid[-1])


def check_sides(grid: Sequence[str]) -> bool:
    """True when every row starts with a wall and has one at the top row's last column."""
    if not grid or not grid[0]:
        return False
    last = len(grid[0]) - 1
    return all(row[:1] == "1" and row[last:last + 1] == "1" for row in grid)


def check_equal_length(grid: Sequence[str]) -> bool:
    """True when every row is as long as the first one."""
    if not grid:
        return False
    width = len(grid[0])
    return all(len(row) == width for row in grid)


def check_rectangle(grid: Sequence[str]) -> bool:
    """Require a rectangular map closed by walls."""
    if (
        check_sides(grid)
        and check_last_line(grid)
        and check_first_line(grid)
        and check_equal_length(grid)
    ):
        return True
    raise MapError("Error: map is not rectangular")


def find_tile(grid: Sequence[str], to_find: str) -> tuple[int, int] | None:
    """Return ``(row, column)`` of the first ``to_find`` inside the border walls."""
    height = len(grid)
    width = len(grid[0]) if grid else 0
    for y in range(1, height):
        row = grid[y]
        for x in range(1, min(width, len(row))):
            if row[x] == to_find:
                return y, x
    return None


def flood_fill(grid: Sequence[str], start: tuple[int, int]) -> list[str]:
    """Return a copy of ``grid`` with every tile reachable from ``start`` turned to wall."""
    cells = [list(row) for row in grid]
    height = len(cells)
    width = len(cells[0]) if cells else 0
    pending = [start]
    while pending:
        y, x = pending.pop()
        if not (0 <= y < height and 0 <= x < min(width, len(cells[y]))):
            continue
        if cells[y][x] == "1":
            continue
        cells[y][x] = "1"
        pending.extend(((y, x + 1), (y, x - 1), (y + 1, x), (y - 1, x)))
    return ["".join(row) for row in cells]


def check_path(grid: Sequence[str]) -> bool:
    """Require every collectible to be reachable from the player.

    The exit counts as a wall, since the player may only step onto it
    once everything has been collected.
    """
    blocked = list(grid)
    exit_at = find_tile(blocked, "E")
    if exit_at is not None:
        y, x = exit_at
        blocked[y] = blocked[y][:x] + "1" + blocked[y][x + 1:]
    player = find_tile(grid, "P")
    filled = flood_fill(blocked, player) if player is not None else blocked
    if any("C" in row or "E" in row for row in filled):
        raise MapError("Error: invalid path on the map")
    return True


def read_map_text(path: str | Path) -> str:
    """Return the whole text of a map file."""
    try:
        data = Path(path).read_bytes()
    except OSError as exc:
        raise MapError("Error : Invalid read") from exc
    if not data:
        raise MapError("Error: The file is empty.")
    return data.decode("latin-1")


def parse_map(text: str) -> list[str]:
    """Validate map text and return its rows."""
    check_backslash(text)
    grid = [row for row in text.split("\n") if row]
    check_rectangle(grid)
    check_items(grid)
    check_path(grid)
    return grid


def load_map(path: str | Path) -> list[str]:
    """Read, validate and return the rows of a map file."""
    return parse_map(read_map_text(path))