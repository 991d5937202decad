"""Game state: the player walking over a validated map."""

from __future__ import annotations

from collections.abc import Sequence
from enum import Enum

from desertrun.mapfile import MapError, count_items, find_tile

ESC = 65307
W = 119
A = 97
D = 100
S = 115
UP = 65362
LEFT = 65361
RIGHT = 65363
DOWN = 65364


class Direction(Enum):
    """A step on the grid as a (row, column) offset."""

    UP = (-1, 0)
    DOWN = (1, 0)
    LEFT = (0, -1)
    RIGHT = (0, 1)

    @property
    def dy(self) -> int:
        return self.value[0]

    @property
    def dx(self) -> int:
        return self.value[1]


_KEY_DIRECTIONS = {
    W: Direction.UP,
    UP: Direction.UP,
    S: Direction.DOWN,
    DOWN: Direction.DOWN,
    A: Direction.LEFT,
    LEFT: Direction.LEFT,
    D: Direction.RIGHT,
    RIGHT: Direction.RIGHT,
}


def key_to_direction(keycode: int) -> Direction | None:
    """Return the direction bound to an X keysym, or None."""
    return _KEY_DIRECTIONS.get(keycode)


class Game:
    """A running game: the tiles, the player's position and the move counter."""

    def __init__(self, grid: Sequence[str]) -> None:
        self._cells = [list(row) for row in grid]
        position = find_tile(grid, "P")
        if position is None:
            raise MapError("Error: invalid items on the map")
        self.player: tuple[int, int] = position
        self.count = 0
        self.won = False
        self.quit = False

    @property
    def rows(self) -> list[str]:
        """The current tiles, one string per row."""
        return ["".join(row) for row in self._cells]

    @property
    def over(self) -> bool:
        """True once the player has won or asked to quit."""
        return self.won or self.quit

    def remaining_collectibles(self) -> int:
        """Number of collectibles still on the map."""
        return count_items(self.rows, "C")

    def _tile(self, y: int, x: int) -> str:
        if 0 <= y < len(self._cells) and 0 <= x < len(self._cells[y]):
            return self._cells[y][x]
        return "1"

    def move(self, direction: Direction) -> bool:
        """Try one step; return True when it counts as a move.

        Walls block. The exit blocks while collectibles remain; stepping on
        it once they are all taken wins the game.
        """
        if self.over:
            return False
        collectibles = self.remaining_collectibles()
        y, x = self.player
        ty, tx = y + direction.dy, x + direction.dx
        target = self._tile(ty, tx)
        if target == "1":
            return False
        if target == "E":
            if collectibles:
                return False
            self.count += 1
            self.won = True
            return True
        self._cells[y][x] = "0"
        self._cells[ty][tx] = "P"
        self.player = (ty, tx)
        self.count += 1
        return True

    def handle_key(self, keycode: int) -> bool:
        """Apply a key press; Escape quits. Return True when a move counted."""
        if keycode == ESC:
            self.quit = True
            return False
        direction = key_to_direction(keycode)
        if direction is None:
            return False
        return self.move(direction)