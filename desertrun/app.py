"""Command-line entry point and drawing of the game window."""

from __future__ import annotations

import os
import sys
from collections.abc import Mapping, Sequence
from pathlib import Path

os.environ.setdefault("PYGAME_HIDE_SUPPORT_PROMPT", "1")

import pygame  # noqa: E402

from desertrun.game import (  # noqa: E402
    A,
    D,
    DOWN,
    ESC,
    LEFT,
    RIGHT,
    S,
    UP,
    W,
    Game,
)
from desertrun.mapfile import MapError, load_map  # noqa: E402
from desertrun.xpm import XpmError, XpmImage, load_xpm  # noqa: E402

TILE_SIZE = 80
MAX_WIDTH = 2560
MAX_HEIGHT = 1440
WINDOW_TITLE = "desertrun"

TILE_FILES = {
    "0": "sand.xpm",
    "1": "cactus.xpm",
    "P": "cowboy.xpm",
    "C": "gold.xpm",
    "E": "horse.xpm",
}

_PYGAME_TO_KEYSYM = {
    pygame.K_ESCAPE: ESC,
    pygame.K_w: W,
    pygame.K_a: A,
    pygame.K_s: S,
    pygame.K_d: D,
    pygame.K_UP: UP,
    pygame.K_DOWN: DOWN,
    pygame.K_LEFT: LEFT,
    pygame.K_RIGHT: RIGHT,
}


def validate_arguments(argv: Sequence[str]) -> Path:
    """Check the command arguments and return the path of the ``.ber`` map."""
    if len(argv) != 1:
        raise MapError("Error : Invalid number of arguments")
    name = argv[0]
    path = Path(name)
    if path.is_dir():
        raise MapError("Error : Invalid map (<name>.ber)")
    if len(name) < 4 or not name.endswith(".ber"):
        raise MapError("Error : Invalid file, use a (<name>.ber)")
    return path


def window_size(grid: Sequence[str]) -> tuple[int, int]:
    """Return the window size in pixels for a map; reject maps too large."""
    width = len(grid[0]) * TILE_SIZE if grid else 0
    height = len(grid) * TILE_SIZE
    if width > MAX_WIDTH or height > MAX_HEIGHT:
        raise MapError("Error: Size windows.")
    return width, height


def _to_surface(image: XpmImage) -> pygame.Surface:
    surface = pygame.Surface((image.width, image.height))
    for y, row in enumerate(image.pixels):
        for x, color in enumerate(row):
            surface.set_at((x, y), ((color >> 16) & 0xFF, (color >> 8) & 0xFF, color & 0xFF))
    return surface


def load_tiles(directory: str | Path = "images") -> dict[str, pygame.Surface]:
    """Load the tile images from ``directory``, keyed by map character."""
    base = Path(directory)
    return {tile: _to_surface(load_xpm(base / name)) for tile, name in TILE_FILES.items()}


def render(surface: pygame.Surface, game: Game, tiles: Mapping[str, pygame.Surface]) -> None:
    """Draw every map tile of ``game`` onto ``surface``."""
    for y, row in enumerate(game.rows):
        for x, tile in enumerate(row):
            image = tiles.get(tile)
            if image is not None:
                surface.blit(image, (x * TILE_SIZE, y * TILE_SIZE))


def _report(count: int) -> None:
    print(f"Movement counter : \033[1;34m{count}\033[0m")


def _play(game: Game, size: tuple[int, int]) -> None:
    pygame.init()
    try:
        tiles = load_tiles("images")
        screen = pygame.display.set_mode(size)
        pygame.display.set_caption(WINDOW_TITLE)
        render(screen, game, tiles)
        pygame.display.flip()
        while not game.over:
            event = pygame.event.wait()
            if event.type == pygame.QUIT:
                return
            if event.type not in (pygame.KEYDOWN, pygame.KEYUP):
                continue
            keycode = _PYGAME_TO_KEYSYM.get(event.key)
            if keycode is None:
                continue
            # Escape acts on press, moves on release.
            if (keycode == ESC) != (event.type == pygame.KEYDOWN):
                continue
            if game.handle_key(keycode):
                _report(game.count)
            render(screen, game, tiles)
            pygame.display.flip()
    finally:
        pygame.quit()


def main(argv: Sequence[str] | None = None) -> int:
    """Run the game on the map named on the command line."""
    args = list(sys.argv[1:] if argv is None else argv)
    try:
        path = validate_arguments(args)
        grid = load_map(path)
        size = window_size(grid)
        game = Game(grid)
        _play(game, size)
    except (MapError, XpmError) as exc:
        print(exc)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())