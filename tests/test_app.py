import pygame
import pytest

from desertrun.app import (
    MAX_HEIGHT,
    MAX_WIDTH,
    TILE_FILES,
    TILE_SIZE,
    load_tiles,
    main,
    render,
    validate_arguments,
    window_size,
)
from desertrun.game import Game
from desertrun.mapfile import MapError
from desertrun.xpm import XpmError

SIMPLE = ["11111", "1PCE1", "11111"]


def _xpm(color: str) -> str:
    return (
        "/* XPM */\n"
        "static char *tile[] = {\n"
        '"2 2 1 1",\n'
        f'"a c {color}",\n'
        '"aa",\n'
        '"aa"\n'
        "};\n"
    )


def test_validate_arguments_accepts_ber_file(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text("1\n")
    assert validate_arguments([str(path)]) == path


@pytest.mark.parametrize("argv", [[], ["a.ber", "b.ber"]])
def test_validate_arguments_counts_arguments(argv):
    with pytest.raises(MapError, match="Invalid number of arguments"):
        validate_arguments(argv)


@pytest.mark.parametrize("name", ["level.txt", "ber", "level.be", "levelber"])
def test_validate_arguments_requires_ber_suffix(name):
    with pytest.raises(MapError, match="Invalid file"):
        validate_arguments([name])


def test_validate_arguments_rejects_directory(tmp_path):
    folder = tmp_path / "maps.ber"
    folder.mkdir()
    with pytest.raises(MapError, match="Invalid map"):
        validate_arguments([str(folder)])


def test_window_size_scales_by_tile():
    assert window_size(SIMPLE) == (len(SIMPLE[0]) * TILE_SIZE, len(SIMPLE) * TILE_SIZE)


def test_window_size_accepts_maximum():
    columns = MAX_WIDTH // TILE_SIZE
    rows = MAX_HEIGHT // TILE_SIZE
    grid = ["1" * columns] * rows
    assert window_size(grid) == (MAX_WIDTH, MAX_HEIGHT)


def test_window_size_rejects_too_wide():
    grid = ["1" * (MAX_WIDTH // TILE_SIZE + 1)] * 3
    with pytest.raises(MapError, match="Size windows"):
        window_size(grid)


def test_window_size_rejects_too_tall():
    grid = ["111"] * (MAX_HEIGHT // TILE_SIZE + 1)
    with pytest.raises(MapError, match="Size windows"):
        window_size(grid)


def test_load_tiles_reads_every_image(tmp_path):
    for tile, name in TILE_FILES.items():
        color = "#FF0000" if tile == "1" else "#0000FF"
        (tmp_path / name).write_text(_xpm(color))
    tiles = load_tiles(tmp_path)
    assert set(tiles) == set(TILE_FILES)
    assert tuple(tiles["1"].get_at((1, 1)))[:3] == (255, 0, 0)
    assert tuple(tiles["0"].get_at((0, 0)))[:3] == (0, 0, 255)
    assert tiles["P"].get_size() == (2, 2)


def test_load_tiles_missing_file(tmp_path):
    with pytest.raises(XpmError):
        load_tiles(tmp_path)


def test_render_places_tiles_on_grid():
    colors = {"0": (10, 10, 10), "1": (200, 0, 0), "P": (0, 200, 0), "C": (0, 0, 200), "E": (90, 90, 0)}
    tiles = {}
    for tile, color in colors.items():
        surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
        surface.fill(color)
        tiles[tile] = surface
    game = Game(SIMPLE)
    canvas = pygame.Surface((len(SIMPLE[0]) * TILE_SIZE, len(SIMPLE) * TILE_SIZE))
    render(canvas, game, tiles)
    for y, row in enumerate(SIMPLE):
        for x, tile in enumerate(row):
            point = (x * TILE_SIZE + TILE_SIZE // 2, y * TILE_SIZE + TILE_SIZE // 2)
            assert tuple(canvas.get_at(point))[:3] == colors[tile]


def test_render_follows_player():
    tiles = {}
    for tile, color in {"0": (1, 1, 1), "P": (0, 255, 0)}.items():
        surface = pygame.Surface((TILE_SIZE, TILE_SIZE))
        surface.fill(color)
        tiles[tile] = surface
    game = Game(SIMPLE)
    game.handle_key(100)
    canvas = pygame.Surface((len(SIMPLE[0]) * TILE_SIZE, len(SIMPLE) * TILE_SIZE))
    render(canvas, game, tiles)
    y, x = game.player
    assert tuple(canvas.get_at((x * TILE_SIZE, y * TILE_SIZE)))[:3] == (0, 255, 0)
    assert tuple(canvas.get_at((TILE_SIZE, TILE_SIZE)))[:3] == (1, 1, 1)


def test_main_without_arguments(capsys):
    assert main([]) == 1
    assert "Error : Invalid number of arguments" in capsys.readouterr().out


def test_main_with_invalid_map(tmp_path, capsys):
    path = tmp_path / "bad.ber"
    path.write_text("1111\n1PC1\n1E1\n1111\n")
    assert main([str(path)]) == 1
    assert "Error: map is not rectangular" in capsys.readouterr().out


def test_main_with_oversized_map(tmp_path, capsys):
    width = MAX_WIDTH // TILE_SIZE + 1
    inner = "1PCE" + "0" * (width - 5) + "1"
    path = tmp_path / "wide.ber"
    path.write_text("\n".join(["1" * width, inner, "1" * width]) + "\n")
    assert main([str(path)]) == 1
    assert "Error: Size windows." in capsys.readouterr().out


def test_main_with_empty_file(tmp_path, capsys):
    path = tmp_path / "empty.ber"
    path.write_text("")
    assert main([str(path)]) == 1
    assert "Error: The file is empty." in capsys.readouterr().out