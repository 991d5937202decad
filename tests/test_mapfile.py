import pytest

from desertrun.mapfile import (
    MapError,
    check_backslash,
    check_equal_length,
    check_first_line,
    check_items,
    check_last_line,
    check_path,
    check_rectangle,
    check_sides,
    count_items,
    find_tile,
    flood_fill,
    load_map,
    parse_map,
    read_map_text,
)

VALID_TEXT = "1111111\n1P0C0E1\n1000C01\n1111111\n"
VALID_ROWS = ["1111111", "1P0C0E1", "1000C01", "1111111"]
BLOCKED_ROWS = ["11111", "1P1C1", "1E001", "11111"]


def test_count_items_counts_collectibles():
    assert count_items(VALID_ROWS, "C") == 2
    assert count_items(VALID_ROWS, "P") == 1


def test_count_items_invalid_tile_gives_zero():
    assert count_items(["11111", "1PXC1", "11111"], "C") == 0


def test_check_items_accepts_valid_map():
    assert check_items(VALID_ROWS) is True


@pytest.mark.parametrize(
    "rows",
    [
        ["11111", "1PPCE1", "11111"],
        ["11111", "1P0E1", "11111"],
        ["11111", "1PCE1", "1E001", "11111"],
        ["11111", "10CE1", "11111"],
    ],
)
def test_check_items_rejects(rows):
    with pytest.raises(MapError, match="invalid items on the map"):
        check_items(rows)


def test_check_backslash_leading_newline():
    with pytest.raises(MapError, match="first character cannot be a newline"):
        check_backslash("\n111")


def test_check_backslash_empty_line():
    with pytest.raises(MapError, match="consecutives newlines"):
        check_backslash("111\n\n111")


def test_first_and_last_lines():
    assert check_first_line(VALID_ROWS) is True
    assert check_last_line(VALID_ROWS) is True
    assert check_first_line(["10111", "11111"]) is False
    assert check_last_line(["11111", "11011"]) is False


def test_sides():
    assert check_sides(VALID_ROWS) is True
    assert check_sides(["111", "101", "001", "111"]) is False
    assert check_sides(["1111", "110", "1111"]) is False


def test_equal_length():
    assert check_equal_length(VALID_ROWS) is True
    assert check_equal_length(["111", "1111", "111"]) is False
    assert check_equal_length([]) is False


def test_check_rectangle_rejects_ragged_map():
    with pytest.raises(MapError, match="map is not rectangular"):
        check_rectangle(["11111", "1PCE1", "1111"])


def test_check_rectangle_rejects_empty_grid():
    with pytest.raises(MapError, match="map is not rectangular"):
        check_rectangle([])


def test_find_tile_locates_player():
    assert find_tile(VALID_ROWS, "P") == (1, 1)
    y, x = find_tile(VALID_ROWS, "E")
    assert VALID_ROWS[y][x] == "E"


def test_find_tile_ignores_border_and_missing():
    assert find_tile(["P11", "111"], "P") is None
    assert find_tile(VALID_ROWS, "Z") is None


def test_flood_fill_reaches_all_open_tiles():
    filled = flood_fill(VALID_ROWS, (1, 1))
    assert all(set(row) == {"1"} for row in filled)
    assert len(filled) == len(VALID_ROWS)


def test_flood_fill_leaves_input_untouched_and_isolated_tiles():
    rows = ["11111", "1P1C1", "11111"]
    filled = flood_fill(rows, (1, 1))
    assert rows[1] == "1P1C1"
    assert filled[1][3] == "C"
    assert filled[1][1] == "1"


def test_check_path_accepts_reachable_map():
    assert check_path(VALID_ROWS) is True


def test_check_path_exit_blocks_the_way():
    with pytest.raises(MapError, match="invalid path on the map"):
        check_path(BLOCKED_ROWS)


def test_parse_map_returns_rows():
    assert parse_map(VALID_TEXT) == VALID_ROWS


def test_parse_map_runs_checks_in_order():
    with pytest.raises(MapError, match="map is not rectangular"):
        parse_map("11111\n1PCE1\n1111\n")
    with pytest.raises(MapError, match="invalid items"):
        parse_map("11111\n1P0E1\n11111")
    with pytest.raises(MapError, match="invalid path"):
        parse_map("\n".join(BLOCKED_ROWS))


def test_read_map_text_round_trip(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID_TEXT)
    assert read_map_text(path) == VALID_TEXT


def test_read_map_text_empty_file(tmp_path):
    path = tmp_path / "empty.ber"
    path.write_text("")
    with pytest.raises(MapError, match="The file is empty"):
        read_map_text(path)


def test_read_map_text_missing_file(tmp_path):
    with pytest.raises(MapError, match="Invalid read"):
        read_map_text(tmp_path / "missing.ber")


def test_load_map(tmp_path):
    path = tmp_path / "level.ber"
    path.write_text(VALID_TEXT)
    assert load_map(path) == VALID_ROWS
    assert load_map(path) == parse_map(VALID_TEXT)