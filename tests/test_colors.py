import pytest

from desertrun.colors import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("white", 0xFFFFFF),
        ("black", 0x0),
        ("red", 0xFF0000),
        ("navy", 0x80),
        ("gray100", 0xFFFFFF),
        ("light green", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent():
    assert lookup_color("none") == -1


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Dark Red") == lookup_color("dark red")
    assert lookup_color("NONE") == -1


def test_first_entry_wins_for_repeated_names():
    assert lookup_color("dark slate") == 0x2F4F4F
    assert lookup_color("light slate") == 0x778899
    assert lookup_color("light goldenrod") == 0xFAFAD2


def test_unknown_name_gives_none():
    assert lookup_color("not a colour") is None
    assert lookup_color("") is None


def test_spaced_and_joined_forms_agree():
    assert lookup_color("ghost white") == lookup_color("ghostwhite")
    assert lookup_color("misty rose") == lookup_color("mistyrose")
    assert lookup_color("dark magenta") == lookup_color("darkmagenta")


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_spellings_match(level):
    gray = lookup_color(f"gray{level}")
    assert gray == lookup_color(f"grey{level}")
    assert 0 <= gray <= 0xFFFFFF
    # every numbered grey has three equal channels
    assert (gray >> 16) & 0xFF == (gray >> 8) & 0xFF == gray & 0xFF


def test_numbered_greys_increase():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


@pytest.mark.parametrize("base", ["red", "green", "blue", "yellow", "magenta"])
def test_numbered_variant_one_equals_base(base):
    assert lookup_color(f"{base}1") == lookup_color(base)
    assert lookup_color(f"{base}4") < lookup_color(f"{base}1")