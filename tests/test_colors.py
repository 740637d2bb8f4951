import pytest

from cubed.colors import lookup_color


@pytest.mark.parametrize(
    "name, expected",
    [
        ("snow", 0xFFFAFA),
        ("ghost white", 0xF8F8FF),
        ("ghostwhite", 0xF8F8FF),
        ("black", 0x0),
        ("white", 0xFFFFFF),
        ("navy", 0x80),
        ("red", 0xFF0000),
        ("thistle4", 0x8B7B8B),
        ("gray50", 0x7F7F7F),
        ("grey100", 0xFFFFFF),
        ("darkgray", 0xA9A9A9),
        ("lightgreen", 0x90EE90),
    ],
)
def test_known_names(name, expected):
    assert lookup_color(name) == expected


def test_none_is_transparent_marker():
    assert lookup_color("none") == -1


def test_lookup_ignores_case():
    assert lookup_color("SNOW") == lookup_color("snow")
    assert lookup_color("Ghost White") == lookup_color("ghost white")
    assert lookup_color("NoNe") == -1


def test_unknown_name_gives_none():
    assert lookup_color("not a colour") is None
    assert lookup_color("") is None


def test_first_entry_wins_for_repeated_names():
    # "dark slate" appears several times; the first value is used.
    assert lookup_color("dark slate") == lookup_color("darkslategray")
    assert lookup_color("light slate") == lookup_color("lightslategray")
    assert lookup_color("light goldenrod") == lookup_color("lightgoldenrodyellow")


def test_later_spellings_of_repeated_names_still_resolve():
    assert lookup_color("darkslateblue") == 0x483D8B
    assert lookup_color("lightgoldenrod") == 0xEEDD82


@pytest.mark.parametrize("level", range(101))
def test_gray_and_grey_agree(level):
    gray = lookup_color(f"gray{level}")
    assert gray == lookup_color(f"grey{level}")
    red, green, blue = (gray >> 16) & 0xFF, (gray >> 8) & 0xFF, gray & 0xFF
    assert red == green == blue


def test_grays_increase_monotonically():
    values = [lookup_color(f"gray{level}") for level in range(101)]
    assert values == sorted(values)
    assert values[0] == lookup_color("black")
    assert values[-1] == lookup_color("white")


@pytest.mark.parametrize("base", ["snow", "bisque", "ivory", "azure", "red", "gold"])
def test_first_shade_matches_base(base):
    assert lookup_color(f"{base}1") == lookup_color(base)


def test_numbered_shades_fit_in_24_bits():
    for base in ("slateblue", "cyan", "orchid", "tan"):
        for number in range(1, 5):
            value = lookup_color(f"{base}{number}")
            assert 0 <= value <= 0xFFFFFF
        assert lookup_color(f"{base}5") is None