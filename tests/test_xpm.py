import pytest

from cubed.colors import lookup_color
from cubed.xpm import (
    XpmError,
    color_from_spec,
    load_xpm,
    parse_xpm,
    parse_xpm_lines,
    strip_comments,
)

SAMPLE = """/* XPM */
static char *sample[] = {
/* columns rows colors chars-per-pixel */
"2 2 2 1",
"a c #FF0000",
"b c None",
// pixels
"ab",
"ba"
};
"""


def test_strip_comments_removes_block_and_line_comments():
    result = strip_comments('x /* gone */ "keep" // also gone\ny')
    assert "gone" not in result
    assert '"keep"' in result
    assert result.endswith("\ny")
    assert len(result) == len('x /* gone */ "keep" // also gone\ny')


def test_strip_comments_keeps_quoted_markers():
    text = '"a /* b */ c" "d // e"'
    assert strip_comments(text) == text


def test_color_from_hex():
    assert color_from_spec("#00FF7F") == 0x00FF7F


def test_color_from_name_matches_table():
    assert color_from_spec("Red") == lookup_color("red")


def test_color_from_two_word_name():
    assert color_from_spec("dark", "red") == lookup_color("dark red")


def test_color_none_is_transparent_marker():
    assert color_from_spec("None") == -1


def test_unknown_color_is_black():
    assert color_from_spec("nosuchcolour") == 0


def test_parse_sample():
    image = parse_xpm(SAMPLE)
    assert (image.width, image.height) == (2, 2)
    assert image.get_pixel(0, 0) == 0xFF0000
    assert image.get_pixel(1, 0) == 0xFF000000
    assert image.get_pixel(0, 1) == 0xFF000000
    assert image.get_pixel(1, 1) == 0xFF0000


def test_short_keys_later_definition_wins():
    image = parse_xpm_lines(["1 1 2 1", "a c #000001", "a c #000002", "a"])
    assert image.get_pixel(0, 0) == 0x000002


def test_long_keys_first_definition_wins():
    image = parse_xpm_lines(["1 1 2 3", "abc c #000001", "abc c #000002", "abc"])
    assert image.get_pixel(0, 0) == 0x000001


def test_unknown_pixel_key_is_black():
    image = parse_xpm_lines(["2 1 1 1", "a c #ABCDEF", "az"])
    assert image.get_pixel(0, 0) == 0xABCDEF
    assert image.get_pixel(1, 0) == 0


@pytest.mark.parametrize(
    "lines",
    [
        ["0 1 1 1", "a c #000000", "a"],
        ["1 1 1", "a c #000000", "a"],
        ["1 1 1 1", "a s foo", "a"],
        ["1 1 1 1", "a c", "a"],
        ["1 2 1 1", "a c #000000", "a"],
        [],
    ],
)
def test_invalid_data_raises(lines):
    with pytest.raises(XpmError):
        parse_xpm_lines(lines)


def test_load_xpm_round_trip(tmp_path):
    path = tmp_path / "tex.xpm"
    path.write_text(SAMPLE)
    loaded = load_xpm(path)
    parsed = parse_xpm(SAMPLE)
    assert loaded.to_rgb_bytes() == parsed.to_rgb_bytes()


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(OSError):
        load_xpm(tmp_path / "missing.xpm")