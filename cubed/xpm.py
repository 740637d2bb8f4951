"""Reader for XPM pixmap images."""

from __future__ import annotations

import re
from collections.abc import Sequence
from pathlib import Path

from cubed.colors import lookup_color
from cubed.image import Image

_TRANSPARENT = 0xFF000000
_QUOTED = re.compile(r'"([^"]*)"')
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")
_LEADING_HEX = re.compile(r"[0-9a-fA-F]*")


class XpmError(ValueError):
    """Raised when XPM data cannot be turned into an image."""


def _atoi(text: str) -> int:
    match = _LEADING_INT.match(text)
    return int(match.group(1)) if match else 0


def _words(text: str) -> list[str]:
    return [word for word in re.split(r"[ \t]+", text) if word]


def strip_comments(text: str) -> str:
    """Blank out C comments that lie outside double-quoted strings.

    Comment characters are replaced by spaces so that line layout and
    quoted content are left untouched.
    """
    chars = list(text)
    length = len(chars)
    in_quote = False
    i = 0
    while i < length:
        ch = chars[i]
        if ch == '"':
            in_quote = not in_quote
            i += 1
            continue
        if not in_quote and ch == "/" and i + 1 < length:
            nxt = chars[i + 1]
            if nxt == "*":
                end = text.find("*/", i + 2)
                stop = length if end == -1 else end + 2
            elif nxt == "/":
                end = text.find("\n", i + 2)
                stop = length if end == -1 else end
            else:
                i += 1
                continue
            chars[i:stop] = " " * (stop - i)
            i = stop
            continue
        i += 1
    return "".join(chars)


def color_from_spec(name: str, extra: str | None = None) -> int:
    """Turn an XPM colour value into 0xRRGGBB.

    ``#hex`` values are read as hexadecimal.  Otherwise ``name`` (joined
    with ``extra`` by a space when given) is looked up in the colour
    table; ``None`` gives -1 and unknown names give 0.
    """
    if name.startswith("#"):
        digits = _LEADING_HEX.match(name, 1).group(0)
        return int(digits, 16) if digits else 0
    if extra:
        name = f"{name} {extra}"
    value = lookup_color(name)
    return 0 if value is None else value


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = _words(line)
    if len(words) < 4:
        raise XpmError(f"incomplete XPM header: {line!r}")
    values = tuple(_atoi(word) for word in words[:4])
    if any(value == 0 for value in values):
        raise XpmError(f"invalid XPM header: {line!r}")
    width, height, ncolors, cpp = values
    if width < 0 or height < 0 or ncolors < 0 or cpp < 0:
        raise XpmError(f"invalid XPM header: {line!r}")
    return width, height, ncolors, cpp


def _parse_color_line(line: str, cpp: int) -> tuple[str, int]:
    words = _words(line[cpp:])
    try:
        position = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour definition without 'c' key: {line!r}") from None
    if position >= len(words):
        raise XpmError(f"colour definition without value: {line!r}")
    extra = words[position + 1] if position + 1 < len(words) else None
    return line[:cpp], color_from_spec(words[position], extra)


def parse_xpm_lines(lines: Sequence[str]) -> Image:
    """Build an image from the string contents of an XPM file."""
    rows = iter(lines)

    def next_line(what: str) -> str:
        try:
            return next(rows)
        except StopIteration:
            raise XpmError(f"XPM data ends before {what}") from None

    width, height, ncolors, cpp = _parse_header(next_line("the header"))

    palette: dict[str, int] = {}
    for _ in range(ncolors):
        key, color = _parse_color_line(next_line("all colours"), cpp)
        if cpp <= 2:
            palette[key] = color
        else:
            palette.setdefault(key, color)

    image = Image(width, height)
    for y in range(height):
        line = next_line("all pixel rows")
        for x in range(width):
            key = line[x * cpp:(x + 1) * cpp]
            color = palette.get(key, 0)
            if color == -1:
                color = _TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def parse_xpm(text: str) -> Image:
    """Parse the text of an XPM file into an image."""
    return parse_xpm_lines(_QUOTED.findall(strip_comments(text)))


def load_xpm(path: str | Path) -> Image:
    """Read and parse an XPM file."""
    text = Path(path).read_text(encoding="latin-1")
    return parse_xpm(text)