"""Reading of XPM pixmap images into plain pixel grids."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from dataclasses import dataclass
from pathlib import Path

from desertrun.colors import lookup_color

TRANSPARENT = 0xFF000000
"""Pixel value given to colours defined as ``None``."""

_HEX_NUMBER = re.compile(r"\s*([+-]?)(?:0[xX](?=[0-9a-fA-F]))?([0-9a-fA-F]+)")
_DEC_NUMBER = re.compile(r"\s*([+-]?\d+)")
_WORD_SEPARATOR = re.compile(r"[ \t]+")
_QUOTED = re.compile(r'"([^"]*)"')
_NAME_LIMIT = 63


class XpmError(ValueError):
    """Raised when XPM data cannot be read or is malformed."""


@dataclass(frozen=True)
class XpmImage:
    """A decoded image: rows of 0xRRGGBB values, top row first."""

    width: int
    height: int
    pixels: tuple[tuple[int, ...], ...]

    def pixel(self, x: int, y: int) -> int:
        """Return the colour at column ``x`` of row ``y``."""
        if not (0 <= x < self.width and 0 <= y < self.height):
            raise IndexError(f"pixel ({x}, {y}) outside {self.width}x{self.height} image")
        return self.pixels[y][x]


def _find_unquoted(text: str, token: str) -> int:
    """Position of the first ``token`` outside double quotes, or -1."""
    inside = False
    last_start = len(text) - len(token)
    for index in range(last_start + 1):
        if text[index] == '"':
            inside = not inside
        if not inside and text.startswith(token, index):
            return index
    return -1


def _blank(text: str, start: int, stop: int) -> str:
    return text[:start] + " " * (stop - start) + text[stop:]


def strip_comments(text: str) -> str:
    """Blank out C-style comments lying outside quotes; the length is kept."""
    while (begin := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        text = _blank(text, begin, len(text) if end == -1 else end + 2)
    while (begin := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        text = _blank(text, begin, len(text) if end == -1 else end + 1)
    return text


def split_words(line: str) -> list[str]:
    """Split a line on runs of spaces and tabs."""
    return [word for word in _WORD_SEPARATOR.split(line) if word]


def _parse_hex(text: str) -> int:
    match = _HEX_NUMBER.match(text)
    if match is None:
        return 0
    value = int(match.group(2), 16)
    return -value if match.group(1) == "-" else value


def _atoi(text: str) -> int:
    match = _DEC_NUMBER.match(text)
    return int(match.group(1)) if match else 0


def text_to_rgb(name: str, end: str | None = None) -> int:
    """Resolve a colour specification to 0xRRGGBB.

    ``#hex`` values are read directly; otherwise ``name`` (joined with
    ``end`` when given, for two-word names) is looked up in the colour
    table. Unknown names give 0, ``None`` gives -1.
    """
    if name.startswith("#"):
        return _parse_hex(name[1:])
    if end is not None:
        name = f"{name} {end}"[:_NAME_LIMIT]
    value = lookup_color(name)
    return 0 if value is None else value


def _next_line(lines: Iterator[str], what: str) -> str:
    try:
        return next(lines)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what}") from None


def _parse_header(line: str) -> tuple[int, int, int, int]:
    words = split_words(line)
    if len(words) < 4:
        raise XpmError(f"XPM header needs four values, got {line!r}")
    width, height, ncolors, cpp = (_atoi(word) for word in words[:4])
    if not (width and height and ncolors and cpp):
        raise XpmError(f"invalid XPM header {line!r}")
    if width < 0 or height < 0 or ncolors < 0 or cpp < 0:
        raise XpmError(f"negative value in XPM header {line!r}")
    return width, height, ncolors, cpp


def _parse_color(line: str, cpp: int) -> tuple[str, int]:
    if len(line) < cpp:
        raise XpmError(f"colour line {line!r} shorter than {cpp} characters")
    words = split_words(line[cpp:])
    try:
        position = words.index("c") + 1
    except ValueError:
        raise XpmError(f"colour line {line!r} has no 'c' definition") from None
    if position >= len(words):
        raise XpmError(f"colour line {line!r} has no colour after 'c'")
    end = words[position + 1] if position + 1 < len(words) else None
    return line[:cpp], text_to_rgb(words[position], end)


def parse_xpm_lines(lines: Iterable[str]) -> XpmImage:
    """Decode XPM from its quoted strings: header, colours, then pixel rows."""
    source = iter(lines)
    width, height, ncolors, cpp = _parse_header(_next_line(source, "header"))

    colors: dict[str, int] = {}
    for _ in range(ncolors):
        key, value = _parse_color(_next_line(source, "colour table"), cpp)
        # Short keys use a direct table where later entries overwrite;
        # longer keys are searched and the first definition is found.
        if cpp <= 2:
            colors[key] = value
        else:
            colors.setdefault(key, value)

    rows = []
    for _ in range(height):
        line = _next_line(source, "pixel rows")
        if len(line) < width * cpp:
            raise XpmError(f"pixel row {line!r} shorter than {width} pixels")
        row = []
        for x in range(width):
            color = colors.get(line[x * cpp:(x + 1) * cpp], 0)
            row.append(TRANSPARENT if color == -1 else color)
        rows.append(tuple(row))
    return XpmImage(width, height, tuple(rows))


def parse_xpm(text: str) -> XpmImage:
    """Decode the text of an XPM file."""
    cleaned = strip_comments(text)
    return parse_xpm_lines(match.group(1) for match in _QUOTED.finditer(cleaned))


def load_xpm(path: str | Path) -> XpmImage:
    """Read and decode an XPM file."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm(text)