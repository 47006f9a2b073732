"""Reading XPM pixmaps into :class:`~solong.image.Image` objects."""

from __future__ import annotations

import re
from collections.abc import Iterable, Iterator
from pathlib import Path

from solong.colors import parse_color
from solong.image import Image

TRANSPARENT = 0xFF000000

_WORD_SPLIT = re.compile(r"[ \t]+")
_ATOI = re.compile(r"\s*([+-]?\d+)")


class XpmError(ValueError):
    """Raised when XPM data cannot be read or parsed."""


def _find_unquoted(text: str, needle: str) -> int:
    in_quote = False
    for index, char in enumerate(text):
        if char == '"':
            in_quote = not in_quote
        if not in_quote and text.startswith(needle, index):
            return index
    return -1


def _blank(text: str, start: int, span: int) -> str:
    span = min(span, len(text) - start)
    return text[:start] + " " * span + text[start + span:]


def strip_comments(text: str) -> str:
    """Replace C comments outside quoted strings with spaces.

    The text keeps its length, so positions in it stay valid.
    """
    while (begin := _find_unquoted(text, "/*")) != -1:
        end = text.find("*/", begin + 2)
        text = _blank(text, begin, end - begin + 2 if end != -1 else 3)
    while (begin := _find_unquoted(text, "//")) != -1:
        end = text.find("\n", begin + 2)
        text = _blank(text, begin, end - begin + 1 if end != -1 else 2)
    return text


def quoted_lines(text: str) -> Iterator[str]:
    """Yield, in order, each string enclosed between a pair of double quotes."""
    pos = 0
    while (open_at := text.find('"', pos)) != -1:
        close_at = text.find('"', open_at + 1)
        if close_at == -1:
            return
        yield text[open_at + 1:close_at]
        pos = close_at + 1


def _words(line: str) -> list[str]:
    return [word for word in _WORD_SPLIT.split(line) if word]


def _atoi(text: str) -> int:
    match = _ATOI.match(text)
    return int(match.group(1)) if match else 0


def _next_line(rows: Iterator[str], what: str) -> str:
    try:
        return next(rows)
    except StopIteration:
        raise XpmError(f"XPM data ends before the {what} lines") from None


def parse_xpm(lines: Iterable[str]) -> Image:
    """Build an image from the strings of an XPM: header, colours, then pixels.

    Colours given as "None" become fully transparent pixels (0xFF000000);
    pixels whose key has no colour entry are black.
    """
    rows = iter(lines)
    header = _next_line(rows, "header")
    fields = _words(header)
    if len(fields) < 4:
        raise XpmError(f"incomplete XPM header: {header!r}")
    width, height, ncolors, cpp = (_atoi(value) for value in fields[:4])
    if min(width, height, ncolors, cpp) <= 0:
        raise XpmError(f"invalid XPM header: {header!r}")

    # With one or two characters per pixel later entries override earlier
    # ones; with more, the first entry for a key is the one used.
    direct = cpp <= 2
    palette: dict[str, int] = {}
    for _ in range(ncolors):
        line = _next_line(rows, "colour")
        words = _words(line[cpp:])
        try:
            index = words.index("c")
        except ValueError:
            raise XpmError(f"colour entry without 'c' key: {line!r}") from None
        if index + 1 >= len(words):
            raise XpmError(f"colour entry without a colour: {line!r}")
        extra = words[index + 2] if index + 2 < len(words) else None
        value = parse_color(words[index + 1], extra)
        key = line[:cpp]
        if direct:
            palette[key] = value
        else:
            palette.setdefault(key, value)

    image = Image(width, height)
    for y in range(height):
        line = _next_line(rows, "pixel")
        for x in range(width):
            color = palette.get(line[x * cpp:(x + 1) * cpp], 0)
            if color == -1:
                color = TRANSPARENT
            image.put_pixel(x, y, color)
    return image


def parse_xpm_text(text: str) -> Image:
    """Parse the text of an XPM file."""
    return parse_xpm(quoted_lines(strip_comments(text)))


def load_xpm(path: str | Path) -> Image:
    """Read and parse an XPM file."""
    try:
        text = Path(path).read_text(encoding="latin-1")
    except OSError as exc:
        raise XpmError(f"cannot read {path}: {exc}") from exc
    return parse_xpm_text(text)