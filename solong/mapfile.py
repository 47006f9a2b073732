"""Loading and checking ".ber" map files."""

from __future__ import annotations

import re
from collections.abc import Iterable, Sequence
from dataclasses import dataclass
from pathlib import Path

WALL = "1"
FLOOR = "0"
COIN = "C"
EXIT = "E"
PLAYER = "P"
FOES = "F"

_ALLOWED = frozenset("01EPC\nF")
_LINE = re.compile(r"[^\n]*\n|[^\n]+")


class MapError(ValueError):
    """Raised when a map file is missing, malformed or cannot be finished."""


def check_extension(path: str | Path) -> None:
    """Check that the name has a ".ber" extension after its first character."""
    name = str(path)
    dot = name.find(".", 1)
    if dot == -1 or name[dot:dot + 4] != ".ber":
        raise MapError("Wrong file format !")


def read_map_lines(path: str | Path) -> list[str]:
    """Return the lines of a map file, each keeping its newline."""
    try:
        text = Path(path).read_bytes().decode("latin-1")
    except OSError as exc:
        raise MapError("Map can't be open") from exc
    return _LINE.findall(text)


def find_player(rows: Sequence[str]) -> tuple[int, int]:
    """Return the (y, x) position of the last player tile in ``rows``."""
    found = None
    for y, row in enumerate(rows):
        for x, tile in enumerate(row):
            if tile == PLAYER:
                found = (y, x)
    if found is None:
        raise MapError("No player on the map")
    return found


def reachable(rows: Sequence[str], start: tuple[int, int]) -> set[tuple[int, int]]:
    """Return every cell reachable from ``start`` without crossing walls or foes."""
    seen: set[tuple[int, int]] = set()
    stack = [start]
    while stack:
        y, x = stack.pop()
        if (
            (y, x) in seen
            or not 0 <= y < len(rows)
            or not 0 <= x < len(rows[y])
            or rows[y][x] in (WALL, FOES)
        ):
            continue
        seen.add((y, x))
        stack.extend(((y + 1, x), (y - 1, x), (y, x + 1), (y, x - 1)))
    return seen


def _width(lines: Sequence[str]) -> int:
    if not lines:
        raise MapError("Empty map !")
    return len(lines[0]) - 1


def validate(lines: Sequence[str]) -> tuple[tuple[int, int], int]:
    """Check raw map lines and return the player position and the coin count.

    Lines keep their newlines; the map width is the first line's length less
    one. Raises MapError with the first problem found.
    """
    width = _width(lines)
    height = len(lines)

    if any(len(prev) != len(cur) for prev, cur in zip(lines, lines[1:])):
        raise MapError("Non-Rectangular Map")

    grid = [line[:width] for line in lines]

    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            edge = y in (0, height - 1) or x in (0, width - 1)
            if edge and tile != WALL:
                raise MapError("Invalid map borders !")

    tiles = "".join(grid)
    coins = tiles.count(COIN)
    if tiles.count(EXIT) != 1 or tiles.count(PLAYER) != 1 or coins < 1:
        raise MapError("Invalid number of elements !")

    if any(char not in _ALLOWED for line in lines for char in line):
        raise MapError("Invalid map content !")

    player = find_player(grid)
    visited = reachable(grid, player)
    for y, row in enumerate(grid):
        for x, tile in enumerate(row):
            if tile in (EXIT, COIN) and (y, x) not in visited:
                raise MapError("Impossible map")
    return player, coins


@dataclass
class GameMap:
    """A checked map: its tiles, the player's start and the number of coins."""

    grid: list[list[str]]
    player: tuple[int, int]
    coins: int

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> GameMap:
        """Check raw map lines and build the map from them."""
        lines = list(lines)
        player, coins = validate(lines)
        width = _width(lines)
        return cls([list(line[:width]) for line in lines], player, coins)

    @property
    def height(self) -> int:
        return len(self.grid)

    @property
    def width(self) -> int:
        return len(self.grid[0]) if self.grid else 0

    def __getitem__(self, pos: tuple[int, int]) -> str:
        y, x = pos
        return self.grid[y][x]

    def __setitem__(self, pos: tuple[int, int], tile: str) -> None:
        y, x = pos
        self.grid[y][x] = tile

    def __str__(self) -> str:
        return "".join("".join(row) + "\n" for row in self.grid)


def load_map(path: str | Path) -> GameMap:
    """Check the file name, read the file and build a checked map from it."""
    check_extension(path)
    return GameMap.from_lines(read_map_lines(path))