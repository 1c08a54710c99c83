"""Maze panel grid: walls, gates and branch points read from the stage map."""

from __future__ import annotations

import re
from dataclasses import dataclass
from enum import IntEnum
from functools import lru_cache
from pathlib import Path
from typing import Iterable, Iterator

from pacmaze.config import OBJECT_SIZE
from pacmaze.vector2d import Vector2D

STAGE_ROWS = 31
STAGE_COLUMNS = 28
STAGE_MAP_PATH = "Resource/Map/StageMap.csv"

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class PanelID(IntEnum):
    """Content of one maze tile."""

    WALL = 0
    BRANCH = 1
    GATE = 2
    NONE = 3


class AdjacentDirection(IntEnum):
    """Neighbour keys for :meth:`StageData.adjacent_panels`."""

    UP = 0
    DOWN = 1
    LEFT = 2
    RIGHT = 3


def to_index(location: Vector2D) -> tuple[int, int]:
    """Convert a pixel location to ``(row, column)`` tile indices."""
    return int(location.y / OBJECT_SIZE), int(location.x / OBJECT_SIZE)


def _stoi(text: str) -> int:
    match = _INT_PREFIX.match(text)
    if match is None:
        raise ValueError(f"invalid integer field: {text!r}")
    return int(match.group(1))


def _read_ints(fields: Iterator[str], count: int) -> list[int]:
    return [_stoi(next(fields, "")) for _ in range(count)]


def _place(grid: list[list[PanelID]], row: int, column: int, panel: PanelID) -> None:
    if not (0 <= row < len(grid) and 0 <= column < len(grid[row])):
        raise IndexError(f"stage cell ({row}, {column}) is outside the map")
    grid[row][column] = panel


@dataclass
class StageData:
    """A grid of panels, ``data[row][column]``."""

    data: list[list[PanelID]]

    @classmethod
    def from_file(cls, path: str | Path) -> StageData:
        """Read a stage map CSV file."""
        with open(path, encoding="utf-8") as handle:
            return parse_stage(handle)

    def panel_at(self, location: Vector2D) -> PanelID:
        """Panel under a pixel location; NONE outside the map."""
        row, column = to_index(location)
        if row < 0 or column < 0 or row >= len(self.data) or column >= len(self.data[0]):
            return PanelID.NONE
        return self.data[row][column]

    def adjacent_panels(self, location: Vector2D) -> dict[AdjacentDirection, PanelID]:
        """Panels above, below, left and right of a location; NONE past the edges."""
        row, column = to_index(location)
        offsets = {
            AdjacentDirection.UP: (-1, 0),
            AdjacentDirection.DOWN: (1, 0),
            AdjacentDirection.LEFT: (0, -1),
            AdjacentDirection.RIGHT: (0, 1),
        }
        result = {}
        for direction, (d_row, d_column) in offsets.items():
            r, c = row + d_row, column + d_column
            inside = 0 <= r < len(self.data) and 0 <= c < len(self.data[r])
            result[direction] = self.data[r][c] if inside else PanelID.NONE
        return result


def parse_stage(lines: Iterable[str] | str) -> StageData:
    """Build the panel grid from stage map lines.

    ``#`` and ``G`` lines place a run of walls or gates
    (``mode,x_size,y_size,x_start,y_start``, 1-based); ``B`` lines place a branch
    (``B,x,y``). Other lines are ignored.
    """
    if isinstance(lines, str):
        lines = lines.splitlines()
    grid = [[PanelID.NONE] * STAGE_COLUMNS for _ in range(STAGE_ROWS)]
    for line in lines:
        fields = iter(line.rstrip("\r\n").split(","))
        kind = next(fields, "")[:1]
        if kind in ("#", "G"):
            panel = PanelID.GATE if kind == "G" else PanelID.WALL
            x_size, y_size, x_start, y_start = _read_ints(fields, 4)
            x_start -= 1
            y_start -= 1
            if x_size == 1:
                cells = ((row, x_start) for row in range(y_start, y_start + y_size))
            else:
                cells = ((y_start, column) for column in range(x_start, x_start + x_size))
            for row, column in cells:
                _place(grid, row, column, panel)
        elif kind == "B":
            x_start, y_start = _read_ints(fields, 2)
            _place(grid, y_start - 1, x_start - 1, PanelID.BRANCH)
    return StageData(grid)


@lru_cache(maxsize=None)
def default_stage() -> StageData:
    """The stage loaded once from the default map file."""
    return StageData.from_file(STAGE_MAP_PATH)