"""
Grid Module - Weighted rectangular grid and a search state that walks it.

Grids are read from text where every character is a single decimal digit
giving the cost of entering that cell, for example:

    1163
    1381
    2136

The walk starts at the top-left cell (its own weight is never paid) and
ends at the bottom-right cell.
"""

import logging
from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Optional, Tuple, Union

import numpy as np

from .search import SearchState

logger = logging.getLogger(__name__)


class Direction(Enum):
    """Cardinal step directions with their (dx, dy) offsets."""
    NORTH = (0, -1)
    EAST = (1, 0)
    SOUTH = (0, 1)
    WEST = (-1, 0)

    def to_char(self) -> str:
        """Arrow character for this direction: one of ^ > v <."""
        return _ARROWS[self]


_ARROWS = {
    Direction.NORTH: "^",
    Direction.EAST: ">",
    Direction.SOUTH: "v",
    Direction.WEST: "<",
}


@dataclass(frozen=True)
class Position:
    """
    Integer grid coordinate; x grows east, y grows south.

    Attributes:
        x: Column index
        y: Row index
    """
    x: int
    y: int

    def offset(self, dx: int, dy: int) -> "Position":
        return Position(self.x + dx, self.y + dy)

    def step(self, direction: Direction) -> "Position":
        dx, dy = direction.value
        return self.offset(dx, dy)

    def distance_to(self, other: "Position") -> int:
        """Manhattan distance."""
        return abs(self.x - other.x) + abs(self.y - other.y)

    def adjacent(self) -> Iterator["Position"]:
        """The four orthogonal neighbours, in Direction order."""
        for direction in Direction:
            yield self.step(direction)

    def direction_to(self, other: "Position") -> Direction:
        """
        Direction of a single step from this position to a neighbour.

        Raises:
            ValueError: If other is not orthogonally adjacent
        """
        for direction in Direction:
            if self.step(direction) == other:
                return direction
        raise ValueError(f"{other} is not adjacent to {self}")


class WeightGrid:
    """
    Immutable grid of non-negative cell weights backed by a numpy array.

    Attributes:
        weights: 2D int array indexed [y, x]
    """

    def __init__(self, weights: np.ndarray):
        if weights.ndim != 2 or weights.size == 0:
            raise ValueError(f"Grid must be a non-empty 2D array, got shape {weights.shape}")
        if not np.issubdtype(weights.dtype, np.integer):
            raise ValueError(f"Grid weights must be integers, got dtype {weights.dtype}")
        if (weights < 0).any():
            raise ValueError("Grid weights must be non-negative")
        self.weights = weights.astype(np.int64, copy=True)
        self.weights.setflags(write=False)
        self._min_weight = int(self.weights.min())

    @classmethod
    def from_lines(cls, lines: Iterable[str]) -> "WeightGrid":
        """
        Build a grid from rows of digit characters.

        Blank lines are ignored.

        Args:
            lines: Text rows, e.g. from a file

        Returns:
            WeightGrid instance

        Raises:
            ValueError: On empty input, ragged rows, or non-digit characters
        """
        rows = [line.strip() for line in lines]
        rows = [row for row in rows if row]

        if not rows:
            raise ValueError("Grid input is empty")

        width = len(rows[0])
        for index, row in enumerate(rows):
            if len(row) != width:
                raise ValueError(f"Row {index} has length {len(row)}, expected {width}")
            if not row.isdigit() or not row.isascii():
                raise ValueError(f"Row {index} contains non-digit characters: {row!r}")

        weights = np.array([[int(c) for c in row] for row in rows], dtype=np.int64)
        return cls(weights)

    @classmethod
    def load(cls, path: Union[str, Path]) -> "WeightGrid":
        """
        Read a grid file.

        Args:
            path: File with one row of digits per line

        Returns:
            WeightGrid instance
        """
        with open(path, "r", encoding="utf-8") as f:
            grid = cls.from_lines(f)
        logger.debug(f"Loaded {grid.width}x{grid.height} grid from {path}")
        return grid

    @property
    def width(self) -> int:
        return self.weights.shape[1]

    @property
    def height(self) -> int:
        return self.weights.shape[0]

    @property
    def min_weight(self) -> int:
        """Smallest cell weight, used to scale the distance heuristic."""
        return self._min_weight

    @property
    def top_left(self) -> Position:
        return Position(0, 0)

    @property
    def bottom_right(self) -> Position:
        return Position(self.width - 1, self.height - 1)

    def contains(self, position: Position) -> bool:
        return 0 <= position.x < self.width and 0 <= position.y < self.height

    def get(self, position: Position) -> Optional[int]:
        """
        Weight of a cell.

        Args:
            position: Cell coordinate

        Returns:
            Weight, or None if position is off the grid
        """
        if not self.contains(position):
            return None
        return int(self.weights[position.y, position.x])


class GridState(SearchState):
    """
    Position on a WeightGrid heading for a target cell.

    Moving to an orthogonal neighbour costs the neighbour's weight. The
    heuristic is min_weight times the Manhattan distance to the target,
    which never overestimates.
    """

    def __init__(self, grid: WeightGrid, position: Position, target: Position):
        self.grid = grid
        self.position = position
        self.target = target

    @classmethod
    def start(cls, grid: WeightGrid) -> "GridState":
        """State at the top-left cell targeting the bottom-right cell."""
        return cls(grid, grid.top_left, grid.bottom_right)

    def min_remaining_cost(self) -> int:
        return self.grid.min_weight * self.position.distance_to(self.target)

    def is_complete(self) -> bool:
        return self.position == self.target

    def successors(self) -> Iterator[Tuple["GridState", int]]:
        for position in self.position.adjacent():
            weight = self.grid.get(position)
            if weight is not None:
                yield GridState(self.grid, position, self.target), weight

    def __eq__(self, other):
        if not isinstance(other, GridState):
            return NotImplemented
        return self.position == other.position and self.target == other.target

    def __hash__(self):
        return hash((self.position, self.target))

    def __repr__(self):
        return f"GridState(({self.position.x},{self.position.y}) -> ({self.target.x},{self.target.y}))"
