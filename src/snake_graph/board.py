"""Board-state model: a dense grid of typed cells built from a turn snapshot."""

from __future__ import annotations

import enum
import logging
from collections.abc import Iterator
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any

import numpy as np

if TYPE_CHECKING:
    from snake_graph.server.models import BattleSnake

logger = logging.getLogger(__name__)

# Largest value representable by the grid's index type (32-bit unsigned).
INDEX_MAX = 2**32 - 1

_NO_OWNER = -1

# Upper bound on width * height; larger boards are rejected before allocation.
MAX_CELLS = 2**24


class BoardError(ValueError):
    """Base class for board construction and indexing errors."""


class CapacityError(BoardError, OverflowError):
    """A dimension or coordinate does not fit the grid's index type."""


class OutOfBoundsError(BoardError, IndexError):
    """A coordinate lies outside the allocated grid."""


class CellType(enum.IntEnum):
    """Integer codes stored in the grid array."""

    EMPTY = 0
    FOOD = 1
    HAZARD = 2
    SNAKE_BODY = 3
    SNAKE_HEAD = 4


_OWNED = frozenset({CellType.SNAKE_BODY, CellType.SNAKE_HEAD})


@dataclass(frozen=True, eq=False)
class Cell:
    """Occupancy of one coordinate.

    ``owner`` is the occupying snake's record for ``SNAKE_BODY`` and
    ``SNAKE_HEAD`` cells and ``None`` for every other kind. Equality and
    hashing use the kind and the owner's id, so cells can be set members.
    """

    kind: CellType
    owner: BattleSnake | None = None

    def __post_init__(self) -> None:
        if (self.kind in _OWNED) != (self.owner is not None):
            raise ValueError(
                f"{self.kind.name} cell must "
                f"{'' if self.kind in _OWNED else 'not '}carry an owner.",
            )

    @property
    def owner_id(self) -> str | None:
        return None if self.owner is None else self.owner.id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Cell):
            return NotImplemented
        return (self.kind, self.owner_id) == (other.kind, other.owner_id)

    def __hash__(self) -> int:
        return hash((self.kind, self.owner_id))


EMPTY = Cell(CellType.EMPTY)
FOOD = Cell(CellType.FOOD)
HAZARD = Cell(CellType.HAZARD)


def _check_index(value: int, name: str) -> int:
    if not 0 <= value <= INDEX_MAX:
        raise CapacityError(
            f"{name}={value} does not fit a 32-bit unsigned index.",
        )
    return int(value)


class BoardState:
    """Dense ``height × width`` grid of cells for a single turn.

    Cells are addressed as ``grid[y][x]``: the row is selected by ``y`` and
    the column by ``x``. Kinds live in an ``int8`` NumPy array and owners
    in a parallel ``int32`` array of handles into :attr:`snakes`, so many
    cells share one snake record without copying it.

    Construction writes food, then hazards, then each snake's body followed
    by its head, in snapshot order. Later writes win, so a coordinate that
    is both food and hazard ends up ``HAZARD`` and a coordinate claimed by
    two snakes belongs to the later one.
    """

    def __init__(self, game_state: Any) -> None:
        board = game_state.board
        self.width = _check_index(board.width, "width")
        self.height = _check_index(board.height, "height")
        if self.width * self.height > MAX_CELLS:
            raise CapacityError(
                f"{self.width}x{self.height} board exceeds "
                f"{MAX_CELLS} cells.",
            )
        try:
            self._kinds = np.zeros((self.height, self.width), dtype=np.int8)
            self._owners = np.full(
                (self.height, self.width), _NO_OWNER, dtype=np.int32,
            )
        except (ValueError, MemoryError) as exc:
            raise CapacityError(
                f"Cannot allocate a {self.width}x{self.height} board.",
            ) from exc
        self._snakes: list[BattleSnake] = []
        self._handles: dict[int, int] = {}

        for coord in board.food:
            self.set(coord.x, coord.y, FOOD)

        for coord in board.hazards:
            self.set(coord.x, coord.y, HAZARD)

        for snake in board.snakes:
            body = Cell(CellType.SNAKE_BODY, snake)
            for coord in snake.body:
                self.set(coord.x, coord.y, body)
            head = snake.head
            self.set(head.x, head.y, Cell(CellType.SNAKE_HEAD, snake))

        logger.debug(
            "Built %dx%d board with %d snakes.",
            self.width, self.height, len(self._snakes),
        )

    @property
    def snakes(self) -> tuple[BattleSnake, ...]:
        """Snake records referenced by cells, in first-written order."""
        return tuple(self._snakes)

    def in_bounds(self, x: int, y: int) -> bool:
        """Check whether a coordinate lies within the grid."""
        return 0 <= x < self.width and 0 <= y < self.height

    def _locate(self, x: int, y: int) -> tuple[int, int]:
        x = _check_index(x, "x")
        y = _check_index(y, "y")
        if x >= self.width or y >= self.height:
            raise OutOfBoundsError(
                f"({x}, {y}) is outside the "
                f"{self.width}x{self.height} board.",
            )
        return y, x

    def _handle(self, snake: BattleSnake) -> int:
        key = id(snake)
        handle = self._handles.get(key)
        if handle is None:
            handle = len(self._snakes)
            self._snakes.append(snake)
            self._handles[key] = handle
        return handle

    def get(self, x: int, y: int) -> Cell:
        """Return the cell at ``(x, y)``."""
        row, col = self._locate(x, y)
        kind = CellType(int(self._kinds[row, col]))
        if kind in _OWNED:
            return Cell(kind, self._snakes[int(self._owners[row, col])])
        return Cell(kind)

    def set(self, x: int, y: int, cell: Cell) -> None:
        """Overwrite the cell at ``(x, y)``."""
        row, col = self._locate(x, y)
        self._kinds[row, col] = cell.kind
        self._owners[row, col] = (
            _NO_OWNER if cell.owner is None else self._handle(cell.owner)
        )

    def cells(self) -> Iterator[tuple[tuple[int, int], Cell]]:
        """Yield ``((x, y), cell)`` pairs in row-major order."""
        for y in range(self.height):
            for x in range(self.width):
                yield (x, y), self.get(x, y)

    def to_dict(self) -> dict:
        """Serialize board state to a dictionary."""
        ids = [snake.id for snake in self._snakes]
        return {
            "width": self.width,
            "height": self.height,
            "cells": self._kinds.tolist(),
            "owners": [
                [None if h == _NO_OWNER else ids[h] for h in row]
                for row in self._owners.tolist()
            ],
        }
