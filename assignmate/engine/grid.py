"""Grid representation and placement helpers."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional, Sequence, Tuple

from ..core.constants import DEFAULT_GRID_SIZE, MAX_GRID_SIZE, MIN_GRID_SIZE, Direction
from ..core.exceptions import SlotPlacementError
from ..core.models import Bounds, Cell, Placement
from ..utils.logger import get_logger


LOGGER = get_logger(__name__)


@dataclass
class GridConfig:
    """Configuration values driving the grid layout."""

    size: int = DEFAULT_GRID_SIZE
    guard_word_ends: bool = True

    def __post_init__(self) -> None:
        if not MIN_GRID_SIZE <= self.size <= MAX_GRID_SIZE:
            raise ValueError(
                f"Grid size must be between {MIN_GRID_SIZE} and {MAX_GRID_SIZE}, got {self.size}"
            )


class PlacementGrid:
    """Square letter grid that tracks the bounds of its occupied cells."""

    def __init__(self, config: GridConfig) -> None:
        self.config = config
        self.size = config.size
        self.cells: List[List[Cell]] = [
            [Cell() for _ in range(self.size)] for _ in range(self.size)
        ]
        self.bounds = Bounds()
        self.placements: List[Placement] = []

    # ------------------------------------------------------------------
    # Queries
    # ------------------------------------------------------------------
    def contains(self, row: int, col: int) -> bool:
        return 0 <= row < self.size and 0 <= col < self.size

    def cell(self, row: int, col: int) -> Cell:
        return self.cells[row][col]

    def letter_at(self, row: int, col: int) -> Optional[str]:
        """Letter at ``(row, col)``; cells outside the grid read as empty."""
        if not self.contains(row, col):
            return None
        return self.cells[row][col].letter

    def occupied(self) -> List[Tuple[int, int]]:
        return [
            (r, c)
            for r in range(self.size)
            for c in range(self.size)
            if not self.cells[r][c].is_empty()
        ]

    # ------------------------------------------------------------------
    # Fit checks
    # ------------------------------------------------------------------
    def fits(
        self,
        graphemes: Sequence[str],
        row: int,
        col: int,
        direction: Direction,
        crossing_index: Optional[int] = None,
    ) -> bool:
        """Check whether a word can be written at ``(row, col)``.

        With a ``crossing_index`` the word must cross exactly there: that cell
        holds the same letter and every other cell is empty with empty side
        neighbours. Without one (the anchor word) every cell must be empty.
        """

        dr, dc = direction.step
        for m, letter in enumerate(graphemes):
            r, c = row + dr * m, col + dc * m
            if not self.contains(r, c):
                return False
            existing = self.cells[r][c].letter
            if m == crossing_index:
                if existing != letter:
                    return False
                continue
            if existing is not None:
                return False
            for sr, sc in direction.side_steps:
                if self.letter_at(r + sr, c + sc) is not None:
                    return False

        if self.config.guard_word_ends:
            before = self.letter_at(row - dr, col - dc)
            length = len(graphemes)
            after = self.letter_at(row + dr * length, col + dc * length)
            if before is not None or after is not None:
                return False
        return True

    # ------------------------------------------------------------------
    # Mutation
    # ------------------------------------------------------------------
    def place(self, placement: Placement) -> None:
        """Write a placement into the grid, rejecting it before any mutation."""

        graphemes = placement.entry.graphemes
        for index, (row, col) in enumerate(placement.cells):
            if not self.contains(row, col):
                raise SlotPlacementError(
                    f"Word '{placement.entry.text}' extends outside grid at {(row, col)}"
                )
            existing = self.cells[row][col].letter
            if existing is not None and existing != graphemes[index]:
                raise SlotPlacementError(
                    f"Letter conflict at {(row, col)}: '{existing}' vs '{graphemes[index]}'"
                )

        # All checks passed, mutate grid
        for index, (row, col) in enumerate(placement.cells):
            cell = self.cells[row][col]
            cell.letter = graphemes[index]
            cell.part_of_word_ids.add(placement.entry.id)
            self.bounds.update(row, col)
        self.placements.append(placement)
        LOGGER.debug(
            "Placed %s at (%s,%s) %s",
            placement.entry.text,
            placement.row,
            placement.col,
            placement.direction.name,
        )

    # ------------------------------------------------------------------
    # Serialization helpers
    # ------------------------------------------------------------------
    def crop_window(self, margin: int = 1) -> Optional[Tuple[int, int, int, int]]:
        """Return ``(top, left, bottom, right)`` of the bounds plus ``margin``, clamped."""

        if self.bounds.is_empty():
            return None
        return (
            max(0, self.bounds.top - margin),
            max(0, self.bounds.left - margin),
            min(self.size - 1, self.bounds.bottom + margin),
            min(self.size - 1, self.bounds.right + margin),
        )

    def letters(self) -> List[List[Optional[str]]]:
        return [[cell.letter for cell in row] for row in self.cells]

    def to_jsonable(self, margin: int = 1) -> List[List[Optional[str]]]:
        window = self.crop_window(margin)
        if window is None:
            return []
        top, left, bottom, right = window
        return [
            [self.cells[r][c].letter for c in range(left, right + 1)]
            for r in range(top, bottom + 1)
        ]
