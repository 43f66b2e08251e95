"""Shared constants and enumerations for the crossword layout engine."""

from __future__ import annotations

from enum import Enum
from typing import Tuple


DEFAULT_GRID_SIZE = 32
MIN_GRID_SIZE = 2
MAX_GRID_SIZE = 256
MIN_WORD_LENGTH = 2
DEFAULT_MAX_WORDS = 64

EMPTY_SYMBOL = "."
USED_SYMBOL = "#"


class Direction(int, Enum):
    """Word directions on the grid.

    ``DOWN`` grows the row index per character, ``ACROSS`` grows the column
    index. The integer values are the wire encoding (``0``/``1``).
    """

    DOWN = 0
    ACROSS = 1

    @property
    def step(self) -> Tuple[int, int]:
        return (1, 0) if self is Direction.DOWN else (0, 1)

    @property
    def side_steps(self) -> Tuple[Tuple[int, int], Tuple[int, int]]:
        """Offsets of the two neighbours perpendicular to the word's axis."""
        if self is Direction.DOWN:
            return ((0, -1), (0, 1))
        return ((-1, 0), (1, 0))

    def perpendicular(self) -> "Direction":
        return Direction.ACROSS if self is Direction.DOWN else Direction.DOWN


class WordSourceKind(str, Enum):
    """Where an input word came from."""

    USER = "user"
    SAMPLE = "sample"
    QUESTION_BANK = "question_bank"
