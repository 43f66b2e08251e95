"""Data models supporting the crossword layout engine."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Optional, Set, Tuple

from .constants import Direction


@dataclass
class Cell:
    """A grid cell holding at most one grapheme."""

    letter: Optional[str] = None
    part_of_word_ids: Set[str] = field(default_factory=set)

    def is_empty(self) -> bool:
        return self.letter is None


@dataclass
class Bounds:
    """Minimal rectangle enclosing every occupied cell.

    Starts empty; ``update`` grows it one cell at a time as letters land.
    """

    top: Optional[int] = None
    left: Optional[int] = None
    bottom: Optional[int] = None
    right: Optional[int] = None

    def update(self, row: int, col: int) -> None:
        if self.top is None:
            self.top = self.bottom = row
            self.left = self.right = col
            return
        self.top = min(self.top, row)
        self.bottom = max(self.bottom, row)
        self.left = min(self.left, col)
        self.right = max(self.right, col)

    def is_empty(self) -> bool:
        return self.top is None

    def contains(self, row: int, col: int) -> bool:
        if self.is_empty():
            return False
        return self.top <= row <= self.bottom and self.left <= col <= self.right

    @property
    def height(self) -> int:
        return 0 if self.is_empty() else self.bottom - self.top + 1

    @property
    def width(self) -> int:
        return 0 if self.is_empty() else self.right - self.left + 1

    def to_jsonable(self) -> Optional[dict]:
        if self.is_empty():
            return None
        return {"top": self.top, "left": self.left, "bottom": self.bottom, "right": self.right}


@dataclass
class WordEntry:
    """A normalized word ready for placement."""

    id: str
    text: str
    graphemes: Tuple[str, ...]
    clue: str = ""
    source: str = "user"
    index: int = 0
    total_matches: int = 0

    @property
    def length(self) -> int:
        return len(self.graphemes)


@dataclass
class Placement:
    """A word assigned to an origin and a direction on the grid."""

    entry: WordEntry
    row: int
    col: int
    direction: Direction
    crossing_index: Optional[int] = None
    crosses: Optional[str] = None
    _cells: Optional[List[Tuple[int, int]]] = field(default=None, repr=False, compare=False)

    @property
    def cells(self) -> List[Tuple[int, int]]:
        if self._cells is None:
            dr, dc = self.direction.step
            self._cells = [
                (self.row + dr * i, self.col + dc * i) for i in range(self.entry.length)
            ]
        return self._cells

    def to_jsonable(self) -> dict:
        return {
            "id": self.entry.id,
            "word": self.entry.text,
            "clue": self.entry.clue,
            "start": [self.row, self.col],
            "direction": self.direction.name,
            "dir": int(self.direction),
            "length": self.entry.length,
            "crossing_index": self.crossing_index,
            "crosses": self.crosses,
        }
