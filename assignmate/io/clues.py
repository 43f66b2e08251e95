"""Clue numbering and clue lists for a finished layout."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, List, Sequence, Tuple

from ..core.constants import Direction
from ..core.models import Placement


@dataclass
class ClueEntry:
    number: int
    direction: Direction
    word: str
    clue: str
    row: int
    col: int
    length: int

    def to_jsonable(self) -> dict:
        return {
            "number": self.number,
            "direction": self.direction.name,
            "word": self.word,
            "clue": self.clue,
            "start": [self.row, self.col],
            "length": self.length,
        }


def number_starts(placements: Sequence[Placement]) -> Dict[Tuple[int, int], int]:
    """Number word start cells in reading order; shared starts share a number."""

    starts = sorted({(p.row, p.col) for p in placements})
    return {cell: index for index, cell in enumerate(starts, start=1)}


def build_clue_list(placements: Sequence[Placement]) -> List[ClueEntry]:
    numbers = number_starts(placements)
    clues = [
        ClueEntry(
            number=numbers[(p.row, p.col)],
            direction=p.direction,
            word=p.entry.text,
            clue=p.entry.clue,
            row=p.row,
            col=p.col,
            length=p.entry.length,
        )
        for p in placements
    ]
    # Across before down, as printed on the worksheet.
    clues.sort(key=lambda c: (c.direction != Direction.ACROSS, c.number))
    return clues
