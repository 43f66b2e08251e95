"""Pretty-print helpers for crossword layouts."""

from __future__ import annotations

import sys
from typing import TYPE_CHECKING, Dict, List, Optional, Tuple

from ..core.constants import EMPTY_SYMBOL, USED_SYMBOL, Direction
from ..io.clues import build_clue_list, number_starts

if TYPE_CHECKING:
    from ..engine.generator import LayoutResult
    from ..engine.grid import PlacementGrid


def cell_symbol(letter: Optional[str], reveal: bool) -> str:
    if letter is None:
        return EMPTY_SYMBOL
    return letter if reveal else USED_SYMBOL


def format_grid(
    grid: PlacementGrid,
    *,
    reveal: bool = False,
    numbers: Optional[Dict[Tuple[int, int], int]] = None,
    margin: int = 1,
) -> str:
    """Render the occupied region plus ``margin`` cells; letters stay hidden unless ``reveal``."""

    window = grid.crop_window(margin)
    if window is None:
        return ""
    top, left, bottom, right = window
    numbers = numbers or {}
    lines: List[str] = []
    for r in range(top, bottom + 1):
        row_cells = []
        for c in range(left, right + 1):
            symbol = cell_symbol(grid.letter_at(r, c), reveal)
            number = numbers.get((r, c))
            row_cells.append(f"{number}{symbol}" if number is not None else symbol)
        lines.append(" ".join(f"{cell:>3}" for cell in row_cells))
    return "\n".join(lines)


def print_layout_stats(result: LayoutResult, *, reveal: bool = False, stream=None) -> None:
    """Print grid, clue list and placement stats for a finished layout."""

    stream = stream or sys.stdout
    numbers = number_starts(result.placements)
    print(format_grid(result.grid, reveal=reveal, numbers=numbers), file=stream)

    clues = build_clue_list(result.placements)
    for direction in (Direction.ACROSS, Direction.DOWN):
        group = [c for c in clues if c.direction == direction]
        if not group:
            continue
        print(file=stream)
        print(f"--- {direction.name.capitalize()} ---", file=stream)
        for clue in group:
            print(f"  {clue.number:>2}. {clue.clue or '?'} ({clue.length})", file=stream)

    bounds = result.bounds
    print(file=stream)
    print("--- Layout ---", file=stream)
    print(f"  Grid:          {result.grid.size} x {result.grid.size}", file=stream)
    print(f"  Placed:        {len(result.placements)}/{len(result.entries)}", file=stream)
    if not bounds.is_empty():
        print(f"  Occupied:      {bounds.height} x {bounds.width}", file=stream)
    if result.skipped:
        print(f"  Skipped:       {', '.join(e.text for e in result.skipped)}", file=stream)

    if result.validation_messages:
        print(file=stream)
        print("--- Validation ---", file=stream)
        for msg in result.validation_messages:
            print(f"  {msg}", file=stream)

    if result.seed is not None:
        print(file=stream)
        print(f"Seed: {result.seed}", file=stream)
