"""Deterministic rule validation for generated layouts."""

from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, List, Set, Tuple

from ..core.exceptions import SlotPlacementError, ValidationError
from ..utils.logger import get_logger
from .grid import PlacementGrid

if TYPE_CHECKING:
    from .generator import LayoutResult


LOGGER = get_logger(__name__)


@dataclass
class ValidationResult:
    ok: bool
    messages: List[str]


class LayoutValidator:
    """Runs deterministic validation over a finished layout."""

    def validate(self, result: "LayoutResult") -> ValidationResult:
        messages: List[str] = []
        try:
            self._check_letters(result)
            self._check_crossings(result)
            self._check_replay(result)
            self._check_bounds(result.grid)
        except ValidationError as exc:
            messages.append(str(exc))
            LOGGER.error("Validation failed: %s", exc)
            return ValidationResult(ok=False, messages=messages)
        return ValidationResult(ok=True, messages=[])

    def _check_letters(self, result: "LayoutResult") -> None:
        grid = result.grid
        for placement in result.placements:
            for (row, col), letter in zip(placement.cells, placement.entry.graphemes):
                if not grid.contains(row, col):
                    raise ValidationError(
                        f"Word '{placement.entry.text}' leaves the grid at {(row, col)}"
                    )
                if grid.letter_at(row, col) != letter:
                    raise ValidationError(
                        f"Cell {(row, col)} holds '{grid.letter_at(row, col)}', "
                        f"expected '{letter}' from '{placement.entry.text}'"
                    )

    def _check_crossings(self, result: "LayoutResult") -> None:
        covered: Set[Tuple[int, int]] = set()
        for position, placement in enumerate(result.placements):
            shared = [cell for cell in placement.cells if cell in covered]
            if position > 0 and len(shared) != 1:
                raise ValidationError(
                    f"Word '{placement.entry.text}' shares {len(shared)} cells with earlier words"
                )
            covered.update(placement.cells)

    def _check_replay(self, result: "LayoutResult") -> None:
        replay = PlacementGrid(result.grid.config)
        for placement in result.placements:
            try:
                replay.place(placement)
            except SlotPlacementError as exc:
                raise ValidationError(f"Replay rejected '{placement.entry.text}': {exc}") from exc
        if replay.letters() != result.grid.letters():
            raise ValidationError("Replaying placements does not reproduce the grid")

    def _check_bounds(self, grid: PlacementGrid) -> None:
        occupied = grid.occupied()
        bounds = grid.bounds
        if not occupied:
            if not bounds.is_empty():
                raise ValidationError("Bounds set on an empty grid")
            return
        rows = [r for r, _ in occupied]
        cols = [c for _, c in occupied]
        expected = (min(rows), min(cols), max(rows), max(cols))
        actual = (bounds.top, bounds.left, bounds.bottom, bounds.right)
        if actual != expected:
            raise ValidationError(f"Bounds {actual} do not match occupied region {expected}")
