"""Crossword layout generation.

Single greedy pass: the first word anchors near the grid centre, every later
word must cross a word already on the grid at a shared letter. Among all
valid crossings one is picked at random, and words with no valid crossing are
skipped rather than aborting the pass.
"""

from __future__ import annotations

import random
from dataclasses import dataclass, field
from typing import List, Optional, Sequence, Tuple, Union

from ..core.constants import DEFAULT_GRID_SIZE, DEFAULT_MAX_WORDS, MIN_WORD_LENGTH, Direction
from ..core.exceptions import PlacementFailure
from ..core.models import Bounds, Placement, WordEntry
from ..data.normalization import normalize_word, split_graphemes
from ..data.word_bank import WordClue
from ..utils.logger import get_logger
from .grid import GridConfig, PlacementGrid
from .validator import LayoutValidator


LOGGER = get_logger(__name__)

WordInput = Union[WordClue, str]


@dataclass
class GeneratorConfig:
    size: int = DEFAULT_GRID_SIZE
    anchor: Optional[Tuple[int, int]] = None
    min_word_length: int = MIN_WORD_LENGTH
    max_words: int = DEFAULT_MAX_WORDS
    guard_word_ends: bool = True
    seed: Optional[int] = None

    def __post_init__(self) -> None:
        grid_config = self.to_grid_config()
        if self.anchor is None:
            offset = self.size * 3 // 8
            self.anchor = (offset, offset)
        row, col = self.anchor
        if not (0 <= row < grid_config.size and 0 <= col < grid_config.size):
            raise ValueError(f"Anchor {self.anchor} lies outside a {self.size}x{self.size} grid")
        if self.max_words < 1:
            raise ValueError("max_words must be at least 1")

    def to_grid_config(self) -> GridConfig:
        return GridConfig(size=self.size, guard_word_ends=self.guard_word_ends)


@dataclass
class Candidate:
    row: int
    col: int
    direction: Direction
    crossing_index: int
    crosses: str


@dataclass
class LayoutResult:
    grid: PlacementGrid
    entries: List[WordEntry]
    placements: List[Placement]
    skipped: List[WordEntry] = field(default_factory=list)
    validation_messages: List[str] = field(default_factory=list)
    seed: Optional[int] = None

    @property
    def bounds(self) -> Bounds:
        return self.grid.bounds


def build_entries(words: Sequence[WordInput], min_length: int = MIN_WORD_LENGTH) -> List[WordEntry]:
    """Normalize raw words and drop the ones that are too short to place."""

    entries: List[WordEntry] = []
    for index, item in enumerate(words):
        clue_item = item if isinstance(item, WordClue) else WordClue(word=item)
        text = normalize_word(clue_item.word)
        graphemes = split_graphemes(text)
        if len(graphemes) < min_length:
            LOGGER.debug("Dropping %r: shorter than %s", clue_item.word, min_length)
            continue
        entries.append(
            WordEntry(
                id=f"W{index}",
                text=text,
                graphemes=graphemes,
                clue=clue_item.clue,
                source=clue_item.source,
                index=index,
            )
        )
    count_matches(entries)
    return entries


def count_matches(entries: Sequence[WordEntry]) -> None:
    """Fill ``total_matches``: letter equalities against every other entry."""

    for i, entry in enumerate(entries):
        total = 0
        for letter in entry.graphemes:
            for k, other in enumerate(entries):
                if i == k:
                    continue
                total += sum(1 for other_letter in other.graphemes if other_letter == letter)
        entry.total_matches = total


class CrosswordGenerator:
    """Places words on a square grid so that they cross at shared letters."""

    def __init__(
        self,
        config: Optional[GeneratorConfig] = None,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config or GeneratorConfig()
        self.rng = rng if rng is not None else random.Random(self.config.seed)
        self.validator = LayoutValidator()

    # ------------------------------------------------------------------
    # Public entrypoint
    # ------------------------------------------------------------------
    def generate(self, words: Sequence[WordInput]) -> LayoutResult:
        entries = build_entries(words, self.config.min_word_length)
        if len(entries) > self.config.max_words:
            LOGGER.warning(
                "Received %s placeable words, keeping the first %s",
                len(entries),
                self.config.max_words,
            )
            entries = entries[: self.config.max_words]
            count_matches(entries)
        grid = PlacementGrid(self.config.to_grid_config())
        skipped: List[WordEntry] = []

        for entry in entries:
            LOGGER.debug("Trying %s (total matches %s)", entry.text, entry.total_matches)
            try:
                self._place_entry(grid, entry)
            except PlacementFailure as exc:
                LOGGER.warning("%s", exc)
                skipped.append(entry)

        result = LayoutResult(
            grid=grid,
            entries=entries,
            placements=list(grid.placements),
            skipped=skipped,
            seed=self.config.seed,
        )
        validation = self.validator.validate(result)
        result.validation_messages = validation.messages
        LOGGER.info(
            "Placed %s of %s words on a %sx%s grid",
            len(result.placements),
            len(entries),
            grid.size,
            grid.size,
        )
        return result

    # ------------------------------------------------------------------
    # Placement
    # ------------------------------------------------------------------
    def _place_entry(self, grid: PlacementGrid, entry: WordEntry) -> Placement:
        if entry.length > grid.size:
            raise PlacementFailure(entry.text, f"longer than the {grid.size}-cell grid")

        if not grid.placements:
            row, col = self.config.anchor
            if not grid.fits(entry.graphemes, row, col, Direction.DOWN):
                raise PlacementFailure(entry.text, f"does not fit at anchor {(row, col)}")
            placement = Placement(entry=entry, row=row, col=col, direction=Direction.DOWN)
            grid.place(placement)
            return placement

        candidates = self.find_candidates(grid, entry)
        if not candidates:
            raise PlacementFailure(entry.text)

        choice = self.rng.choice(candidates)
        placement = Placement(
            entry=entry,
            row=choice.row,
            col=choice.col,
            direction=choice.direction,
            crossing_index=choice.crossing_index,
            crosses=choice.crosses,
        )
        grid.place(placement)
        return placement

    @staticmethod
    def find_candidates(grid: PlacementGrid, entry: WordEntry) -> List[Candidate]:
        """Every valid perpendicular crossing of ``entry`` with the placed words."""

        candidates: List[Candidate] = []
        for j, letter in enumerate(entry.graphemes):
            for placed in grid.placements:
                for pos, placed_letter in enumerate(placed.entry.graphemes):
                    if letter != placed_letter:
                        continue
                    direction = placed.direction.perpendicular()
                    cross_row, cross_col = placed.cells[pos]
                    dr, dc = direction.step
                    row, col = cross_row - dr * j, cross_col - dc * j
                    if grid.fits(entry.graphemes, row, col, direction, crossing_index=j):
                        candidates.append(
                            Candidate(
                                row=row,
                                col=col,
                                direction=direction,
                                crossing_index=j,
                                crosses=placed.entry.id,
                            )
                        )
        return candidates
