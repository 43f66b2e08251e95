"""Word list sources feeding the layout engine."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import List, Optional, Protocol, Sequence

from ..core.constants import WordSourceKind
from ..utils.logger import get_logger
from .normalization import normalize_word


LOGGER = get_logger(__name__)


@dataclass
class WordClue:
    """A raw word and its clue, as supplied by the caller."""

    word: str
    clue: str = ""
    source: str = WordSourceKind.USER.value


class WordSource(Protocol):
    """Protocol implemented by all word providers."""

    def generate(self, limit: int = 64) -> List[WordClue]:
        ...


def parse_word_entry(item: str, source: str = WordSourceKind.USER.value) -> Optional[WordClue]:
    """Parse ``WORD`` or ``WORD:Clue``; returns ``None`` for blank input."""

    item = item.strip()
    if not item:
        return None
    if ":" in item:
        word, _, clue = item.partition(":")
        return WordClue(word.strip(), clue.strip(), source)
    return WordClue(item, "", source)


def parse_words_file(path: Path) -> List[str]:
    """Read words from a file, one entry per line. Blank lines and # comments are skipped."""
    entries: List[str] = []
    for line in path.read_text(encoding="utf-8").splitlines():
        line = line.strip()
        if not line or line.startswith("#"):
            continue
        entries.append(line)
    return entries


class UserWordList:
    """Returns a user-supplied list of ``WORD[:Clue]`` entries."""

    def __init__(self, raw_words: Sequence[str]) -> None:
        self._entries: List[WordClue] = []
        for item in raw_words:
            parsed = parse_word_entry(item)
            if parsed is not None:
                self._entries.append(parsed)

    def generate(self, limit: int = 64) -> List[WordClue]:
        return list(self._entries)


SAMPLE_WORD_CLUES = [
    ("Tucan", "A tropical bird with a large beak"),
    ("Dingo", "This free-ranging dog is at home in the outback."),
    ("Dolphin", "A friendly finned non-fish"),
    ("Pig", "Bosses of the farm in Orwell's world"),
    ("Kangaroo", "Boxing champions of the outback"),
    ("Octopus", "Eight legged sea creature"),
    ("Hamster", "Furry rodent whose teeth never stop growing"),
    ("Alligator", "Dating back further than the T-rex, this reptile is a modern day dinosaur"),
    ("Ostrich", "Flightless bird not know for its people skills"),
    ("Koala", "Friendly version of the infamous Australian tourist terrorizing tree-dwellers"),
    ("Mouse", "This poor animal is often the victim of feline aggression and human experimentation"),
    ("Antelope", "The victim of every lion documentary clip you've ever seen."),
]


class SampleWordList:
    """The default animal word list shown on the worksheet form."""

    def generate(self, limit: int = 64) -> List[WordClue]:
        results = [
            WordClue(word, clue, WordSourceKind.SAMPLE.value)
            for word, clue in SAMPLE_WORD_CLUES[:limit]
        ]
        LOGGER.info("Sample word list produced %s entries", len(results))
        return results


def merge_word_sources(
    primary: WordSource | None,
    fallbacks: Sequence[WordSource],
    target: int,
) -> List[WordClue]:
    """Attempt primary source, cascaded fallbacks, and deduplicate results."""

    collected: List[WordClue] = []
    seen: set[str] = set()

    def extend(entries: List[WordClue]) -> None:
        for entry in entries:
            word_key = normalize_word(entry.word)
            if not word_key or word_key in seen:
                continue
            collected.append(entry)
            seen.add(word_key)
            if len(collected) >= target:
                break

    if primary:
        try:
            extend(primary.generate(limit=target))
        except Exception as exc:
            LOGGER.warning("Primary word source failed: %s", exc)

    for source in fallbacks:
        if len(collected) >= target:
            break
        try:
            extend(source.generate(limit=target))
        except Exception as exc:
            LOGGER.warning("Fallback word source %s failed: %s", source, exc)

    return collected[:target]
