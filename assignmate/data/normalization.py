"""Shared helpers for word normalization and grapheme splitting."""

from __future__ import annotations

import re
import unicodedata
from typing import List, Tuple

WHITESPACE_RE = re.compile(r"\s+")

ZERO_WIDTH_JOINER = "\u200d"


def _is_virama(char: str) -> bool:
    return "VIRAMA" in unicodedata.name(char, "")


def normalize_word(text: str) -> str:
    """Return ``text`` uppercased with all whitespace removed."""

    if not text:
        return ""
    return WHITESPACE_RE.sub("", unicodedata.normalize("NFC", text)).upper()


def split_graphemes(text: str) -> Tuple[str, ...]:
    """Split ``text`` into the clusters that occupy one grid cell each.

    Combining marks stay with their base letter, and a letter following a
    virama or a zero width joiner stays in the same cluster, so Bangla
    conjuncts such as ``ক্ষ`` fill a single cell.
    """

    clusters: List[str] = []
    for char in text:
        if clusters:
            previous = clusters[-1]
            joins = (
                unicodedata.category(char).startswith("M")
                or char == ZERO_WIDTH_JOINER
                or _is_virama(previous[-1])
                or previous[-1] == ZERO_WIDTH_JOINER
            )
            if joins:
                clusters[-1] = previous + char
                continue
        clusters.append(char)
    return tuple(clusters)


__all__ = ["normalize_word", "split_graphemes"]
