"""Crossword layout engine for AssignMate worksheets.

This package exposes the public API surface via:

- ``assignmate.engine.generator.CrosswordGenerator``: places words on the grid.
- ``assignmate.data.word_bank`` helpers: word list sources and their merge.
- ``assignmate.io.question_bank.QuestionBankClient``: reads words from the
  question-bank REST API.
"""

from .engine.generator import CrosswordGenerator, GeneratorConfig, LayoutResult
from .data.word_bank import WordClue, merge_word_sources

__all__ = [
    "CrosswordGenerator",
    "GeneratorConfig",
    "LayoutResult",
    "WordClue",
    "merge_word_sources",
]

__version__ = "0.1.0"
