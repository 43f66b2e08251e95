"""CLI entrypoint for the AssignMate crossword layout generator."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional, Tuple

from assignmate.core.constants import DEFAULT_GRID_SIZE, DEFAULT_MAX_WORDS
from assignmate.core.exceptions import WordSourceError
from assignmate.data.word_bank import (
    SampleWordList,
    UserWordList,
    WordClue,
    WordSource,
    merge_word_sources,
    parse_words_file,
)
from assignmate.engine.generator import CrosswordGenerator, GeneratorConfig, LayoutResult
from assignmate.io.clues import build_clue_list
from assignmate.io.question_bank import QuestionBankClient, QuestionBankWordSource
from assignmate.utils.logger import configure_logging
from assignmate.utils.pretty import print_layout_stats


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Lay out crossword words for AssignMate worksheets",
    )
    parser.add_argument(
        "--words",
        nargs="+",
        metavar="WORD",
        help="Explicit words (format: WORD or WORD:Clue)",
    )
    parser.add_argument(
        "--words-file",
        type=Path,
        metavar="FILE",
        help="File with one WORD or WORD:Clue entry per line (# comments and blank lines ignored)",
    )
    parser.add_argument(
        "--sample",
        action="store_true",
        help="Use the built-in animal word list",
    )
    parser.add_argument(
        "--question-bank",
        type=str,
        metavar="KIND",
        help="Pull words from the question-bank API (e.g. riddle, science)",
    )
    parser.add_argument(
        "--api-url",
        type=str,
        help="Question-bank base URL (defaults to $ASSIGNMATE_API_URL)",
    )
    parser.add_argument(
        "--question-limit",
        type=int,
        default=15,
        help="Maximum number of question-bank words to request",
    )
    parser.add_argument("--size", type=int, default=DEFAULT_GRID_SIZE, help="Grid size in cells")
    parser.add_argument("--seed", type=int, default=None, help="Random seed for reproducibility")
    parser.add_argument(
        "--max-words",
        type=int,
        default=DEFAULT_MAX_WORDS,
        help="Maximum number of words attempted",
    )
    parser.add_argument(
        "--no-end-guard",
        action="store_true",
        help="Allow words to end right next to a collinear letter",
    )
    parser.add_argument(
        "--reveal",
        action="store_true",
        help="Print the grid with letters revealed to stderr",
    )
    parser.add_argument("--output", type=Path, help="Optional path to JSON output")
    parser.add_argument(
        "--log-level",
        type=str,
        default="INFO",
        help="Logging level (DEBUG, INFO, WARNING, ERROR)",
    )
    return parser


def collect_words(args: argparse.Namespace) -> List[WordClue]:
    user_words: List[str] = []
    if args.words:
        user_words.extend(args.words)
    if args.words_file:
        user_words.extend(parse_words_file(args.words_file))

    sources: List[WordSource] = []
    if user_words:
        sources.append(UserWordList(user_words))
    if args.question_bank:
        client = QuestionBankClient(base_url=args.api_url)
        sources.append(
            QuestionBankWordSource(client, kind=args.question_bank, max_questions=args.question_limit)
        )
    if args.sample:
        sources.append(SampleWordList())

    words = merge_word_sources(sources[0], sources[1:], target=args.max_words)
    if not words:
        raise WordSourceError("No usable words collected from the configured sources")
    return words


def window_to_jsonable(window: Optional[Tuple[int, int, int, int]]) -> Optional[Dict[str, int]]:
    """Name the crop window edges; ``grid`` row 0, column 0 sits at (top, left)."""
    if window is None:
        return None
    top, left, bottom, right = window
    return {"top": top, "left": left, "bottom": bottom, "right": right}


def build_payload(result: LayoutResult) -> Dict[str, Any]:
    return {
        "size": result.grid.size,
        "bounds": result.bounds.to_jsonable(),
        "window": window_to_jsonable(result.grid.crop_window()),
        "grid": result.grid.to_jsonable(),
        "placements": [placement.to_jsonable() for placement in result.placements],
        "skipped": [entry.text for entry in result.skipped],
        "entries": [
            {"id": entry.id, "word": entry.text, "total_matches": entry.total_matches}
            for entry in result.entries
        ],
        "clues": [clue.to_jsonable() for clue in build_clue_list(result.placements)],
        "validation": result.validation_messages,
        "seed": result.seed,
    }


def main(argv: list[str] | None = None) -> None:
    parser = build_parser()
    args = parser.parse_args(argv)
    level = getattr(logging, args.log_level.upper(), logging.INFO)
    configure_logging(level)

    if not (args.words or args.words_file or args.sample or args.question_bank):
        parser.error("provide at least one of --words, --words-file, --sample or --question-bank")

    try:
        config = GeneratorConfig(
            size=args.size,
            max_words=args.max_words,
            guard_word_ends=not args.no_end_guard,
            seed=args.seed,
        )
    except ValueError as exc:
        parser.error(str(exc))

    try:
        words = collect_words(args)
    except WordSourceError as exc:
        parser.error(str(exc))

    result = CrosswordGenerator(config).generate(words)
    if args.reveal:
        print_layout_stats(result, reveal=True, stream=sys.stderr)

    output_text = json.dumps(build_payload(result), ensure_ascii=False, indent=2)
    if args.output:
        args.output.write_text(output_text, encoding="utf-8")
    else:
        print(output_text)


if __name__ == "__main__":  # pragma: no cover
    main()
