"""Lightweight HTTP client for the AssignMate question-bank API."""

from __future__ import annotations

import os
from dataclasses import dataclass, field
from typing import Any, Dict, Iterator, List, Optional

import requests

from ..core.constants import WordSourceKind
from ..core.exceptions import QuestionBankError
from ..data.word_bank import WordClue
from ..utils.logger import get_logger

LOGGER = get_logger(__name__)

DEFAULT_API_URL = "http://localhost:5000/api"

QUESTION_KINDS = {
    "riddle": "riddles",
    "flagIdentify": "flag-identifies",
    "goodHabit": "good-habits",
    "science": "science",
    "imageDifference": "image-differences",
}


@dataclass
class QuestionPage:
    questions: List[Dict[str, Any]] = field(default_factory=list)
    total: int = 0
    page: int = 1
    limit: int = 10


class QuestionBankClient:
    """Minimal read-only client around the question-bank REST endpoints."""

    def __init__(
        self,
        base_url: Optional[str] = None,
        base_url_env: str = "ASSIGNMATE_API_URL",
        timeout_seconds: float = 15.0,
        session: Optional[requests.Session] = None,
    ) -> None:
        self.base_url = (base_url or os.environ.get(base_url_env) or DEFAULT_API_URL).rstrip("/")
        self.timeout_seconds = timeout_seconds
        self.session = session or requests.Session()

    @staticmethod
    def endpoint_for(kind: str) -> str:
        """Map a question type (``riddle``) or route name (``riddles``) to its route."""
        if kind in QUESTION_KINDS:
            return QUESTION_KINDS[kind]
        if kind in QUESTION_KINDS.values():
            return kind
        raise ValueError(
            f"Unknown question kind '{kind}' (known: {sorted(QUESTION_KINDS)})"
        )

    def fetch_page(self, kind: str, page: int = 1, limit: int = 10) -> QuestionPage:
        """Fetch one page of questions of the given kind."""
        url = f"{self.base_url}/{self.endpoint_for(kind)}"
        try:
            response = self.session.get(
                url,
                params={"page": page, "limit": limit},
                timeout=self.timeout_seconds,
            )
            response.raise_for_status()
            data = response.json()
        except requests.RequestException as exc:
            raise QuestionBankError(f"Question bank request failed: {exc}") from exc
        except ValueError as exc:
            raise QuestionBankError(f"Question bank returned invalid JSON: {exc}") from exc

        if not isinstance(data, dict):
            raise QuestionBankError(
                f"Question bank returned {type(data).__name__}, expected a JSON object"
            )
        questions = data.get("questions")
        if not isinstance(questions, list):
            LOGGER.warning("Question bank response missing questions: %s", data)
            raise QuestionBankError("Question bank response missing 'questions' list")
        return QuestionPage(
            questions=questions,
            total=int(data.get("total", len(questions))),
            page=int(data.get("page", page)),
            limit=int(data.get("limit", limit)),
        )

    def iter_questions(self, kind: str, limit: int = 50, page_size: int = 10) -> Iterator[Dict[str, Any]]:
        """Yield up to ``limit`` questions, paging until the bank runs out."""
        yielded = 0
        page = 1
        while yielded < limit:
            batch = self.fetch_page(kind, page=page, limit=page_size)
            if not batch.questions:
                return
            for question in batch.questions:
                yield question
                yielded += 1
                if yielded >= limit:
                    return
            if page * page_size >= batch.total:
                return
            page += 1


class QuestionBankWordSource:
    """Turns question-bank answers into words and question texts into clues."""

    def __init__(
        self,
        client: QuestionBankClient,
        kind: str = "riddle",
        max_questions: Optional[int] = None,
    ) -> None:
        self.client = client
        self.kind = kind
        self.max_questions = max_questions

    def generate(self, limit: int = 64) -> List[WordClue]:
        if self.max_questions is not None:
            limit = min(limit, self.max_questions)
        results: List[WordClue] = []
        for question in self.client.iter_questions(self.kind, limit=limit):
            answer = question.get("answer")
            if not isinstance(answer, str) or not answer.strip():
                continue
            results.append(
                WordClue(
                    word=answer.strip(),
                    clue=str(question.get("question") or ""),
                    source=WordSourceKind.QUESTION_BANK.value,
                )
            )
        LOGGER.info("Question bank produced %s words from '%s'", len(results), self.kind)
        return results
