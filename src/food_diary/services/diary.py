"""Diary parsing service."""

import logging
from collections.abc import Iterable
from dataclasses import dataclass

from food_diary.domain.diary import Document, NonEmpty
from food_diary.parser.errors import ParseError
from food_diary.parser.parse import parse_document
from food_diary.parser.vocabulary import DEFAULT_VOCABULARY, Vocabulary

_logger = logging.getLogger(__name__)


class DiaryTooLargeError(ValueError):
    """Raised when diary text exceeds the configured size limit."""

    def __init__(self, size: int, limit: int) -> None:
        self.size = size
        self.limit = limit
        super().__init__(f"diary is {size} bytes, limit is {limit} bytes")


@dataclass
class DiaryService:
    """Service that parses diary text with a size limit and logging."""

    vocabulary: Vocabulary = DEFAULT_VOCABULARY
    max_input_bytes: int = 1024 * 1024

    def parse(self, text: str) -> Document:
        """Parse one diary text into a document."""
        size = len(text.encode("utf-8"))
        if size > self.max_input_bytes:
            _logger.warning(
                "Diary rejected: size=%s limit=%s", size, self.max_input_bytes
            )
            raise DiaryTooLargeError(size, self.max_input_bytes)
        try:
            document = parse_document(text, self.vocabulary)
        except ParseError as exc:
            _logger.warning("Diary parse failed: %s", exc)
            raise
        _logger.info(
            "Diary parsed: days=%s meals=%s entries=%s",
            len(document.days),
            sum(len(day.meals) for day in document.days),
            sum(len(meal.entries) for day in document.days for meal in day.meals),
        )
        return document

    def parse_many(self, texts: Iterable[str]) -> Document:
        """Parse several diaries and join them, ordered by their first day.

        Days are concatenated as-is; a date present in two diaries stays two
        separate days.
        """
        documents = [self.parse(text) for text in texts]
        if not documents:
            raise ValueError("parse_many needs at least one diary")
        ordered = sorted(documents, key=lambda document: document.days.head.date)
        return Document(
            days=NonEmpty.from_iterable(
                day for document in ordered for day in document.days
            )
        )
