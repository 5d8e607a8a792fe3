"""Whole-input entry points for the diary grammar.

Each function parses the complete text, allowing only blank lines around
the parsed value, and raises `ParseError` on any mismatch.
"""

from collections.abc import Callable
from datetime import date
from functools import partial
from typing import TypeVar

from food_diary.domain.diary import Day, Document, FoodEntry, Meal, Quantity
from food_diary.parser.core import Cursor, Failure, Result, fail
from food_diary.parser.dates import calendar_date
from food_diary.parser.document import day, document
from food_diary.parser.entries import food_entry
from food_diary.parser.lexical import skip_blank_lines, skip_inline
from food_diary.parser.meals import meal
from food_diary.parser.quantity import quantity
from food_diary.parser.vocabulary import DEFAULT_VOCABULARY, Vocabulary

T = TypeVar("T")


def parse_document(text: str, vocabulary: Vocabulary | None = None) -> Document:
    """Parse a whole diary into a `Document`."""
    return _parse_all(partial(document, vocabulary=_resolve(vocabulary)), text)


def parse_day(text: str, vocabulary: Vocabulary | None = None) -> Day:
    return _parse_all(partial(day, vocabulary=_resolve(vocabulary)), text)


def parse_meal(text: str, vocabulary: Vocabulary | None = None) -> Meal:
    return _parse_all(partial(meal, vocabulary=_resolve(vocabulary)), text)


def parse_food_entry(text: str, vocabulary: Vocabulary | None = None) -> FoodEntry:
    return _parse_all(partial(food_entry, vocabulary=_resolve(vocabulary)), text)


def parse_quantity(text: str, vocabulary: Vocabulary | None = None) -> Quantity:
    return _parse_all(partial(quantity, vocabulary=_resolve(vocabulary)), text)


def parse_date(text: str) -> date:
    return _parse_all(calendar_date, text)


def _resolve(vocabulary: Vocabulary | None) -> Vocabulary:
    return vocabulary if vocabulary is not None else DEFAULT_VOCABULARY


def _parse_all(parser: Callable[[Cursor], Result[T]], text: str) -> T:
    start = skip_inline(skip_blank_lines(Cursor(text)))
    result = parser(start)
    if isinstance(result, Failure):
        raise result.to_error()
    rest = skip_blank_lines(result.cursor)
    if not rest.at_end():
        raise fail(skip_inline(rest), "end of input").to_error()
    return result.value
