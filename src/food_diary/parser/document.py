"""Day and document grammar."""

from functools import partial

from food_diary.domain.diary import Day, Document, Meal, NonEmpty
from food_diary.parser.core import (
    Cursor,
    Result,
    Success,
    fail,
    first_of,
    lookahead,
    rule,
)
from food_diary.parser.dates import day_header
from food_diary.parser.errors import FailureKind
from food_diary.parser.lexical import skip_blank_lines
from food_diary.parser.meals import meal
from food_diary.parser.vocabulary import Vocabulary


@rule("day")
def day(cursor: Cursor, vocabulary: Vocabulary) -> Result[Day]:
    """Parse a date header and the meals under it."""
    header = day_header(cursor)
    if not isinstance(header, Success):
        return header

    meals: list[Meal] = []
    current = header.cursor
    while True:
        line = skip_blank_lines(current)
        if line.at_end():
            break
        step = first_of(
            line,
            partial(meal, vocabulary=vocabulary),
            lookahead(day_header),
        )
        if not isinstance(step, Success):
            return step
        if not isinstance(step.value, Meal):
            break
        meals.append(step.value)
        current = step.cursor

    if not meals:
        return fail(line, "at least one meal", FailureKind.STRUCTURAL)
    parsed = Day(date=header.value, meals=NonEmpty.from_iterable(meals))
    return Success(parsed, current)


@rule("document")
def document(cursor: Cursor, vocabulary: Vocabulary) -> Result[Document]:
    days: list[Day] = []
    current = cursor
    while True:
        line = skip_blank_lines(current)
        if line.at_end():
            break
        parsed = day(line, vocabulary)
        if not isinstance(parsed, Success):
            return parsed
        days.append(parsed.value)
        current = parsed.cursor

    if not days:
        return fail(line, "at least one day", FailureKind.STRUCTURAL)
    return Success(Document(days=NonEmpty.from_iterable(days)), line)
