"""Meal grammar: a header line followed by food entry lines."""

from functools import partial

from food_diary.domain.diary import FoodEntry, Meal, MealLabel, NonEmpty
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
from food_diary.parser.entries import food_entry
from food_diary.parser.errors import FailureKind
from food_diary.parser.lexical import (
    INLINE_WHITESPACE,
    at_line_end,
    line_end,
    skip_blank_lines,
    skip_inline,
    starts_number,
    word,
)
from food_diary.parser.vocabulary import Vocabulary

MEAL_LABEL = "meal label"
LABEL_TRAILER = ":" + "".join(sorted(INLINE_WHITESPACE))


@rule("meal header")
def meal_header(cursor: Cursor, vocabulary: Vocabulary) -> Result[MealLabel]:
    """Parse a label line such as `breakfast` or `Second breakfast:`.

    Labels may not contain numbers or `=`, which keeps them apart from
    food entries. Trailing colons are dropped, so `Elevenses::` reads as
    `Elevenses`.
    """
    start = skip_inline(cursor)
    label_end = current = start
    while True:
        current = skip_inline(current)
        if at_line_end(current):
            break
        if starts_number(current):
            return fail(current, MEAL_LABEL)
        matched = word(current)
        if not isinstance(matched, Success):
            return fail(current, MEAL_LABEL)
        if "=" in matched.value:
            return fail(current.advance(matched.value.index("=")), MEAL_LABEL)
        label_end = current = matched.cursor

    text = start.slice_to(label_end).rstrip(LABEL_TRAILER)
    if not text:
        return fail(start, MEAL_LABEL)
    end = line_end(label_end)
    if not isinstance(end, Success):
        return end

    kind = vocabulary.meal_kind(text)
    label = MealLabel.canonical(kind) if kind is not None else MealLabel.other(text)
    return Success(label, end.cursor)


@rule("meal")
def meal(cursor: Cursor, vocabulary: Vocabulary) -> Result[Meal]:
    """Parse a meal header and every food entry up to the next header."""
    header = meal_header(cursor, vocabulary)
    if not isinstance(header, Success):
        return header

    entries: list[FoodEntry] = []
    current = header.cursor
    while True:
        line = skip_blank_lines(current)
        if line.at_end():
            break
        step = first_of(
            line,
            partial(food_entry, vocabulary=vocabulary),
            lookahead(partial(meal_header, vocabulary=vocabulary)),
            lookahead(day_header),
        )
        if not isinstance(step, Success):
            return step
        if not isinstance(step.value, FoodEntry):
            break
        entries.append(step.value)
        current = step.cursor

    if not entries:
        return fail(line, "at least one food entry", FailureKind.STRUCTURAL)
    parsed = Meal(label=header.value, entries=NonEmpty.from_iterable(entries))
    return Success(parsed, current)
