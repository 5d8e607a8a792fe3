"""Food entry grammar: `name quantity [key=value ...]` on one line."""

from decimal import Decimal

from food_diary.domain.diary import FoodEntry, MacroKind, MacroOverrides
from food_diary.parser.core import Cursor, Result, Success, fail, rule
from food_diary.parser.errors import FailureKind
from food_diary.parser.lexical import (
    at_line_end,
    line_end,
    number,
    skip_inline,
    starts_number,
    word,
)
from food_diary.parser.quantity import quantity
from food_diary.parser.vocabulary import Vocabulary

OVERRIDE_OR_LINE_END = "macro override (key=value) or end of line"


def food_name(cursor: Cursor) -> Result[str]:
    """Read words up to the first one that starts a number.

    The returned cursor sits at that number, or at the end of the line.
    """
    start = skip_inline(cursor)
    name_end = start
    current = start
    while True:
        current = skip_inline(current)
        if at_line_end(current) or starts_number(current):
            break
        matched = word(current)
        if not isinstance(matched, Success):
            break
        name_end = current = matched.cursor
    if name_end.index == start.index:
        return fail(start, "food name")
    return Success(start.slice_to(name_end), current)


@rule("macro override")
def macro_override(
    cursor: Cursor, vocabulary: Vocabulary
) -> Result[tuple[MacroKind, Decimal]]:
    key_end = cursor.advance_while(lambda char: char != "=" and not char.isspace())
    if key_end.peek() != "=" or key_end.index == cursor.index:
        return fail(cursor, OVERRIDE_OR_LINE_END)
    kind = vocabulary.macro_kind(cursor.slice_to(key_end))
    if kind is None:
        known = ", ".join(vocabulary.macro_names())
        return fail(cursor, f"macro override key (one of: {known})")
    value = number(key_end.advance(1), "override value")
    if not isinstance(value, Success):
        return value
    return Success((kind, value.value), value.cursor)


def macro_overrides(
    cursor: Cursor, vocabulary: Vocabulary
) -> Result[MacroOverrides]:
    """Read `key=value` pairs until the end of the line."""
    overrides: dict[MacroKind, Decimal] = {}
    current = cursor
    while True:
        token_start = skip_inline(current)
        if at_line_end(token_start):
            return Success(MacroOverrides(overrides), current)
        if token_start.index == current.index:
            return fail(token_start, OVERRIDE_OR_LINE_END)
        parsed = macro_override(token_start, vocabulary)
        if not isinstance(parsed, Success):
            return parsed
        kind, value = parsed.value
        if kind in overrides:
            return fail(
                token_start,
                f"unique macro override key ({kind.value} given twice)",
                FailureKind.SEMANTIC,
            ).within("macro override")
        overrides[kind] = value
        current = parsed.cursor


@rule("food entry")
def food_entry(cursor: Cursor, vocabulary: Vocabulary) -> Result[FoodEntry]:
    name = food_name(cursor)
    if not isinstance(name, Success):
        return name
    amount = quantity(name.cursor, vocabulary)
    if not isinstance(amount, Success):
        return amount
    overrides = macro_overrides(amount.cursor, vocabulary)
    if not isinstance(overrides, Success):
        return overrides
    end = line_end(overrides.cursor, OVERRIDE_OR_LINE_END)
    if not isinstance(end, Success):
        return end
    entry = FoodEntry(
        name=name.value, quantity=amount.value, overrides=overrides.value
    )
    return Success(entry, end.cursor)
