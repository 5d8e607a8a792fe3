"""Quantity grammar: an exact decimal amount with an optional unit."""

from food_diary.domain.diary import Quantity, Unit
from food_diary.parser.core import Cursor, Result, Success, fail, rule
from food_diary.parser.errors import FailureKind
from food_diary.parser.lexical import at_word_boundary, number, skip_inline
from food_diary.parser.vocabulary import Vocabulary


def unit(cursor: Cursor, vocabulary: Vocabulary) -> Result[Unit]:
    """Match the longest unit alias that ends on a word boundary."""
    for alias, matched in vocabulary.unit_aliases():
        end = cursor.advance(len(alias))
        if end.index - cursor.index != len(alias):
            continue
        if cursor.slice_to(end).casefold() == alias and at_word_boundary(end):
            return Success(matched, end)
    return fail(cursor, "unit")


@rule("quantity")
def quantity(cursor: Cursor, vocabulary: Vocabulary) -> Result[Quantity]:
    amount = number(cursor)
    if not isinstance(amount, Success):
        return amount
    if amount.value < 0:
        return fail(cursor, "non-negative quantity", FailureKind.SEMANTIC)

    matched = unit(skip_inline(amount.cursor), vocabulary)
    if isinstance(matched, Success):
        return Success(Quantity(amount.value, matched.value), matched.cursor)
    return Success(Quantity(amount.value), amount.cursor)
