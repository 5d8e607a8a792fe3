"""Lexical primitives: whitespace, line ends, words and numbers."""

from decimal import Decimal

from food_diary.parser.core import (
    LINE_TERMINATORS,
    Cursor,
    Result,
    Success,
    fail,
)

INLINE_WHITESPACE = frozenset(" \t")
DIGITS = frozenset("0123456789")
SIGNS = frozenset("+-")


def skip_inline(cursor: Cursor) -> Cursor:
    return cursor.advance_while(lambda char: char in INLINE_WHITESPACE)


def at_line_end(cursor: Cursor) -> bool:
    return cursor.at_end() or any(cursor.startswith(t) for t in LINE_TERMINATORS)


def at_word_boundary(cursor: Cursor) -> bool:
    return at_line_end(cursor) or cursor.peek() in INLINE_WHITESPACE


def skip_blank_lines(cursor: Cursor) -> Cursor:
    """Skip lines holding only whitespace.

    Returns the start of the next non-blank line, or the end of input.
    """
    current = cursor
    while True:
        probe = skip_inline(current)
        if probe.at_end():
            return probe
        terminator = _terminator_at(probe)
        if terminator is None:
            return current
        current = probe.advance(len(terminator))


def line_end(cursor: Cursor, expected: str = "end of line") -> Result[None]:
    """Consume trailing inline whitespace and one line terminator.

    End of input counts as a line end.
    """
    probe = skip_inline(cursor)
    if probe.at_end():
        return Success(None, probe)
    terminator = _terminator_at(probe)
    if terminator is None:
        return fail(probe, expected)
    return Success(None, probe.advance(len(terminator)))


def word(cursor: Cursor) -> Result[str]:
    """Consume a run of characters up to whitespace or the end of the line."""
    end = cursor.advance_while(lambda char: not char.isspace())
    if end.index == cursor.index:
        return fail(cursor, "word")
    return Success(cursor.slice_to(end), end)


def digits(cursor: Cursor, expected: str = "digits") -> Result[str]:
    end = cursor.advance_while(lambda char: char in DIGITS)
    if end.index == cursor.index:
        return fail(cursor, expected)
    return Success(cursor.slice_to(end), end)


def starts_number(cursor: Cursor) -> bool:
    """Tell whether a numeric literal begins here."""
    ahead = 1 if cursor.peek() in SIGNS else 0
    if cursor.peek(ahead) in DIGITS:
        return True
    return cursor.peek(ahead) == "." and cursor.peek(ahead + 1) in DIGITS


def number(cursor: Cursor, expected: str = "numeric quantity") -> Result[Decimal]:
    """Scan `[sign] digits [. digits]` straight into an exact Decimal."""
    current = cursor
    sign = 0
    if current.peek() in SIGNS:
        sign = 1 if current.peek() == "-" else 0
        current = current.advance(1)

    whole = current.advance_while(lambda char: char in DIGITS)
    integer_part = current.slice_to(whole)
    current = whole

    fraction_part = ""
    if current.peek() == "." and current.peek(1) in DIGITS:
        fraction_start = current.advance(1)
        fraction_end = fraction_start.advance_while(lambda char: char in DIGITS)
        fraction_part = fraction_start.slice_to(fraction_end)
        current = fraction_end

    if not integer_part and not fraction_part:
        return fail(cursor, expected)

    coefficient = tuple(int(digit) for digit in integer_part + fraction_part)
    amount = Decimal((sign, coefficient, -len(fraction_part)))
    return Success(amount, current)


def _terminator_at(cursor: Cursor) -> str | None:
    for terminator in LINE_TERMINATORS:
        if cursor.startswith(terminator):
            return terminator
    return None
