"""Cursor, results and the combinators every grammar rule is built from.

Rules are plain functions taking a `Cursor` and returning either a
`Success` (value plus the advanced cursor) or a `Failure`. A failing rule
never moves the input: the caller still holds the cursor it passed in, so
alternatives can be retried from the same place.
"""

import functools
from collections.abc import Callable
from dataclasses import dataclass, replace
from typing import Generic, TypeVar

from food_diary.parser.errors import FailureKind, ParseError, Position

T = TypeVar("T")

LINE_TERMINATORS = ("\r\n", "\n")


@dataclass(frozen=True)
class Cursor:
    """Immutable read position over the input text."""

    text: str
    index: int = 0
    offset: int = 0
    line: int = 1
    column: int = 1

    @property
    def position(self) -> Position:
        return Position(offset=self.offset, line=self.line, column=self.column)

    def at_end(self) -> bool:
        return self.index >= len(self.text)

    def peek(self, ahead: int = 0) -> str:
        """Return the character `ahead` places from here, or '' past the end."""
        index = self.index + ahead
        if index >= len(self.text):
            return ""
        return self.text[index]

    def startswith(self, prefix: str) -> bool:
        return self.text.startswith(prefix, self.index)

    def slice_to(self, other: "Cursor") -> str:
        return self.text[self.index : other.index]

    def advance(self, count: int) -> "Cursor":
        """Move forward `count` characters, keeping line and column in step."""
        offset, line, column = self.offset, self.line, self.column
        end = min(self.index + count, len(self.text))
        for char in self.text[self.index : end]:
            offset += len(char.encode("utf-8"))
            if char == "\n":
                line += 1
                column = 1
            else:
                column += 1
        return replace(self, index=end, offset=offset, line=line, column=column)

    def advance_while(self, predicate: Callable[[str], bool]) -> "Cursor":
        end = self.index
        while end < len(self.text) and predicate(self.text[end]):
            end += 1
        return self.advance(end - self.index)


@dataclass(frozen=True)
class Success(Generic[T]):
    """A matched rule: its value and the cursor just past the match."""

    value: T
    cursor: Cursor


@dataclass(frozen=True)
class Failure:
    """A rule that did not match, with where and what it wanted."""

    position: Position
    expected: str
    kind: FailureKind = FailureKind.LEXICAL
    context: tuple[str, ...] = ()

    def within(self, rule_name: str) -> "Failure":
        """Return a copy with an enclosing rule name appended to the context."""
        return replace(self, context=(*self.context, rule_name))

    def to_error(self) -> ParseError:
        return ParseError(
            position=self.position,
            expected=self.expected,
            context=self.context,
            kind=self.kind,
        )


Result = Success[T] | Failure
Rule = Callable[[Cursor], "Success[T] | Failure"]


def fail(
    cursor: Cursor, expected: str, kind: FailureKind = FailureKind.LEXICAL
) -> Failure:
    return Failure(position=cursor.position, expected=expected, kind=kind)


def rule(name: str) -> Callable[[Callable[..., Result]], Callable[..., Result]]:
    """Name a grammar rule so its failures carry it in their context."""

    def decorator(func: Callable[..., Result]) -> Callable[..., Result]:
        @functools.wraps(func)
        def wrapper(cursor: Cursor, *args: object, **kwargs: object) -> Result:
            result = func(cursor, *args, **kwargs)
            if isinstance(result, Failure):
                return result.within(name)
            return result

        return wrapper

    return decorator


def first_of(cursor: Cursor, *alternatives: Rule) -> Result:
    """Try alternatives in order and return the first success.

    When every alternative fails, the failure that got furthest into the
    input is returned; on a tie the earlier alternative wins.
    """
    if not alternatives:
        raise ValueError("first_of needs at least one alternative")
    deepest: Failure | None = None
    for alternative in alternatives:
        result = alternative(cursor)
        if isinstance(result, Success):
            return result
        if deepest is None or result.position.offset > deepest.position.offset:
            deepest = result
    return deepest


def lookahead(parser: Rule) -> Rule:
    """Succeed with None where `parser` would match, without consuming."""

    def check(cursor: Cursor) -> Result:
        result = parser(cursor)
        if isinstance(result, Failure):
            return result
        return Success(None, cursor)

    return check
