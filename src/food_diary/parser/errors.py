"""Parse error types shared by every grammar rule."""

from dataclasses import dataclass
from enum import Enum


class FailureKind(Enum):
    """Broad class of a parse failure."""

    LEXICAL = "lexical"
    STRUCTURAL = "structural"
    SEMANTIC = "semantic"


@dataclass(frozen=True)
class Position:
    """Location in the input: UTF-8 byte offset, 1-based line and column."""

    offset: int
    line: int
    column: int

    def __str__(self) -> str:
        return f"line {self.line}, column {self.column}"


class ParseError(Exception):
    """Raised when diary text does not match the grammar."""

    def __init__(
        self,
        position: Position,
        expected: str,
        context: tuple[str, ...] = (),
        kind: FailureKind = FailureKind.LEXICAL,
    ) -> None:
        self.position = position
        self.expected = expected
        self.context = context
        self.kind = kind
        super().__init__(self._describe())

    def _describe(self) -> str:
        message = f"{self.position}: expected {self.expected}"
        if self.context:
            message += f" (in {' > '.join(reversed(self.context))})"
        return message

    def to_dict(self) -> dict[str, object]:
        """Return a JSON-friendly view of the error."""
        return {
            "offset": self.position.offset,
            "line": self.position.line,
            "column": self.position.column,
            "expected": self.expected,
            "context": list(self.context),
            "kind": self.kind.value,
        }
