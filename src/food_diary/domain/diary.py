"""Domain models for parsed food diaries."""

from collections.abc import Iterable, Iterator, Mapping
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal
from enum import Enum
from typing import Generic, TypeVar, overload

T = TypeVar("T")


@dataclass(frozen=True)
class NonEmpty(Generic[T]):
    """Ordered sequence holding at least one element."""

    head: T
    tail: tuple[T, ...] = ()

    @classmethod
    def of(cls, first: T, *rest: T) -> "NonEmpty[T]":
        return cls(head=first, tail=tuple(rest))

    @classmethod
    def from_iterable(cls, items: Iterable[T]) -> "NonEmpty[T]":
        """Build from any iterable, raising ValueError when it is empty."""
        values = tuple(items)
        if not values:
            raise ValueError("NonEmpty requires at least one element")
        return cls(head=values[0], tail=values[1:])

    def __iter__(self) -> Iterator[T]:
        yield self.head
        yield from self.tail

    def __len__(self) -> int:
        return 1 + len(self.tail)

    @overload
    def __getitem__(self, index: int) -> T: ...

    @overload
    def __getitem__(self, index: slice) -> tuple[T, ...]: ...

    def __getitem__(self, index: int | slice) -> T | tuple[T, ...]:
        return (self.head, *self.tail)[index]

    @property
    def last(self) -> T:
        return self.tail[-1] if self.tail else self.head


class Dimension(Enum):
    """What a unit measures."""

    MASS = "mass"
    VOLUME = "volume"
    COUNT = "count"
    ENERGY = "energy"


class Unit(Enum):
    """Measurement units accepted after a quantity."""

    GRAM = "g"
    KILOGRAM = "kg"
    MILLIGRAM = "mg"
    MICROGRAM = "µg"
    OUNCE = "oz"
    POUND = "lb"
    MILLILITRE = "ml"
    LITRE = "l"
    CUP = "cup"
    TABLESPOON = "tbsp"
    TEASPOON = "tsp"
    PIECE = "pcs"
    SERVING = "serving"
    SLICE = "slice"
    KILOCALORIE = "kcal"

    @property
    def symbol(self) -> str:
        return self.value

    @property
    def dimension(self) -> Dimension:
        return _UNIT_DIMENSIONS[self]


_UNIT_DIMENSIONS = {
    Unit.GRAM: Dimension.MASS,
    Unit.KILOGRAM: Dimension.MASS,
    Unit.MILLIGRAM: Dimension.MASS,
    Unit.MICROGRAM: Dimension.MASS,
    Unit.OUNCE: Dimension.MASS,
    Unit.POUND: Dimension.MASS,
    Unit.MILLILITRE: Dimension.VOLUME,
    Unit.LITRE: Dimension.VOLUME,
    Unit.CUP: Dimension.VOLUME,
    Unit.TABLESPOON: Dimension.VOLUME,
    Unit.TEASPOON: Dimension.VOLUME,
    Unit.PIECE: Dimension.COUNT,
    Unit.SERVING: Dimension.COUNT,
    Unit.SLICE: Dimension.COUNT,
    Unit.KILOCALORIE: Dimension.ENERGY,
}


class MacroKind(Enum):
    """Nutrients that may be overridden inline on a food entry."""

    CALORIES = "calories"
    PROTEIN = "protein"
    CARBOHYDRATE = "carbohydrate"
    FAT = "fat"
    FIBER = "fiber"
    SUGAR = "sugar"
    SODIUM = "sodium"


class MacroOverrides(Mapping[MacroKind, Decimal]):
    """Read-only macro overrides, kept in source order."""

    __slots__ = ("_values",)

    def __init__(
        self,
        values: Mapping[MacroKind, Decimal] | Iterable[tuple[MacroKind, Decimal]] = (),
    ) -> None:
        self._values = dict(values)

    def __getitem__(self, kind: MacroKind) -> Decimal:
        return self._values[kind]

    def __iter__(self) -> Iterator[MacroKind]:
        return iter(self._values)

    def __len__(self) -> int:
        return len(self._values)

    def __hash__(self) -> int:
        return hash(frozenset(self._values.items()))

    def __repr__(self) -> str:
        return f"MacroOverrides({self._values!r})"


class MealKind(Enum):
    """Canonical meal labels, plus OTHER for free-form ones."""

    BREAKFAST = "breakfast"
    LUNCH = "lunch"
    DINNER = "dinner"
    SNACK = "snack"
    OTHER = "other"


@dataclass(frozen=True)
class MealLabel:
    """Label of a meal: a canonical kind or free-form text."""

    kind: MealKind
    name: str

    @classmethod
    def canonical(cls, kind: MealKind) -> "MealLabel":
        if kind is MealKind.OTHER:
            raise ValueError("free-form labels need their own text")
        return cls(kind=kind, name=kind.value)

    @classmethod
    def other(cls, name: str) -> "MealLabel":
        return cls(kind=MealKind.OTHER, name=name)

    @property
    def is_canonical(self) -> bool:
        return self.kind is not MealKind.OTHER

    def __str__(self) -> str:
        return self.name


@dataclass(frozen=True)
class Quantity:
    """Exact amount with an optional unit."""

    amount: Decimal
    unit: Unit | None = None

    def __str__(self) -> str:
        if self.unit is None:
            return format(self.amount, "f")
        return f"{self.amount:f}{self.unit.symbol}"


@dataclass(frozen=True)
class FoodEntry:
    """One eaten food item."""

    name: str
    quantity: Quantity
    overrides: MacroOverrides = field(default_factory=MacroOverrides)

    def __post_init__(self) -> None:
        if not isinstance(self.overrides, MacroOverrides):
            object.__setattr__(self, "overrides", MacroOverrides(self.overrides))


@dataclass(frozen=True)
class Meal:
    """Named group of food entries within a day."""

    label: MealLabel
    entries: NonEmpty[FoodEntry]


@dataclass(frozen=True)
class Day:
    """Meals recorded under one date header."""

    date: date
    meals: NonEmpty[Meal]


@dataclass(frozen=True)
class Document:
    """A whole parsed diary; days keep their source order."""

    days: NonEmpty[Day]

    def dates(self) -> list[date]:
        """Return the date of every day block, duplicates included."""
        return [day.date for day in self.days]
