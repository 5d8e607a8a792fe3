"""Pydantic models for the diary API payloads."""

import datetime

from pydantic import BaseModel, Field

from food_diary.domain.diary import Day, Document, FoodEntry, Meal, Quantity
from food_diary.render import render_decimal


class DiaryParseRequest(BaseModel):
    """Diary text to parse."""

    text: str


class QuantityModel(BaseModel):
    """Quantity payload; the amount is an exact decimal string."""

    amount: str
    unit: str | None = None

    @classmethod
    def from_domain(cls, quantity: Quantity) -> "QuantityModel":
        return cls(
            amount=render_decimal(quantity.amount),
            unit=quantity.unit.symbol if quantity.unit else None,
        )


class FoodEntryModel(BaseModel):
    """Food entry payload."""

    name: str
    quantity: QuantityModel
    overrides: dict[str, str] = Field(default_factory=dict)

    @classmethod
    def from_domain(cls, entry: FoodEntry) -> "FoodEntryModel":
        return cls(
            name=entry.name,
            quantity=QuantityModel.from_domain(entry.quantity),
            overrides={
                kind.value: render_decimal(value)
                for kind, value in entry.overrides.items()
            },
        )


class MealModel(BaseModel):
    """Meal payload."""

    label: str
    kind: str
    entries: list[FoodEntryModel]

    @classmethod
    def from_domain(cls, meal: Meal) -> "MealModel":
        return cls(
            label=meal.label.name,
            kind=meal.label.kind.value,
            entries=[FoodEntryModel.from_domain(entry) for entry in meal.entries],
        )


class DayModel(BaseModel):
    """Day payload."""

    date: datetime.date
    meals: list[MealModel]

    @classmethod
    def from_domain(cls, day: Day) -> "DayModel":
        return cls(
            date=day.date, meals=[MealModel.from_domain(meal) for meal in day.meals]
        )


class DocumentModel(BaseModel):
    """Parsed diary payload."""

    days: list[DayModel]

    @classmethod
    def from_domain(cls, document: Document) -> "DocumentModel":
        return cls(days=[DayModel.from_domain(day) for day in document.days])


class ParseErrorModel(BaseModel):
    """Position and expectation of a parse failure."""

    offset: int
    line: int
    column: int
    expected: str
    context: list[str]
    kind: str
