"""Tests for day and document parsing."""

from datetime import date
from decimal import Decimal

import pytest

from food_diary.domain.diary import MacroKind, MealKind, MealLabel, Quantity, Unit
from food_diary.parser.errors import FailureKind, ParseError
from food_diary.parser.parse import parse_day, parse_document
from tests.conftest import LONG_DIARY, SAMPLE_DIARY


def test_sample_diary_end_to_end() -> None:
    document = parse_document(SAMPLE_DIARY)

    assert len(document.days) == 1
    day = document.days.head
    assert day.date == date(2024, 3, 1)
    assert [meal.label for meal in day.meals] == [
        MealLabel.canonical(MealKind.BREAKFAST),
        MealLabel.canonical(MealKind.LUNCH),
    ]

    breakfast, lunch = day.meals
    assert len(breakfast.entries) == 1
    assert len(lunch.entries) == 1
    oatmeal = breakfast.entries.head
    assert oatmeal.name == "oatmeal"
    assert oatmeal.quantity == Quantity(Decimal("80"), Unit.GRAM)
    assert oatmeal.overrides == {MacroKind.PROTEIN: Decimal("10")}
    chicken = lunch.entries.head
    assert chicken.name == "chicken"
    assert chicken.quantity == Quantity(Decimal("150"), Unit.GRAM)
    assert chicken.overrides == {MacroKind.CALORIES: Decimal("250")}


def test_long_diary_keeps_order_and_duplicate_dates() -> None:
    document = parse_document(LONG_DIARY)

    assert document.dates() == [date(2024, 3, 1), date(2024, 3, 2), date(2024, 3, 1)]
    first_day = document.days.head
    assert [str(meal.label) for meal in first_day.meals] == [
        "breakfast",
        "Second breakfast",
    ]
    yogurt = first_day.meals[1].entries.head
    assert yogurt.quantity == Quantity(Decimal("0.150"), Unit.KILOGRAM)
    assert yogurt.overrides == {MacroKind.FAT: Decimal("2.50")}
    assert document.days.last.meals.head.label.kind is MealKind.SNACK


def test_crlf_and_indentation() -> None:
    text = "\r\n2024-03-01\r\n\r\n  breakfast\r\n    oatmeal 80g\r\n"

    document = parse_document(text)

    assert document.days.head.meals.head.entries.head.name == "oatmeal"


def test_day_header_followed_by_day_header() -> None:
    text = "2024-03-01\n2024-03-02\nbreakfast\noatmeal 80g\n"

    with pytest.raises(ParseError) as exc_info:
        parse_document(text)

    error = exc_info.value
    assert error.kind is FailureKind.STRUCTURAL
    assert error.expected == "at least one meal"
    assert error.context == ("day", "document")
    assert (error.position.line, error.position.column) == (2, 1)


def test_meal_header_followed_by_end_of_input() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_document("2024-03-01\nbreakfast\n")

    error = exc_info.value
    assert error.kind is FailureKind.STRUCTURAL
    assert error.context == ("meal", "day", "document")


@pytest.mark.parametrize("text", ["", "   \n\n\t\n"])
def test_empty_diary_is_not_a_document(text: str) -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_document(text)

    assert exc_info.value.kind is FailureKind.STRUCTURAL
    assert exc_info.value.expected == "at least one day"
    assert exc_info.value.context == ("document",)


def test_nested_failure_keeps_position_and_context() -> None:
    text = "2024-03-01\nbreakfast\noatmeal 80g\nlunch\nchicken -150g\n"

    with pytest.raises(ParseError) as exc_info:
        parse_document(text)

    error = exc_info.value
    assert error.kind is FailureKind.SEMANTIC
    assert error.context == ("quantity", "food entry", "meal", "day", "document")
    assert (error.position.line, error.position.column) == (5, 9)
    prefix = "2024-03-01\nbreakfast\noatmeal 80g\nlunch\n"
    assert error.position.offset == len(prefix) + 8
    assert str(error).startswith("line 5, column 9: expected non-negative quantity")
    assert "document > day > meal > food entry > quantity" in str(error)


def test_calendar_invalid_date_inside_diary() -> None:
    text = "2024-03-01\nbreakfast\noatmeal 80g\n2023-02-29\nlunch\nrice 1g\n"

    with pytest.raises(ParseError) as exc_info:
        parse_document(text)

    error = exc_info.value
    assert error.kind is FailureKind.SEMANTIC
    assert (error.position.line, error.position.column) == (4, 9)
    assert "date" in error.context


def test_text_before_first_date() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_document("breakfast\noatmeal 80g\n")

    error = exc_info.value
    assert error.expected == "date (YYYY-MM-DD)"
    assert error.context == ("date", "day header", "day", "document")


def test_byte_offset_counts_utf8() -> None:
    text = "2024-03-01\nśniadanie\nżurek -1g\n"

    with pytest.raises(ParseError) as exc_info:
        parse_document(text)

    position = exc_info.value.position
    assert position.line == 3
    assert position.column == 7
    assert position.offset == len("2024-03-01\nśniadanie\nżurek ".encode())


def test_parse_day_stops_at_next_day() -> None:
    with pytest.raises(ParseError) as exc_info:
        parse_day(SAMPLE_DIARY + "2024-03-02\nsnack\napple 1\n")

    assert exc_info.value.expected == "end of input"
    assert exc_info.value.position.line == 6
