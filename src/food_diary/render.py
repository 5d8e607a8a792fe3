"""Render parsed diaries back into the diary text form."""

from decimal import Decimal

from food_diary.domain.diary import Day, Document, FoodEntry, Meal, Quantity


def render_decimal(value: Decimal) -> str:
    """Render without exponent notation, keeping the digits as parsed."""
    return format(value, "f")


def render_quantity(quantity: Quantity) -> str:
    return str(quantity)


def render_entry(entry: FoodEntry) -> str:
    parts = [entry.name, render_quantity(entry.quantity)]
    parts.extend(
        f"{kind.value}={render_decimal(value)}"
        for kind, value in entry.overrides.items()
    )
    return " ".join(parts)


def render_meal(meal: Meal) -> str:
    lines = [meal.label.name]
    lines.extend(render_entry(entry) for entry in meal.entries)
    return "\n".join(lines)


def render_day(day: Day) -> str:
    lines = [day.date.isoformat()]
    lines.extend(render_meal(meal) for meal in day.meals)
    return "\n".join(lines)


def render_document(document: Document) -> str:
    """Render every day, separated by blank lines, with a final newline."""
    return "\n\n".join(render_day(day) for day in document.days) + "\n"
