"""Closed vocabularies recognised by the diary grammar."""

from collections.abc import Mapping
from dataclasses import dataclass, field

from food_diary.domain.diary import MacroKind, MealKind, Unit


def normalize_alias(text: str) -> str:
    """Case-fold and collapse inner whitespace so lookups ignore spelling noise."""
    return " ".join(text.split()).casefold()


@dataclass(frozen=True)
class Vocabulary:
    """Alias tables for meal labels, units and macro override keys."""

    meal_labels: Mapping[str, MealKind]
    units: Mapping[str, Unit]
    macros: Mapping[str, MacroKind]
    _units_longest_first: tuple[tuple[str, Unit], ...] = field(
        init=False, repr=False, compare=False
    )

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "meal_labels", _normalized(self.meal_labels, "meal label")
        )
        object.__setattr__(self, "units", _normalized(self.units, "unit"))
        object.__setattr__(self, "macros", _normalized(self.macros, "macro key"))
        if MealKind.OTHER in self.meal_labels.values():
            raise ValueError("meal aliases cannot map to the free-form kind")
        for alias in self.units:
            if " " in alias:
                raise ValueError(f"unit alias must be a single word: {alias!r}")
        ordered = sorted(self.units.items(), key=lambda item: -len(item[0]))
        object.__setattr__(self, "_units_longest_first", tuple(ordered))

    def meal_kind(self, label: str) -> MealKind | None:
        return self.meal_labels.get(normalize_alias(label))

    def macro_kind(self, key: str) -> MacroKind | None:
        return self.macros.get(normalize_alias(key))

    def unit_aliases(self) -> tuple[tuple[str, Unit], ...]:
        """Unit aliases ordered longest first, so `kg` is tried before `g`."""
        return self._units_longest_first

    def macro_names(self) -> list[str]:
        return sorted(self.macros)

    def extended(
        self,
        *,
        meal_labels: Mapping[str, MealKind] | None = None,
        units: Mapping[str, Unit] | None = None,
        macros: Mapping[str, MacroKind] | None = None,
    ) -> "Vocabulary":
        """Return a copy with extra aliases added on top of these ones."""
        return Vocabulary(
            meal_labels={**self.meal_labels, **(meal_labels or {})},
            units={**self.units, **(units or {})},
            macros={**self.macros, **(macros or {})},
        )


def _normalized(table: Mapping[str, object], what: str) -> dict[str, object]:
    normalized = {}
    for alias, value in table.items():
        key = normalize_alias(alias)
        if not key:
            raise ValueError(f"empty {what} alias")
        normalized[key] = value
    return normalized


DEFAULT_VOCABULARY = Vocabulary(
    meal_labels={
        "breakfast": MealKind.BREAKFAST,
        "lunch": MealKind.LUNCH,
        "dinner": MealKind.DINNER,
        "supper": MealKind.DINNER,
        "snack": MealKind.SNACK,
        "snacks": MealKind.SNACK,
    },
    units={
        "g": Unit.GRAM,
        "gram": Unit.GRAM,
        "grams": Unit.GRAM,
        "kg": Unit.KILOGRAM,
        "mg": Unit.MILLIGRAM,
        "µg": Unit.MICROGRAM,
        "mcg": Unit.MICROGRAM,
        "oz": Unit.OUNCE,
        "lb": Unit.POUND,
        "lbs": Unit.POUND,
        "ml": Unit.MILLILITRE,
        "l": Unit.LITRE,
        "cup": Unit.CUP,
        "cups": Unit.CUP,
        "tbsp": Unit.TABLESPOON,
        "tsp": Unit.TEASPOON,
        "pcs": Unit.PIECE,
        "pc": Unit.PIECE,
        "piece": Unit.PIECE,
        "pieces": Unit.PIECE,
        "serving": Unit.SERVING,
        "servings": Unit.SERVING,
        "slice": Unit.SLICE,
        "slices": Unit.SLICE,
        "kcal": Unit.KILOCALORIE,
    },
    macros={
        "calories": MacroKind.CALORIES,
        "kcal": MacroKind.CALORIES,
        "protein": MacroKind.PROTEIN,
        "carbohydrate": MacroKind.CARBOHYDRATE,
        "carbohydrates": MacroKind.CARBOHYDRATE,
        "carbs": MacroKind.CARBOHYDRATE,
        "fat": MacroKind.FAT,
        "fiber": MacroKind.FIBER,
        "fibre": MacroKind.FIBER,
        "sugar": MacroKind.SUGAR,
        "sodium": MacroKind.SODIUM,
    },
)
