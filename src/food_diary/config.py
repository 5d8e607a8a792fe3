"""Application configuration."""

import os
from enum import Enum

from pydantic_settings import BaseSettings, SettingsConfigDict

from food_diary.domain.diary import MacroKind, MealKind, Unit
from food_diary.parser.vocabulary import DEFAULT_VOCABULARY, Vocabulary

_ENVIRONMENT = os.getenv("ENVIRONMENT", "local")


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    environment: str = _ENVIRONMENT
    log_level: str = "INFO"
    max_input_bytes: int = 1024 * 1024
    meal_aliases: dict[str, str] = {}
    unit_aliases: dict[str, str] = {}
    macro_aliases: dict[str, str] = {}

    model_config = SettingsConfigDict(
        env_prefix="FOOD_DIARY_",
        env_file=(f".env.{_ENVIRONMENT}", ".env"),
        extra="ignore",
    )


def build_vocabulary(settings: Settings) -> Vocabulary:
    """Extend the default vocabulary with aliases from settings.

    Alias values name a canonical entry, e.g. `{"brekkie": "breakfast"}`.
    """
    return DEFAULT_VOCABULARY.extended(
        meal_labels={
            alias: _lookup(MealKind, target, "meal label")
            for alias, target in settings.meal_aliases.items()
        },
        units={
            alias: _lookup(Unit, target, "unit")
            for alias, target in settings.unit_aliases.items()
        },
        macros={
            alias: _lookup(MacroKind, target, "macro key")
            for alias, target in settings.macro_aliases.items()
        },
    )


def _lookup(enum: type[Enum], target: str, what: str) -> Enum:
    cleaned = target.strip().casefold()
    for member in enum:
        if cleaned in {member.value, member.name.casefold()}:
            return member
    raise ValueError(f"unknown {what} in alias configuration: {target!r}")
