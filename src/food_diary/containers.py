"""Dependency container wiring for the application."""

from dataclasses import dataclass

from food_diary.config import Settings, build_vocabulary
from food_diary.services.diary import DiaryService


@dataclass
class AppContainer:
    """Holds application-wide dependencies."""

    settings: Settings
    diary_service: DiaryService


def build_container(settings: Settings | None = None) -> AppContainer:
    """Create the default dependency container."""
    resolved_settings = settings or Settings()
    diary_service = DiaryService(
        vocabulary=build_vocabulary(resolved_settings),
        max_input_bytes=resolved_settings.max_input_bytes,
    )
    return AppContainer(settings=resolved_settings, diary_service=diary_service)
