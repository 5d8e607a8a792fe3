"""Tests for the diary HTTP API."""

import asyncio
from dataclasses import dataclass, field

from fastapi.testclient import TestClient

from food_diary.api.app import create_app
from food_diary.config import Settings
from food_diary.containers import AppContainer, build_container
from food_diary.domain.diary import Document
from food_diary.services.diary import DiaryService
from tests.conftest import SAMPLE_DIARY


def test_health(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok"}


def test_parse_returns_document(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/diary/parse", json={"text": SAMPLE_DIARY})

    assert response.status_code == 200
    day = response.json()["days"][0]
    assert day["date"] == "2024-03-01"
    assert [meal["label"] for meal in day["meals"]] == ["breakfast", "lunch"]
    oatmeal = day["meals"][0]["entries"][0]
    assert oatmeal == {
        "name": "oatmeal",
        "quantity": {"amount": "80", "unit": "g"},
        "overrides": {"protein": "10"},
    }


def test_parse_error_is_unprocessable(container: AppContainer) -> None:
    client = TestClient(create_app(container))

    response = client.post("/diary/parse", json={"text": "2024-03-01\n"})

    assert response.status_code == 422
    error = response.json()["error"]
    assert error["kind"] == "structural"
    assert error["expected"] == "at least one meal"
    assert error["context"] == ["day", "document"]
    assert error["line"] == 2


def test_oversized_diary_is_rejected() -> None:
    container = build_container(Settings(max_input_bytes=8))
    client = TestClient(create_app(container))

    response = client.post("/diary/parse", json={"text": SAMPLE_DIARY})

    assert response.status_code == 413
    assert response.json()["error"]["limit"] == 8


@dataclass
class LoopRecordingDiaryService(DiaryService):
    """Diary service that notes whether it ran inside an event loop."""

    ran_in_loop: list[bool] = field(default_factory=list)

    def parse(self, text: str) -> Document:
        try:
            asyncio.get_running_loop()
        except RuntimeError:
            self.ran_in_loop.append(False)
        else:
            self.ran_in_loop.append(True)
        return super().parse(text)


def test_parse_runs_off_the_event_loop(settings: Settings) -> None:
    service = LoopRecordingDiaryService()
    container = AppContainer(settings=settings, diary_service=service)
    client = TestClient(create_app(container))

    response = client.post("/diary/parse", json={"text": SAMPLE_DIARY})

    assert response.status_code == 200
    assert service.ran_in_loop == [False]
