"""Tests for the diary service."""

import logging
from collections.abc import Iterator
from datetime import date

import pytest

from food_diary.parser.errors import ParseError
from food_diary.services.diary import DiaryService, DiaryTooLargeError
from tests.conftest import SAMPLE_DIARY


@pytest.fixture
def service_records(caplog: pytest.LogCaptureFixture) -> Iterator[list]:
    records: list[logging.LogRecord] = []
    handler = logging.Handler()
    handler.emit = records.append  # type: ignore[method-assign]
    logger = logging.getLogger("food_diary.services.diary")
    logger.addHandler(handler)
    caplog.set_level(logging.INFO, logger="food_diary.services.diary")
    yield records
    logger.removeHandler(handler)


def test_parse_logs_summary(service_records: list) -> None:
    document = DiaryService().parse(SAMPLE_DIARY)

    assert document.dates() == [date(2024, 3, 1)]
    assert any(
        "days=1 meals=2 entries=2" in record.getMessage() for record in service_records
    )


def test_parse_failure_is_logged_and_raised(service_records: list) -> None:
    with pytest.raises(ParseError):
        DiaryService().parse("2024-03-01\n")

    assert any(record.levelno == logging.WARNING for record in service_records)


def test_oversized_diary_is_rejected() -> None:
    service = DiaryService(max_input_bytes=10)

    with pytest.raises(DiaryTooLargeError) as exc_info:
        service.parse(SAMPLE_DIARY)

    assert isinstance(exc_info.value, ValueError)
    assert exc_info.value.limit == 10
    assert exc_info.value.size == len(SAMPLE_DIARY.encode())


def test_parse_many_orders_by_first_day_and_keeps_duplicates() -> None:
    later = "2024-03-05\nlunch\nrice 100g\n"
    earlier = "2024-03-01\nbreakfast\noatmeal 80g\n2024-03-05\nsnack\napple 1\n"

    document = DiaryService().parse_many([later, earlier])

    assert document.dates() == [date(2024, 3, 1), date(2024, 3, 5), date(2024, 3, 5)]


def test_parse_many_needs_input() -> None:
    with pytest.raises(ValueError):
        DiaryService().parse_many([])
