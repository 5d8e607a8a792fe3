"""Calendar date grammar for day headers."""

import calendar
from datetime import date

from food_diary.parser.core import Cursor, Result, Success, fail, rule
from food_diary.parser.errors import FailureKind
from food_diary.parser.lexical import digits, line_end, skip_inline

DATE_SEPARATORS = frozenset("-./")
DATE_FORMAT = "date (YYYY-MM-DD)"
MAX_MONTH = 12


def days_in_month(year: int, month: int) -> int:
    """Gregorian month length, leap years included."""
    return calendar.monthrange(year, month)[1]


@rule("date")
def calendar_date(cursor: Cursor) -> Result[date]:
    """Parse `YYYY-MM-DD`; `.` or `/` may replace `-` if used throughout."""
    year = digits(cursor, DATE_FORMAT)
    if not isinstance(year, Success) or len(year.value) != 4:
        return fail(cursor, DATE_FORMAT)

    separator = year.cursor.peek()
    if separator not in DATE_SEPARATORS:
        return fail(year.cursor, "date separator ('-', '.' or '/')")

    month_start = year.cursor.advance(1)
    month = _short_group(month_start, "month")
    if not isinstance(month, Success):
        return month
    if month.cursor.peek() != separator:
        return fail(month.cursor, f"date separator {separator!r}")

    day_start = month.cursor.advance(1)
    day = _short_group(day_start, "day")
    if not isinstance(day, Success):
        return day

    year_value, month_value, day_value = int(year.value), month.value, day.value
    if year_value < 1:
        return fail(cursor, "year between 1 and 9999", FailureKind.SEMANTIC)
    if not 1 <= month_value <= MAX_MONTH:
        return fail(month_start, "month between 1 and 12", FailureKind.SEMANTIC)
    last_day = days_in_month(year_value, month_value)
    if not 1 <= day_value <= last_day:
        return fail(
            day_start,
            f"day between 1 and {last_day} for {year_value:04d}-{month_value:02d}",
            FailureKind.SEMANTIC,
        )
    return Success(date(year_value, month_value, day_value), day.cursor)


@rule("day header")
def day_header(cursor: Cursor) -> Result[date]:
    parsed = calendar_date(skip_inline(cursor))
    if not isinstance(parsed, Success):
        return parsed
    end = line_end(parsed.cursor, "end of line after the date")
    if not isinstance(end, Success):
        return end
    return Success(parsed.value, end.cursor)


def _short_group(cursor: Cursor, what: str) -> Result[int]:
    group = digits(cursor, f"{what} digits")
    if not isinstance(group, Success):
        return group
    if len(group.value) > 2:
        return fail(cursor.advance(2), f"at most two {what} digits")
    return Success(int(group.value), group.cursor)
