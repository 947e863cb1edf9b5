from __future__ import annotations

from calendar import monthrange
from datetime import date, datetime, timedelta
from typing import Optional


def parse_iso_date(value: str) -> date:
    """Parse YYYY-MM-DD (or an ISO timestamp; only the date part is used) into date."""
    return datetime.strptime(value.split("T", 1)[0].strip(), "%Y-%m-%d").date()


def try_parse_iso_date(value: object) -> Optional[date]:
    if not isinstance(value, str) or not value:
        return None
    try:
        return parse_iso_date(value)
    except ValueError:
        return None


def today_local() -> date:
    """Current local date.

    Note: Wrapped so tests can patch/mocked easier.
    """
    return date.today()


def age_on(birth_date: date, today: date) -> int:
    """Full years between birth_date and today."""
    age = today.year - birth_date.year
    if (today.month, today.day) < (birth_date.month, birth_date.day):
        age -= 1
    return age


def _add_months(d: date, months: int) -> date:
    """Shift by whole months, clamping the day to the target month's length."""
    year, month0 = divmod(d.month - 1 + months, 12)
    year += d.year
    return date(year, month0 + 1, min(d.day, monthrange(year, month0 + 1)[1]))


def tenure_parts(joined: date, today: date) -> tuple[int, int, int]:
    """(years, months, days) elapsed since joined; zero when joined is in the future."""
    if joined > today:
        return 0, 0, 0

    months_total = (today.year - joined.year) * 12 + today.month - joined.month
    if today.day < joined.day:
        months_total -= 1
    # days are counted from the last monthly anniversary
    days = (today - _add_months(joined, months_total)).days
    years, months = divmod(months_total, 12)
    return years, months, days


def format_tenure(joined: date, today: date) -> str:
    years, months, days = tenure_parts(joined, today)

    def _plural(n: int, unit: str) -> str:
        return f"{n} {unit}" if n == 1 else f"{n} {unit}s"

    return f"{_plural(years, 'year')}, {_plural(months, 'month')}, {_plural(days, 'day')}"


def business_days_between(start: date, end: date) -> int:
    """Count Monday-Friday days in the inclusive range [start, end]."""
    if end < start:
        return 0

    total_days = (end - start).days + 1
    full_weeks, remainder = divmod(total_days, 7)
    count = full_weeks * 5
    for offset in range(remainder):
        if (start + timedelta(days=full_weeks * 7 + offset)).weekday() < 5:
            count += 1
    return count
