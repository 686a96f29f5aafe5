"""Start and end times of suites and test cases"""

from __future__ import annotations

import re

from datetime import datetime, timedelta, timezone
from decimal import ROUND_HALF_EVEN, Decimal, InvalidOperation
from typing import Iterator

from settings import CaseTiming
from shared.errors import TimeFormatError


RFC3339_RE = re.compile(
    r"^([0-9]{4})-([0-9]{2})-([0-9]{2})[Tt]([0-9]{2}):([0-9]{2}):([0-9]{2})(?:\.([0-9]+))?"
    r"(?:([Zz])|([+-])([0-9]{2}):([0-9]{2}))$"
)
# seconds without unit, sign allowed only to be rejected with a clear message
DURATION_RE = re.compile(r"^[+-]?([0-9]+(\.[0-9]*)?|\.[0-9]+)$")
MICROSECOND = Decimal("0.000001")


def parse_timestamp(value: str) -> datetime:
    """
    Strict RFC 3339 timestamp, e.g. `2024-01-01T00:00:00Z` or `2024-01-01T02:00:00.123+02:00`
    Fractions of second beyond microseconds are truncated.
    """
    match = RFC3339_RE.fullmatch(value)
    if match is None:
        raise TimeFormatError(f"timestamp '{value}' is not RFC 3339")
    year, month, day, hour, minute, second, fraction, zulu, sign, off_hours, off_minutes = match.groups()
    if zulu:
        tz = timezone.utc
    else:
        if int(off_hours) > 23 or int(off_minutes) > 59:
            raise TimeFormatError(f"timestamp '{value}' has invalid offset")
        offset = timedelta(hours=int(off_hours), minutes=int(off_minutes))
        tz = timezone(-offset if sign == "-" else offset)
    microsecond = int((fraction or "0")[:6].ljust(6, "0"))
    try:
        return datetime(
            int(year), int(month), int(day), int(hour), int(minute), int(second), microsecond, tzinfo=tz
        )
    except ValueError as e:
        raise TimeFormatError(f"timestamp '{value}': {e}") from e


def parse_duration(value: str) -> timedelta:
    """Duration given in (fractional) seconds, e.g. `2.5`"""
    if DURATION_RE.fullmatch(value) is None:
        raise TimeFormatError(f"duration '{value}' is not a decimal number of seconds")
    seconds = Decimal(value)
    if seconds < 0:
        raise TimeFormatError(f"duration '{value}' is negative")
    try:
        microseconds = int((seconds / MICROSECOND).quantize(Decimal(1), rounding=ROUND_HALF_EVEN))
        return timedelta(microseconds=microseconds)
    except (InvalidOperation, OverflowError) as e:
        raise TimeFormatError(f"duration '{value}' is too large") from e


def end_time(start: datetime, duration: str) -> datetime:
    """start + duration in seconds"""
    return advance(start, parse_duration(duration))


def advance(start: datetime, step: timedelta) -> datetime:
    try:
        return start + step
    except OverflowError as e:
        raise TimeFormatError(f"{start.isoformat()} + {step} is out of range") from e


def case_step(suite_duration: timedelta, case_count: int, case_timing: CaseTiming) -> timedelta:
    """How much the running clock advances for every test case of the suite"""
    if case_timing == CaseTiming.EVEN_SPLIT and case_count > 0:
        return suite_duration / case_count
    return suite_duration


def case_windows(start: datetime, step: timedelta, case_count: int) -> Iterator[tuple[datetime, datetime]]:
    """(start, end) of consecutive test cases, each one starts when the previous ended"""
    running_time = start
    for _ in range(case_count):
        after = advance(running_time, step)
        yield running_time, after
        running_time = after
