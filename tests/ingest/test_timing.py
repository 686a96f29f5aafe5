from __future__ import annotations

from datetime import datetime, timedelta, timezone

import pytest

from junit.timing import case_step, case_windows, end_time, parse_duration, parse_timestamp
from settings import CaseTiming
from shared.errors import TimeFormatError


UTC_START = datetime(2024, 1, 1, tzinfo=timezone.utc)


@pytest.mark.unit
class TestTimestamp:
    def test_zulu(self) -> None:
        assert parse_timestamp("2024-01-01T00:00:00Z") == UTC_START

    def test_offset_and_fraction(self) -> None:
        ts = parse_timestamp("2024-03-10T12:00:00.1234567+01:00")
        assert ts.utcoffset() == timedelta(hours=1)
        assert ts.microsecond == 123456
        assert ts == datetime(2024, 3, 10, 11, 0, 0, 123456, tzinfo=timezone.utc)

    @pytest.mark.parametrize(
        "value",
        [
            "",
            "2024-01-01",
            "2024-01-01 00:00:00Z",
            "2024-01-01T00:00:00",
            "2024-13-01T00:00:00Z",
            "yesterday",
            "\u0662\u0660\u0662\u0664-01-01T00:00:00Z",
            "2024-01-01T00:00:00+01:99",
            "2024-01-01T00:00:00+24:00",
        ],
    )
    def test_invalid(self, value: str) -> None:
        with pytest.raises(TimeFormatError):
            parse_timestamp(value)


@pytest.mark.unit
class TestDuration:
    @pytest.mark.parametrize(
        "value,expected",
        [
            ("2.5", timedelta(seconds=2.5)),
            ("3", timedelta(seconds=3)),
            (".5", timedelta(milliseconds=500)),
            ("0", timedelta(0)),
            ("0.0000004", timedelta(0)),
            ("+1", timedelta(seconds=1)),
        ],
    )
    def test_valid(self, value: str, expected: timedelta) -> None:
        assert parse_duration(value) == expected

    @pytest.mark.parametrize(
        "value", ["abc", "", "1s", "1e3", "-1", "1.2.3", " 1", "1\n", "9" * 40, "\u0662.\u0665", "\u0663"]
    )
    def test_invalid(self, value: str) -> None:
        with pytest.raises(TimeFormatError):
            parse_duration(value)

    def test_end_time(self) -> None:
        assert end_time(UTC_START, "2.5") == datetime(2024, 1, 1, 0, 0, 2, 500000, tzinfo=timezone.utc)


@pytest.mark.unit
class TestCaseWindows:
    def test_suite_duration_step(self) -> None:
        """Every case advances the clock by the whole suite duration."""
        step = case_step(timedelta(seconds=4), 3, CaseTiming.SUITE_DURATION)
        windows = list(case_windows(UTC_START, step, 3))
        assert [(s - UTC_START, e - UTC_START) for s, e in windows] == [
            (timedelta(seconds=0), timedelta(seconds=4)),
            (timedelta(seconds=4), timedelta(seconds=8)),
            (timedelta(seconds=8), timedelta(seconds=12)),
        ]

    def test_even_split_step(self) -> None:
        step = case_step(timedelta(seconds=3), 4, CaseTiming.EVEN_SPLIT)
        assert step == timedelta(seconds=0.75)
        windows = list(case_windows(UTC_START, step, 4))
        assert windows[-1][1] == UTC_START + timedelta(seconds=3)

    def test_even_split_without_cases(self) -> None:
        assert case_step(timedelta(seconds=3), 0, CaseTiming.EVEN_SPLIT) == timedelta(seconds=3)
        assert list(case_windows(UTC_START, timedelta(seconds=3), 0)) == []
