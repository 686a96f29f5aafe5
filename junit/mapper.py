"""Maps JUnit suites to Fern suite runs"""

from __future__ import annotations

from datetime import datetime, timedelta
from typing import List, Optional, Tuple

from fern.models import SpecRun, SpecStatus, SuiteRun
from junit.model import RawSuite, RawTestCase
from junit.timing import case_step, case_windows, end_time, parse_duration, parse_timestamp
from settings import CaseTiming, settings
from shared.errors import TimeFormatError


def classify(test_case: RawTestCase) -> Tuple[SpecStatus, str]:
    """
    Status and message of the test case.
    Failures take precedence over errors and errors over skips. Only the first
    failure or error is used for the message.
    """
    if test_case.failures:
        failure = test_case.failures[0]
        return SpecStatus.FAILURE, failure.message + "\n" + failure.content
    if test_case.errors:
        error = test_case.errors[0]
        return SpecStatus.FAILURE, error.message + "\n" + error.content
    if test_case.skips:
        return SpecStatus.SKIPPED, ""
    return SpecStatus.SUCCESS, ""


def map_suite(raw_suite: RawSuite, case_timing: Optional[CaseTiming] = None) -> SuiteRun:
    case_timing = case_timing or settings.case_timing
    try:
        start_time: datetime = parse_timestamp(raw_suite.timestamp)
        duration: timedelta = parse_duration(raw_suite.time)
        suite_end: datetime = end_time(start_time, raw_suite.time)
        step = case_step(duration, len(raw_suite.testCases), case_timing)
        windows = list(case_windows(start_time, step, len(raw_suite.testCases)))
    except TimeFormatError as e:
        raise TimeFormatError(f"Failed to parse TestSuite {raw_suite.name}: {e}", suite=raw_suite.name) from e

    spec_runs: List[SpecRun] = []
    for i, (test_case, (case_start, case_end)) in enumerate(zip(raw_suite.testCases, windows)):
        status, message = classify(test_case)
        spec_runs.append(
            SpecRun(
                id=i,
                spec_description=test_case.classname,
                status=status,
                message=message,
                tags=[],
                start_time=case_start,
                end_time=case_end,
            )
        )
    return SuiteRun(
        suite_name=raw_suite.name,
        start_time=start_time,
        end_time=suite_end,
        spec_runs=spec_runs,
    )
