"""Test run sent to the Fern API. Field names are the keys of the JSON payload."""

from __future__ import annotations

import datetime

from enum import Enum
from typing import List

from pydantic import BaseModel, ConfigDict

from fern import NEW_ID


class SpecStatus(str, Enum):
    SUCCESS = "Success"
    FAILURE = "Failure"
    SKIPPED = "Skipped"


class Tag(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: int = NEW_ID
    name: str


class SpecRun(BaseModel):
    """Single test case execution"""

    model_config = ConfigDict(frozen=True)

    id: int = NEW_ID
    suite_id: int = NEW_ID
    spec_description: str
    status: SpecStatus
    # empty unless status is Failure
    message: str = ""
    tags: List[Tag] = []
    start_time: datetime.datetime
    end_time: datetime.datetime


class SuiteRun(BaseModel):
    """Test suite execution"""

    model_config = ConfigDict(frozen=True)

    id: int = NEW_ID
    test_run_id: int = NEW_ID
    suite_name: str
    start_time: datetime.datetime
    end_time: datetime.datetime
    spec_runs: List[SpecRun] = []


class TestRun(BaseModel):
    """All suites reported by one invocation"""

    __test__ = False  # not a pytest test class
    model_config = ConfigDict(frozen=True)

    id: int = NEW_ID
    test_project_name: str
    suite_runs: List[SuiteRun] = []
