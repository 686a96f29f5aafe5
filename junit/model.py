"""Model of JUnit XML reports as read from the files, before mapping to Fern runs"""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict


class Marker(BaseModel):
    """<failure>, <error> or <skipped> child of a test case"""

    model_config = ConfigDict(frozen=True)

    message: str = ""
    content: str = ""


class RawTestCase(BaseModel):
    model_config = ConfigDict(frozen=True)

    classname: str = ""
    name: str = ""
    failures: List[Marker] = []
    errors: List[Marker] = []
    skips: List[Marker] = []


class RawSuite(BaseModel):
    """Test suite with timestamp and duration exactly as written in the report"""

    model_config = ConfigDict(frozen=True)

    name: str = ""
    # RFC 3339
    timestamp: str = ""
    # seconds without unit e.g. `2.5`
    time: str = ""
    testCases: List[RawTestCase] = []
