"""Builds one test run from a report directory and publishes it to Fern"""

from __future__ import annotations

from enum import Enum
from pathlib import Path
from typing import List, Optional

from loguru import logger

from fern.client import FernClient
from fern.models import SuiteRun, TestRun
from junit.walker import ReportWalker
from settings import CaseTiming


class ReportState(Enum):
    IDLE = "idle"
    PARSING = "parsing"
    PARSE_FAILED = "parse failed"
    PARSED = "parsed"
    SENDING = "sending"
    SEND_FAILED = "send failed"
    SENT = "sent"


def build_test_run(project_name: str, report_directory: Path,
                   case_timing: Optional[CaseTiming] = None) -> TestRun:
    """Test run of all reports under `report_directory`, nothing is built when any report fails"""
    suite_runs: List[SuiteRun] = ReportWalker(case_timing=case_timing).walk(report_directory)
    return TestRun(test_project_name=project_name, suite_runs=suite_runs)


class JunitReporter:
    """
    Parse all reports, then send them. The first failure is final, there are no retries.

    IDLE -> PARSING -> PARSE_FAILED | PARSED -> SENDING -> SEND_FAILED | SENT
    """

    def __init__(self, project_name: str, report_directory: Path, client: FernClient,
                 case_timing: Optional[CaseTiming] = None):
        self.projectName: str = project_name
        self.reportDirectory: Path = Path(report_directory)
        self.client: FernClient = client
        self.caseTiming: Optional[CaseTiming] = case_timing
        self.state: ReportState = ReportState.IDLE
        self.testRun: Optional[TestRun] = None

    def parse(self) -> TestRun:
        self.state = ReportState.PARSING
        logger.info("Parsing reports...")
        try:
            self.testRun = build_test_run(self.projectName, self.reportDirectory, case_timing=self.caseTiming)
        except Exception:
            self.state = ReportState.PARSE_FAILED
            logger.error("FAILED")
            raise
        self.state = ReportState.PARSED
        logger.info("Parsing reports succeeded!")
        return self.testRun

    def send(self):
        if self.state != ReportState.PARSED:
            raise RuntimeError(f"Can't send reports in state '{self.state.value}'")
        self.state = ReportState.SENDING
        logger.info(f"Sending reports to {self.client.base_url}...")
        try:
            self.client.send_test_run(self.testRun)
        except Exception:
            self.state = ReportState.SEND_FAILED
            logger.error("FAILED")
            raise
        self.state = ReportState.SENT
        logger.info("Sending reports succeeded!")

    def run(self) -> TestRun:
        if self.state != ReportState.IDLE:
            raise RuntimeError(f"Reporter already ran, state '{self.state.value}'")
        test_run = self.parse()
        self.send()
        return test_run
