from __future__ import annotations

from pathlib import Path
from typing import List, Optional

from loguru import logger

from fern.models import SuiteRun
from junit.mapper import map_suite
from junit.model import RawSuite
from junit.parser import parse_report
from settings import CaseTiming, settings
from shared.errors import ParseError
from shared.utils import list_entries, read_report


def process_file(report_path: Path, case_timing: Optional[CaseTiming] = None) -> List[SuiteRun]:
    """Suite runs of all suites in a single report file"""
    raw_suites: List[RawSuite] = parse_report(read_report(report_path), report_path)
    return [map_suite(raw_suite, case_timing=case_timing) for raw_suite in raw_suites]


class ReportWalker:
    """
    Depth first traversal of a report directory.

    Every file found is processed as JUnit report, entries of each directory are visited
    in name order. The first error stops the walk. Suite runs of files processed before
    the error stay in `suiteRuns`.
    """

    def __init__(self, case_timing: Optional[CaseTiming] = None):
        self.caseTiming: CaseTiming = case_timing or settings.case_timing
        self.suiteRuns: List[SuiteRun] = []
        self.visited: List[Path] = []

    def walk(self, root: Path) -> List[SuiteRun]:
        logger.info(f"Walking {root}")
        self._visit_dir(Path(root))
        logger.info(f"{len(self.visited)} files, {len(self.suiteRuns)} suite runs")
        return self.suiteRuns

    def _visit_dir(self, current_path: Path):
        for entry in list_entries(current_path):
            entry_path = Path(current_path, entry.name)
            # symlinked directories are not followed, they can point back up the tree
            if entry.is_dir(follow_symlinks=False):
                self._visit_dir(entry_path)
            elif entry.is_file():
                self._visit_file(entry_path)
            else:
                logger.debug(f"Skipping {entry_path}: not a regular file")

    def _visit_file(self, report_path: Path):
        logger.debug(f"Processing {report_path}")
        try:
            suite_runs = process_file(report_path, case_timing=self.caseTiming)
        except ParseError as e:
            if e.path is None:
                e.path = report_path
            raise
        self.visited.append(report_path)
        self.suiteRuns.extend(suite_runs)
