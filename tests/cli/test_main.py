from __future__ import annotations

import shutil

from pathlib import Path

import pytest

from typer.testing import CliRunner

import main

from fern.client import FernClient
from fern.models import TestRun
from settings import settings
from shared.errors import TransportError


runner = CliRunner()


@pytest.fixture
def sent(monkeypatch) -> list[TestRun]:
    """Test runs the CLI tried to send, nothing leaves the process"""
    sent_runs: list[TestRun] = []

    def fake_send(self, test_run: TestRun):
        sent_runs.append(test_run)

    monkeypatch.setattr(FernClient, "send_test_run", fake_send)
    monkeypatch.setattr(main, "setup_logging", lambda **kwargs: None)
    return sent_runs


def args(command: str, reports: Path) -> list[str]:
    return [command, "-n", "fern", "-d", str(reports), "-u", "http://fern:8080"]


@pytest.mark.integration
class TestJunitCommand:
    @pytest.mark.parametrize("command", ["junit", "ju"])
    def test_success(self, tmp_path: Path, sent: list[TestRun], command: str) -> None:
        shutil.copyfile(Path(settings.test_data, "multi_suites.xml"), tmp_path / "multi_suites.xml")
        result = runner.invoke(main.app, args(command, tmp_path))
        assert result.exit_code == 0, result.output
        assert len(sent) == 1
        assert sent[0].test_project_name == "fern"
        assert len(sent[0].suite_runs) == 3

    def test_long_options(self, tmp_path: Path, sent: list[TestRun]) -> None:
        result = runner.invoke(
            main.app,
            ["junit", "--projectName", "fern", "--reportDirectory", str(tmp_path), "--fernApiUrl", "http://fern"],
        )
        assert result.exit_code == 0, result.output
        assert sent[0].suite_runs == []

    def test_options_required(self, tmp_path: Path, sent: list[TestRun], monkeypatch) -> None:
        monkeypatch.delenv("FERN_API_URL", raising=False)
        result = runner.invoke(main.app, ["junit", "-n", "fern", "-d", str(tmp_path)])
        assert result.exit_code != 0
        assert sent == []

    def test_parse_failure(self, tmp_path: Path, sent: list[TestRun]) -> None:
        shutil.copyfile(Path(settings.test_data, "not_junit.xml"), tmp_path / "not_junit.xml")
        result = runner.invoke(main.app, args("junit", tmp_path))
        assert result.exit_code == main.PARSE_FAILED_EXIT_CODE
        assert sent == []

    def test_send_failure(self, tmp_path: Path, monkeypatch) -> None:
        def failing_send(self, test_run: TestRun):
            raise TransportError("Unexpected response code: 500", status_code=500)

        monkeypatch.setattr(FernClient, "send_test_run", failing_send)
        monkeypatch.setattr(main, "setup_logging", lambda **kwargs: None)
        result = runner.invoke(main.app, args("junit", tmp_path))
        assert result.exit_code == main.SEND_FAILED_EXIT_CODE
