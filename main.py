#! /usr/bin/env python
"""Command-line interface of the Fern reporter."""
from __future__ import annotations

from pathlib import Path

import typer

from loguru import logger

from fern.client import FernClient
from fern.reporter import JunitReporter
from settings import CaseTiming, settings
from shared.errors import ParseError, TransportError
from shared.log import setup_logging


PARSE_FAILED_EXIT_CODE = 1
SEND_FAILED_EXIT_CODE = 2

app = typer.Typer()


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Debug logging"),
):
    """Fern reporter cli tool"""
    setup_logging(level="DEBUG" if verbose else settings.log_level, folder=settings.log_folder)


@app.command("ju", hidden=True)
@app.command("junit")
def junit(
    project_name: str = typer.Option(
        ..., "--projectName", "-n", envvar="FERN_PROJECT_NAME", help="Name of the project (required)"
    ),
    report_directory: Path = typer.Option(
        ...,
        "--reportDirectory",
        "-d",
        envvar="FERN_REPORT_DIRECTORY",
        help="Path to the test reports directory (required)",
    ),
    fern_api_url: str = typer.Option(
        ..., "--fernApiUrl", "-u", envvar="FERN_API_URL", help="Fern API url to send reports (required)"
    ),
    case_timing: CaseTiming = typer.Option(
        settings.case_timing,
        "--case-timing",
        help="Per test case duration: the whole suite duration or the suite duration split evenly",
    ),
):
    """
    Parse JUnit XML reports found in report directory and its sub-directories and send them
    to Fern as one test run. Alias `ju`.
    """
    logger.debug(f"Project Name: {project_name}")
    logger.debug(f"Test Reports Directory: {report_directory}")
    logger.debug(f"Fern API Url: {fern_api_url}")
    reporter = JunitReporter(
        project_name=project_name,
        report_directory=report_directory,
        client=FernClient(fern_api_url),
        case_timing=case_timing,
    )
    try:
        reporter.run()
    except ParseError as e:
        typer.echo(f"Parsing reports failed: {e}", err=True)
        raise typer.Exit(code=PARSE_FAILED_EXIT_CODE)
    except TransportError as e:
        typer.echo(f"Sending reports failed: {e}", err=True)
        raise typer.Exit(code=SEND_FAILED_EXIT_CODE)
    typer.echo(
        f"{len(reporter.testRun.suite_runs)} suite runs of '{project_name}' sent to {fern_api_url}"
    )


if __name__ == "__main__":
    app()
