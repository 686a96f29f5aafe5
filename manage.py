"""Developer commands: lint, format and test the reporter."""

from __future__ import annotations

from subprocess import call

import typer

from settings import settings


app = typer.Typer()


@app.command()
def lint():
    """Run flake8 over the repository."""
    import flake8.main.application

    linter = flake8.main.application.Application()
    linter.run([str(settings.fern_home), "--max-line-length=120", "--exclude=.venv,build"])
    raise typer.Exit(code=1 if linter.result_count else 0)


@app.command()
def format():
    """Format code with Black and sort imports with isort."""
    black_errors = call(["black", str(settings.fern_home)])
    isort_errors = call(["isort", str(settings.fern_home)])
    raise typer.Exit(code=1 if black_errors or isort_errors else 0)


@app.command()
def test(
    marker: str = typer.Option(None, "--marker", "-m", help="Run only tests with this marker e.g. unit"),
):
    """Run pytest, optionally only tests with given marker."""
    import pytest

    args = [str(settings.fern_home / "tests")]
    if marker:
        args += ["-m", marker]
    raise typer.Exit(code=pytest.main(args))


if __name__ == "__main__":
    app()
