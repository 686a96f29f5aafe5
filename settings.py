"""This module defines the application-wide settings."""

from __future__ import annotations

from enum import Enum
from pathlib import Path

from pydantic_settings import BaseSettings, SettingsConfigDict


VERSION = "0.1.0"


class CaseTiming(str, Enum):
    """How a suite's declared duration is turned into per-test start and end times"""

    # every test case advances the clock by the full suite duration
    SUITE_DURATION = "suite-duration"
    # the suite duration is divided evenly between its test cases
    EVEN_SPLIT = "even-split"


class Settings(BaseSettings):
    """
    A class that defines the application settings.

    Settings are automatically loaded from .env files and environment variables. The load order is:
    1. the default values here in the code
    2. .env, and then
    3. the system's environment variables prefixed with `FERN_`.
    """

    # FERN_PROJECT_NAME, FERN_REPORT_DIRECTORY and FERN_API_URL belong to the cli, not here
    model_config = SettingsConfigDict(
        env_prefix="FERN_", env_file=".env", env_file_encoding="utf-8", env_nested_delimiter="__", extra="ignore"
    )

    # Paths
    fern_home: Path = Path(__file__).parent
    # test data is in the repo
    test_data: Path = Path(fern_home, "tests", "data")

    # Fern API
    # appended to the base url given on the command line, keep leading `/`
    api_path: str = "/api/testrun"
    request_timeout_sec: float | None = None  # None blocks until the transport gives up
    user_agent: str = f"fern-junit-reporter/{VERSION}"

    # JUnit
    case_timing: CaseTiming = CaseTiming.SUITE_DURATION

    # Logging
    log_level: str = "INFO"
    log_folder: Path | None = None


# singleton instance of the Settings class. Use this instead of creating your own instance.
settings = Settings()
