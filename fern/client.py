"""HTTP client of the Fern reporting API"""

from __future__ import annotations

from typing import Optional

import requests

from loguru import logger

from fern.models import TestRun
from settings import settings
from shared.errors import TransportError


class FernClient:
    """Client for publishing test runs to Fern."""

    def __init__(self, base_url: str, session: Optional[requests.Session] = None,
                 timeout: Optional[float] = None):
        """
        Initialize Fern client.

        Args:
            base_url: Fern API url e.g. http://localhost:8080, trailing `/` is ignored
            session: requests session to use, a new one is created if None
            timeout: seconds to wait for the API, defaults to settings.request_timeout_sec
        """
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout if timeout is not None else settings.request_timeout_sec
        self.session = session or requests.Session()
        self.session.headers.update({
            "User-Agent": settings.user_agent
        })

    @property
    def test_run_url(self) -> str:
        return f"{self.base_url}{settings.api_path}"

    def send_test_run(self, test_run: TestRun):
        """
        POST the test run as JSON.

        Raises:
            TransportError: request failed or the response status is 300 or higher
        """
        payload: str = test_run.model_dump_json()
        logger.debug(f"POST {self.test_run_url}: {len(test_run.suite_runs)} suite runs, {len(payload)} bytes")
        try:
            response = self.session.post(
                self.test_run_url,
                data=payload.encode("utf-8"),
                headers={"Content-Type": "application/json"},
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            raise TransportError(f"Failed to send request: {e}") from e
        if response.status_code >= 300:
            raise TransportError(f"Unexpected response code: {response.status_code}",
                                 status_code=response.status_code)
        logger.debug(f"Response code: {response.status_code}")
