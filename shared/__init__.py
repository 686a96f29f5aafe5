"""Helpers shared by the JUnit ingestion and the Fern publishing packages."""

LOG_FILE = "fern.log"
LOG_FORMAT = "[{time:YYYY-MM-DD HH:mm:ss.SSS}] {name}:{function}:{line} {level} - {message}"
