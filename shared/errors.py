"""Errors raised while parsing reports and sending them to Fern."""

from __future__ import annotations

from pathlib import Path
from typing import Optional


class FernError(Exception):
    """Base class of all reporter errors"""


class ParseError(FernError):
    """
    Reading, decoding or mapping of a report failed.

    `path` is the offending file or directory. It is filled in by whoever knows it,
    usually the directory walker, and then prefixes the message.
    """

    def __init__(self, message: str, path: Optional[Path] = None):
        super().__init__(message)
        self.message: str = message
        self.path: Optional[Path] = path

    def __str__(self):
        if self.path is None:
            return self.message
        return f"Failed to process file {self.path}: {self.message}"


class DirectoryReadError(ParseError):
    """Directory can't be listed"""

    def __str__(self):
        return f"Failed to read directory {self.path}: {self.message}"


class FileOpenError(ParseError):
    """Report file can't be opened or read"""


class XMLFormatError(ParseError):
    """Content is neither a <testsuites> nor a <testsuite> document"""


class TimeFormatError(ParseError):
    """Timestamp is not RFC 3339 or duration is not a decimal number of seconds"""

    def __init__(self, message: str, suite: Optional[str] = None, path: Optional[Path] = None):
        super().__init__(message, path=path)
        self.suite: Optional[str] = suite


class TransportError(FernError):
    """Test run could not be delivered to the Fern API"""

    def __init__(self, message: str, status_code: Optional[int] = None):
        super().__init__(message)
        self.status_code: Optional[int] = status_code
