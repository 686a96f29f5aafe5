from __future__ import annotations

import os

from pathlib import Path
from typing import List

from loguru import logger

from shared.errors import DirectoryReadError, FileOpenError


def list_entries(folder: Path) -> List[os.DirEntry]:
    """
    Entries of a single directory sorted by name, not recursive
    :param folder: directory to list
    :return: files and sub-directories of `folder`
    """
    try:
        with os.scandir(folder) as it:
            entries: List[os.DirEntry] = sorted(it, key=lambda e: e.name)
    except OSError as e:
        raise DirectoryReadError(str(e), path=folder) from e
    logger.debug(f"{folder}: {len(entries)} entries")
    return entries


def read_report(file: Path) -> bytes:
    """Whole content of the file. The handle is closed before returning."""
    try:
        with open(file, mode="rb") as f:
            return f.read()
    except OSError as e:
        raise FileOpenError(str(e), path=file) from e
