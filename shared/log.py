"""loguru configuration, the only place where sinks are added"""

from __future__ import annotations

import os
import sys

from pathlib import Path
from typing import Optional

from loguru import logger

from shared import LOG_FILE, LOG_FORMAT


def setup_logging(level: str = "INFO", folder: Optional[Path] = None, filename: str = LOG_FILE):
    logger.remove()
    logger.add(sys.stderr, level=level, format=LOG_FORMAT)
    if folder:
        os.makedirs(folder, exist_ok=True)
        logger.add(Path(folder, filename).resolve(), level=level, format=LOG_FORMAT)
