# Author: PB
# Maintainer: PB
# Original date: 2026.10.14
# License: (c) HRDAG, 2025, GPL-2 or newer
#
# ------
# src/gitcmd/system/logging_setup.py

import sys
from pathlib import Path
from typing import Optional

from loguru import logger

LOG_FILE_NAME = "git-cmd.log"


def setup_logging(debug: bool = False, local_log: Optional[Path] = None) -> None:
    """Setup loguru logging for the dispatcher.

    Configures:
    - Console output: WARNING+ only, DEBUG+ with --debug
    - File output: DEBUG+ if local_log is configured

    Stdout is never used; it belongs to the subcommand.
    """
    logger.remove()

    logger.add(
        sys.stderr,
        level="DEBUG" if debug else "WARNING",
        format="<level>{level}</level>: {message}",
        colorize=True
    )

    if local_log is None:
        return

    try:
        log_dir = Path(local_log).expanduser()
        log_dir.mkdir(parents=True, exist_ok=True)
        log_file = log_dir / LOG_FILE_NAME

        logger.add(
            log_file,
            level="DEBUG",
            format="{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <8} | {name}:{function}:{line} - {message}",
            rotation="10 MB",
            retention="30 days",
            compression="gz"
        )
        logger.debug(f"File logging enabled: {log_file}")

    except OSError as e:
        # Logging trouble must not stop the subcommand
        logger.warning(f"Failed to setup file logging: {e}")
