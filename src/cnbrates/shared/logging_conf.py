"""
Logging Setup for the Rates Server and Command Line

Every cnbrates module logs through `logging.getLogger(__name__)`. Feed
fetches are logged at INFO, structural feed failures at ERROR and dropped
rows at DEBUG; setup_logging decides where those records end up.

Files that USE this module:
- cnbrates.app (called once before serving or printing rates)

Files that this module USES:
- None (pure configuration module)
"""
import logging
import os
import sys
from logging.handlers import RotatingFileHandler
from pathlib import Path
from typing import List, Optional, Union

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s :: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_FILE_NAME = "cnbrates.log"


def _resolve_log_path(
    log_file: Optional[Union[str, Path]],
    log_dir: Optional[Union[str, Path]],
) -> Optional[Path]:
    """LOG_DIR wins over LOG_FILE; the parent directory is created."""
    if log_dir:
        path = Path(log_dir) / LOG_FILE_NAME
    elif log_file:
        path = Path(log_file)
    else:
        return None
    path.parent.mkdir(parents=True, exist_ok=True)
    return path


def _stdout_enabled(log_stdout: Optional[bool]) -> bool:
    if log_stdout is not None:
        return log_stdout
    return os.environ.get("CNBRATES_LOG_STDOUT", "true").lower() == "true"


def setup_logging(
    level=logging.INFO,
    log_file: Optional[Union[str, Path]] = None,
    log_dir: Optional[Union[str, Path]] = None,
    max_bytes: int = 10 * 1024 * 1024,
    backup_count: int = 5,
    log_stdout: Optional[bool] = None,
) -> None:
    """
    Route cnbrates log records to stdout and/or a rotating file.

    Calling it again replaces the previous handlers, so the command line
    can switch to DEBUG after parsing --debug.

    Args:
        level: Root log level, logging.DEBUG with --debug
        log_file: LOG_FILE setting, path of the rotating log file
        log_dir: LOG_DIR setting, directory that receives cnbrates.log
        max_bytes: LOG_MAX_BYTES, size at which the file rotates
        backup_count: LOG_BACKUP_COUNT, rotated files kept
        log_stdout: CNBRATES_LOG_STDOUT; None reads the environment
    """
    formatter = logging.Formatter(LOG_FORMAT, DATE_FORMAT)
    handlers: List[logging.Handler] = []

    if _stdout_enabled(log_stdout):
        handlers.append(logging.StreamHandler(sys.stdout))

    log_path = _resolve_log_path(log_file, log_dir)
    if log_path is not None:
        handlers.append(
            RotatingFileHandler(log_path, maxBytes=max_bytes, backupCount=backup_count, encoding="utf-8")
        )

    # Never leave the process without a handler
    if not handlers:
        handlers.append(logging.StreamHandler(sys.stdout))

    for handler in handlers:
        handler.setFormatter(formatter)

    logging.basicConfig(level=level, handlers=handlers, force=True)

    logging.getLogger(__name__).info(
        "Logging configured: %s, level=%s",
        f"file={log_path}" if log_path else "stdout",
        logging.getLevelName(level),
    )
