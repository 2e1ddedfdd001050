"""Run log files under .newsbrief/logs."""

import logging
from datetime import datetime
from pathlib import Path

from newsbrief.utils.files import get_logs_path

LOG_FORMAT = '%(asctime)s %(levelname)-8s %(name)s: %(message)s'

# Transport libraries log every connection at DEBUG
NOISY_LOGGERS = ('urllib3', 'httpx', 'httpcore', 'charset_normalizer')


class RunFileHandler(logging.FileHandler):
    """File handler for one CLI run; at most one is attached to the root logger."""


def _resolve_level(level: str) -> int:
    name = level.upper()
    if name == 'ALL':
        return logging.NOTSET
    resolved = logging.getLevelName(name)
    return resolved if isinstance(resolved, int) else logging.INFO


def setup_local_logging(level: str = 'INFO', logs_dir: Path | None = None) -> Path:
    """Send log records to a timestamped file for this run.

    Console output stays with the CLI's rich console. Calling this again
    replaces the previous run file handler instead of adding a second one.

    Args:
        level: Level name such as 'DEBUG' or 'INFO', or 'ALL'. Unknown names fall back to INFO.
        logs_dir: Directory for the log file. Defaults to .newsbrief/logs in the project root.

    Returns:
        Path of the log file.

    """
    logs_dir = logs_dir or get_logs_path()
    logs_dir.mkdir(parents=True, exist_ok=True)
    log_file = logs_dir / f'run_{datetime.now():%Y%m%d_%H%M%S}.log'

    numeric_level = _resolve_level(level)
    root_logger = logging.getLogger()
    for handler in [h for h in root_logger.handlers if isinstance(h, RunFileHandler)]:
        root_logger.removeHandler(handler)
        handler.close()

    handler = RunFileHandler(log_file, encoding='utf-8')
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(handler)
    root_logger.setLevel(numeric_level)

    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(max(numeric_level, logging.WARNING))

    return log_file
