"""
Logging configuration for the tag validator.

The command-line run logs under the 'tag_validator' logger. Progress lines
and per-file faults go to stdout, and when reports are written the same
records are kept in '<output_dir>/logs/validation.log' next to them.
"""

import logging
import sys
from pathlib import Path
from typing import List, Optional

PACKAGE_LOGGER = 'tag_validator'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
DATE_FORMAT = '%Y-%m-%d %H:%M:%S'


def _build_handlers(log_file: Optional[str], console_output: bool) -> List[logging.Handler]:
    """Console handler on stdout and/or a UTF-8 file handler"""
    handlers: List[logging.Handler] = []
    if console_output:
        handlers.append(logging.StreamHandler(sys.stdout))
    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_file, encoding='utf-8'))
    return handlers


def setup_logger(
    name: str,
    log_file: Optional[str] = None,
    level: int = logging.INFO,
    console_output: bool = True
) -> logging.Logger:
    """
    Configure a validator logger.

    Calling it again for the same name replaces the handlers, so a second
    run in the same process does not print every record twice.

    Args:
        name: Logger name, usually 'tag_validator'
        log_file: Validation log to append to. If None, nothing is written to disk
        level: Logging level (default: INFO)
        console_output: Whether to echo records on stdout (default: True)

    Returns:
        Configured logger instance
    """
    logger = logging.getLogger(name)
    logger.setLevel(level)

    for handler in list(logger.handlers):
        logger.removeHandler(handler)
        handler.close()

    formatter = logging.Formatter(LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(log_file, console_output):
        handler.setLevel(level)
        handler.setFormatter(formatter)
        logger.addHandler(handler)

    return logger


def get_validation_logger(output_dir: Optional[str] = None,
                          level: int = logging.INFO,
                          console_output: bool = True) -> logging.Logger:
    """
    Get the package logger writing to the validation log of a report folder.

    Args:
        output_dir: Report directory holding the logs/ folder. If None, logs to ./logs/
        level: Logging level (default: INFO)
        console_output: Whether to echo records on stdout (default: True)

    Returns:
        Configured 'tag_validator' logger
    """
    log_dir = Path(output_dir) / "logs" if output_dir else Path("logs")
    return setup_logger(PACKAGE_LOGGER, str(log_dir / "validation.log"), level, console_output)
