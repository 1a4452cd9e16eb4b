"""
Logging setup for the vnote CLI.

Library modules log through loguru's global ``logger`` and never configure
it. The CLI calls setup_logging() once per invocation: warnings and errors
go to stderr in the same "  ! message" shape as the rest of the CLI output,
and ``--verbose`` or ``logging.level`` in config opens up debug lines that
also name the module that emitted them.
"""

import sys

from loguru import logger

CONSOLE_FORMAT = "  <level>{level.icon}</level> {message}"
VERBOSE_FORMAT = "  <level>{level.icon}</level> <dim>{name}:{line}</dim> {message}"
FILE_FORMAT = "{time:YYYY-MM-DD HH:mm:ss.SSS} | {level: <7} | {name}:{function} | {message}"

_LEVEL_ICONS = {
    "DEBUG": "·",
    "INFO": "#",
    "WARNING": "!",
    "ERROR": "!",
}


def setup_logging(level: str = "WARNING", log_file: str | None = None) -> None:
    """
    Route loguru output for one CLI run.

    Args:
        level: Minimum log level name (case-insensitive).
        log_file: Optional path of a notebook activity log. It always records
            INFO and above, so note additions are kept even when the console
            only shows warnings.
    """
    level = level.upper()
    for name, icon in _LEVEL_ICONS.items():
        logger.level(name, icon=icon)

    logger.remove()
    console_fmt = VERBOSE_FORMAT if level in ("TRACE", "DEBUG") else CONSOLE_FORMAT
    logger.add(sys.stderr, level=level, format=console_fmt)

    if log_file:
        file_level = level if logger.level(level).no < logger.level("INFO").no else "INFO"
        logger.add(
            log_file,
            level=file_level,
            format=FILE_FORMAT,
            encoding="utf-8",
            rotation="1 MB",
            retention=3,
        )
