"""
Logging setup for SectorVFS.

Modules log through ``logging.getLogger(__name__)``; this module only wires
a console handler onto the package logger.
"""

import logging
import sys
from datetime import datetime
from typing import Optional, TextIO, Union

ROOT_LOGGER_NAME = "sectorvfs"


class VFSLogFormatter(logging.Formatter):
    """Formats records as ``[timestamp] LEVEL    [logger] message``."""

    def format(self, record: logging.LogRecord) -> str:
        timestamp = datetime.fromtimestamp(record.created).strftime(
            '%Y-%m-%d %H:%M:%S.%f'
        )[:-3]
        message = f"[{timestamp}] {record.levelname:8s} [{record.name}] {record.getMessage()}"
        if record.exc_info:
            message += "\n" + self.formatException(record.exc_info)
        return message


def configure_logging(level: Union[int, str] = logging.WARNING,
                      stream: Optional[TextIO] = None) -> logging.Logger:
    """
    Attach a single console handler to the ``sectorvfs`` logger.

    Calling it again replaces the previous handler instead of stacking a
    second one, so the CLI and tests can reconfigure freely.
    """
    if isinstance(level, str):
        level = logging.getLevelName(level.upper())
        if not isinstance(level, int):
            raise ValueError(f"Unknown log level: {level}")

    root = logging.getLogger(ROOT_LOGGER_NAME)
    for handler in list(root.handlers):
        if getattr(handler, "_sectorvfs_handler", False):
            root.removeHandler(handler)

    handler = logging.StreamHandler(stream or sys.stderr)
    handler.setFormatter(VFSLogFormatter())
    handler._sectorvfs_handler = True
    root.addHandler(handler)
    root.setLevel(level)
    return root
