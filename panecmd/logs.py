"""File-based logging setup.

The screen belongs to the TUI while it runs, so records go to a rotating file
under the platform log directory instead of stdout/stderr.
"""

from __future__ import annotations

import logging
import logging.handlers
from pathlib import Path

from platformdirs import user_log_dir

APP_LOGGER_NAME = "panecmd"
LOG_FILENAME = "panecmd.log"
LOG_MAX_BYTES = 256 * 1024
LOG_BACKUP_COUNT = 3
LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def default_log_path() -> Path:
    return Path(user_log_dir(APP_LOGGER_NAME, appauthor=False)) / LOG_FILENAME


def configure_logging(level: str = "WARNING", log_path: Path | None = None) -> logging.Logger:
    """Attach one handler to the application logger and return it.

    Calling again replaces the previous handler. When the log directory cannot
    be created the logger gets a ``NullHandler`` and the app runs without logs.
    """
    app_logger = logging.getLogger(APP_LOGGER_NAME)
    for handler in list(app_logger.handlers):
        app_logger.removeHandler(handler)
        handler.close()

    app_logger.setLevel(logging.getLevelName(level.upper()))
    app_logger.propagate = False

    target = log_path if log_path is not None else default_log_path()
    handler: logging.Handler
    try:
        target.parent.mkdir(parents=True, exist_ok=True)
        handler = logging.handlers.RotatingFileHandler(
            target,
            maxBytes=LOG_MAX_BYTES,
            backupCount=LOG_BACKUP_COUNT,
            encoding="utf-8",
        )
    except OSError:
        handler = logging.NullHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    app_logger.addHandler(handler)
    return app_logger
