"""
Logging configuration for LinkVault.

What gets logged, by logger:

* ``linkvault_api.app.main`` – start-up (database path), rejected
  request bodies (INFO) and storage failures (ERROR).
* ``linkvault_api.app.core.store`` – database loads (INFO) and every
  snapshot write (DEBUG).
* ``linkvault_api.app.services.*`` – registrations, link creation,
  updates and deletions (INFO).

``setup_logging`` installs the handlers on the root logger once per
process.  Uvicorn's own loggers are left to uvicorn, except that
their level follows the configured one.
"""

import logging
from pathlib import Path
from typing import List, Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

# Server loggers whose verbosity should track the application's.
SERVER_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def _build_handlers(logfile: Optional[str]) -> List[logging.Handler]:
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        log_path = Path(logfile).resolve()
        log_path.parent.mkdir(parents=True, exist_ok=True)
        handlers.append(logging.FileHandler(log_path, encoding="utf-8"))
    return handlers


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger for the application.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; case insensitive, unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        Also write log lines to this file (parent directories are
        created).  Empty or ``None`` means console only.
    """
    root = logging.getLogger()
    if root.handlers:
        # Already configured (pytest capture, repeated create_app calls).
        return

    numeric_level = getattr(logging, level.upper(), logging.INFO)
    root.setLevel(numeric_level)

    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in _build_handlers(logfile):
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in SERVER_LOGGERS:
        logging.getLogger(name).setLevel(numeric_level)
