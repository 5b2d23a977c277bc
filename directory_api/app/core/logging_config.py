"""
Logging setup shared by ``create_app`` and ``run.py``.

Both entry points call ``setup_logging`` with the configured level and
optional log file.  Only the first call in a process does anything:
uvicorn, test runners and repeated ``create_app`` calls all leave an
already configured root logger alone.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> bool:
    """Attach console (and file) handlers to the root logger.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"``; unknown names mean ``INFO``.
    logfile : Optional[str]
        ``LOG_FILE`` setting.  When given, log lines are also appended
        to this file.

    Returns
    -------
    bool
        ``False`` if the root logger already had handlers and nothing
        was changed.
    """
    root = logging.getLogger()
    if root.handlers:
        return False

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)
    return True
