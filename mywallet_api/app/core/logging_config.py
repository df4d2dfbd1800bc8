"""
Logging setup for the wallet service.

One formatter is shared by the console handler, the optional log file
and uvicorn's own loggers, so server and application lines look the
same.  Configuration happens once per process; repeated calls (tests,
a second ``create_app``) are no‑ops.
"""

import logging
from pathlib import Path
from typing import Optional

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

UVICORN_LOGGERS = ("uvicorn", "uvicorn.error", "uvicorn.access")


def setup_logging(level: str = "INFO", logfile: Optional[str] = None) -> None:
    """Configure the root logger and hand uvicorn's loggers over to it.

    Parameters
    ----------
    level : str
        Level name such as ``"DEBUG"`` or ``"info"``; unknown names
        fall back to ``INFO``.
    logfile : Optional[str]
        Extra file to write to, resolved against the working
        directory.
    """
    root = logging.getLogger()
    if root.handlers:
        return

    root.setLevel(getattr(logging, level.upper(), logging.INFO))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)

    handlers: list[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(Path(logfile).resolve(), encoding="utf-8"))
    for handler in handlers:
        handler.setFormatter(formatter)
        root.addHandler(handler)

    for name in UVICORN_LOGGERS:
        server_logger = logging.getLogger(name)
        server_logger.handlers.clear()
        server_logger.propagate = True
