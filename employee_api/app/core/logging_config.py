"""
Logging setup driven by ``Settings``.

``LOG_LEVEL`` picks the root level and ``LOG_FILE``, when set, adds a
file next to the console output.  Modules log through
``logging.getLogger(__name__)``.
"""

import logging
from typing import List, Optional

from .config import settings

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def build_handlers(logfile: Optional[str] = None) -> List[logging.Handler]:
    """Console handler, plus a UTF-8 file handler when ``logfile`` is given."""
    handlers: List[logging.Handler] = [logging.StreamHandler()]
    if logfile:
        handlers.append(logging.FileHandler(logfile, encoding="utf-8"))
    formatter = logging.Formatter(fmt=LOG_FORMAT, datefmt=DATE_FORMAT)
    for handler in handlers:
        handler.setFormatter(formatter)
    return handlers


def setup_logging(level: Optional[str] = None, logfile: Optional[str] = None) -> None:
    """Configure the root logger from arguments or, by default, ``settings``.

    Does nothing if the root logger already has handlers, so repeated
    ``create_app`` calls and test runners keep their own setup.
    Unknown level names fall back to ``INFO``.
    """
    root = logging.getLogger()
    if root.handlers:
        return
    level_name = (level or settings.log_level).upper()
    root.setLevel(getattr(logging, level_name, logging.INFO))
    for handler in build_handlers(logfile or settings.log_file or None):
        root.addHandler(handler)
