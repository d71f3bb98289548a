"""
Logging setup.
"""

from __future__ import annotations

import logging

from . import settings

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s %(message)s"


def configure_logging(level: str | None = None) -> None:
    """
    Configure the root logger once. Lambda/Netlify runtimes install their
    own handler, in which case only the level is applied.
    """
    resolved = (level or settings.log_level()).upper()
    root = logging.getLogger()
    if root.handlers:
        root.setLevel(resolved)
        return None
    logging.basicConfig(level=resolved, format=LOG_FORMAT)
