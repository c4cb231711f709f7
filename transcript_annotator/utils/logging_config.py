"""Root logging setup shared by the annotator library and its command line tool."""

from __future__ import annotations

import logging
import os
from typing import Optional, Union

LOG_LEVEL_ENV = "TRANSCRIPT_ANNOTATOR_LOG_LEVEL"
PACKAGE_LOGGER = "transcript_annotator"
LOG_FORMAT = "%(asctime)s %(levelname)-8s %(name)s: %(message)s"

LevelSetting = Union[str, int, None]

_CONFIGURED = False


def level_from_setting(value: LevelSetting) -> int:
    """Turn ``"debug"``, ``"10"`` or ``logging.DEBUG`` into a numeric level.

    Blank and unrecognised names map to ``INFO``.
    """

    if isinstance(value, int):
        return value
    name = (value or "").strip()
    if not name:
        return logging.INFO
    if name.isdigit():
        return int(name)
    level = logging.getLevelName(name.upper())
    return level if isinstance(level, int) else logging.INFO


def configure_logging(level: LevelSetting = None, *, force: bool = False) -> int:
    """Attach the root handler and set the package level; return that level.

    An explicit ``level`` overrides ``TRANSCRIPT_ANNOTATOR_LOG_LEVEL``.  Only
    the first call installs a handler; pass ``force`` to replace it.
    """

    global _CONFIGURED

    chosen = level_from_setting(level if level is not None else os.environ.get(LOG_LEVEL_ENV))
    if _CONFIGURED and not force:
        return chosen

    logging.basicConfig(level=chosen, format=LOG_FORMAT, force=force)
    logging.getLogger(PACKAGE_LOGGER).setLevel(chosen)
    _CONFIGURED = True
    return chosen


__all__ = ["configure_logging", "level_from_setting", "LOG_LEVEL_ENV"]
