from __future__ import annotations

import logging
import os
from typing import Tuple

from .rules import CORE_ATTRIBUTE_NAMES
from .splitter import split_fields


def log_level() -> str:
    level = (os.getenv("ATTRCSV_LOG_LEVEL") or "INFO").strip().upper()
    # getLevelName maps known names to ints and anything else to "Level X".
    if not isinstance(logging.getLevelName(level), int):
        return "INFO"
    return level


def core_attribute_names() -> Tuple[str, ...]:
    # Reserved names can be overridden by the host, e.g. "path,filename,uuid,entryDate".
    raw = (os.getenv("ATTRCSV_CORE_ATTRIBUTES") or "").strip()
    if not raw:
        return CORE_ATTRIBUTE_NAMES
    return tuple(name for name in split_fields(raw) if name)


def configure_logging() -> None:
    logging.basicConfig(
        level=log_level(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
