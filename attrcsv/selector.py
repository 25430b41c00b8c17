"""
Attribute selection.

Selection is additive and runs in a fixed order, keeping the first position
of any name:

1. regex over attribute keys (full match), in map order
2. explicit attribute list, in list order, present or not
3. when neither 1 nor 2 is configured: every non-reserved key, in map order
4. reserved names, when requested
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Mapping, Optional, Pattern, Sequence, Set

from .errors import InvalidSelectionPattern
from .models import SelectionConfig
from .rules import CORE_ATTRIBUTE_NAMES

log = logging.getLogger("attrcsv.selector")


class OrderedNames:
    """Insertion-ordered set of attribute names."""

    def __init__(self) -> None:
        self._names: List[str] = []
        self._seen: Set[str] = set()

    def add(self, name: str) -> None:
        if name in self._seen:
            return
        self._seen.add(name)
        self._names.append(name)

    def extend(self, names: Iterable[str]) -> None:
        for name in names:
            self.add(name)

    def __contains__(self, name: object) -> bool:
        return name in self._seen

    def __len__(self) -> int:
        return len(self._names)

    def to_list(self) -> List[str]:
        return list(self._names)


def compile_selection_pattern(pattern: str) -> Pattern[str]:
    try:
        return re.compile(pattern)
    except re.error as e:
        log.warning("rejected selection pattern %r: %s", pattern, e)
        raise InvalidSelectionPattern(pattern, str(e)) from e


def select_attribute_names(
    attrs: Mapping[str, str],
    cfg: SelectionConfig,
    core_names: Optional[Sequence[str]] = None,
) -> List[str]:
    if core_names is None:
        core_names = CORE_ATTRIBUTE_NAMES

    selected = OrderedNames()

    if cfg.attribute_regex is not None:
        pattern = compile_selection_pattern(cfg.attribute_regex)
        selected.extend(key for key in attrs if pattern.fullmatch(key))

    if cfg.attribute_list is not None:
        selected.extend(cfg.attribute_list)

    if cfg.attribute_regex is None and cfg.attribute_list is None:
        reserved = set(core_names)
        selected.extend(key for key in attrs if key not in reserved)

    if cfg.include_core_attributes:
        selected.extend(core_names)

    names = selected.to_list()
    log.debug("selected %d attribute(s): %s", len(names), names)
    return names
