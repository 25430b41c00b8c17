from __future__ import annotations

from dataclasses import dataclass, field
from typing import List, Mapping, Optional, Sequence

from .encoder import encode_csv_line
from .models import SelectionConfig
from .rules import EMPTY_VALUE, NULL_VALUE


@dataclass(frozen=True)
class AssembledRow:
    data: str
    header: Optional[str] = None
    missing: List[str] = field(default_factory=list)


def assemble_row(
    attrs: Mapping[str, str],
    selected: Sequence[str],
    cfg: SelectionConfig,
) -> AssembledRow:
    """
    Resolve each selected name and encode the data line (and header).

    Absent attributes become `null` or the empty string depending on
    `null_value_for_empty`; neither substitute ever needs quoting.
    """
    substitute = NULL_VALUE if cfg.null_value_for_empty else EMPTY_VALUE

    values: List[str] = []
    missing: List[str] = []
    for name in selected:
        value = attrs.get(name)
        if value is None:
            missing.append(name)
            value = substitute
        values.append(value)

    header = encode_csv_line(selected) if cfg.include_schema else None
    return AssembledRow(data=encode_csv_line(values), header=header, missing=missing)
