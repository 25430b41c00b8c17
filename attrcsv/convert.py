"""
Attribute-to-CSV conversion.

Responsibilities:
- select attribute names (regex, explicit list, default, reserved names)
- resolve values with the missing-value policy
- encode the data line and optional header
- deliver to a new attribute or to the record body
"""

from __future__ import annotations

import logging
from typing import Optional, Sequence

from .assembler import assemble_row
from .config import core_attribute_names
from .models import ConversionReport, ConversionSettings, ConvertResponse, Record, SelectionConfig
from .selector import select_attribute_names
from .writer import write_destination

log = logging.getLogger("attrcsv.convert")


def attributes_to_csv(
    record: Record,
    cfg: SelectionConfig,
    core_names: Optional[Sequence[str]] = None,
) -> tuple[Record, ConversionReport]:
    if core_names is None:
        core_names = core_attribute_names()

    selected = select_attribute_names(record.attributes, cfg, core_names)
    row = assemble_row(record.attributes, selected, cfg)
    out = write_destination(record, row, cfg)

    report = ConversionReport(
        destination=cfg.destination,
        selected=selected,
        missing=row.missing,
        header=row.header is not None,
    )
    log.info(
        "converted %d attribute(s) to csv destination=%s missing=%d",
        len(selected),
        cfg.destination.value,
        len(row.missing),
    )
    return out, report


def convert_record(record: Record, settings: ConversionSettings) -> ConvertResponse:
    """Resolve settings, convert, and wrap the result in the API envelope."""
    out, report = attributes_to_csv(record, settings.to_selection_config())
    return ConvertResponse(record=out, report=report)
