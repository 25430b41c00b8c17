"""
Delivery of an assembled row to its destination.

- flowfile-attribute: CSVData (+ CSVSchema) added, body untouched
- flowfile-content: body replaced with the line(s), mime.type set to text/csv
"""

from __future__ import annotations

import base64
from typing import Dict

from .assembler import AssembledRow
from .models import Destination, Record, SelectionConfig
from .rules import (
    BODY_ENCODING,
    CSV_MIME_TYPE,
    LINE_SEPARATOR,
    MIME_TYPE_ATTRIBUTE,
    OUTPUT_ATTRIBUTE_NAME,
    SCHEMA_ATTRIBUTE_NAME,
)


def _body_text(row: AssembledRow) -> str:
    if row.header is None:
        return row.data
    return row.header + LINE_SEPARATOR + row.data


def write_destination(record: Record, row: AssembledRow, cfg: SelectionConfig) -> Record:
    attributes: Dict[str, str] = dict(record.attributes)

    if cfg.destination is Destination.CONTENT:
        body = _body_text(row).encode(BODY_ENCODING)
        attributes[MIME_TYPE_ATTRIBUTE] = CSV_MIME_TYPE
        return Record(
            attributes=attributes,
            content_b64=base64.b64encode(body).decode("ascii"),
        )

    attributes[OUTPUT_ATTRIBUTE_NAME] = row.data
    if row.header is not None:
        attributes[SCHEMA_ATTRIBUTE_NAME] = row.header
    return Record(attributes=attributes, content_b64=record.content_b64)
