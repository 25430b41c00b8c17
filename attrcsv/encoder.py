from __future__ import annotations

from typing import Iterable

from .rules import FIELD_SEPARATOR, QUOTE_CHAR

_NEEDS_QUOTING = (FIELD_SEPARATOR, QUOTE_CHAR, "\r", "\n")


def escape_csv_value(value: str) -> str:
    """
    Quote a single value for a CSV line.

    Rules:
    - Quote only when the value contains a comma, a double quote, CR or LF.
    - Inside quotes, every double quote is doubled.
    - Everything else is emitted verbatim, including the empty string.
    """
    if not any(ch in value for ch in _NEEDS_QUOTING):
        return value
    return QUOTE_CHAR + value.replace(QUOTE_CHAR, QUOTE_CHAR * 2) + QUOTE_CHAR


def encode_csv_line(values: Iterable[str]) -> str:
    # csv.writer quotes a lone empty field as '""'; a missing value must stay empty.
    return FIELD_SEPARATOR.join(escape_csv_value(v) for v in values)
