"""
Field splitting for comma/quote-delimited configuration strings.

Used for the explicit attribute list and for the reserved-name override.
Commas split only outside double quotes; line breaks are ordinary characters.
A token wrapped in double quotes has the wrapping quotes removed, and doubled
quotes inside it read as a single quote, so any line produced by the encoder
splits back into its values.
"""

from __future__ import annotations

from typing import List

from .rules import FIELD_SEPARATOR, QUOTE_CHAR


def _unwrap(token: str) -> str:
    if len(token) >= 2 and token.startswith(QUOTE_CHAR) and token.endswith(QUOTE_CHAR):
        return token[1:-1].replace(QUOTE_CHAR * 2, QUOTE_CHAR)
    return token


def split_fields(s: str) -> List[str]:
    if not s:
        return []

    tokens: List[str] = []
    start = 0
    in_quotes = False
    for i, ch in enumerate(s):
        # A doubled quote toggles twice, leaving the state unchanged.
        if ch == QUOTE_CHAR:
            in_quotes = not in_quotes
        elif ch == FIELD_SEPARATOR and not in_quotes:
            tokens.append(s[start:i])
            start = i + 1
    tokens.append(s[start:])

    return [_unwrap(token) for token in tokens]
