"""
Decoding of uploaded attribute documents.

An upload is a JSON object of attribute name -> value in any text encoding.
Encoding is detected best-effort with charset-normalizer; undecodable input
falls back to UTF-8 with replacement characters.
"""

from __future__ import annotations

import json
import logging
from typing import Any, Dict, Tuple

from charset_normalizer import from_bytes

from .errors import InvalidAttributeDocument

log = logging.getLogger("attrcsv.ingest")


def decode_text(raw: bytes) -> Tuple[str, str]:
    """Return (text, encoding_used)."""
    detected = None
    match = from_bytes(raw).best()
    if match is not None:
        detected = match.encoding

    decode_used = detected or "utf-8"
    if raw.startswith(b"\xef\xbb\xbf") and (decode_used.lower().replace("-", "_") in ("utf_8", "utf8")):
        decode_used = "utf-8-sig"

    try:
        return raw.decode(decode_used), decode_used
    except (UnicodeDecodeError, LookupError):
        try:
            return raw.decode("utf-8"), "utf-8"
        except UnicodeDecodeError:
            log.warning("attribute upload is not decodable as %s; replacing bad bytes", decode_used)
            return raw.decode("utf-8", errors="replace"), "utf-8"


def _as_attribute_value(name: str, value: Any) -> str:
    if isinstance(value, str):
        return value
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, (int, float)):
        return str(value)
    raise InvalidAttributeDocument(f"attribute {name!r} must be a scalar, got {type(value).__name__}")


def decode_attribute_bytes(raw: bytes) -> Dict[str, str]:
    if not raw.strip():
        return {}

    text, encoding = decode_text(raw)
    try:
        doc = json.loads(text)
    except json.JSONDecodeError as e:
        raise InvalidAttributeDocument(f"attribute document is not valid JSON: {e.msg}") from e

    if not isinstance(doc, dict):
        raise InvalidAttributeDocument("attribute document must be a JSON object")

    # null means "attribute not set"
    attrs = {name: _as_attribute_value(name, value) for name, value in doc.items() if value is not None}
    log.debug("decoded %d attribute(s) from upload (%s)", len(attrs), encoding)
    return attrs
