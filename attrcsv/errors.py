from __future__ import annotations


class AttrCsvError(Exception):
    """Base class for conversion errors surfaced to callers."""


class InvalidSelectionPattern(AttrCsvError, ValueError):
    def __init__(self, pattern: str, reason: str):
        self.pattern = pattern
        self.reason = reason
        super().__init__(f"invalid selection pattern {pattern!r}: {reason}")


class InvalidAttributeDocument(AttrCsvError, ValueError):
    """Uploaded attribute document could not be read as a flat JSON object."""
