"""
Deterministic conversion rules.

Names and markers shared with the hosting flow. Kept in one place so the
output contract stays explicit.
"""

import os

# Reserved attribute names, in the order they are appended.
CORE_ATTRIBUTE_NAMES = ("path", "filename", "uuid")

OUTPUT_ATTRIBUTE_NAME = "CSVData"
SCHEMA_ATTRIBUTE_NAME = "CSVSchema"

MIME_TYPE_ATTRIBUTE = "mime.type"
CSV_MIME_TYPE = "text/csv"

NULL_VALUE = "null"
EMPTY_VALUE = ""

FIELD_SEPARATOR = ","
QUOTE_CHAR = '"'
# Header and data lines are joined with the platform's native separator.
LINE_SEPARATOR = os.linesep

BODY_ENCODING = "utf-8"
