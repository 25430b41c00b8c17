from __future__ import annotations

import base64
import binascii
from enum import Enum
from typing import Dict, List, Optional, Tuple

from pydantic import BaseModel, ConfigDict, Field, field_validator

from .splitter import split_fields


class Destination(str, Enum):
    ATTRIBUTE = "flowfile-attribute"
    CONTENT = "flowfile-content"


class SelectionConfig(BaseModel):
    """Resolved, immutable selection configuration for one conversion."""

    model_config = ConfigDict(frozen=True)

    attribute_list: Optional[Tuple[str, ...]] = None
    attribute_regex: Optional[str] = None
    include_core_attributes: bool = True
    include_schema: bool = False
    null_value_for_empty: bool = False
    destination: Destination = Destination.ATTRIBUTE


class ConversionSettings(BaseModel):
    """
    Settings as received from the caller.

    `attribute_list` and `attribute_regex` are plain, already-resolved strings.
    Blank strings are treated as not configured.
    """

    destination: Destination = Destination.ATTRIBUTE
    include_core_attributes: bool = True
    attribute_list: Optional[str] = Field(default=None, examples=["beach-name,beach-location"])
    attribute_regex: Optional[str] = Field(default=None, examples=["beach-.*"])
    include_schema: bool = False
    null_value_for_empty: bool = False

    def to_selection_config(self) -> SelectionConfig:
        attribute_list = None
        if self.attribute_list is not None and self.attribute_list.strip():
            attribute_list = tuple(split_fields(self.attribute_list))

        attribute_regex = None
        if self.attribute_regex is not None and self.attribute_regex.strip():
            attribute_regex = self.attribute_regex

        return SelectionConfig(
            attribute_list=attribute_list,
            attribute_regex=attribute_regex,
            include_core_attributes=self.include_core_attributes,
            include_schema=self.include_schema,
            null_value_for_empty=self.null_value_for_empty,
            destination=self.destination,
        )


class Record(BaseModel):
    attributes: Dict[str, str] = Field(default_factory=dict)
    content_b64: str = Field(default="", examples=[""])

    @field_validator("content_b64")
    @classmethod
    def _check_base64(cls, v: str) -> str:
        try:
            base64.b64decode(v, validate=True)
        except (binascii.Error, ValueError) as e:
            raise ValueError(f"content_b64 is not valid base64: {e}") from e
        return v

    def content_bytes(self) -> bytes:
        return base64.b64decode(self.content_b64)


class ConversionReport(BaseModel):
    destination: Destination
    selected: List[str] = Field(default_factory=list)
    missing: List[str] = Field(default_factory=list)
    header: bool = False


class ConvertRequest(BaseModel):
    record: Record = Field(default_factory=Record)
    settings: ConversionSettings = Field(default_factory=ConversionSettings)


class ConvertResponse(BaseModel):
    record: Record
    report: ConversionReport


class HealthResponse(BaseModel):
    ok: bool = True
    core_attributes: List[str] = Field(default_factory=list)
