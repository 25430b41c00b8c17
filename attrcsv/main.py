import logging
from typing import Optional

from fastapi import Depends, FastAPI, File, Form, HTTPException, UploadFile

from .config import configure_logging, core_attribute_names
from .convert import convert_record
from .errors import InvalidAttributeDocument, InvalidSelectionPattern
from .ingest import decode_attribute_bytes
from .models import ConversionSettings, ConvertRequest, ConvertResponse, Destination, HealthResponse, Record

configure_logging()
log = logging.getLogger("attrcsv.api")

app = FastAPI(
    title="attrcsv",
    description="Deterministic attribute-to-CSV conversion for automation pipelines",
    version="0.1.0",
)


def settings_form(
    destination: Destination = Form(Destination.ATTRIBUTE),
    include_core_attributes: bool = Form(True),
    attribute_list: Optional[str] = Form(None),
    attribute_regex: Optional[str] = Form(None),
    include_schema: bool = Form(False),
    null_value_for_empty: bool = Form(False),
) -> ConversionSettings:
    return ConversionSettings(
        destination=destination,
        include_core_attributes=include_core_attributes,
        attribute_list=attribute_list,
        attribute_regex=attribute_regex,
        include_schema=include_schema,
        null_value_for_empty=null_value_for_empty,
    )


def _convert(record: Record, settings: ConversionSettings) -> ConvertResponse:
    try:
        return convert_record(record, settings)
    except InvalidSelectionPattern as e:
        raise HTTPException(status_code=422, detail=str(e)) from e


@app.get("/health", response_model=HealthResponse)
def health():
    return {"ok": True, "core_attributes": list(core_attribute_names())}


@app.post("/convert", response_model=ConvertResponse)
def convert(req: ConvertRequest):
    return _convert(req.record, req.settings)


@app.post("/convert/upload", response_model=ConvertResponse)
async def convert_upload(
    file: UploadFile = File(...),
    settings: ConversionSettings = Depends(settings_form),
):
    if not (file.filename or "").lower().endswith(".json"):
        raise HTTPException(status_code=422, detail="Only JSON attribute files are supported")

    raw = await file.read()
    try:
        attributes = decode_attribute_bytes(raw)
    except InvalidAttributeDocument as e:
        log.warning("rejected attribute upload %s: %s", file.filename, e)
        raise HTTPException(status_code=422, detail=str(e)) from e

    return _convert(Record(attributes=attributes), settings)
