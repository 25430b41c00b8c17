import base64
import json
import os

from fastapi.testclient import TestClient
from attrcsv.main import app

client = TestClient(app)

BEACH = {
    "beach-name": "Malibu Beach",
    "beach-location": "California, US",
    "attribute-should-be-eliminated": "This should not be in CSVData!",
}


def test_health():
    r = client.get("/health")
    assert r.status_code == 200
    assert r.json() == {"ok": True, "core_attributes": ["path", "filename", "uuid"]}


def test_convert_schema_to_attribute():
    payload = {
        "record": {"attributes": BEACH},
        "settings": {
            "include_core_attributes": False,
            "attribute_regex": "beach-.*",
            "include_schema": True,
        },
    }
    r = client.post("/convert", json=payload)
    assert r.status_code == 200

    data = r.json()
    attrs = data["record"]["attributes"]
    assert attrs["CSVData"] == 'Malibu Beach,"California, US"'
    assert attrs["CSVSchema"] == "beach-name,beach-location"
    assert "mime.type" not in attrs
    assert data["report"]["selected"] == ["beach-name", "beach-location"]
    assert data["report"]["header"] is True


def test_convert_schema_to_content():
    payload = {
        "record": {"attributes": BEACH},
        "settings": {
            "destination": "flowfile-content",
            "include_core_attributes": False,
            "attribute_regex": "beach-.*",
            "include_schema": True,
        },
    }
    r = client.post("/convert", json=payload)
    assert r.status_code == 200

    record = r.json()["record"]
    assert record["attributes"]["mime.type"] == "text/csv"
    assert "CSVData" not in record["attributes"]
    assert "CSVSchema" not in record["attributes"]

    body = base64.b64decode(record["content_b64"]).decode("utf-8")
    assert body == "beach-name,beach-location" + os.linesep + 'Malibu Beach,"California, US"'


def test_convert_rejects_invalid_regex():
    payload = {"settings": {"attribute_regex": "beach-("}}
    r = client.post("/convert", json=payload)
    assert r.status_code == 422
    assert "invalid selection pattern" in r.json()["detail"]


def test_convert_rejects_invalid_base64_body():
    payload = {"record": {"attributes": {}, "content_b64": "not base64!"}}
    r = client.post("/convert", json=payload)
    assert r.status_code == 422


def test_convert_upload_latin1_attributes():
    # Include Latin-1 characters to force non-ASCII handling
    doc = {"beach-name": "Plage de Montréal", "beach-location": "Québec, Canada"}
    raw = json.dumps(doc, ensure_ascii=False).encode("latin-1")

    files = {"file": ("attributes.json", raw, "application/json")}
    form = {"include_core_attributes": "false", "attribute_regex": "beach-.*"}
    r = client.post("/convert/upload", files=files, data=form)
    assert r.status_code == 200

    attrs = r.json()["record"]["attributes"]
    assert "Montréal" in attrs["CSVData"]
    assert '"Québec, Canada"' in attrs["CSVData"]


def test_convert_upload_requires_json_file():
    files = {"file": ("attributes.csv", b"a,b\n", "text/csv")}
    r = client.post("/convert/upload", files=files)
    assert r.status_code == 422


def test_convert_upload_rejects_non_object():
    files = {"file": ("attributes.json", b"[1, 2, 3]", "application/json")}
    r = client.post("/convert/upload", files=files)
    assert r.status_code == 422
    assert "JSON object" in r.json()["detail"]
