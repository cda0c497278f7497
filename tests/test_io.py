"""Tests for reading and writing records."""

import json
from pathlib import Path
from unittest.mock import patch

import pytest

from receipt_extractor import (
    MalformedResponseError,
    ResponseNormalizer,
    load_record_json,
    write_record_json,
)
from receipt_extractor.results.io import write_text_atomic

PAYLOAD = {
    "document_type": "Invoice",
    "description": "Hosting",
    "company": "Hetzner Online GmbH",
    "date_issued": "2024-02-01",
    "service_description": None,
    "amount_minor_units": 57500,
    "original_amount": 50.0,
    "original_currency": "EUR",
    "original_vat_amount": None,
    "id_fields": [],
}


@pytest.fixture
def record():  # type: ignore[no-untyped-def]
    return ResponseNormalizer().parse(json.dumps(PAYLOAD))


class TestRecordFiles:
    """Tests for write_record_json and load_record_json."""

    def test_write_is_indented_json(self, tmp_path: Path, record) -> None:  # type: ignore[no-untyped-def]
        path = tmp_path / "out.json"

        write_record_json(record, path)

        text = path.read_text(encoding="utf-8")
        assert text.startswith('{\n  "document_type": "Invoice"')
        assert json.loads(text)["suggested_filename"] == record.suggested_filename

    def test_load_round_trip(self, tmp_path: Path, record) -> None:  # type: ignore[no-untyped-def]
        path = tmp_path / "out.json"
        write_record_json(record, path)

        assert load_record_json(path) == record

    def test_load_recomputes_filename(self, tmp_path: Path) -> None:
        path = tmp_path / "edited.json"
        path.write_text(json.dumps({**PAYLOAD, "suggested_filename": "edited"}), encoding="utf-8")

        loaded = load_record_json(path)

        assert loaded.suggested_filename == "2024_02_01-hetzner_online_gmbh-hosting-575sek"

    def test_load_invalid_file(self, tmp_path: Path) -> None:
        path = tmp_path / "bad.json"
        path.write_text('{"description": "only"}', encoding="utf-8")

        with pytest.raises(MalformedResponseError):
            load_record_json(path)

    def test_load_non_utf8_file(self, tmp_path: Path) -> None:
        path = tmp_path / "latin1.json"
        path.write_bytes(b"\xff\xfe{}")

        with pytest.raises(MalformedResponseError, match="not valid UTF-8"):
            load_record_json(path)

    def test_failed_write_leaves_nothing_behind(self, tmp_path: Path) -> None:
        path = tmp_path / "out.json"

        with patch("receipt_extractor.results.io.os.replace", side_effect=OSError("disk full")):
            with pytest.raises(OSError):
                write_text_atomic(path, "content")

        assert list(tmp_path.iterdir()) == []
