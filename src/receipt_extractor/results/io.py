"""Reading and writing extracted records."""

import os
import tempfile
from pathlib import Path

from receipt_extractor.results.normalizer import ResponseNormalizer
from receipt_extractor.schemas.receipt_invoice import ExtractedRecord


def record_to_json(record: ExtractedRecord) -> str:
    """Serialize a record as 2-space indented JSON."""
    return record.model_dump_json(indent=2)


def write_text_atomic(path: str | Path, content: str) -> None:
    """Write ``content`` to ``path`` through a temporary file and an atomic rename.

    Either the complete file appears or nothing does.
    """
    path = Path(path)
    fd, tmp_name = tempfile.mkstemp(dir=path.parent, prefix=f".{path.name}.", suffix=".tmp")
    try:
        with os.fdopen(fd, "w", encoding="utf-8") as fh:
            fh.write(content)
        os.replace(tmp_name, path)
    except BaseException:
        Path(tmp_name).unlink(missing_ok=True)
        raise


def write_record_json(record: ExtractedRecord, path: str | Path) -> None:
    write_text_atomic(path, record_to_json(record))


def load_record_json(path: str | Path, target_currency: str = "SEK") -> ExtractedRecord:
    """Load a record written by ``write_record_json``.

    The stored ``suggested_filename`` is not trusted and is recomputed.

    Raises:
        FileNotFoundError: If ``path`` does not exist.
        MalformedResponseError: If the file is not a valid record.
    """
    return ResponseNormalizer(target_currency).parse(Path(path).read_bytes())
