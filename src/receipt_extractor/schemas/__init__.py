"""Extraction schemas for receipts and invoices."""

from receipt_extractor.schemas.receipt_invoice import (
    DocumentType,
    ExtractedRecord,
    ExtractionPayload,
    IdField,
)

__all__ = [
    "DocumentType",
    "ExtractedRecord",
    "ExtractionPayload",
    "IdField",
]
