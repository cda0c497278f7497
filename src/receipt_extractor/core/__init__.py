"""Core extraction functionality."""

from receipt_extractor.core.config import ExtractionConfig, ProviderSettings
from receipt_extractor.core.exceptions import (
    BinaryContentError,
    ConfigurationError,
    DocumentNotFoundError,
    DocumentTooLargeError,
    DocumentValidationError,
    EmptyResponseError,
    ExtractionError,
    MalformedResponseError,
    ProviderError,
    ReceiptExtractorError,
)
from receipt_extractor.core.observer import ExtractionObserver, LoggingObserver, UsageReport
from receipt_extractor.core.validator import InputValidator, ValidatedDocument, looks_binary
from receipt_extractor.core.extractor import DocumentExtractor

__all__ = [
    "DocumentExtractor",
    "ExtractionConfig",
    "ProviderSettings",
    "ExtractionObserver",
    "LoggingObserver",
    "UsageReport",
    "InputValidator",
    "ValidatedDocument",
    "looks_binary",
    "ReceiptExtractorError",
    "DocumentValidationError",
    "DocumentNotFoundError",
    "DocumentTooLargeError",
    "BinaryContentError",
    "ExtractionError",
    "ProviderError",
    "EmptyResponseError",
    "MalformedResponseError",
    "ConfigurationError",
]
