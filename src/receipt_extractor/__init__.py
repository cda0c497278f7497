"""
receipt-extractor: LLM-driven classification and field extraction for receipts and invoices.
"""

from seeds_clients.core.base_client import BaseClient

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
from receipt_extractor.core.extractor import DocumentExtractor
from receipt_extractor.core.observer import ExtractionObserver, LoggingObserver, UsageReport
from receipt_extractor.core.validator import (
    InputValidator,
    ValidatedDocument,
    looks_binary,
    validate_document,
)
from receipt_extractor.prompts.builder import ExtractionRequest, PromptBuilder
from receipt_extractor.providers import ExtractionProvider, OpenAIProvider
from receipt_extractor.rendering import HtmlOverviewRenderer
from receipt_extractor.results import (
    ExtractionResult,
    ResponseNormalizer,
    amount_token,
    clean,
    suggested_filename,
)
from receipt_extractor.results.io import load_record_json, write_record_json
from receipt_extractor.schemas import DocumentType, ExtractedRecord, ExtractionPayload, IdField

__version__ = "0.1.0"

__all__ = [
    # Core
    "DocumentExtractor",
    "InputValidator",
    "ValidatedDocument",
    "looks_binary",
    "validate_document",
    # Errors
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
    # Config
    "ExtractionConfig",
    "ProviderSettings",
    # Observers
    "ExtractionObserver",
    "LoggingObserver",
    "UsageReport",
    # Prompts
    "PromptBuilder",
    "ExtractionRequest",
    # Providers
    "ExtractionProvider",
    "OpenAIProvider",
    "BaseClient",  # For type hints when injecting clients
    # Schemas
    "DocumentType",
    "IdField",
    "ExtractionPayload",
    "ExtractedRecord",
    # Results
    "ExtractionResult",
    "ResponseNormalizer",
    "clean",
    "amount_token",
    "suggested_filename",
    "write_record_json",
    "load_record_json",
    # Rendering
    "HtmlOverviewRenderer",
]
