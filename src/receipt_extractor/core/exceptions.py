"""Custom exceptions for receipt-extractor."""

from pathlib import Path
from typing import Any


class ReceiptExtractorError(Exception):
    """Base exception for all receipt-extractor errors."""

    pass


class DocumentValidationError(ReceiptExtractorError):
    """Raised when an input document is rejected before extraction."""

    def __init__(self, message: str, path: str | Path) -> None:
        super().__init__(message)
        self.path = Path(path)


class DocumentNotFoundError(DocumentValidationError):
    """Raised when the input document does not exist."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(f"File does not exist: {path}", path)


class DocumentTooLargeError(DocumentValidationError):
    """Raised when the input document exceeds the size limit."""

    def __init__(self, path: str | Path, size: int, limit: int) -> None:
        super().__init__(
            f"File size ({size} bytes) exceeds maximum allowed size ({limit} bytes): {path}",
            path,
        )
        self.size = size
        self.limit = limit


class BinaryContentError(DocumentValidationError):
    """Raised when the input document looks like binary data."""

    def __init__(self, path: str | Path) -> None:
        super().__init__(
            f"File appears to be binary, only text files are supported: {path}",
            path,
        )


class ExtractionError(ReceiptExtractorError):
    """Raised when extraction fails after the document was accepted."""

    def __init__(
        self,
        message: str,
        raw_response: str | None = None,
        last_error: Exception | None = None,
    ) -> None:
        super().__init__(message)
        self.raw_response = raw_response
        self.last_error = last_error


class ProviderError(ExtractionError):
    """Raised when the LLM provider call fails at the transport or API level."""

    pass


class EmptyResponseError(ExtractionError):
    """Raised when the provider returns no completion content."""

    pass


class MalformedResponseError(ExtractionError):
    """Raised when the provider payload does not match the record schema."""

    def __init__(
        self,
        message: str,
        validation_errors: Any = None,
        raw_response: str | None = None,
    ) -> None:
        super().__init__(message, raw_response=raw_response)
        self.validation_errors = validation_errors


class ConfigurationError(ReceiptExtractorError):
    """Raised when extractor or provider configuration is invalid."""

    pass
