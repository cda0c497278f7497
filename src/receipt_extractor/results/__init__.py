"""Result types and response normalization."""

from receipt_extractor.results.normalizer import (
    ResponseNormalizer,
    amount_token,
    clean,
    suggested_filename,
)
from receipt_extractor.results.types import ExtractionResult

__all__ = [
    "ExtractionResult",
    "ResponseNormalizer",
    "amount_token",
    "clean",
    "suggested_filename",
]
