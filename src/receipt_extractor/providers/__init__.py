"""LLM provider backends."""

from receipt_extractor.providers.base import ExtractionProvider
from receipt_extractor.providers.openai import OpenAIProvider

__all__ = ["ExtractionProvider", "OpenAIProvider"]
