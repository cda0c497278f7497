"""Prompt and schema construction."""

from receipt_extractor.prompts.builder import ExtractionRequest, PromptBuilder, build_strict_schema

__all__ = ["ExtractionRequest", "PromptBuilder", "build_strict_schema"]
