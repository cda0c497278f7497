"""Observers receiving progress and telemetry from the extraction pipeline.

Components never reach for a process-wide logger of their own; the caller
passes an observer in. ``LoggingObserver`` forwards everything to a
``logging.Logger`` and is what the CLI uses.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from receipt_extractor.prompts.builder import ExtractionRequest
    from receipt_extractor.schemas.receipt_invoice import ExtractedRecord


@dataclass(frozen=True)
class UsageReport:
    """Token usage and timing of a single provider call."""

    model: str | None
    duration_seconds: float
    prompt_tokens: int | None = None
    completion_tokens: int | None = None
    total_tokens: int | None = None
    cost_usd: float | None = None


class ExtractionObserver:
    """Base observer. Every hook is a no-op; override the ones you need."""

    def on_warning(self, message: str) -> None:
        """Called for non-fatal problems, such as an unexpected file extension."""

    def on_request(self, request: ExtractionRequest, model: str | None) -> None:
        """Called right before the provider is contacted."""

    def on_usage(self, report: UsageReport) -> None:
        """Called after a successful provider call."""

    def on_record(self, record: ExtractedRecord) -> None:
        """Called once the normalized record is complete."""


class LoggingObserver(ExtractionObserver):
    """Observer that writes every event to a logger."""

    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger("receipt_extractor")

    def on_warning(self, message: str) -> None:
        self.logger.warning(message)

    def on_request(self, request: ExtractionRequest, model: str | None) -> None:
        self.logger.info("Calling chat completions API (model=%s)", model)
        self.logger.info(
            "Using structured output with schema: %s (strict mode: true)", request.schema_name
        )
        self.logger.debug("System prompt length: %d characters", len(request.system_prompt))
        self.logger.debug("User prompt length: %d characters", len(request.user_prompt))

    def on_usage(self, report: UsageReport) -> None:
        self.logger.info("API call successful (took %.2fs)", report.duration_seconds)
        if report.total_tokens:
            self.logger.info(
                "Token usage - Prompt: %s, Completion: %s, Total: %s",
                report.prompt_tokens,
                report.completion_tokens,
                report.total_tokens,
            )
        if report.cost_usd is not None:
            self.logger.debug("Estimated cost: $%.6f", report.cost_usd)

    def on_record(self, record: ExtractedRecord) -> None:
        self.logger.info("Extracted document type: %s", record.document_type.value)
        if record.date_issued is not None:
            self.logger.info("Extracted date: %s", record.date_issued)
        else:
            self.logger.debug("No date found in document")
        if record.company is not None:
            self.logger.info("Extracted company: %s", record.company)
        else:
            self.logger.debug("No company found in document")
        if record.amount_minor_units is not None:
            self.logger.info(
                "Extracted amount: %d minor units (%.2f)",
                record.amount_minor_units,
                record.amount_minor_units / 100,
            )
        else:
            self.logger.debug("No amount found in document")
        self.logger.info("Generated suggested filename: %s", record.suggested_filename)
