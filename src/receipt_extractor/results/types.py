"""Result types for extraction outputs."""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field

from receipt_extractor.schemas.receipt_invoice import ExtractedRecord


class ExtractionResult(BaseModel):
    """Result of extracting one document."""

    model_config = ConfigDict(frozen=True)

    record: ExtractedRecord = Field(description="The normalized record")
    source_path: Path | None = Field(
        default=None,
        description="Path of the input document, when extracted from a file",
    )
    model_used: str | None = Field(
        default=None,
        description="LLM model used for extraction",
    )
    warnings: list[str] = Field(
        default_factory=list,
        description="Non-fatal problems noticed while validating the input",
    )
    raw_response: str | None = Field(
        default=None,
        description="Raw LLM response for debugging",
    )
