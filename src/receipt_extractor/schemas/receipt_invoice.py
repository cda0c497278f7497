"""Receipt and invoice extraction schema.

``ExtractionPayload`` is what the model is asked to produce. Every property is
required (nullable where the value may be missing) and unknown properties are
rejected, which is what strict structured output expects. ``ExtractedRecord``
adds the locally computed ``suggested_filename``.

Scalar fields are validated strictly: a number sent as a string, a float sent
for an integer or a boolean sent for a number is rejected, not coerced.
Dates must be YYYY-MM-DD and currencies three upper-case letters.
"""

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict, Field, field_validator


class DocumentType(str, Enum):
    """Classification of a document."""

    NONE = "None"
    INVOICE = "Invoice"
    RECEIPT = "Receipt"


class IdField(BaseModel):
    """An identification field found in the document."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    name: str = Field(
        strict=True,
        description=(
            "The type or name of the identifier "
            "(e.g., 'Invoice Number', 'Receipt Number', 'Customer ID')"
        ),
    )
    value: str = Field(strict=True, description="The actual identifier value")


class ExtractionPayload(BaseModel):
    """Structured information extracted from a receipt or invoice."""

    model_config = ConfigDict(extra="forbid", frozen=True)

    document_type: DocumentType = Field(
        description="Classification of the document as None, Invoice, or Receipt"
    )
    description: str = Field(
        strict=True,
        max_length=50,
        description=(
            "Mandatory accountant-friendly description: for None documents describe what "
            "it's about, for Invoice/Receipt provide generic service category "
            "(e.g., 'AI Services', 'Cloud Services'). Max 50 characters."
        ),
    )
    company: str | None = Field(
        strict=True,
        description=(
            "The company that owns the service being offered and is requesting payment, "
            "null if not found"
        ),
    )
    date_issued: str | None = Field(
        strict=True,
        pattern=r"^\d{4}-\d{2}-\d{2}$",
        description="The date the document was issued in YYYY-MM-DD format, null if not found",
    )
    service_description: str | None = Field(
        strict=True,
        description="Description of the service or items paid for, null if not found",
    )
    amount_minor_units: int | None = Field(
        strict=True,
        ge=0,
        description=(
            "Total amount in minor units of the target currency, where the last 2 digits "
            "are the minor unit and the rest the major unit, null if not found"
        ),
    )
    original_amount: float | None = Field(
        strict=True,
        description="The total amount in the original currency, null if not found",
    )
    original_currency: str | None = Field(
        strict=True,
        pattern=r"^[A-Z]{3}$",
        description="The ISO 3-letter currency code (e.g., 'EUR', 'USD', 'SEK'), null if not found",
    )
    original_vat_amount: float | None = Field(
        strict=True,
        description="The VAT/tax amount in the original currency, null if not found",
    )
    id_fields: list[IdField] = Field(
        description=(
            "List of identification fields found in the document (invoice numbers, "
            "receipt numbers, customer IDs, etc.). Can be empty."
        )
    )

    @field_validator(
        "company", "date_issued", "service_description", "original_currency", mode="before"
    )
    @classmethod
    def _blank_to_none(cls, value: Any) -> Any:
        # Models sometimes answer "." instead of null
        if isinstance(value, str) and value.strip() in ("", "."):
            return None
        return value


class ExtractedRecord(ExtractionPayload):
    """A normalized extraction result with its suggested filename attached."""

    suggested_filename: str = Field(
        description="Filename derived from the other fields, computed locally"
    )
