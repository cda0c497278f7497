"""Prompt and schema builder for receipt/invoice extraction."""

import copy
from dataclasses import dataclass, field
from typing import Any

from pydantic import BaseModel

from receipt_extractor.core.config import ExtractionConfig
from receipt_extractor.schemas.receipt_invoice import ExtractionPayload

SCHEMA_NAME = "receipt_invoice_info"
SCHEMA_DESCRIPTION = "Structured information extracted from a receipt or invoice"


@dataclass(frozen=True)
class ExtractionRequest:
    """Everything a provider needs for one schema-constrained call."""

    system_prompt: str
    user_prompt: str
    response_model: type[BaseModel]
    json_schema: dict[str, Any] = field(compare=False)
    schema_name: str = SCHEMA_NAME
    schema_description: str = SCHEMA_DESCRIPTION


def build_strict_schema(model: type[BaseModel]) -> dict[str, Any]:
    """Return the JSON schema of ``model`` in the strict structured-output subset.

    Every object gets ``additionalProperties: false`` and lists all of its
    properties as required.
    """
    schema = copy.deepcopy(model.model_json_schema())
    _make_strict(schema)
    return schema


def _make_strict(node: Any) -> None:
    if isinstance(node, dict):
        if node.get("type") == "object" and "properties" in node:
            node["additionalProperties"] = False
            node["required"] = list(node["properties"])
        for value in node.values():
            _make_strict(value)
    elif isinstance(node, list):
        for item in node:
            _make_strict(item)


class PromptBuilder:
    """Builds the fixed extraction prompts and the strict response schema.

    The output depends only on the document text and the configuration, so
    the same document always produces the same request.
    """

    SYSTEM_PROMPT_TEMPLATE = (
        "You are an experienced accountant reviewing financial documents. "
        "Your task is to:\n"
        '1. Classify the document as either "None" (not a financial document), '
        '"Invoice", or "Receipt"\n'
        "2. Extract the company name that is offering the service and requesting payment\n"
        "3. Extract the date the document was issued (in YYYY-MM-DD format)\n"
        "4. Extract a concise description of the service or items paid for\n"
        "5. Extract the total amount in {currency} and convert it to {currency} "
        "minor units ({minor_unit})\n"
        "   - For amounts in {currency}: multiply by 100 "
        "(e.g., 95.37 {currency} = 9537)\n"
        "   - For amounts in other currencies: convert to {currency} first using "
        "approximate rates ({rates}), then to minor units\n"
        "   - Return null if no amount is found or if conversion is not possible\n\n"
        "Be precise and extract only information that is clearly present in the document."
    )

    USER_PROMPT_PREFIX = (
        "Please analyze the following document and extract the required information:\n\n"
    )

    def __init__(self, config: ExtractionConfig | None = None) -> None:
        self.config = config or ExtractionConfig()
        self._schema = build_strict_schema(ExtractionPayload)

    def build_system_prompt(self) -> str:
        """Build the system prompt, honoring a custom override from the config."""
        if self.config.system_prompt:
            return self.config.system_prompt

        currency = self.config.target_currency
        if self.config.exchange_rate_hints:
            rates = ", ".join(
                f"1 {code} ≈ {rate:g} {currency}"
                for code, rate in sorted(self.config.exchange_rate_hints.items())
            )
        else:
            rates = "current market rates"

        return self.SYSTEM_PROMPT_TEMPLATE.format(
            currency=currency,
            minor_unit=self.config.target_minor_unit,
            rates=rates,
        )

    def build_user_prompt(self, document: str) -> str:
        return f"{self.USER_PROMPT_PREFIX}{document}"

    def build_schema(self) -> dict[str, Any]:
        """Return a copy of the constant strict response schema."""
        return copy.deepcopy(self._schema)

    def build_request(self, document: str) -> ExtractionRequest:
        """Build the complete request for a document."""
        return ExtractionRequest(
            system_prompt=self.build_system_prompt(),
            user_prompt=self.build_user_prompt(document),
            response_model=ExtractionPayload,
            json_schema=self.build_schema(),
        )
