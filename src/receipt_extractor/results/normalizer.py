"""Response normalization and suggested filename generation."""

import json
import re
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from pydantic import ValidationError

from receipt_extractor.core.exceptions import MalformedResponseError
from receipt_extractor.schemas.receipt_invoice import ExtractedRecord, ExtractionPayload

UNKNOWN = "unknown"

_NON_ALNUM = re.compile(r"[^a-z0-9]")


def clean(value: str) -> str:
    """Lowercase ``value`` and replace every character outside ``[a-z0-9]`` with ``_``.

    Example:
        >>> clean("ACME Corp.")
        'acme_corp_'
    """
    return _NON_ALNUM.sub("_", value.lower())


def amount_token(amount_minor_units: int | None, currency: str = "SEK") -> str:
    """Format an amount in minor units as rounded major units plus currency code.

    Rounds half away from zero, so 9550 becomes ``96sek``. Missing or
    non-positive amounts give ``unknown``.
    """
    if amount_minor_units is None or amount_minor_units <= 0:
        return UNKNOWN
    major = (Decimal(amount_minor_units) / 100).quantize(Decimal(1), rounding=ROUND_HALF_UP)
    return f"{int(major)}{currency.lower()}"


def _present(value: str | None) -> str | None:
    if value is None or value.strip() in ("", "."):
        return None
    return value


def suggested_filename(payload: ExtractionPayload, currency: str = "SEK") -> str:
    """Build ``<date>-<company>-<description>-<amount>`` from extracted fields."""
    date = _present(payload.date_issued)
    company = _present(payload.company)
    parts = [
        clean(date) if date is not None else UNKNOWN,
        clean(company) if company is not None else UNKNOWN,
        clean(payload.description),
        amount_token(payload.amount_minor_units, currency),
    ]
    return "-".join(parts)


class ResponseNormalizer:
    """Turns a raw provider payload into an ``ExtractedRecord``."""

    def __init__(self, target_currency: str = "SEK") -> None:
        self.target_currency = target_currency

    def parse(self, raw_response: str | bytes) -> ExtractedRecord:
        """Parse and validate a raw JSON payload.

        A ``suggested_filename`` present in the payload is ignored and
        recomputed.

        Raises:
            MalformedResponseError: If the payload is not JSON or does not match
                the record schema. No partial record is ever returned.
        """
        if isinstance(raw_response, bytes):
            try:
                text = raw_response.decode("utf-8")
            except UnicodeDecodeError as e:
                raise MalformedResponseError(
                    f"Response is not valid UTF-8: {e}",
                    raw_response=raw_response.decode("utf-8", errors="replace"),
                ) from e
        else:
            text = raw_response
        try:
            data: Any = json.loads(text)
        except json.JSONDecodeError as e:
            raise MalformedResponseError(
                f"Response is not valid JSON: {e}", raw_response=text
            ) from e

        if not isinstance(data, dict):
            raise MalformedResponseError(
                f"Expected a JSON object, got {type(data).__name__}", raw_response=text
            )

        data.pop("suggested_filename", None)
        try:
            payload = ExtractionPayload.model_validate(data)
        except ValidationError as e:
            raise MalformedResponseError(
                f"Response does not match the record schema: {e}",
                validation_errors=e.errors(),
                raw_response=text,
            ) from e

        return self.normalize(payload)

    def normalize(self, payload: ExtractionPayload) -> ExtractedRecord:
        """Attach the suggested filename to an already validated payload."""
        fields = payload.model_dump(exclude={"suggested_filename"})
        return ExtractedRecord.model_validate(
            {**fields, "suggested_filename": suggested_filename(payload, self.target_currency)}
        )
