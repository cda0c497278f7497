"""Provider capability interface."""

from typing import TYPE_CHECKING, Protocol, runtime_checkable

if TYPE_CHECKING:
    from receipt_extractor.prompts.builder import ExtractionRequest


@runtime_checkable
class ExtractionProvider(Protocol):
    """Anything that can answer an extraction request with a JSON payload.

    Implementations make exactly one schema-constrained call per request and
    do not retry.
    """

    model: str | None

    def extract(self, request: "ExtractionRequest") -> str:
        """Send the request and return the raw JSON content of the completion.

        Raises:
            ProviderError: If the transport or the API fails.
            EmptyResponseError: If no completion content is returned.
            MalformedResponseError: If the client library rejects the payload.
        """
        ...
