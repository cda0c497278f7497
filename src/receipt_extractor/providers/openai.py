"""OpenAI backend built on seeds-clients."""

import logging
import time
from typing import Any

from pydantic import ValidationError
from seeds_clients import Message, OpenAIClient
from seeds_clients.core.base_client import BaseClient

from receipt_extractor.core.config import ExtractionConfig, ProviderSettings
from receipt_extractor.core.exceptions import (
    EmptyResponseError,
    MalformedResponseError,
    ProviderError,
)
from receipt_extractor.core.observer import ExtractionObserver, LoggingObserver, UsageReport
from receipt_extractor.prompts.builder import ExtractionRequest

logger = logging.getLogger(__name__)


class OpenAIProvider:
    """Schema-constrained chat completion against OpenAI.

    Any seeds-clients ``BaseClient`` can be injected instead of the default
    ``OpenAIClient``. Responses are never cached and failed calls are never
    retried. No timeout is enforced beyond the client library default.

    Example:
        ```python
        from receipt_extractor import OpenAIProvider, PromptBuilder

        provider = OpenAIProvider()  # reads OPENAI_KEY / OPENAI_MODEL
        raw_json = provider.extract(PromptBuilder().build_request(text))
        ```
    """

    _client: BaseClient

    def __init__(
        self,
        client: BaseClient | None = None,
        settings: ProviderSettings | None = None,
        config: ExtractionConfig | None = None,
        observer: ExtractionObserver | None = None,
    ) -> None:
        """Initialize the provider.

        Args:
            client: Pre-configured seeds-clients client. If provided,
                ``settings`` is ignored.
            settings: API key and model. Read from the environment when omitted.
            config: Extraction configuration (temperature, max_tokens).
            observer: Receives request and usage events.
        """
        self.config = config or ExtractionConfig()
        self.observer = observer or LoggingObserver(logger)

        if client is not None:
            self._client = client
            self.model = client.model
        else:
            settings = settings or ProviderSettings.from_env()
            logger.debug("Initializing OpenAI provider with API key: %s", settings.masked_api_key)
            self.model = settings.model
            self._client = OpenAIClient(api_key=settings.api_key, model=settings.model)
            logger.info("OpenAI provider initialized successfully")

    def extract(self, request: ExtractionRequest) -> str:
        """Make one structured-output call and return the raw JSON content.

        Raises:
            ProviderError: If the call fails.
            EmptyResponseError: If the completion has no content.
            MalformedResponseError: If the client rejects the payload against the schema.
        """
        messages = [
            Message(role="system", content=request.system_prompt),
            Message(role="user", content=request.user_prompt),
        ]

        llm_kwargs: dict[str, Any] = {
            "temperature": self.config.temperature,
        }
        if self.config.max_tokens:
            llm_kwargs["max_tokens"] = self.config.max_tokens

        self.observer.on_request(request, self.model)
        started = time.perf_counter()
        try:
            response = self._client.generate(
                messages,
                use_cache=False,
                response_format=request.response_model,
                **llm_kwargs,
            )
        except ValidationError as e:
            raise MalformedResponseError(
                f"Response does not match the record schema: {e}",
                validation_errors=e.errors(),
            ) from e
        except Exception as e:
            logger.error(
                "LLM call failed after %.2fs: %s", time.perf_counter() - started, str(e)
            )
            raise ProviderError(f"LLM call failed: {e}", last_error=e) from e

        duration = time.perf_counter() - started
        content = response.content
        if not isinstance(content, str) or not content.strip():
            raise EmptyResponseError("LLM returned no completion content", raw_response=None)

        self.observer.on_usage(self._usage_report(response, duration))
        return content

    def _usage_report(self, response: Any, duration: float) -> UsageReport:
        usage = response.usage
        return UsageReport(
            model=response.model,
            duration_seconds=duration,
            prompt_tokens=usage.prompt_tokens if usage is not None else None,
            completion_tokens=usage.completion_tokens if usage is not None else None,
            total_tokens=usage.total_tokens if usage is not None else None,
            cost_usd=response.tracking.cost_usd if response.tracking else None,
        )
