"""Main document extractor class."""

import logging
from pathlib import Path

from receipt_extractor.core.config import ExtractionConfig, ProviderSettings
from receipt_extractor.core.observer import ExtractionObserver, LoggingObserver
from receipt_extractor.core.validator import InputValidator
from receipt_extractor.prompts.builder import PromptBuilder
from receipt_extractor.providers.base import ExtractionProvider
from receipt_extractor.providers.openai import OpenAIProvider
from receipt_extractor.results.normalizer import ResponseNormalizer
from receipt_extractor.results.types import ExtractionResult

logger = logging.getLogger(__name__)


class DocumentExtractor:
    """Classifies a receipt or invoice and extracts its fields.

    Runs validate -> build prompt -> call provider -> normalize for one
    document at a time. Every step raises on failure, so a result is either
    complete or not produced at all.

    Example:
        ```python
        from receipt_extractor import DocumentExtractor

        extractor = DocumentExtractor()
        result = extractor.extract_file("invoice.md")
        print(result.record.suggested_filename)

        # Any other backend implementing ExtractionProvider
        extractor = DocumentExtractor(provider=my_provider)
        ```
    """

    def __init__(
        self,
        provider: ExtractionProvider | None = None,
        config: ExtractionConfig | None = None,
        observer: ExtractionObserver | None = None,
        settings: ProviderSettings | None = None,
    ) -> None:
        """Initialize the document extractor.

        Args:
            provider: Backend answering extraction requests. Defaults to
                ``OpenAIProvider`` configured from ``settings``.
            config: Extraction configuration.
            observer: Receives warnings, request and usage events.
            settings: Provider settings, only used when ``provider`` is omitted.
                Read from the environment when omitted too.
        """
        self.config = config or ExtractionConfig()
        self.observer = observer or LoggingObserver(logger)

        if provider is not None:
            self._provider = provider
        else:
            self._provider = OpenAIProvider(
                settings=settings,
                config=self.config,
                observer=self.observer,
            )

        self._validator = InputValidator(self.config, self.observer)
        self._prompt_builder = PromptBuilder(self.config)
        self._normalizer = ResponseNormalizer(self.config.target_currency)

    @property
    def model(self) -> str | None:
        return self._provider.model

    def extract(self, document: str) -> ExtractionResult:
        """Extract a record from document text.

        Raises:
            ProviderError: If the provider call fails.
            EmptyResponseError: If the provider returns nothing.
            MalformedResponseError: If the payload does not match the schema.
        """
        return self._run(document)

    def extract_file(self, path: str | Path) -> ExtractionResult:
        """Validate a file and extract a record from its contents.

        Raises:
            DocumentNotFoundError: If the file does not exist.
            DocumentTooLargeError: If the file is over the size limit.
            BinaryContentError: If the file does not look like text.
            ExtractionError: Any of the errors raised by ``extract``.
        """
        document = self._validator.validate(path)
        logger.info(
            "File validation successful (%s, %d bytes)", document.path, document.size
        )
        return self._run(
            document.text,
            source_path=document.path,
            warnings=list(document.warnings),
        )

    def _run(
        self,
        document: str,
        source_path: Path | None = None,
        warnings: list[str] | None = None,
    ) -> ExtractionResult:
        logger.debug("Document content length: %d characters", len(document))
        request = self._prompt_builder.build_request(document)
        raw_response = self._provider.extract(request)
        record = self._normalizer.parse(raw_response)
        self.observer.on_record(record)

        return ExtractionResult(
            record=record,
            source_path=source_path,
            model_used=self.model,
            warnings=warnings or [],
            raw_response=raw_response,
        )
