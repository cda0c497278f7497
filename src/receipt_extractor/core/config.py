"""Configuration classes for extraction."""

from __future__ import annotations

import logging
import os

from dotenv import load_dotenv
from pydantic import BaseModel, Field, field_validator

from receipt_extractor.core.exceptions import ConfigurationError

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-4o-2024-08-06"
API_KEY_ENV_VARS = ("OPENAI_KEY", "OPENAI_API_KEY")
MODEL_ENV_VAR = "OPENAI_MODEL"


class ExtractionConfig(BaseModel):
    """Configuration for the extraction process."""

    # Input validation settings
    max_file_size: int = Field(
        default=200 * 1024,
        gt=0,
        description="Maximum accepted document size in bytes",
    )
    binary_sample_size: int = Field(
        default=512,
        gt=0,
        description="Number of leading bytes inspected for NUL bytes",
    )
    max_null_bytes: int = Field(
        default=3,
        ge=0,
        description="NUL bytes tolerated in the sample before the file counts as binary",
    )
    max_control_chars: int = Field(
        default=5,
        ge=0,
        description="Control characters tolerated in the first line before the file counts as binary",
    )
    allowed_extensions: tuple[str, ...] = Field(
        default=(".txt", ".md"),
        description="Extensions accepted without a warning",
    )

    # Currency settings
    target_currency: str = Field(
        default="SEK",
        min_length=3,
        max_length=3,
        description="ISO-4217 code of the currency amounts are converted to",
    )
    target_minor_unit: str = Field(
        default="öre",
        description="Name of the minor unit of the target currency, used in the prompt",
    )
    exchange_rate_hints: dict[str, float] = Field(
        default_factory=lambda: {"EUR": 11.5},
        description="Approximate conversion rates embedded in the prompt (1 unit = N target units)",
    )

    # LLM settings
    temperature: float = Field(
        default=0.0,
        ge=0.0,
        le=2.0,
        description="LLM temperature for extraction (lower = more deterministic)",
    )
    max_tokens: int | None = Field(
        default=None,
        description="Maximum tokens for LLM response",
    )

    # Prompt settings
    system_prompt: str | None = Field(
        default=None,
        description="Custom system prompt override",
    )

    @field_validator("target_currency")
    @classmethod
    def _upper_currency(cls, value: str) -> str:
        return value.upper()

    @field_validator("allowed_extensions")
    @classmethod
    def _normalize_extensions(cls, value: tuple[str, ...]) -> tuple[str, ...]:
        return tuple(ext.lower() if ext.startswith(".") else f".{ext.lower()}" for ext in value)


class ProviderSettings(BaseModel):
    """Credentials and model selection for the LLM provider."""

    api_key: str = Field(min_length=1, description="API key for the provider")
    model: str = Field(default=DEFAULT_MODEL, description="Model identifier to request")

    @property
    def masked_api_key(self) -> str:
        """API key reduced to its last four characters, safe for logs."""
        return f"sk-...{self.api_key[-4:]}"

    @classmethod
    def from_env(cls, dotenv_path: str | None = None) -> ProviderSettings:
        """Build settings from the environment, loading a ``.env`` file first.

        A missing ``.env`` file is not an error. The API key is read from
        ``OPENAI_KEY`` (or ``OPENAI_API_KEY``) and the model from ``OPENAI_MODEL``.

        Raises:
            ConfigurationError: If no API key is available.
        """
        load_dotenv(dotenv_path)

        api_key = next((os.getenv(name) for name in API_KEY_ENV_VARS if os.getenv(name)), None)
        if not api_key:
            raise ConfigurationError(
                "OPENAI_KEY environment variable is required. "
                "Set it in your environment or create a .env file with OPENAI_KEY=your-api-key"
            )

        model = os.getenv(MODEL_ENV_VAR)
        if not model:
            model = DEFAULT_MODEL
            logger.warning("%s is not set, defaulting to %s", MODEL_ENV_VAR, model)
        else:
            logger.info("Using OpenAI model: %s", model)

        return cls(api_key=api_key, model=model)
