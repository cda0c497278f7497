"""Tests for configuration classes."""

import pytest
from pydantic import ValidationError

from receipt_extractor.core.config import DEFAULT_MODEL, ExtractionConfig, ProviderSettings
from receipt_extractor.core.exceptions import ConfigurationError


@pytest.fixture
def clean_env(monkeypatch: pytest.MonkeyPatch, tmp_path) -> pytest.MonkeyPatch:  # type: ignore[no-untyped-def]
    """Run in an empty directory with no provider variables set."""
    for name in ("OPENAI_KEY", "OPENAI_API_KEY", "OPENAI_MODEL"):
        monkeypatch.delenv(name, raising=False)
    monkeypatch.chdir(tmp_path)
    return monkeypatch


class TestExtractionConfig:
    """Tests for ExtractionConfig class."""

    def test_default_values(self) -> None:
        """Test default extraction config values."""
        config = ExtractionConfig()

        assert config.max_file_size == 200 * 1024
        assert config.binary_sample_size == 512
        assert config.max_null_bytes == 3
        assert config.max_control_chars == 5
        assert config.allowed_extensions == (".txt", ".md")
        assert config.target_currency == "SEK"
        assert config.exchange_rate_hints == {"EUR": 11.5}
        assert config.temperature == 0.0
        assert config.max_tokens is None
        assert config.system_prompt is None

    def test_currency_is_uppercased(self) -> None:
        assert ExtractionConfig(target_currency="eur").target_currency == "EUR"

    def test_currency_must_be_three_letters(self) -> None:
        with pytest.raises(ValidationError):
            ExtractionConfig(target_currency="KRONA")

    def test_extensions_are_normalized(self) -> None:
        config = ExtractionConfig(allowed_extensions=("TXT", ".Md", ".eml"))

        assert config.allowed_extensions == (".txt", ".md", ".eml")

    def test_temperature_validation(self) -> None:
        """Test temperature must be between 0 and 2."""
        ExtractionConfig(temperature=0.0)
        ExtractionConfig(temperature=2.0)

        with pytest.raises(ValidationError):
            ExtractionConfig(temperature=2.5)

        with pytest.raises(ValidationError):
            ExtractionConfig(temperature=-0.1)

    def test_file_size_must_be_positive(self) -> None:
        with pytest.raises(ValidationError):
            ExtractionConfig(max_file_size=0)


class TestProviderSettings:
    """Tests for ProviderSettings."""

    def test_masked_api_key(self) -> None:
        settings = ProviderSettings(api_key="sk-abcdefgh1234")

        assert settings.masked_api_key == "sk-...1234"
        assert settings.model == DEFAULT_MODEL

    def test_empty_key_rejected(self) -> None:
        with pytest.raises(ValidationError):
            ProviderSettings(api_key="")

    def test_from_env(self, clean_env: pytest.MonkeyPatch) -> None:
        clean_env.setenv("OPENAI_KEY", "sk-env-1111")
        clean_env.setenv("OPENAI_MODEL", "gpt-4.1-mini")

        settings = ProviderSettings.from_env()

        assert settings.api_key == "sk-env-1111"
        assert settings.model == "gpt-4.1-mini"

    def test_from_env_fallback_key_and_default_model(
        self, clean_env: pytest.MonkeyPatch
    ) -> None:
        clean_env.setenv("OPENAI_API_KEY", "sk-fallback-2222")

        settings = ProviderSettings.from_env()

        assert settings.api_key == "sk-fallback-2222"
        assert settings.model == DEFAULT_MODEL

    def test_from_dotenv_file(self, clean_env: pytest.MonkeyPatch, tmp_path) -> None:  # type: ignore[no-untyped-def]
        env_file = tmp_path / "custom.env"
        env_file.write_text("OPENAI_KEY=sk-dotenv-3333\nOPENAI_MODEL=gpt-4o\n", encoding="utf-8")

        settings = ProviderSettings.from_env(str(env_file))

        assert settings.api_key == "sk-dotenv-3333"
        assert settings.model == "gpt-4o"

    def test_missing_key(self, clean_env: pytest.MonkeyPatch) -> None:
        with pytest.raises(ConfigurationError, match="OPENAI_KEY"):
            ProviderSettings.from_env()
