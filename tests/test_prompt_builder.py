"""Tests for the prompt and schema builder."""

from typing import Any

from receipt_extractor import ExtractionConfig, ExtractionPayload, PromptBuilder
from receipt_extractor.prompts.builder import SCHEMA_NAME, build_strict_schema


def _objects(node: Any) -> list[dict[str, Any]]:
    """Collect every object schema in a JSON schema tree."""
    found: list[dict[str, Any]] = []
    if isinstance(node, dict):
        if node.get("type") == "object":
            found.append(node)
        for value in node.values():
            found.extend(_objects(value))
    elif isinstance(node, list):
        for item in node:
            found.extend(_objects(item))
    return found


class TestSystemPrompt:
    """Tests for the system prompt."""

    def test_describes_all_five_tasks(self) -> None:
        """Test the prompt lists classification and the four fields."""
        prompt = PromptBuilder().build_system_prompt()

        assert "accountant" in prompt
        assert '"None"' in prompt and '"Invoice"' in prompt and '"Receipt"' in prompt
        assert "company name" in prompt
        assert "YYYY-MM-DD" in prompt
        assert "description of the service" in prompt
        assert "95.37 SEK = 9537" in prompt

    def test_embeds_exchange_rate_hint(self) -> None:
        """Test the approximate conversion rate is part of the text."""
        prompt = PromptBuilder().build_system_prompt()

        assert "1 EUR ≈ 11.5 SEK" in prompt

    def test_target_currency_from_config(self) -> None:
        """Test the currency and rates come from the config."""
        config = ExtractionConfig(
            target_currency="nok",
            target_minor_unit="øre",
            exchange_rate_hints={"USD": 10.7, "EUR": 11.6},
        )
        prompt = PromptBuilder(config).build_system_prompt()

        assert "NOK" in prompt
        assert "øre" in prompt
        assert "1 EUR ≈ 11.6 NOK, 1 USD ≈ 10.7 NOK" in prompt
        assert "SEK" not in prompt

    def test_without_rate_hints(self) -> None:
        """Test the prompt still reads well without any rate hints."""
        prompt = PromptBuilder(ExtractionConfig(exchange_rate_hints={})).build_system_prompt()

        assert "current market rates" in prompt

    def test_custom_system_prompt(self) -> None:
        """Test a configured override replaces the default."""
        custom = "You are a specialized invoice extractor."
        prompt = PromptBuilder(ExtractionConfig(system_prompt=custom)).build_system_prompt()

        assert prompt == custom


class TestUserPrompt:
    """Tests for the user prompt."""

    def test_contains_document(self) -> None:
        """Test the document text is appended verbatim."""
        document = "INVOICE INV-42\nTotal: 100 EUR"
        prompt = PromptBuilder().build_user_prompt(document)

        assert prompt.startswith("Please analyze the following document")
        assert prompt.endswith(document)

    def test_deterministic(self) -> None:
        """Test the same text always gives the same request."""
        builder = PromptBuilder()

        assert builder.build_request("abc") == builder.build_request("abc")
        assert PromptBuilder().build_request("abc") == builder.build_request("abc")


class TestSchema:
    """Tests for the strict response schema."""

    def test_all_objects_are_closed_and_fully_required(self) -> None:
        """Test every object forbids extra properties and requires all of them."""
        schema = PromptBuilder().build_schema()
        objects = _objects(schema)

        assert len(objects) >= 2  # record and id field
        for obj in objects:
            assert obj["additionalProperties"] is False
            assert sorted(obj["required"]) == sorted(obj["properties"])

    def test_record_properties(self) -> None:
        """Test the schema matches the record shape without the filename."""
        schema = PromptBuilder().build_schema()

        assert set(schema["properties"]) == {
            "document_type",
            "description",
            "company",
            "date_issued",
            "service_description",
            "amount_minor_units",
            "original_amount",
            "original_currency",
            "original_vat_amount",
            "id_fields",
        }
        assert "suggested_filename" not in schema["properties"]
        assert schema["properties"]["description"]["maxLength"] == 50

    def test_date_and_currency_patterns(self) -> None:
        """Test the formats asked of the model are part of the schema."""
        properties = PromptBuilder().build_schema()["properties"]

        def patterns(name: str) -> list[str]:
            return [
                option["pattern"]
                for option in properties[name]["anyOf"]
                if "pattern" in option
            ]

        assert patterns("date_issued") == [r"^\d{4}-\d{2}-\d{2}$"]
        assert patterns("original_currency") == [r"^[A-Z]{3}$"]

    def test_document_type_enum(self) -> None:
        """Test the classification is limited to three values."""
        schema = PromptBuilder().build_schema()

        assert schema["$defs"]["DocumentType"]["enum"] == ["None", "Invoice", "Receipt"]

    def test_schema_is_constant_and_copied(self) -> None:
        """Test callers cannot modify the shared schema."""
        builder = PromptBuilder()
        first = builder.build_schema()
        first["properties"].clear()

        assert builder.build_schema() == build_strict_schema(ExtractionPayload)
        assert builder.build_schema()["properties"]

    def test_request_bundles_schema(self) -> None:
        """Test the request carries the schema name and response model."""
        request = PromptBuilder().build_request("doc")

        assert request.schema_name == SCHEMA_NAME
        assert request.response_model is ExtractionPayload
        assert request.json_schema == build_strict_schema(ExtractionPayload)
