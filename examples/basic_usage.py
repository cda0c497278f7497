"""Example: Basic usage of receipt-extractor.

Usage:
    # Requires OPENAI_KEY (and optionally OPENAI_MODEL) in the environment or .env
    python examples/basic_usage.py
"""

from dotenv import load_dotenv

from receipt_extractor import (
    DocumentExtractor,
    ExtractionConfig,
    HtmlOverviewRenderer,
    ReceiptExtractorError,
)

# Load environment variables
load_dotenv()

INVOICE = """
INVOICE #INV-2024-0042

Date: 2024-03-01
From: Acme AB
      Storgatan 1, 111 22 Stockholm

Cloud hosting, March 2024        76.30 SEK
VAT 25%                          19.07 SEK
Total due                        95.37 SEK

Customer ID: C-1001
"""

RECEIPT_EUR = """
Receipt 2045-1234
OpenAI, LLC
Paid November 25, 2024

ChatGPT Plus Subscription      €20.00
Total                          €20.00
"""


def example_basic_extraction(extractor: DocumentExtractor) -> None:
    """Extract an invoice written in Swedish kronor."""
    print("=" * 60)
    print("Example 1: Invoice in SEK")
    print("=" * 60)

    result = extractor.extract(INVOICE)
    record = result.record

    print(f"Type:        {record.document_type.value}")
    print(f"Company:     {record.company}")
    print(f"Date:        {record.date_issued}")
    print(f"Description: {record.description}")
    print(f"Amount:      {record.amount_minor_units} öre")
    for id_field in record.id_fields:
        print(f"{id_field.name}: {id_field.value}")
    print(f"Filename:    {record.suggested_filename}")


def example_currency_conversion(extractor: DocumentExtractor) -> None:
    """Extract a receipt in euros; the amount is converted by the model."""
    print("=" * 60)
    print("Example 2: Receipt in EUR")
    print("=" * 60)

    record = extractor.extract(RECEIPT_EUR).record

    print(f"Original:    {record.original_amount} {record.original_currency}")
    print(f"Converted:   {record.amount_minor_units} öre (approximate rate)")
    print(f"Filename:    {record.suggested_filename}")

    html = HtmlOverviewRenderer().render(record)
    print(f"HTML overview: {len(html)} characters")


def main() -> None:
    extractor = DocumentExtractor(config=ExtractionConfig(temperature=0.0))
    try:
        example_basic_extraction(extractor)
        example_currency_conversion(extractor)
    except ReceiptExtractorError as e:
        print(f"Extraction failed: {e}")


if __name__ == "__main__":
    main()
