"""Command line interface.

Usage:
    receipt-extractor extract -i invoice.md -o invoice.json [--html invoice.html]
    receipt-extractor htmloverview -i invoice.json -o invoice.html

The API key and model are read from OPENAI_KEY and OPENAI_MODEL, optionally
from a ``.env`` file in the working directory.
"""

import argparse
import logging
import sys
from collections.abc import Sequence
from pathlib import Path

from receipt_extractor.core.config import ExtractionConfig
from receipt_extractor.core.exceptions import ReceiptExtractorError
from receipt_extractor.core.extractor import DocumentExtractor
from receipt_extractor.core.observer import LoggingObserver
from receipt_extractor.rendering.html import HtmlOverviewRenderer
from receipt_extractor.results.io import (
    load_record_json,
    record_to_json,
    write_record_json,
    write_text_atomic,
)
from receipt_extractor.schemas.receipt_invoice import ExtractedRecord

logger = logging.getLogger("receipt_extractor.cli")


def configure_logging(verbose: bool = False) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="[%(asctime)s] [%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="receipt-extractor",
        description=(
            "Extract structured information from receipt and invoice data "
            "in text or markdown files."
        ),
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    extract = subparsers.add_parser(
        "extract",
        help="Extract structured information from a receipt or invoice file",
    )
    extract.add_argument("-i", "--input", required=True, type=Path, help="Path to the input file")
    extract.add_argument(
        "-o", "--output", required=True, type=Path, help="Path to the output JSON file"
    )
    extract.add_argument("--html", type=Path, help="Also write an HTML overview to this path")

    overview = subparsers.add_parser(
        "htmloverview",
        help="Generate an HTML overview from extracted JSON data",
    )
    overview.add_argument(
        "-i", "--input", required=True, type=Path, help="Path to the input JSON file"
    )
    overview.add_argument(
        "-o", "--output", required=True, type=Path, help="Path to the output HTML file"
    )

    return parser


def run_extract(
    input_path: Path,
    output_path: Path,
    html_path: Path | None = None,
    config: ExtractionConfig | None = None,
) -> int:
    """Extract one document and write its JSON (and optional HTML) output."""
    logger.info("Starting receipt/invoice extraction for file: %s", input_path)

    if output_path.exists():
        logger.warning("Output file already exists: %s", output_path)
        return 0

    config = config or ExtractionConfig()
    observer = LoggingObserver(logging.getLogger("receipt_extractor"))

    logger.info("Output will be written to: %s", output_path)

    extractor = DocumentExtractor(config=config, observer=observer)
    logger.info("Processing document with AI provider...")
    result = extractor.extract_file(input_path)
    logger.info("Successfully extracted information from document")

    print(record_to_json(result.record))
    write_record_json(result.record, output_path)
    logger.info("Successfully wrote JSON output to %s", output_path)

    if html_path is not None:
        if html_path.exists():
            logger.warning("HTML output file already exists: %s", html_path)
        else:
            _write_overview(result.record, html_path, config.target_currency)

    return 0


def run_htmloverview(
    input_path: Path,
    output_path: Path,
    config: ExtractionConfig | None = None,
) -> int:
    """Render an HTML overview from a JSON file written by ``extract``."""
    logger.info("Starting HTML overview generation for file: %s", input_path)

    if output_path.exists():
        logger.warning("Output file already exists: %s", output_path)
        return 0

    if not input_path.is_file():
        logger.error("Input file does not exist: %s", input_path)
        return 1

    config = config or ExtractionConfig()
    logger.info("Reading JSON data from: %s", input_path)
    record = load_record_json(input_path, config.target_currency)
    logger.info("Document type: %s", record.document_type.value)
    logger.info("Description: %s", record.description)
    if record.company is not None:
        logger.info("Company: %s", record.company)

    _write_overview(record, output_path, config.target_currency)

    if record.amount_minor_units is not None:
        logger.info(
            "Amount (%s): %.2f %s (%d minor units)",
            config.target_currency,
            record.amount_minor_units / 100,
            config.target_currency,
            record.amount_minor_units,
        )
    if record.original_amount is not None:
        logger.info(
            "Original amount: %.2f %s", record.original_amount, record.original_currency or "units"
        )
    if record.id_fields:
        logger.info("Found %d identification fields", len(record.id_fields))

    return 0


def _write_overview(record: ExtractedRecord, path: Path, currency: str) -> None:
    logger.info("Generating HTML output...")
    html = HtmlOverviewRenderer(currency=currency).render(record)
    write_text_atomic(path, html)
    logger.info("Successfully generated HTML overview: %s", path)


def main(argv: Sequence[str] | None = None) -> int:
    args = build_parser().parse_args(argv)
    configure_logging(args.verbose)

    try:
        if args.command == "extract":
            return run_extract(args.input, args.output, args.html)
        return run_htmloverview(args.input, args.output)
    except (ReceiptExtractorError, OSError) as e:
        logger.error("Command execution failed: %s", e)
        return 1


if __name__ == "__main__":
    sys.exit(main())
