"""HTML overview of an extracted record."""

from datetime import datetime

from jinja2 import Environment

from receipt_extractor.schemas.receipt_invoice import ExtractedRecord

OVERVIEW_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{{ data.document_type.value }} - {{ data.description }}</title>
  <style>
    body { font-family: -apple-system, "Segoe UI", Helvetica, Arial, sans-serif; color: #222; margin: 2rem; }
    h1 { font-size: 1.6rem; margin-bottom: 0.2rem; }
    .subtitle { color: #666; margin-top: 0; }
    .badge { display: inline-block; padding: 0.15rem 0.6rem; border-radius: 0.8rem; font-size: 0.85rem; }
    .badge-invoice { background: #e3f0ff; color: #0b4f9c; }
    .badge-receipt { background: #e5f7e8; color: #1c6b2a; }
    .badge-none { background: #eee; color: #555; }
    table { border-collapse: collapse; width: 100%; margin: 1rem 0; }
    th, td { text-align: left; padding: 0.45rem 0.6rem; border-bottom: 1px solid #ddd; }
    th { width: 30%; color: #555; font-weight: 600; }
    .amount { font-size: 1.4rem; font-weight: 700; }
    .muted { color: #999; }
    footer { margin-top: 2rem; font-size: 0.8rem; color: #888; }
    @media print { body { margin: 1cm; } .badge { border: 1px solid #999; } }
  </style>
</head>
<body>
  <h1>{{ data.description }}</h1>
  <p class="subtitle">
    <span class="badge badge-{{ data.document_type.value | lower }}">{{ data.document_type.value }}</span>
    {{ data.company | default("Unknown company", true) }}
  </p>

  <h2>Amount</h2>
  <table>
    <tr>
      <th>Total ({{ currency }})</th>
      <td class="amount">
        {%- if data.amount_minor_units is not none %}{{ data.amount_minor_units | major_units }} {{ currency }}
        {%- else %}<span class="muted">Not found</span>{% endif -%}
      </td>
    </tr>
    <tr>
      <th>Original amount</th>
      <td>
        {%- if data.original_amount is not none %}{{ data.original_amount | money(data.original_currency) }}
        {%- else %}<span class="muted">Not found</span>{% endif -%}
      </td>
    </tr>
    <tr>
      <th>Original VAT</th>
      <td>
        {%- if data.original_vat_amount is not none %}{{ data.original_vat_amount | money(data.original_currency) }}
        {%- else %}<span class="muted">Not found</span>{% endif -%}
      </td>
    </tr>
  </table>

  <h2>Details</h2>
  <table>
    <tr><th>Date issued</th><td>{{ data.date_issued | default("Unknown", true) }}</td></tr>
    <tr><th>Company</th><td>{{ data.company | default("Unknown", true) }}</td></tr>
    <tr><th>Service</th><td>{{ data.service_description | default("Not specified", true) }}</td></tr>
    <tr><th>Suggested filename</th><td><code>{{ data.suggested_filename }}</code></td></tr>
  </table>

  {% if data.id_fields %}
  <h2>Identification</h2>
  <table>
    {% for field in data.id_fields %}
    <tr><th>{{ field.name }}</th><td>{{ field.value }}</td></tr>
    {% endfor %}
  </table>
  {% endif %}

  <footer>Processed at {{ processed_at }}</footer>
</body>
</html>
"""


def major_units(amount_minor_units: int | None) -> str:
    """Format minor units as major units with two decimals."""
    if amount_minor_units is None:
        return "0.00"
    return f"{amount_minor_units / 100:.2f}"


def money(amount: float | None, currency: str | None = None) -> str:
    """Format an amount with two decimals and an optional currency code."""
    if amount is None:
        return "0.00"
    if not currency:
        return f"{amount:.2f}"
    return f"{amount:.2f} {currency}"


class HtmlOverviewRenderer:
    """Renders a print-friendly HTML page for an extracted record.

    The renderer only reads the record; it never changes it.
    """

    def __init__(self, currency: str = "SEK", template: str = OVERVIEW_TEMPLATE) -> None:
        self.currency = currency
        self._env = Environment(autoescape=True)
        self._env.filters["major_units"] = major_units
        self._env.filters["money"] = money
        self._template = self._env.from_string(template)

    def render(self, record: ExtractedRecord, processed_at: datetime | None = None) -> str:
        processed_at = processed_at or datetime.now()
        return self._template.render(
            data=record,
            currency=self.currency,
            processed_at=processed_at.strftime("%Y-%m-%d %H:%M:%S"),
        )
