"""HTML rendering of extracted records."""

from receipt_extractor.rendering.html import HtmlOverviewRenderer

__all__ = ["HtmlOverviewRenderer"]
