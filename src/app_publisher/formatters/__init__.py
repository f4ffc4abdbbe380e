"""Output formatters for listing reports and publishing guides."""

from app_publisher.formatters.report import (
    format_error,
    format_field,
    format_listing_report,
    format_publishing_guide,
)

__all__ = [
    "format_error",
    "format_field",
    "format_listing_report",
    "format_publishing_guide",
]
