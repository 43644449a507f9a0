"""Analysis and reporting modules."""

from .report import SUMMARY_COLUMNS, format_listing, summary_table

__all__ = [
    "format_listing",
    "summary_table",
    "SUMMARY_COLUMNS",
]
