"""Utilities package."""

from laptop_helpdesk.utils.formatting import (
    format_laptop_options,
    format_order_summary,
    format_search_results,
)
from laptop_helpdesk.utils.helpers import generate_order_id, truncate_text, utc_now
from laptop_helpdesk.utils.logger import setup_logging

__all__ = [
    "setup_logging",
    "generate_order_id",
    "utc_now",
    "truncate_text",
    "format_laptop_options",
    "format_search_results",
    "format_order_summary",
]
