"""Utility helper functions."""

import time
import uuid
from datetime import UTC, datetime


def generate_order_id(prefix: str = "PO") -> str:
    """Generate a unique order identifier, e.g. ``PO-1718000000000-3F9A1C``."""
    millis = time.time_ns() // 1_000_000
    return f"{prefix}-{millis}-{uuid.uuid4().hex[:6].upper()}"


def utc_now() -> datetime:
    """Current time as an aware UTC datetime."""
    return datetime.now(UTC)


def truncate_text(text: str, max_length: int = 100, suffix: str = "...") -> str:
    """Truncate text to maximum length."""
    if len(text) <= max_length:
        return text
    return text[: max_length - len(suffix)] + suffix
