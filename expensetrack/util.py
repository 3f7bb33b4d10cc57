"""Date and currency formatting helpers."""

from __future__ import annotations

from datetime import datetime

DATE_FORMAT = "%Y-%m-%d"


def get_today(fmt: str = DATE_FORMAT) -> str:
    """Return the current local date formatted with a strftime pattern."""
    return datetime.now().strftime(fmt)


def format_currency(amount: float) -> str:
    """Format an amount with exactly two decimal places."""
    return f"{amount:.2f}"