"""
Date normalization for API query parameters.

The remote APIs expect dates as DD/MM/YYYY.
"""

from typing import Any

from grana_sheets.models import LiteralDate, as_date_input
from grana_sheets.utils.values import render_value


def normalize_date(value: Any) -> str:
    """
    Render a date argument as DD/MM/YYYY.

    LiteralDate (and plain strings) pass through untouched; callers are
    trusted to supply the right format. StructuredDate (and date objects)
    get day and month zero-padded to two digits; the year is not padded.
    Anything else, including None for an empty cell, is sent as its
    rendered text without validation.

    Args:
        value: A DateInput, a str, a datetime.date, or any other cell value

    Returns:
        The date string to send to the API
    """
    date = as_date_input(value)
    if date is None:
        return render_value(value)

    if isinstance(date, LiteralDate):
        return date.text

    day = f"0{date.day}" if date.day < 10 else str(date.day)
    month = f"0{date.month}" if date.month < 10 else str(date.month)
    return f"{day}/{month}/{date.year}"
