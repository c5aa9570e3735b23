"""Rendering of cell values into query-string text."""

from typing import Any


def render_value(value: Any) -> str:
    """Render a cell value the way the APIs expect to read it."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float) and value.is_integer():
        return str(int(value))
    return str(value)
