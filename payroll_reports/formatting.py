import math
from datetime import datetime
from decimal import ROUND_HALF_UP, Decimal
from typing import Any

from .config import CURRENCY_LABEL


def pdf_safe_text(text: Any) -> str:
    if text is None:
        return ""
    return str(text).encode("latin-1", "replace").decode("latin-1")


def _to_number(value: Any) -> float:
    if value is None:
        return 0.0
    try:
        number = float(value)
    except (TypeError, ValueError):
        return 0.0
    if not math.isfinite(number):
        return 0.0
    return number


def format_amount(amount: Any) -> str:
    """
    Grouped digits with at most three fraction digits and trailing zeros
    dropped, e.g. 500000 -> "500,000" and 1234.5 -> "1,234.5". Halves round
    away from zero on the shortest decimal form of the value, so 0.0625 -> "0.063".
    """
    number = Decimal(repr(_to_number(amount))).quantize(Decimal("0.001"), rounding=ROUND_HALF_UP)
    text = f"{number:,.3f}".rstrip("0").rstrip(".")
    return "0" if text in ("-0", "") else text


def format_currency(amount: Any) -> str:
    return f"{CURRENCY_LABEL} {format_amount(amount)}"


def format_percentage(count: Any, total: Any) -> str:
    denominator = _to_number(total) or 1
    return f"{(_to_number(count) / denominator) * 100:.1f}%"


def format_timestamp(moment: datetime) -> str:
    """Long en-US date-time, e.g. "January 5, 2024 at 03:07 PM"."""
    return f"{moment:%B} {moment.day}, {moment:%Y} at {moment:%I:%M %p}"
