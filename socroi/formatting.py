"""Display formatting for currency and percentage figures."""

from __future__ import annotations

import math


def format_currency(amount: float) -> str:
    """Whole US dollars with thousands separators, e.g. ``-$1,234``.

    Halves round away from zero.
    """
    whole = math.floor(abs(amount) + 0.5)
    sign = "-" if amount < 0 and whole else ""
    return f"{sign}${whole:,}"


def format_percentage(value: float, total: float) -> str:
    """``value`` as a one-decimal share of ``total``; ``0.0%`` for a zero total."""
    if total == 0:
        return "0.0%"
    return f"{value / total * 100:.1f}%"
