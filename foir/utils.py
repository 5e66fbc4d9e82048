"""Assorted utility helpers."""
from __future__ import annotations

import math

from foir.presets import CURRENCY_SYMBOL


def nz(x, default=0.0):
    """Return a float for ``x`` or a fallback value.

    Form widgets hand back empty strings, ``None`` or ``NaN`` while a field is
    being edited.  This helper mirrors the spreadsheet ``NZ()`` function so a
    half-typed value reads as zero instead of breaking the calculation.
    Infinite values are treated the same way.
    """

    try:
        if x is None:
            return default
        value = float(x)
    except (TypeError, ValueError, OverflowError):
        return default
    if not math.isfinite(value):
        return default
    return value


def format_money(amount, symbol=CURRENCY_SYMBOL):
    """Format an amount with a currency symbol and thousands separators."""
    value = nz(amount)
    sign = "-" if value < 0 else ""
    return f"{sign}{symbol}{abs(value):,.2f}"
