"""Template filters for money and dates. Never render raw Decimals."""

from datetime import date
from decimal import Decimal
from typing import Any


def format_currency(value: Decimal | None, symbol: str = "R", precision: int = 2) -> str:
    if value is None:
        return "-"
    return f"{symbol} {Decimal(value):,.{precision}f}"


def format_date(d: Any) -> str:
    if d is None:
        return "-"
    if isinstance(d, date):
        return d.strftime("%d %B %Y")
    return str(d).strip() or "-"
