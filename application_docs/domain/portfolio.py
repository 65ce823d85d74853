"""Portfolio aggregation across an application's products"""

from decimal import Decimal
from itertools import chain
from typing import Iterable, Tuple

from application_docs.domain.models import Fund, Product


def flatten_funds(products: Iterable[Product]) -> Tuple[Fund, ...]:
    """Flatten products into a single sequence of funds, preserving order"""
    return tuple(chain.from_iterable(product.funds for product in products))


def calculate_portfolio_total(funds: Iterable[Fund], tax_rate: Decimal) -> Decimal:
    """
    Total value of the portfolio net of fees, taxed at the configured rate.

    Computes sum((amount - fees) * tax_rate) with Decimal arithmetic and no
    rounding. An empty portfolio totals zero.

    Example:
        [Fund(amount=100, fees=10)], tax_rate=0.15 -> 13.5
    """
    return sum(
        ((fund.amount - fund.fees) * tax_rate for fund in funds),
        Decimal("0"),
    )
