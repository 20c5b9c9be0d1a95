"""
Money helpers - Domain Service

All monetary arithmetic runs on ``Decimal`` at full precision. Rounding to
cents happens only here, when a value is emitted.
"""

from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal, InvalidOperation, localcontext
from typing import Iterable, Union

CENT = Decimal("0.01")

Numeric = Union[Decimal, int, float, str]


def to_decimal(value: Numeric) -> Decimal:
    """Convert a raw numeric value (as stored or received) to ``Decimal``."""
    if isinstance(value, Decimal):
        return value
    if isinstance(value, float):
        # repr() keeps the shortest round-tripping form, e.g. 0.1 -> "0.1"
        return Decimal(repr(value))
    try:
        return Decimal(value)
    except InvalidOperation as exc:
        raise ValueError(f"Not a monetary value: {value!r}") from exc


def round_money(value: Numeric) -> Decimal:
    """
    Round to two decimal places, half away from zero.

    Precision grows with the magnitude so large projections keep their cents;
    infinite and NaN values are returned unchanged.
    """
    amount = to_decimal(value)
    if not amount.is_finite():
        return amount
    with localcontext() as context:
        context.prec = max(context.prec, amount.adjusted() + 3)
        return amount.quantize(CENT, rounding=ROUND_HALF_UP)


def money_sum(values: Iterable[Decimal]) -> Decimal:
    return sum(values, Decimal(0))


def to_json_number(value: Numeric) -> float:
    """Rounded representation used in API payloads."""
    return float(round_money(value))
