"""Shared helpers for line totals, order totals and change."""
from __future__ import annotations

from decimal import ROUND_HALF_UP, Decimal
from typing import Iterable


def to_money(value: Decimal | int | float | str | None) -> Decimal:
    if value is None:
        return Decimal("0")
    if isinstance(value, Decimal):
        return value
    # str() keeps 35.9 as Decimal("35.9") instead of its binary expansion
    return Decimal(str(value))


def quantize_money(value: Decimal | int | float | str, decimals: int = 2) -> Decimal:
    exponent = Decimal(1).scaleb(-decimals)
    return to_money(value).quantize(exponent, rounding=ROUND_HALF_UP)


def calc_line_total(unit_price: Decimal | int | float, quantity: int) -> Decimal:
    return to_money(unit_price) * quantity


def calc_items_total(lines: Iterable[tuple[Decimal, int]]) -> Decimal:
    total = Decimal("0")
    for unit_price, quantity in lines:
        total += calc_line_total(unit_price, quantity)
    return total


def calc_total_price(items_total: Decimal | int | float, delivery_fee: Decimal | int | float) -> Decimal:
    return to_money(items_total) + to_money(delivery_fee)


def calc_change(total: Decimal, change_for: Decimal | None) -> Decimal | None:
    """Change owed for cash payments; None when no change was requested."""
    if change_for is None:
        return None
    return max(Decimal("0"), to_money(change_for) - to_money(total))
