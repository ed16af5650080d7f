# app/domain/money.py
"""
Integer-cents helpers. Prices, totals and price_at_time are always whole
numbers of the smallest currency unit; nothing here touches floats.
"""
from typing import Iterable


def _require_int(value, name: str) -> int:
    #bool is an int subclass, refuse it explicitly
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} must be an integer, got {type(value).__name__}")
    return value


def line_total(unit_price: int, quantity: int) -> int:
    unit_price = _require_int(unit_price, "unit_price")
    quantity = _require_int(quantity, "quantity")
    if unit_price < 0:
        raise ValueError("unit_price cannot be negative")
    if quantity < 1:
        raise ValueError("quantity must be at least 1")
    return unit_price * quantity


def sum_cents(amounts: Iterable[int]) -> int:
    total = 0
    for amount in amounts:
        total += _require_int(amount, "amount")
    return total


def format_cents(cents: int, symbol: str = "$") -> str:
    cents = _require_int(cents, "cents")
    sign = "-" if cents < 0 else ""
    whole, frac = divmod(abs(cents), 100)
    return f"{sign}{symbol}{whole:,}.{frac:02d}"
