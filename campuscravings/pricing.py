"""Prices, delivery charges and checkout totals."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Iterable

DELIVERY_FEE = 10

_CLASSIC_PRICES = {1: 60, 2: 60, 3: 65, 4: 50, 5: 60, 6: 60, 7: 50, 8: 60, 9: 50, 10: 60}


class Mode(IntEnum):
    """How the buyer receives the food."""

    DELIVERY = 1
    RESERVATION = 2

    @property
    def label(self) -> str:
        return self.name.capitalize()


@dataclass(frozen=True)
class OrderLine:
    """One item on a buyer's order."""

    meal: str
    quantity: int
    amount: float
    mode: Mode = Mode.RESERVATION


def classic_price(number: int) -> int:
    """Price of dish ``number`` on the fixed menu with per-dish prices."""
    try:
        return _CLASSIC_PRICES[number]
    except KeyError:
        raise ValueError(f"no dish numbered {number}") from None


def order_amount(unit_price: float, quantity: int, mode: Mode) -> float:
    """Amount due for ``quantity`` items; delivery adds a flat fee once."""
    amount = unit_price * quantity
    if Mode(mode) is Mode.DELIVERY:
        amount += DELIVERY_FEE
    return amount


def checkout_total(lines: Iterable[OrderLine]) -> float:
    """Sum of the amounts of all order lines."""
    return sum((line.amount for line in lines), 0.0)


def format_line(line: OrderLine) -> str:
    """Render an order line as shown on the checkout screen."""
    return f"{line.quantity} \t {line.meal} \t {line.amount:.2f}"