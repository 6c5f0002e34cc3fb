import pytest

from campuscravings.pricing import (
    DELIVERY_FEE,
    Mode,
    OrderLine,
    checkout_total,
    classic_price,
    format_line,
    order_amount,
)


@pytest.mark.parametrize(
    "number, price",
    [(1, 60), (2, 60), (3, 65), (4, 50), (5, 60), (6, 60), (7, 50), (8, 60), (9, 50), (10, 60)],
)
def test_classic_prices(number, price):
    assert classic_price(number) == price


@pytest.mark.parametrize("number", [0, 11, -5])
def test_classic_price_rejects_unknown_dish(number):
    with pytest.raises(ValueError):
        classic_price(number)


def test_delivery_fee_is_ten():
    assert DELIVERY_FEE == 10
    assert order_amount(60, 1, Mode.DELIVERY) == 70


@pytest.mark.parametrize("quantity", [1, 2, 5])
def test_delivery_adds_fee_once(quantity):
    delivered = order_amount(60, quantity, Mode.DELIVERY)
    reserved = order_amount(60, quantity, Mode.RESERVATION)
    assert delivered - reserved == DELIVERY_FEE


def test_reservation_is_price_times_quantity():
    assert order_amount(65, 1, Mode.RESERVATION) == 65


def test_mode_accepts_menu_numbers():
    assert order_amount(50, 1, 1) == order_amount(50, 1, Mode.DELIVERY)


def test_checkout_total_sums_amounts():
    lines = [OrderLine("Sisig", 1, 60.0), OrderLine("Menudo", 1, 70.0, Mode.DELIVERY)]
    assert checkout_total(lines) == sum(line.amount for line in lines)


def test_checkout_total_of_nothing_is_zero():
    assert checkout_total([]) == 0


def test_format_line():
    line = OrderLine("Sisig", 3, 180.0)
    assert format_line(line) == "3 \t Sisig \t 180.00"


def test_mode_labels():
    assert Mode(1).label == "Delivery"
    assert Mode(2).label == "Reservation"