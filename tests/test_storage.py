import pytest

from campuscravings.pricing import Mode
from campuscravings.storage import DataStore, OrderRecord, StorageError


def _record(mode=Mode.DELIVERY, name="Juan"):
    return OrderRecord(
        name=name, buyer_id="2021-0001", mode=mode, meal="Sisig", quantity=2, amount=130.0
    )


@pytest.fixture
def store(tmp_path):
    return DataStore(tmp_path)


def test_order_record_text_format():
    text = _record().to_text()
    assert text.splitlines() == [
        "Name: Juan",
        "Id-Number: 2021-0001",
        "Mode : Delivery",
        "Order : Sisig",
        "Quantity: 2",
        "Total Price: 130.00",
    ]


def test_register_and_login(store):
    password = "password"
    store.register_seller("Maria", password)
    assert store.check_login("Maria", password) is True
    assert store.check_login("Maria", "secret") is False
    assert store.check_login("maria", password) is False


def test_register_replaces_previous_seller(store):
    store.register_seller("Maria", "password")
    store.register_seller("Pedro", "secret")
    assert store.check_login("Maria", "password") is False
    assert store.check_login("Pedro", "secret") is True


def test_login_without_registration_fails(store):
    assert store.check_login("", "") is False


def test_receipt_goes_to_mode_folder(store):
    delivery = store.write_receipt(_record(Mode.DELIVERY))
    reservation = store.write_receipt(_record(Mode.RESERVATION, name="Ana"))
    assert delivery.parent.name == "deliverydata"
    assert reservation.parent.name == "reservationdata"
    assert delivery.name == "Order_Juan.txt"
    assert delivery.read_text(encoding="utf-8").endswith("Mode : Delivery")
    assert "Order : Sisig\n" in reservation.read_text(encoding="utf-8")


def test_receipt_rejects_path_in_name(store):
    with pytest.raises(StorageError):
        store.write_receipt(_record(name="../x"))


def test_orders_are_appended_in_order(store):
    first = _record()
    second = _record(Mode.RESERVATION, name="Ana")
    store.append_order(first)
    store.append_address("Science City")
    store.append_order(second)
    assert store.read_orders() == (
        first.to_text() + "Address : Science City\n\n" + second.to_text()
    )


def test_read_orders_missing_raises(store):
    with pytest.raises(StorageError):
        store.read_orders()


def test_sales_sum_whole_pesos(store):
    store.record_sale(130.0)
    store.record_sale(60.9)
    assert store.sales_file.read_text(encoding="utf-8") == "130\n60\n"
    assert store.total_sales() == 130 + 60


def test_total_sales_missing_raises(store):
    with pytest.raises(StorageError):
        store.total_sales()


def test_total_sales_stops_at_bad_entry(store):
    store.sales_file.parent.mkdir(parents=True)
    store.sales_file.write_text("10\n20\nabc\n30\n", encoding="utf-8")
    assert store.total_sales() == 10 + 20