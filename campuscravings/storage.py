"""Files kept by the canteen: seller account, orders, receipts and sales."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Union

from .pricing import Mode


class StorageError(Exception):
    """Raised when a data file cannot be read or written."""


@dataclass(frozen=True)
class OrderRecord:
    """One order as it is logged for the seller."""

    name: str
    buyer_id: str
    mode: Mode
    meal: str
    quantity: int
    amount: float

    def to_text(self) -> str:
        """Render the record as it appears in the order log."""
        return (
            f"Name: {self.name}\n"
            f"Id-Number: {self.buyer_id}\n"
            f"Mode : {Mode(self.mode).label}\n"
            f"Order : {self.meal}\n"
            f"Quantity: {self.quantity}\n"
            f"Total Price: {self.amount:.2f}\n"
        )

    def receipt_text(self) -> str:
        """Render the buyer's receipt."""
        return (
            f"Order : {self.meal}\n"
            f"Quantity: {self.quantity}\n"
            f"Total Price: {self.amount:.2f}\n"
            f"Mode : {Mode(self.mode).label}"
        )


class DataStore:
    """All data files, kept under one root directory."""

    def __init__(self, root: Union[str, Path]) -> None:
        self.root = Path(root)
        self.seller_file = self.root / "sellerdata" / "seller.txt"
        self.orders_file = self.root / "orderdata" / "ORDER.txt"
        self.sales_file = self.root / "totalsales" / "sales.txt"
        self.delivery_dir = self.root / "deliverydata"
        self.reservation_dir = self.root / "reservationdata"

    @staticmethod
    def _write(path: Path, text: str, mode: str) -> None:
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            with path.open(mode, encoding="utf-8") as handle:
                handle.write(text)
        except OSError as error:
            raise StorageError(f"cannot write {path}: {error}") from error

    @staticmethod
    def _read(path: Path, what: str) -> str:
        try:
            return path.read_text(encoding="utf-8")
        except OSError as error:
            raise StorageError(f"cannot read {what} from {path}: {error}") from error

    def register_seller(self, name: str, password: str) -> None:
        """Store the seller account, replacing any earlier one."""
        self._write(self.seller_file, f"{name}\n{password}\n", "w")

    def check_login(self, name: str, password: str) -> bool:
        """True when name and password match the registered seller."""
        try:
            lines = self.seller_file.read_text(encoding="utf-8").splitlines()
        except OSError:
            return False
        if len(lines) < 2:
            return False
        return name == lines[0] and password == lines[1]

    def write_receipt(self, record: OrderRecord) -> Path:
        """Write the buyer's receipt into the folder of its mode."""
        if not record.name or any(sep in record.name for sep in ("/", "\\")):
            raise StorageError(f"unusable buyer name for a receipt: {record.name!r}")
        folder = self.delivery_dir if Mode(record.mode) is Mode.DELIVERY else self.reservation_dir
        path = folder / f"Order_{record.name}.txt"
        self._write(path, record.receipt_text(), "w")
        return path

    def append_order(self, record: OrderRecord) -> None:
        """Add the record to the order log."""
        self._write(self.orders_file, record.to_text(), "a")

    def append_address(self, address: str) -> None:
        """Add a delivery address after the last logged order."""
        self._write(self.orders_file, f"Address : {address}\n\n", "a")

    def read_orders(self) -> str:
        """Whole text of the order log."""
        return self._read(self.orders_file, "orders")

    def record_sale(self, total: float) -> None:
        """Log a checkout total, in whole pesos."""
        self._write(self.sales_file, f"{int(total)}\n", "a")

    def total_sales(self) -> int:
        """Sum of all logged sales, stopping at the first unreadable entry."""
        text = self._read(self.sales_file, "sales")
        total = 0
        for token in text.split():
            try:
                total += int(token)
            except ValueError:
                break
        return total