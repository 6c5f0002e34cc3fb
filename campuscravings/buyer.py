"""The buyer's screens: details, ordering from today's menu and checkout."""

from __future__ import annotations

from typing import Iterable

from .menus import UNIT_PRICE, Schedule, format_menu, pick_meal
from .pricing import Mode, OrderLine, checkout_total, format_line, order_amount
from .storage import DataStore, OrderRecord, StorageError
from .terminal import Console

LINE = "-" * 83 + "\n"

EXIT = "exit"
ORDER_AGAIN = "order"
WELCOME = "welcome"

_INVALID = "Invalid input. Try again.\n"


class BuyerFlow:
    """Walks a buyer through ordering, checkout and what comes after."""

    def __init__(self, console: Console, store: DataStore, schedule: Schedule) -> None:
        self.console = console
        self.store = store
        self.schedule = schedule
        self.name = ""
        self.buyer_id = ""
        self.lines: list[OrderLine] = []

    def _choose(self, prompt: str, options: Iterable[int], invalid: str = _INVALID) -> int:
        allowed = set(options)
        while True:
            answer = self.console.read_int(prompt)
            if answer in allowed:
                return answer
            self.console.show(invalid)

    def run(self) -> bool:
        """Run the buyer's session; True means go back to the welcome page."""
        self.take_details()
        self.console.clear()
        while True:
            self.take_order()
            while self._choose(
                "Would you like to order again?\n1 - Yes.\n2 - No, proceed to check out.\n: ",
                (1, 2),
                "Invalid Input. Please try again.\n",
            ) == 1:
                self.take_order()
            self.checkout()
            choice = self.after_order()
            if choice != ORDER_AGAIN:
                return choice == WELCOME

    def take_details(self) -> tuple[str, str]:
        """Ask for the buyer's name and ID number."""
        self.console.show("\t\t\t\t-- B U Y E R --\n")
        self.console.show(LINE)
        self.name = self.console.read_line("Enter your name: ")
        self.buyer_id = self.console.read_line("ID-Number: ")
        return self.name, self.buyer_id

    def _read_meal(self) -> str:
        while True:
            number = self.console.read_int("Enter the number of the meal you want to order: ")
            try:
                return pick_meal(self.schedule.day, number)
            except ValueError:
                self.console.show(_INVALID)

    def _read_quantity(self) -> int:
        while True:
            quantity = self.console.read_int("Enter the quantity: ")
            if quantity >= 1:
                return quantity
            self.console.show(_INVALID)

    def take_order(self) -> OrderLine:
        """Show today's menu, take one item and log it."""
        show = self.console.show
        show("-- W E L C O M E ! - - \n")
        show(LINE)
        show("\nThe menu for today is: \n\n")
        show(format_menu(self.schedule.day))
        show(LINE)
        mode = Mode(self._choose(
            "How would you like to receive your food?\n"
            "1 - Delivery (plus 10 pesos)\n2 - Reservation\n   :",
            (Mode.DELIVERY, Mode.RESERVATION),
        ))
        show(LINE)
        meal = self._read_meal()
        show(f"Order: {meal}\n")
        quantity = self._read_quantity()
        amount = order_amount(UNIT_PRICE, quantity, mode)

        record = OrderRecord(self.name, self.buyer_id, mode, meal, quantity, amount)
        try:
            self.store.write_receipt(record)
        except StorageError as error:
            show(f"Could not save the receipt: {error}\n")
        self.store.append_order(record)

        line = OrderLine(meal, quantity, amount, mode)
        self.lines.append(line)
        return line

    def checkout(self) -> float:
        """Show the ordered items, log the sale and take a delivery address."""
        show = self.console.show
        self.console.clear()
        show("-- C H E C K  O U T  S C R E E N --\n")
        show(LINE)
        show("You ordered the following items:\n")
        for line in self.lines:
            show(format_line(line) + "\n")
        total = checkout_total(self.lines)
        show(f"\nTotal: {total:.2f}\n")
        self.store.record_sale(total)
        show(LINE)
        if any(line.mode is Mode.DELIVERY for line in self.lines):
            address = self.console.read_line("Enter your delivery address: ")
            self.store.append_address(address)
        self.lines = []
        return total

    def after_order(self) -> str:
        """Ask what to do next: EXIT, ORDER_AGAIN or WELCOME."""
        choices = {1: EXIT, 2: ORDER_AGAIN, 3: WELCOME}
        while True:
            self.console.show("Thank you for ordering! Your order will be done soon.\n")
            answer = self.console.read_int(
                "\n1 - Exit.\n2 - Order again.\n3 - Go back to the Welcome Page.\n   : "
            )
            if answer in choices:
                return choices[answer]