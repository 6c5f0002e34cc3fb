"""Entry point: the welcome page that sends people to the buyer or seller screens."""

from __future__ import annotations

import argparse
from enum import IntEnum
from pathlib import Path
from typing import Optional, Sequence

from .buyer import LINE, BuyerFlow
from .menus import Schedule, parse_day
from .seller import SellerFlow
from .storage import DataStore
from .terminal import Console

_ROLE_PROMPT = "     Are you a:\n\n\t1 - Buyer\n\t2 - Seller\n\n    : "
_DEFAULT_ROOT = Path.home() / ".campuscravings"


class Navigation(IntEnum):
    """Where the welcome page sends the visitor."""

    BUYER = 1
    SELLER = 2


class App:
    """The whole interactive program: welcome page, buyer and seller screens."""

    def __init__(self, console: Console, store: DataStore, schedule: Schedule) -> None:
        self.console = console
        self.store = store
        self.schedule = schedule

    def welcome(self) -> Navigation:
        """Show the welcome page and ask whether the visitor buys or sells."""
        show = self.console.show
        show(LINE)
        show("\t\t\t-- C A M P U S  C R A V I N G S --\n")
        show(LINE)
        show("\n\t\tWelcome to the Alumni Canteen Food Ordering System.\n\n")
        while True:
            answer = self.console.read_int(_ROLE_PROMPT)
            try:
                choice = Navigation(answer)
            except ValueError:
                self.console.clear()
                show("Invalid input. Try again.\n")
                continue
            self.console.clear()
            return choice

    def _goodbye(self) -> None:
        self.console.clear()
        self.console.show(LINE)
        self.console.show("\t\t\t\tT H A N K  Y O U\n")
        self.console.show(LINE)

    def run(self) -> None:
        """Serve visitors until one of them chooses to leave."""
        while True:
            if self.welcome() is Navigation.BUYER:
                flow = BuyerFlow(self.console, self.store, self.schedule)
            else:
                flow = SellerFlow(self.console, self.store, self.schedule)
            if not flow.run():
                self._goodbye()
                return


def _day_argument(value: str):
    try:
        return parse_day(value)
    except ValueError as error:
        raise argparse.ArgumentTypeError(str(error)) from None


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Start the food ordering system on the terminal."""
    parser = argparse.ArgumentParser(
        prog="campuscravings",
        description="Food ordering system of the alumni canteen.",
    )
    parser.add_argument(
        "--data-dir",
        type=Path,
        default=_DEFAULT_ROOT,
        help="directory holding the seller account, orders and sales",
    )
    parser.add_argument(
        "--day",
        type=_day_argument,
        default=1,
        help="menu offered at start, 1 = Sunday ... 7 = Saturday",
    )
    args = parser.parse_args(argv)

    app = App(Console(), DataStore(args.data_dir), Schedule(args.day))
    try:
        app.run()
    except (EOFError, KeyboardInterrupt):
        app.console.show("\n")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())