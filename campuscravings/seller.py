"""The seller's screens: account, today's menu, the order log and sales."""

from __future__ import annotations

from typing import Iterable

from .buyer import LINE
from .menus import Day, Schedule
from .storage import DataStore, StorageError
from .terminal import Console

EXIT = "exit"
DASHBOARD = "seller"
WELCOME = "welcome"

_SELLER_PROMPT = "     Verify that you are a seller:\n\n\t1 - Log-In\n\t2 - Register\n\n    : "
_DASHBOARD_PROMPT = (
    "\t1 - Change Food Selection.\n\t2 - View Orders\n\t3 - View Total Sales."
    "\n\t4 - Go back to Welcome Page\n\n   : "
)
_DAY_PROMPT = (
    "\t1 - Sunday\n\t2 - Monday\n\t3 - Tuesday\n\t4 - Wednesday\n\t5 - Thursday"
    "\n\t6 - Friday\n\t7 - Saturday\n   : "
)
_AFTER_PROMPT = "\n1 - Exit.\n2 - Seller Page.\n3 - Go back to the Welcome Page.\n   : "
_LOGIN_PROMPTS = ("Enter the Username: ", "Enter Password: ")
_REGISTER_PROMPTS = ("Enter your name: ", "Create your password: ")


class SellerFlow:
    """Walks a seller through logging in and managing the canteen."""

    def __init__(self, console: Console, store: DataStore, schedule: Schedule) -> None:
        self.console = console
        self.store = store
        self.schedule = schedule

    def _choose(self, prompt: str, options: Iterable[int]) -> int:
        allowed = set(options)
        while True:
            answer = self.console.read_int(prompt)
            if answer in allowed:
                return answer
            self.console.clear()
            self.console.show("Invalid Input. Try again.\n")

    def _ask_pair(self, prompts: tuple[str, str]) -> tuple[str, str]:
        first, second = prompts
        return self.console.read_line(first), self.console.read_line(second)

    def run(self) -> bool:
        """Run the seller's session; True means go back to the welcome page."""
        self.console.clear()
        self.console.show("\t\t\t\t-- S E L L E R --\n\n")
        choice = self._choose(_SELLER_PROMPT, (1, 2))
        self.console.clear()
        if choice == 2 and not self.register():
            return False
        if not self.login():
            return False
        return self.dashboard()

    def login(self) -> bool:
        """Ask for the seller's name and password and check them."""
        self.console.clear()
        self.console.show("\t\t\t\t-- L O G I N --\n\n")
        name, entered = self._ask_pair(_LOGIN_PROMPTS)
        if self.store.check_login(name, entered):
            self.console.show("Login Successful\n")
            return True
        self.console.show("Incorrect username or password\n")
        return False

    def register(self) -> bool:
        """Create the seller account, replacing any earlier one."""
        self.console.show("\t\t\t\t-- R E G I S T R A T I O N --\n\n")
        name, chosen = self._ask_pair(_REGISTER_PROMPTS)
        try:
            self.store.register_seller(name, chosen)
        except StorageError as error:
            self.console.show(f"Error opening file: {error}\n")
            return False
        self.console.show("\nRegistration Successful\n")
        while self.console.read_int("\nPress 1 to continue to login page: ") != 1:
            pass
        self.console.clear()
        return True

    def dashboard(self) -> bool:
        """Seller's main page; True means go back to the welcome page."""
        while True:
            self.console.show("\t\t\t-- W E L C O M E  S E L L E R --\n")
            self.console.show(LINE)
            self.console.show("   What would you like to do?\n\n")
            choice = self._choose(_DASHBOARD_PROMPT, (1, 2, 3, 4))
            self.console.clear()
            if choice == 1:
                self.change_menu()
            elif choice == 2:
                self.view_orders()
            elif choice == 3:
                try:
                    self.show_total_sales()
                except StorageError as error:
                    self.console.show(f"Error opening file for reading: {error}\n")
                    return False
            else:
                self.console.show("Going back to the Welcome Page...")
                self.console.clear()
                return True
            following = self.after_action()
            if following == EXIT:
                return False
            if following == WELCOME:
                return True

    def change_menu(self) -> Day:
        """Ask which day it is and offer that day's menu."""
        while True:
            self.console.show("\t\t\t-- M E N U  S E L E C T I O N --\n")
            self.console.show(LINE)
            self.console.show("    What day is it today?\n\n")
            answer = self.console.read_int(_DAY_PROMPT)
            try:
                day = self.schedule.set_day(answer)
            except ValueError:
                self.console.clear()
                self.console.show("Invalid input. Try again.\n")
                continue
            self.console.show("Menu is changed.\n")
            return day

    def view_orders(self) -> str:
        """Show the whole order log and return its text."""
        self.console.clear()
        try:
            text = self.store.read_orders()
        except StorageError:
            self.console.show("No orders yet.\n")
            return ""
        self.console.show(text)
        return text

    def show_total_sales(self) -> int:
        """Show the sum of all logged sales; StorageError if none are logged."""
        total = self.store.total_sales()
        self.console.show("-- V I E W I N G  T O T A L  S A L E S --")
        self.console.show(LINE)
        self.console.show(f"Total Sales: {total}\n")
        return total

    def after_action(self) -> str:
        """Ask what to do next: EXIT, DASHBOARD or WELCOME."""
        choices = {1: EXIT, 2: DASHBOARD, 3: WELCOME}
        while True:
            self.console.show(LINE)
            answer = self.console.read_int(_AFTER_PROMPT)
            if answer in choices:
                return choices[answer]
            self.console.clear()
            self.console.show("Invalid Input. Please try again.\n")