"""Daily menus of the canteen and the seller-controlled choice of today's menu."""

from __future__ import annotations

from enum import IntEnum
from typing import Union

UNIT_PRICE = 60


class Day(IntEnum):
    """Days of the week, numbered as the seller picks them."""

    SUNDAY = 1
    MONDAY = 2
    TUESDAY = 3
    WEDNESDAY = 4
    THURSDAY = 5
    FRIDAY = 6
    SATURDAY = 7

    @property
    def label(self) -> str:
        return self.name.capitalize()


_MENUS: dict[Day, tuple[str, ...]] = {
    Day.SUNDAY: (
        "Sisig", "Menudo", "Paksiw", "Pakbet", "Adobong Manok",
        "Kaldereta", "Kare-kare", "Sinigang", "Fried Chicken", "Dinuguan",
    ),
    Day.MONDAY: (
        "Tinola", "Adobong Baboy", "Tokwa't Baboy", "Lechon Kawali", "Adobong Manok",
        "Sinampalucan", "Beef Broccoli", "Mechado", "Bistek", "Tapa",
    ),
    Day.TUESDAY: (
        "Chopseuy", "Ginataang Kalabasa", "Laing", "Sisig", "Adobong Manok",
        "Tinola", "Kare-kare", "Mechado", "Fried Chicken", "Dinuguan",
    ),
    Day.WEDNESDAY: (
        "Lechon Kawali", "Chopseuy", "Laing", "Pakbet", "Adobong Baboy",
        "Afritada", "Beef Broccoli", "Sinigang", "Tinola", "Bistek",
    ),
    Day.THURSDAY: (
        "Afritada", "Bistek", "Paksiw", "Adobong Sitaw", "Tortang Talong",
        "Menudo", "Kare-kare", "Sisig", "Tokwa't Baboy", "Tapa",
    ),
    Day.FRIDAY: (
        "Ginisang Ampalaya", "Ginataang Kalabasa", "Adobong Manok", "Adobong Baboy",
        "Adobong Sitaw", "Kaldereta", "Menudo", "Sinigang", "Sinampalucan",
        "Fried Chicken",
    ),
    Day.SATURDAY: (
        "Sisig", "Bistek", "Paksiw", "Tortang Talong", "Tinola",
        "Sinigang na Bangus", "Kare-kare", "Nilagang Baboy", "Fried Chicken",
        "Papaitan",
    ),
}


def menu_for(day: Union[Day, int]) -> tuple[str, ...]:
    """Return the dishes served on ``day``."""
    return _MENUS[Day(day)]


def format_menu(day: Union[Day, int]) -> str:
    """Render the numbered menu of ``day`` with its prices."""
    return "".join(
        f"{number}. {dish} - {UNIT_PRICE}\n"
        for number, dish in enumerate(menu_for(day), start=1)
    )


def pick_meal(day: Union[Day, int], number: int) -> str:
    """Return the dish with the 1-based ``number`` on the menu of ``day``."""
    dishes = menu_for(day)
    if not 1 <= number <= len(dishes):
        raise ValueError(f"meal number must be between 1 and {len(dishes)}, got {number}")
    return dishes[number - 1]


def parse_day(value: Union[Day, int, str]) -> Day:
    """Turn a seller's answer (1 = Sunday ... 7 = Saturday) into a Day."""
    if isinstance(value, str):
        text = value.strip()
        try:
            value = int(text)
        except ValueError:
            raise ValueError(f"not a day number: {text!r}") from None
    try:
        return Day(value)
    except ValueError:
        raise ValueError(f"day must be between 1 and 7, got {value}") from None


class Schedule:
    """Holds which day's menu is currently offered to buyers."""

    def __init__(self, day: Union[Day, int, str] = Day.SUNDAY) -> None:
        self.day = parse_day(day)

    def set_day(self, value: Union[Day, int, str]) -> Day:
        """Change today's menu; raises ValueError for an unknown day."""
        self.day = parse_day(value)
        return self.day

    def todays_menu(self) -> tuple[str, ...]:
        """Dishes offered under the current setting."""
        return menu_for(self.day)