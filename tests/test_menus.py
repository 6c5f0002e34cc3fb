import pytest

from campuscravings.menus import (
    UNIT_PRICE,
    Day,
    Schedule,
    format_menu,
    menu_for,
    parse_day,
    pick_meal,
)


def test_every_day_has_ten_dishes():
    for day in Day:
        assert len(menu_for(day)) == 10


def test_sunday_menu_starts_with_sisig_and_ends_with_dinuguan():
    dishes = menu_for(Day.SUNDAY)
    assert dishes[0] == "Sisig"
    assert dishes[-1] == "Dinuguan"


def test_menu_for_accepts_plain_numbers():
    assert menu_for(2) == menu_for(Day.MONDAY)


def test_format_menu_lines():
    lines = format_menu(Day.SATURDAY).splitlines()
    assert lines[0] == "1. Sisig - 60"
    assert lines[9] == "10. Papaitan - 60"
    assert all(line.endswith(f" - {UNIT_PRICE}") for line in lines)


def test_format_menu_contains_every_dish_in_order():
    text = format_menu(Day.FRIDAY)
    positions = [text.index(dish) for dish in menu_for(Day.FRIDAY)]
    assert positions == sorted(positions)


@pytest.mark.parametrize("day", list(Day))
def test_pick_meal_matches_menu(day):
    for number, dish in enumerate(menu_for(day), start=1):
        assert pick_meal(day, number) == dish


def test_pick_meal_known_value():
    assert pick_meal(Day.MONDAY, 3) == "Tokwa't Baboy"


@pytest.mark.parametrize("number", [0, 11, -1])
def test_pick_meal_out_of_range(number):
    with pytest.raises(ValueError):
        pick_meal(Day.SUNDAY, number)


def test_parse_day_from_text_and_int():
    assert parse_day("7") is Day.SATURDAY
    assert parse_day(" 1 ") is Day.SUNDAY
    assert parse_day(4) is Day.WEDNESDAY


@pytest.mark.parametrize("value", [0, 8, -3, "abc", ""])
def test_parse_day_rejects_bad_values(value):
    with pytest.raises(ValueError):
        parse_day(value)


def test_schedule_defaults_to_sunday():
    assert Schedule().todays_menu() == menu_for(Day.SUNDAY)


def test_schedule_set_day_changes_menu():
    schedule = Schedule()
    assert schedule.set_day("3") is Day.TUESDAY
    assert schedule.todays_menu()[0] == "Chopseuy"


def test_schedule_set_day_invalid_keeps_previous_day():
    schedule = Schedule(Day.THURSDAY)
    with pytest.raises(ValueError):
        schedule.set_day(9)
    assert schedule.day is Day.THURSDAY