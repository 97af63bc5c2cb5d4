from datetime import date, datetime, timedelta

import pytest

from larder.logic.pantry.freshness import (
    category_class,
    days_in_freezer,
    freezer_age_class,
    is_expired,
    is_expiring_soon,
    parse_date,
)

# Mid-morning so "today" has already started
NOW = datetime(2026, 3, 15, 10, 30)


def _day(offset: int, base: date = NOW.date()) -> str:
    return (base + timedelta(days=offset)).isoformat()


def test_parse_date_is_strict():
    assert parse_date("2026-03-15") == datetime(2026, 3, 15)
    assert parse_date("2026-3-15") is None
    assert parse_date("2026-02-30") is None
    assert parse_date("") is None
    assert parse_date("bad") is None


def test_parse_date_rejects_non_ascii_digits():
    # Arabic-Indic digits for 2026-03-15
    assert parse_date("\u0662\u0660\u0662\u0666-\u0660\u0663-\u0661\u0665") is None
    assert is_expired("\u0662\u0660\u0660\u0660-\u0660\u0661-\u0660\u0661") is False


@pytest.mark.parametrize("value,expected", [
    ("2000-01-01", True),
    ("2999-12-31", False),
    ("", False),
    ("bad", False),
])
def test_is_expired_fixed_dates(value, expected):
    assert is_expired(value) is expected


def test_is_expired_relative_to_now():
    assert is_expired(_day(-1), NOW) is True
    # Expiry day has started, so it counts as expired
    assert is_expired(_day(0), NOW) is True
    assert is_expired(_day(1), NOW) is False


@pytest.mark.parametrize("offset,expected", [
    (-1, False),
    (0, False),
    (1, True),
    (3, True),
    (7, True),
    (8, False),
    (30, False),
])
def test_is_expiring_soon_window(offset, expected):
    assert is_expiring_soon(_day(offset), NOW) is expected


def test_is_expiring_soon_with_real_clock():
    today = date.today()
    assert is_expiring_soon(_day(3, today)) is True
    assert is_expiring_soon(_day(-1, today)) is False
    assert is_expiring_soon(_day(30, today)) is False
    assert is_expiring_soon("") is False
    assert is_expiring_soon("soon") is False


@pytest.mark.parametrize("category,expected", [
    ("Canned Goods", "cat-canned"),
    ("Dry Goods", "cat-dry"),
    ("Spices", "cat-spices"),
    ("Condiments", "cat-condiments"),
    ("Baking", "cat-baking"),
    ("Snacks", "cat-snacks"),
    ("Beverages", "cat-beverages"),
    ("Other", "cat-other"),
    ("Unknown", "cat-other"),
    ("spices", "cat-other"),
    ("", "cat-other"),
])
def test_category_class(category, expected):
    assert category_class(category) == expected


def test_days_in_freezer():
    assert days_in_freezer(_day(-10), NOW) == 10
    assert days_in_freezer(_day(5), NOW) == 0
    assert days_in_freezer("", NOW) == 0
    assert days_in_freezer("yesterday", NOW) == 0


def test_days_in_freezer_with_real_clock():
    assert days_in_freezer(_day(-10, date.today())) in {9, 10, 11}
    assert days_in_freezer(_day(5, date.today())) == 0


@pytest.mark.parametrize("days_ago,expected", [
    (100, "age-old"),
    (91, "age-old"),
    (90, "age-medium"),
    (45, "age-medium"),
    (31, "age-medium"),
    (30, "age-fresh"),
    (10, "age-fresh"),
    (-5, "age-fresh"),
])
def test_freezer_age_class(days_ago, expected):
    assert freezer_age_class(_day(-days_ago), NOW) == expected


def test_freezer_age_class_without_date():
    assert freezer_age_class("") == "age-fresh"
    assert freezer_age_class("not a date") == "age-fresh"
