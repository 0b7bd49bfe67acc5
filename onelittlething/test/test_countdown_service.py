"""
Tests para la tarjeta de cuenta regresiva del embarazo.
"""

from datetime import date, datetime, timedelta

import pytest

from onelittlething.services.countdown_service import CountdownService, format_weeks_and_days
from onelittlething.utils.baby_sizes import BABY_SIZES, get_baby_size_items, pick_baby_size

DUE = "2025-06-15"


def at(day: date) -> datetime:
    return datetime(day.year, day.month, day.day, 9, 30)


@pytest.mark.parametrize(
    "total_days,expected",
    [(0, "0 days"), (1, "1 day"), (6, "6 days"), (7, "1 week"), (14, "2 weeks"), (15, "2 weeks, 1 day"), (107, "15 weeks, 2 days")],
)
def test_format_weeks_and_days(total_days, expected):
    assert format_weeks_and_days(total_days) == expected


def test_normal_week_card():
    card = CountdownService.build_countdown(DUE, "Mia", now=at(date(2025, 3, 1)))

    assert card["meta"]["week"] == 26
    assert card["meta"]["status"] == "normal"
    assert card["size_item"] == {"name": "Lettuce head", "icon": "🥬"}
    assert card["can_cycle"] is True
    assert card["weeks_until_term"] == 11
    assert card["pct_to_due"] == 62.5
    assert card["days_until_term"] == 85
    assert card["headline"] == "Week 26"
    assert card["sub"] == "Mia is the size of Lettuce head"
    assert card["details"] == ["15 weeks, 2 days until due date", "12 weeks, 1 day until term"]


@pytest.mark.parametrize("index,expected", [(1, "Scallions"), (2, "Lettuce head"), (-1, "Scallions")])
def test_item_index_cycles(index, expected):
    card = CountdownService.build_countdown(DUE, "Mia", now=at(date(2025, 3, 1)), item_index=index)
    assert card["size_item"]["name"] == expected


def test_pre_card_has_no_size_item():
    today = date(2025, 3, 1)
    due = today + timedelta(days=280)
    card = CountdownService.build_countdown(due, "Mia", now=at(today))

    assert card["meta"]["status"] == "pre"
    assert card["size_item"] is None
    assert card["can_cycle"] is False
    assert card["headline"] == "Getting started"
    assert card["sub"] == "You are at the very beginning. Exciting times ahead!"
    assert card["details"] == []


def test_term_card():
    card = CountdownService.build_countdown(DUE, "Mia", now=at(date(2025, 6, 8)))

    assert card["meta"]["status"] == "term"
    assert card["meta"]["week"] == 40
    assert card["headline"] == "Full term"
    assert card["sub"] == "Mia is ready! The size of Watermelon"
    assert card["weeks_until_term"] == 0
    assert card["days_until_term"] == 0
    assert card["pct_to_due"] == 97.5
    assert card["details"] == ["8 days until due date"]


def test_post_card_counts_days_past_due():
    card = CountdownService.build_countdown(DUE, "Mia", now=at(date(2025, 6, 18)))

    assert card["headline"] == "Any day now"
    assert card["sub"] == "Past your due date. Thinking of you."
    assert card["details"] == ["2 days past due date"]


def test_post_card_on_day_after_due_date_has_no_details():
    card = CountdownService.build_countdown(DUE, "Mia", now=at(date(2025, 6, 16)))

    assert card["meta"]["status"] == "post"
    assert card["details"] == []


def test_baby_sizes_cover_weeks_four_to_forty():
    assert sorted(BABY_SIZES) == list(range(4, 41))
    assert all(len(items) == 2 for items in BABY_SIZES.values())
    assert get_baby_size_items(3) == []
    assert pick_baby_size(3) is None
    assert pick_baby_size(40).name == "Watermelon"
