"""
Tests para el cálculo del embarazo desde la fecha probable de parto.
"""

from datetime import date, datetime, timedelta, timezone

import pytest

from onelittlething.utils.date_utils import DateParseError, to_iso_date_string
from onelittlething.utils.pregnancy import (
    GESTATION_DAYS,
    PregnancyStatus,
    calculate_pregnancy,
    get_reference_now,
    is_valid_due_date,
    start_of_week,
)

DUE = date(2025, 6, 15)  # domingo


def at(day: date, hour: int = 12) -> datetime:
    return datetime(day.year, day.month, day.day, hour)


def test_worked_example():
    meta = calculate_pregnancy("2025-06-15", now=datetime(2025, 3, 1, 10, 0))

    # Lunes de inicio 2024-09-02, lunes actual 2025-02-24: 25 semanas
    assert meta.week == 26
    assert meta.days_until_due == 107
    assert meta.weeks_until_due == 16
    assert meta.pct_complete == 67.6
    assert meta.status is PregnancyStatus.NORMAL


def test_due_date_280_days_out_is_week_one():
    today = date(2024, 1, 10)
    meta = calculate_pregnancy(today + timedelta(days=GESTATION_DAYS), now=at(today))

    assert meta.week == 1
    assert meta.pct_complete == 0.0
    assert meta.status is PregnancyStatus.PRE


def test_start_of_week_is_monday():
    assert start_of_week(date(2025, 6, 15)) == date(2025, 6, 9)
    assert start_of_week(date(2025, 6, 9)) == date(2025, 6, 9)
    assert start_of_week(date(2025, 3, 1)) == date(2025, 2, 24)


def test_week_changes_on_monday():
    sunday = calculate_pregnancy(DUE, now=at(date(2025, 3, 2)))
    monday = calculate_pregnancy(DUE, now=at(date(2025, 3, 3)))

    assert sunday.week == 26
    assert monday.week == 27


def test_ranges_hold_for_every_day():
    for offset in range(-320, 40):
        meta = calculate_pregnancy(DUE, now=at(DUE + timedelta(days=offset)))
        assert 1 <= meta.week <= 40
        assert 0 <= meta.pct_complete <= 100


def test_status_passes_through_each_phase_once():
    statuses = []
    first_term_week = None
    for offset in range(-GESTATION_DAYS, 2):
        meta = calculate_pregnancy(DUE, now=at(DUE + timedelta(days=offset)))
        if meta.status is PregnancyStatus.TERM and first_term_week is None:
            first_term_week = meta.week
        if not statuses or statuses[-1] is not meta.status:
            statuses.append(meta.status)

    assert statuses == [
        PregnancyStatus.PRE,
        PregnancyStatus.NORMAL,
        PregnancyStatus.TERM,
        PregnancyStatus.POST,
    ]
    assert first_term_week == 37


def test_post_starts_the_day_after_due_date():
    on_due_date = calculate_pregnancy(DUE, now=at(DUE))
    day_after = calculate_pregnancy(DUE, now=at(DUE + timedelta(days=1)))
    three_days_after = calculate_pregnancy(DUE, now=at(DUE + timedelta(days=3)))

    assert on_due_date.status is PregnancyStatus.TERM
    assert on_due_date.days_until_due == 1
    assert on_due_date.week == 40
    assert on_due_date.pct_complete == 100.0

    assert day_after.status is PregnancyStatus.POST
    assert day_after.days_until_due == 0

    assert three_days_after.days_until_due == -2
    assert three_days_after.weeks_until_due == 0


def test_long_before_start_stays_in_week_one():
    meta = calculate_pregnancy(DUE, now=at(DUE - timedelta(days=400)))

    assert meta.week == 1
    assert meta.pct_complete == 0.0
    assert meta.status is PregnancyStatus.PRE


def test_time_of_day_does_not_matter():
    morning = calculate_pregnancy(DUE, now=datetime(2025, 3, 1, 0, 0))
    night = calculate_pregnancy(DUE, now=datetime(2025, 3, 1, 23, 59, 59))

    assert morning == night


def test_aware_now_is_read_in_reference_timezone():
    # 03:00 UTC del 2 de marzo todavía es 1 de marzo en Detroit
    instant = datetime(2025, 3, 2, 3, 0, tzinfo=timezone.utc)
    meta = calculate_pregnancy(DUE, now=instant)

    assert meta.days_until_due == 107
    assert meta.week == 26


def test_timezone_is_injectable():
    instant = datetime(2025, 3, 2, 3, 0, tzinfo=timezone.utc)
    meta = calculate_pregnancy(DUE, now=instant, tz="Pacific/Auckland")

    # En Auckland ya es domingo 2 de marzo
    assert meta.days_until_due == 106
    assert meta.week == 26


def test_as_dict_serializes_status():
    data = calculate_pregnancy(DUE, now=at(date(2025, 3, 1))).as_dict()

    assert data == {
        "week": 26,
        "days_until_due": 107,
        "weeks_until_due": 16,
        "pct_complete": 67.6,
        "status": "normal",
    }


def test_malformed_due_date_raises():
    with pytest.raises(DateParseError):
        calculate_pregnancy("June 15 2025", now=at(date(2025, 3, 1)))


def test_get_reference_now_uses_detroit():
    now = get_reference_now()
    assert str(now.tzinfo) == "America/Detroit"


# =============================================================================
# Validación de la fecha probable
# =============================================================================


def test_far_future_due_date_is_invalid():
    assert is_valid_due_date("2099-01-01") is False


@pytest.mark.parametrize("value", ["not-a-date", "", "2025/06/15", "2025-02-30"])
def test_unparseable_due_date_is_invalid(value):
    assert is_valid_due_date(value, now=at(date(2025, 3, 1))) is False


@pytest.mark.parametrize(
    "offset,expected",
    [(0, True), (106, True), (280, True), (281, False), (-280, True), (-281, False)],
)
def test_due_date_window(offset, expected):
    today = date(2025, 3, 1)
    candidate = to_iso_date_string(today + timedelta(days=offset))
    assert is_valid_due_date(candidate, now=at(today)) is expected
