# onelittlething/utils/pregnancy.py
import math
from dataclasses import asdict, dataclass
from datetime import date, datetime, time, timedelta
from enum import Enum
from typing import Optional, Union
from zoneinfo import ZoneInfo

from .date_utils import DateParseError, coerce_date

GESTATION_DAYS = 280
TERM_WEEKS = 37  # término completo
MAX_WEEKS = 40

# Todos los usuarios comparten los mismos cortes de semana
REFERENCE_TIMEZONE = "America/Detroit"


class PregnancyStatus(str, Enum):
    PRE = "pre"
    NORMAL = "normal"
    TERM = "term"
    POST = "post"


@dataclass(frozen=True)
class PregnancyMeta:
    """Progreso del embarazo calculado desde la fecha probable de parto"""
    week: int
    days_until_due: int
    weeks_until_due: int
    pct_complete: float
    status: PregnancyStatus

    def as_dict(self) -> dict:
        data = asdict(self)
        data["status"] = self.status.value
        return data


def get_reference_now(tz: str = REFERENCE_TIMEZONE) -> datetime:
    return datetime.now(ZoneInfo(tz))


def reference_today(now: Optional[datetime] = None, tz: str = REFERENCE_TIMEZONE) -> date:
    """
    Día civil de `now` en la zona de referencia.
    Un datetime naive se interpreta como hora local de esa zona.
    """
    if now is None:
        return get_reference_now(tz).date()
    if now.tzinfo is None:
        return now.date()
    return now.astimezone(ZoneInfo(tz)).date()


def start_of_week(value: date) -> date:
    """Lunes de la semana de `value`."""
    return value - timedelta(days=value.weekday())


def _clamp(value, low, high):
    return min(high, max(low, value))


def calculate_pregnancy(
    due_date: Union[date, str],
    now: Optional[datetime] = None,
    tz: str = REFERENCE_TIMEZONE,
) -> PregnancyMeta:
    due = coerce_date(due_date)
    today = reference_today(now, tz)
    zone = ZoneInfo(tz)

    # Las semanas cambian siempre en lunes, caiga donde caiga el inicio teórico
    pregnancy_start = start_of_week(due - timedelta(days=GESTATION_DAYS))
    elapsed_weeks = (start_of_week(today) - pregnancy_start).days // 7
    elapsed_weeks = _clamp(elapsed_weeks, 0, MAX_WEEKS)

    week = _clamp(elapsed_weeks + 1, 1, MAX_WEEKS)

    # Misma tzinfo en ambos extremos: la resta es en hora de pared
    due_end = datetime.combine(due, time.max, tzinfo=zone)
    today_start = datetime.combine(today, time.min, tzinfo=zone)
    days_until_due = math.ceil((due_end - today_start).total_seconds() / 86400)

    weeks_until_due = math.ceil(days_until_due / 7)
    pct_complete = round(_clamp(elapsed_weeks / TERM_WEEKS * 100, 0, 100), 1)

    if days_until_due <= 0:
        status = PregnancyStatus.POST
    elif week < 4:
        status = PregnancyStatus.PRE
    elif week >= TERM_WEEKS:
        status = PregnancyStatus.TERM
    else:
        status = PregnancyStatus.NORMAL

    return PregnancyMeta(
        week=week,
        days_until_due=days_until_due,
        weeks_until_due=weeks_until_due,
        pct_complete=pct_complete,
        status=status,
    )


def is_valid_due_date(
    date_string: str,
    now: Optional[datetime] = None,
    tz: str = REFERENCE_TIMEZONE,
) -> bool:
    """La fecha debe estar a no más de 280 días (antes o después) de hoy."""
    try:
        candidate = coerce_date(date_string)
    except DateParseError:
        return False

    diff_days = (candidate - reference_today(now, tz)).days
    return -GESTATION_DAYS <= diff_days <= GESTATION_DAYS
