# onelittlething/utils/date_utils.py
import re
from datetime import date, datetime, timedelta
from typing import Optional, Union

_ISO_DATE_RE = re.compile(r"([0-9]{4})-([0-9]{2})-([0-9]{2})")

MONTH_NAMES = [
    "January", "February", "March", "April", "May", "June",
    "July", "August", "September", "October", "November", "December",
]


class DateParseError(ValueError):
    """La cadena no es una fecha YYYY-MM-DD válida."""

    def __init__(self, value, reason: str = "expected YYYY-MM-DD"):
        self.value = value
        super().__init__(f"Invalid date {value!r}: {reason}")


def parse_local_date(date_string: str) -> date:
    """
    Convierte 'YYYY-MM-DD' en una fecha de calendario.
    Se construye directamente con año/mes/día, sin pasar por UTC,
    así el día nunca se corre según la zona horaria del host.
    """
    if not isinstance(date_string, str):
        raise DateParseError(date_string, "not a string")

    match = _ISO_DATE_RE.fullmatch(date_string)
    if not match:
        raise DateParseError(date_string)

    year, month, day = (int(part) for part in match.groups())
    try:
        return date(year, month, day)
    except ValueError as e:
        raise DateParseError(date_string, str(e)) from e


def to_iso_date_string(value: date) -> str:
    return f"{value.year:04d}-{value.month:02d}-{value.day:02d}"


def coerce_date(value: Union[date, str]) -> date:
    """Acepta date o string; los strings pasan por parse_local_date."""
    if isinstance(value, str):
        return parse_local_date(value)
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    raise DateParseError(value, "not a date")


def ordinal_suffix(day: int) -> str:
    if day % 10 == 1 and day % 100 != 11:
        return "st"
    if day % 10 == 2 and day % 100 != 12:
        return "nd"
    if day % 10 == 3 and day % 100 != 13:
        return "rd"
    return "th"


def format_human_date(value: Union[date, str]) -> str:
    """Formato legible: 'April 1st', 'March 22nd'."""
    value = coerce_date(value)
    return f"{MONTH_NAMES[value.month - 1]} {value.day}{ordinal_suffix(value.day)}"


def last_day_of_previous_month(value: date) -> date:
    return value.replace(day=1) - timedelta(days=1)


def age_in_years(birthdate: Union[date, str], today: Optional[date] = None) -> int:
    birthdate = coerce_date(birthdate)
    today = today or date.today()
    return today.year - birthdate.year - ((today.month, today.day) < (birthdate.month, birthdate.day))


def age_in_months(birthdate: Union[date, str], today: Optional[date] = None) -> int:
    birthdate = coerce_date(birthdate)
    today = today or date.today()
    return (today.year - birthdate.year) * 12 + (today.month - birthdate.month) - (today.day < birthdate.day)
