# onelittlething/utils/age.py
"""
Edad legible de un hijo a partir de su fecha de nacimiento.

- Fecha futura: cuenta regresiva hasta la fecha probable de parto
- Hasta 2 años: meses y años ("1 year, 3 months", "8 months")
- Desde 2 años: años con medios años ("2.5 years", "3 years")
"""
from datetime import date
from typing import Optional, Tuple, Union

from .date_utils import coerce_date, last_day_of_previous_month

# Aproximación fija para la cuenta regresiva; no son meses de calendario
COUNTDOWN_MONTH_DAYS = 30


def pluralize(count: int, unit: str) -> str:
    return f"{count} {unit}{'' if count == 1 else 's'}"


def format_due_countdown(days: int) -> str:
    """Texto de cuenta regresiva para `days` días hasta el parto."""
    if days == 0:
        return "Due today!"
    if days == 1:
        return "Due tomorrow"
    if days < 7:
        return f"{days} days until due"

    if days < COUNTDOWN_MONTH_DAYS:
        weeks, remaining_days = divmod(days, 7)
        if remaining_days == 0:
            return f"{pluralize(weeks, 'week')} until due"
        return f"{pluralize(weeks, 'week')}, {pluralize(remaining_days, 'day')} until due"

    months, remaining_days = divmod(days, COUNTDOWN_MONTH_DAYS)
    if remaining_days == 0:
        return f"{pluralize(months, 'month')} until due"
    if remaining_days < 7:
        return f"{pluralize(months, 'month')}, {pluralize(remaining_days, 'day')} until due"
    return f"{pluralize(months, 'month')}, {pluralize(remaining_days // 7, 'week')} until due"


def elapsed_calendar_time(birth: date, today: date) -> Tuple[int, int, int]:
    """
    Años, meses y días transcurridos restando campo a campo con préstamo.
    Los días negativos toman prestados los días del mes anterior a `today`.
    """
    years = today.year - birth.year
    months = today.month - birth.month
    days = today.day - birth.day

    if days < 0:
        months -= 1
        days += last_day_of_previous_month(today).day

    if months < 0:
        years -= 1
        months += 12

    return years, months, days


def round_to_half_years(total_months: int) -> Tuple[int, bool]:
    """
    Redondea total_months / 12 al 0.5 más cercano (empates hacia arriba).
    Devuelve (años enteros, tiene_medio_año).
    """
    halves = (total_months + 3) // 6
    return halves // 2, halves % 2 == 1


def format_age(birthdate: Union[date, str, None], today: Optional[date] = None) -> Optional[str]:
    if not birthdate:
        return None

    birth = coerce_date(birthdate)
    today = today or date.today()

    if birth > today:
        return format_due_countdown((birth - today).days)

    years, months, days = elapsed_calendar_time(birth, today)
    total_months = years * 12 + months

    if years < 2:
        if total_months == 0:
            if days < 7:
                return pluralize(days, "day")
            return pluralize(days // 7, "week")
        if total_months < 12:
            return pluralize(total_months, "month")
        remaining_months = total_months % 12
        if remaining_months == 0:
            return pluralize(years, "year")
        return f"{pluralize(years, 'year')}, {pluralize(remaining_months, 'month')}"

    whole_years, has_half = round_to_half_years(total_months)
    if has_half:
        return f"{whole_years}.5 years"
    return pluralize(whole_years, "year")
