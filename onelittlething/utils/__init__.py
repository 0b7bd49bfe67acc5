"""
Cálculos de fechas sin estado: edades, embarazo, tamaños y pautas.
"""

from .date_utils import DateParseError, parse_local_date, to_iso_date_string, format_human_date
from .age import format_age
from .pregnancy import PregnancyMeta, PregnancyStatus, calculate_pregnancy, is_valid_due_date

__all__ = [
    "DateParseError",
    "parse_local_date",
    "to_iso_date_string",
    "format_human_date",
    "format_age",
    "PregnancyMeta",
    "PregnancyStatus",
    "calculate_pregnancy",
    "is_valid_due_date",
]
