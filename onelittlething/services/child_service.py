# onelittlething/services/child_service.py
from datetime import date, datetime, time
from typing import Dict, List, Optional

from ..utils.age import format_age
from ..utils.date_utils import (
    DateParseError,
    age_in_months,
    age_in_years,
    format_human_date,
    parse_local_date,
)
from ..utils.pregnancy import (
    REFERENCE_TIMEZONE,
    calculate_pregnancy,
    get_reference_now,
    reference_today,
)


def development_stage(months: int, years: int) -> str:
    if months <= 6:
        return "infant"
    elif months <= 12:
        return "baby"
    elif months <= 24:
        return "toddler"
    elif years <= 5:
        return "preschooler"
    elif years <= 12:
        return "school-age"
    return "teen"


class ChildService:
    """
    Resúmenes de los hijos de una familia para la lista de hijos
    y para el contexto del coach de crianza.
    """

    @staticmethod
    def build_child_summary(child: Dict, today: Optional[date] = None) -> Dict:
        """
        Resumen de un hijo a partir de su fila (id, name, birthdate, gender).

        Raises:
            DateParseError: si birthdate no es YYYY-MM-DD
        """
        today = today or date.today()
        summary = {
            "id": child.get("id"),
            "name": child.get("name"),
            "gender": child.get("gender"),
            "is_unborn": False,
            "date_label": None,
            "age_label": None,
            "age_in_months": None,
            "days_until_due": None,
        }

        birthdate_str = child.get("birthdate")
        if not birthdate_str:
            return summary

        birthdate = parse_local_date(birthdate_str)
        summary["age_label"] = format_age(birthdate, today)

        if birthdate > today:
            summary["is_unborn"] = True
            summary["date_label"] = f"Due {format_human_date(birthdate)}"
            summary["days_until_due"] = (birthdate - today).days
        else:
            summary["date_label"] = format_human_date(birthdate)
            summary["age_in_months"] = age_in_months(birthdate, today)

        return summary

    @staticmethod
    def format_children_for_context(
        children: List[Dict],
        today: Optional[date] = None,
        now: Optional[datetime] = None,
        tz: str = REFERENCE_TIMEZONE,
    ) -> str:
        """
        Formatea los hijos para incluir en el contexto del coach.
        Un hijo con fecha ilegible se lista sin edad en lugar de romper el bloque.
        """
        if not children:
            return ""

        # Semanas de embarazo y "hoy" salen del mismo instante en la zona de referencia
        if now is None and today is None:
            now = get_reference_now(tz)
        if today is None:
            today = reference_today(now, tz)
        if now is None:
            now = datetime.combine(today, time.min)
        lines = []

        for child in children:
            name = child.get("name") or "Child"
            birthdate_str = child.get("birthdate")

            if not birthdate_str:
                lines.append(f"- {name} (birthdate unknown)")
                continue

            try:
                birthdate = parse_local_date(birthdate_str)
            except DateParseError as e:
                print(f"⚠️ [CHILDREN] Fecha inválida para {name}: {e}")
                lines.append(f"- {name} (birthdate unknown)")
                continue

            if birthdate > today:
                meta = calculate_pregnancy(birthdate, now=now, tz=tz)
                lines.append(
                    f"- {name}: expected, due {format_human_date(birthdate)} "
                    f"({format_age(birthdate, today)}), pregnancy week {meta.week}, "
                    f"stage: expected"
                )
                continue

            months = age_in_months(birthdate, today)
            years = age_in_years(birthdate, today)
            lines.append(
                f"- {name}: born {format_human_date(birthdate)} {birthdate.year}, "
                f"age {format_age(birthdate, today)} ({months} months), "
                f"stage: {development_stage(months, years)}"
            )

        return "Children:\n" + "\n".join(lines)
