# onelittlething/services/countdown_service.py
from datetime import date, datetime, timedelta
from typing import Dict, List, Optional, Union

from ..utils.age import pluralize
from ..utils.baby_sizes import get_baby_size_items, pick_baby_size
from ..utils.date_utils import coerce_date
from ..utils.pregnancy import (
    MAX_WEEKS,
    REFERENCE_TIMEZONE,
    TERM_WEEKS,
    PregnancyStatus,
    calculate_pregnancy,
    reference_today,
)

HEADLINES = {
    PregnancyStatus.POST: "Any day now",
    PregnancyStatus.PRE: "Getting started",
    PregnancyStatus.TERM: "Full term",
}


def format_weeks_and_days(total_days: int) -> str:
    weeks, days = divmod(total_days, 7)
    if weeks == 0:
        return pluralize(days, "day")
    if days == 0:
        return pluralize(weeks, "week")
    return f"{pluralize(weeks, 'week')}, {pluralize(days, 'day')}"


class CountdownService:

    @staticmethod
    def build_countdown(
        due_date: Union[date, str],
        baby_name: str,
        now: Optional[datetime] = None,
        tz: str = REFERENCE_TIMEZONE,
        item_index: int = 0,
    ) -> Dict:
        """
        Arma la tarjeta de cuenta regresiva del embarazo: progreso, comparación
        de tamaño del bebé y los textos que se muestran.
        """
        due = coerce_date(due_date)
        today = reference_today(now, tz)
        meta = calculate_pregnancy(due, now=now, tz=tz)

        items = get_baby_size_items(meta.week)
        item = pick_baby_size(meta.week, item_index)

        weeks_until_term = max(0, TERM_WEEKS - meta.week)
        pct_to_due = round(min(100, max(0, (meta.week - 1) / MAX_WEEKS * 100)), 1)

        # El término (37 semanas) cae 3 semanas antes de la fecha probable
        term_date = due - timedelta(weeks=MAX_WEEKS - TERM_WEEKS)
        days_until_term = max(0, (term_date - today).days)

        headline = HEADLINES.get(meta.status, f"Week {meta.week}")

        if meta.status == PregnancyStatus.POST:
            sub = "Past your due date. Thinking of you."
        elif meta.status == PregnancyStatus.PRE:
            sub = "You are at the very beginning. Exciting times ahead!"
        elif meta.status == PregnancyStatus.TERM:
            sub = f"{baby_name} is ready! The size of {item.name}" if item else f"{baby_name} is ready!"
        else:
            sub = f"{baby_name} is the size of {item.name if item else 'something adorable'}"

        details: List[str] = []
        if meta.status == PregnancyStatus.NORMAL:
            details.append(f"{format_weeks_and_days(meta.days_until_due)} until due date")
            if days_until_term > 0:
                details.append(f"{format_weeks_and_days(days_until_term)} until term")
        elif meta.status == PregnancyStatus.TERM:
            details.append(f"{pluralize(meta.days_until_due, 'day')} until due date")
        elif meta.status == PregnancyStatus.POST and meta.days_until_due < 0:
            details.append(f"{pluralize(abs(meta.days_until_due), 'day')} past due date")

        return {
            "meta": meta.as_dict(),
            "size_item": item._asdict() if item else None,
            "can_cycle": len(items) > 1 and meta.status != PregnancyStatus.PRE,
            "weeks_until_term": weeks_until_term,
            "pct_to_due": pct_to_due,
            "days_until_term": days_until_term,
            "headline": headline,
            "sub": sub,
            "details": details,
        }
