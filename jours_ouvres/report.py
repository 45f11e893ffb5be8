"""Reporting helpers."""

from __future__ import annotations

from jours_ouvres import calendar_fr
from jours_ouvres.calendar_fr import Calendar


def summarize_months(calendar: Calendar, year: int) -> list[dict[str, object]]:
    """One row per month: working days, holidays and weekend days off.

    A holiday on a weekend day that the policy already gives off counts as
    weekend.
    """
    summaries: list[dict[str, object]] = []
    for month in range(1, 13):
        days = calendar_fr.month_days(f"{year}-{month:02}")
        working = 0
        holidays = 0
        weekend = 0
        for day in days:
            if not calendar.is_day_off(day):
                working += 1
            elif calendar.is_weekend_off(day):
                weekend += 1
            else:
                holidays += 1

        summaries.append(
            {
                "mois": f"{year}-{month:02}",
                "jours": len(days),
                "jours_ouvres": working,
                "jours_feries": holidays,
                "jours_weekend": weekend,
            }
        )

    return summaries
