"""Excel export helpers."""

from __future__ import annotations

from collections import defaultdict
from datetime import date, timedelta
from pathlib import Path

import pandas as pd
from openpyxl.utils import get_column_letter

from jours_ouvres import calendar_fr
from jours_ouvres.calendar_fr import Calendar
from jours_ouvres.formatter import format_locale_date
from jours_ouvres.report import summarize_months

WEEKDAY_NAMES = ("lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche")
SHEET_NAMES = ("calendrier", "feries", "synthese")


def _auto_fit_columns(worksheet) -> None:
    for column_cells in worksheet.columns:
        values = [str(cell.value) if cell.value is not None else "" for cell in column_cells]
        max_length = max((len(value) for value in values), default=0)
        column_letter = get_column_letter(column_cells[0].column)
        worksheet.column_dimensions[column_letter].width = min(max_length + 2, 60)


def _apply_sheet_formatting(worksheet) -> None:
    worksheet.freeze_panes = "A2"
    worksheet.auto_filter.ref = worksheet.dimensions
    _auto_fit_columns(worksheet)


def calendar_rows(calendar: Calendar, year: int) -> list[dict[str, object]]:
    names: dict[date, list[str]] = defaultdict(list)
    for holiday in calendar_fr.holidays_for_year(year):
        names[holiday.date].append(holiday.name)
    rows: list[dict[str, object]] = []
    current = date(year, 1, 1)
    end = date(year + 1, 1, 1)
    while current < end:
        rows.append(
            {
                "date": format_locale_date(current),
                "jour": WEEKDAY_NAMES[current.weekday()],
                "ouvre": "non" if calendar.is_day_off(current) else "oui",
                "ferie": " / ".join(names.get(current, [])),
            }
        )
        current += timedelta(days=1)
    return rows


def export_calendar_excel(path: str | Path, calendar: Calendar, year: int) -> None:
    output_path = Path(path)

    calendar_df = pd.DataFrame(calendar_rows(calendar, year))
    holidays_df = pd.DataFrame(
        [
            {"date": format_locale_date(holiday.date), "nom": holiday.name}
            for holiday in calendar_fr.holidays_for_year(year)
        ]
    )
    summary_df = pd.DataFrame(summarize_months(calendar, year))

    with pd.ExcelWriter(output_path, engine="openpyxl") as writer:
        calendar_df.to_excel(writer, sheet_name="calendrier", index=False)
        holidays_df.to_excel(writer, sheet_name="feries", index=False)
        summary_df.to_excel(writer, sheet_name="synthese", index=False)

        for sheet_name in SHEET_NAMES:
            worksheet = writer.sheets[sheet_name]
            _apply_sheet_formatting(worksheet)
