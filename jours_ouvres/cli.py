"""CLI for French working-day arithmetic."""

from __future__ import annotations

import argparse
import logging

import pandas as pd

from jours_ouvres import calendar_fr
from jours_ouvres.calendar_fr import Calendar
from jours_ouvres.domain import Settings
from jours_ouvres.errors import JoursOuvresError
from jours_ouvres.export_excel import export_calendar_excel
from jours_ouvres.formatter import format_iso_date, format_iso_datetime, format_locale_date
from jours_ouvres.parser import parse_iso_date, parse_iso_datetime
from jours_ouvres.report import summarize_months

logger = logging.getLogger(__name__)


def _add_policy_args(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--year", type=int, help="Calendar year (default: year of the date)")
    parser.add_argument(
        "--saturday-working",
        action="store_true",
        help="Treat Saturdays as working days",
    )
    parser.add_argument(
        "--sunday-working",
        action="store_true",
        help="Treat Sundays as working days",
    )


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="French working-day calendar")
    parser.add_argument("--verbose", action="store_true", help="Enable debug logging")
    subparsers = parser.add_subparsers(dest="command", required=True)

    for name, help_text in (
        ("next", "Next working day after N calendar days"),
        ("previous", "Previous working day before N calendar days"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("date", help="Date in YYYY-MM-DD format")
        sub.add_argument("--days", type=int, default=1, help="Calendar days to step")
        _add_policy_args(sub)

    for name, help_text in (
        ("next-hours", "Next working datetime after H hours"),
        ("previous-hours", "Previous working datetime before H hours"),
    ):
        sub = subparsers.add_parser(name, help=help_text)
        sub.add_argument("datetime", help="Datetime in YYYY-MM-DDTHH:MM:SS format")
        sub.add_argument("--hours", type=int, required=True, help="Hours to step")
        _add_policy_args(sub)

    sub = subparsers.add_parser("day-off", help="Tell whether a date is a day off")
    sub.add_argument("date", help="Date in YYYY-MM-DD format")
    _add_policy_args(sub)

    sub = subparsers.add_parser("holidays", help="List public holidays of a year")
    _add_policy_args(sub)

    sub = subparsers.add_parser("summary", help="Working days per month")
    _add_policy_args(sub)

    sub = subparsers.add_parser("export", help="Export a year calendar to Excel")
    sub.add_argument("--out", required=True, help="Path to output Excel file")
    _add_policy_args(sub)

    return parser.parse_args(argv)


def _render_table(rows: list[dict[str, object]]) -> str:
    if not rows:
        return "(no rows)"
    return pd.DataFrame(rows).to_string(index=False)


def _build_settings(args: argparse.Namespace) -> Settings:
    settings = Settings.from_env()
    updates: dict[str, object] = {}
    if args.year is not None:
        updates["year"] = args.year
    if args.saturday_working:
        updates["saturday_off"] = False
    if args.sunday_working:
        updates["sunday_off"] = False
    return settings.model_copy(update=updates)


def _build_calendar(settings: Settings, fallback_year: int | None = None) -> Calendar:
    year = settings.resolve_year(fallback_year)
    logger.debug(
        "Building calendar %s (saturday_off=%s, sunday_off=%s)",
        year,
        settings.saturday_off,
        settings.sunday_off,
    )
    return Calendar.from_settings(year, settings)


def run(args: argparse.Namespace) -> str:
    settings = _build_settings(args)

    if args.command in ("next", "previous"):
        day = parse_iso_date(args.date)
        calendar = _build_calendar(settings, day.year)
        if args.command == "next":
            result = calendar.next_working_day(day, args.days)
        else:
            result = calendar.previous_working_day(day, args.days)
        return format_iso_date(result)

    if args.command in ("next-hours", "previous-hours"):
        moment = parse_iso_datetime(args.datetime)
        calendar = _build_calendar(settings, moment.year)
        if args.command == "next-hours":
            result = calendar.next_working_day_with_hours(moment, args.hours)
        else:
            result = calendar.previous_working_day_with_hours(moment, args.hours)
        return format_iso_datetime(result)

    if args.command == "day-off":
        day = parse_iso_date(args.date)
        calendar = _build_calendar(settings, day.year)
        return "oui" if calendar.is_day_off(day) else "non"

    year = settings.resolve_year()
    if args.command == "holidays":
        rows = [
            {"date": format_locale_date(holiday.date), "nom": holiday.name}
            for holiday in calendar_fr.holidays_for_year(year)
        ]
        return _render_table(rows)

    calendar = _build_calendar(settings, year)
    if args.command == "summary":
        return _render_table(summarize_months(calendar, year))

    export_calendar_excel(args.out, calendar, year)
    return f"OK: {args.out}"


def main(argv: list[str] | None = None) -> None:
    args = parse_args(argv)
    if args.verbose:
        logging.basicConfig(level=logging.DEBUG)
    try:
        output = run(args)
    except JoursOuvresError as exc:
        raise SystemExit(f"ERROR: {exc}") from exc
    print(output)


if __name__ == "__main__":
    main()
