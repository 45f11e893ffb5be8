"""Text formatting for French locale and legacy (Teliway) exchanges."""

from __future__ import annotations

from datetime import date, datetime, time


def format_locale_date(value: date) -> str:
    """-> dd/mm/yyyy"""
    return f"{value.day:02}/{value.month:02}/{value.year}"


def format_locale_time(value: datetime | time) -> str:
    """-> hh:mm"""
    return f"{value.hour:02}:{value.minute:02}"


def format_iso_date(value: date) -> str:
    return f"{value.year:04}-{value.month:02}-{value.day:02}"


def format_iso_datetime(value: datetime) -> str:
    return f"{format_iso_date(value)}T{value.hour:02}:{value.minute:02}:{value.second:02}"


def to_legacy_date(value: date) -> str:
    """-> yyyymmdd"""
    return format_iso_date(value).replace("-", "")


def to_hour(value: datetime | time) -> str:
    return format_locale_time(value)


def to_legacy_hour(value: datetime | time) -> str:
    """-> hhmm"""
    return to_hour(value).replace(":", "")
