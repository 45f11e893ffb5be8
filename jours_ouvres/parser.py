"""Parsing of ISO and legacy (Teliway) date/time text."""

from __future__ import annotations

from datetime import date, datetime

from jours_ouvres.errors import ParamsError

ISO_DATE_FORMAT = "%Y-%m-%d"
ISO_DATETIME_FORMAT = "%Y-%m-%dT%H:%M:%S"
LEGACY_DATE_LENGTH = 8
LEGACY_HOUR_LENGTH = 6


def parse_iso_date(value: str) -> date:
    """value: yyyy-mm-dd"""
    try:
        return datetime.strptime(value, ISO_DATE_FORMAT).date()
    except (TypeError, ValueError) as exc:
        raise ParamsError(str(exc)) from exc


def parse_iso_datetime(value: str) -> datetime:
    """value: yyyy-mm-ddThh:mm:ss"""
    try:
        return datetime.strptime(value, ISO_DATETIME_FORMAT)
    except (TypeError, ValueError) as exc:
        raise ParamsError(str(exc)) from exc


def parse_legacy(date_digits: str, hour_digits: str) -> tuple[str, str]:
    """20230101, 103000 -> (2023-01-01, 10:30:00)

    Only the lengths are checked; digit content is sliced as is.
    """
    if len(date_digits) != LEGACY_DATE_LENGTH:
        raise ParamsError(
            f"Date legacy attendue sur {LEGACY_DATE_LENGTH} caracteres: {date_digits!r}"
        )
    if len(hour_digits) != LEGACY_HOUR_LENGTH:
        raise ParamsError(
            f"Heure legacy attendue sur {LEGACY_HOUR_LENGTH} caracteres: {hour_digits!r}"
        )
    iso_date = f"{date_digits[:4]}-{date_digits[4:6]}-{date_digits[6:]}"
    iso_time = f"{hour_digits[:2]}:{hour_digits[2:4]}:{hour_digits[4:]}"
    return iso_date, iso_time
