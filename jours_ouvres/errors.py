"""Exceptions raised by the calendar and the text converters."""

from __future__ import annotations


class JoursOuvresError(Exception):
    """Base exception for jours_ouvres."""


class CalendarError(JoursOuvresError):
    """Raised for an unusable year or an invalid constructed date."""


class ParamsError(JoursOuvresError):
    """Raised when date or time text cannot be parsed."""
