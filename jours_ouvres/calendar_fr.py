"""French business-day calendar."""

from __future__ import annotations

import logging
import warnings
from dataclasses import dataclass
from datetime import date, datetime, timedelta

from jours_ouvres.domain import Holiday, Settings
from jours_ouvres.errors import CalendarError

logger = logging.getLogger(__name__)

SATURDAY = 5
SUNDAY = 6

FIXED_HOLIDAYS: tuple[tuple[int, int, str], ...] = (
    (1, 1, "Jour de l'an"),
    (5, 1, "Fete du travail"),
    (5, 8, "Victoire 1945"),
    (7, 14, "Fete nationale"),
    (8, 15, "Assomption"),
    (11, 1, "Toussaint"),
    (11, 11, "Armistice 1918"),
    (12, 25, "Noel"),
)

# offsets in days from Easter Sunday
MOVABLE_HOLIDAYS: tuple[tuple[int, str], ...] = (
    (1, "Lundi de Paques"),
    (39, "Jeudi de l'Ascension"),
    (50, "Lundi de Pentecote"),
)


def _get_date(year: int, month: int, day: int) -> date:
    try:
        return date(year, month, day)
    except ValueError as exc:
        raise CalendarError(f"{year}-{month}-{day}") from exc


def easter_sunday(year: int) -> date:
    """Return Easter Sunday for the given year (Gregorian calendar)."""
    if year < 0:
        raise CalendarError(f"Annee negative non supportee: {year}")
    a, b = divmod(year, 100)
    c, d = divmod(3 * (a + 25), 4)
    e = 8 * (a + 11) // 25
    f = (5 * a + b) % 19
    g = (19 * f + c - e) % 30
    h = (f + 11 * g) // 319
    j, k = divmod(60 * (5 - d) + b, 4)
    m = (2 * j - k - g + h) % 7
    n, p = divmod(g - h + m + 114, 31)
    return _get_date(year, n, p + 1)


def _named_holidays(year: int, easter: date) -> list[tuple[date, str]]:
    holidays = [
        (_get_date(year, month, day), name) for month, day, name in FIXED_HOLIDAYS
    ]
    for offset, name in MOVABLE_HOLIDAYS:
        holidays.append((easter + timedelta(days=offset), name))
    return holidays


def build_holidays(year: int) -> frozenset[date]:
    """Materialize holidays for ``year - 1``, ``year`` and ``year + 1``.

    Easter is computed once for ``year`` and its movable feasts are reused
    for both neighbouring years, so those years only get their fixed
    holidays right.
    """
    easter = easter_sunday(year)
    holidays: set[date] = set()
    for y in (year - 1, year, year + 1):
        holidays.update(day for day, _ in _named_holidays(y, easter))
    return frozenset(holidays)


def holidays_for_year(year: int) -> list[Holiday]:
    """Named holidays of ``year``; a movable feast on a fixed one keeps both entries."""
    named = sorted(_named_holidays(year, easter_sunday(year)), key=lambda item: item[0])
    return [Holiday(date=day, name=name) for day, name in named]


def is_weekend(day: date) -> bool:
    return day.weekday() >= SATURDAY


def month_days(ym: str) -> list[date]:
    year_str, month_str = ym.split("-", 1)
    year = int(year_str)
    month = int(month_str)
    first = date(year, month, 1)
    if month == 12:
        next_month = date(year + 1, 1, 1)
    else:
        next_month = date(year, month + 1, 1)
    days: list[date] = []
    current = first
    while current < next_month:
        days.append(current)
        current += timedelta(days=1)
    return days


@dataclass(frozen=True)
class Calendar:
    """Holidays of three consecutive years plus a weekend policy.

    Only dates in ``year - 1`` .. ``year + 1`` are reliably classified;
    build one calendar per year of interest.
    """

    year: int
    holidays: frozenset[date]
    saturday_off: bool = True
    sunday_off: bool = True

    @classmethod
    def new(cls, year: int) -> "Calendar":
        return cls.new_with_days_off(year, True, True)

    @classmethod
    def new_with_days_off(
        cls, year: int, saturday_off: bool, sunday_off: bool
    ) -> "Calendar":
        return cls(
            year=year,
            holidays=build_holidays(year),
            saturday_off=saturday_off,
            sunday_off=sunday_off,
        )

    @classmethod
    def from_settings(cls, year: int, settings: Settings) -> "Calendar":
        return cls.new_with_days_off(year, settings.saturday_off, settings.sunday_off)

    def covers(self, day: date) -> bool:
        return self.year - 1 <= day.year <= self.year + 1

    def _warn_outside(self, day: date, stacklevel: int) -> None:
        warnings.warn(
            f"{day} hors de la plage {self.year - 1}-{self.year + 1} "
            f"du calendrier {self.year}: jours feries non garantis",
            UserWarning,
            stacklevel=stacklevel + 1,
        )

    def is_weekend_off(self, day: date) -> bool:
        weekday = day.weekday()
        if weekday == SATURDAY:
            return self.saturday_off
        return weekday == SUNDAY and self.sunday_off

    def _is_day_off(self, day: date) -> bool:
        if isinstance(day, datetime):
            day = day.date()
        return day in self.holidays or self.is_weekend_off(day)

    def is_day_off(self, day: date) -> bool:
        if not self.covers(day):
            self._warn_outside(day, stacklevel=2)
        return self._is_day_off(day)

    def is_working_day(self, day: date) -> bool:
        if not self.covers(day):
            self._warn_outside(day, stacklevel=2)
        return not self._is_day_off(day)

    def _leap(self, start, amount: int, unit: timedelta, corrective: int, direction: int):
        outside = None
        try:
            step = unit * direction
            candidate = start + step * amount
            while True:
                if outside is None and not self.covers(candidate):
                    outside = candidate
                if not self._is_day_off(candidate):
                    break
                logger.debug("%s is a day off, moving by %s", candidate, step * corrective)
                candidate = candidate + step * corrective
        except OverflowError as exc:
            raise CalendarError(f"Date hors limites depuis {start}") from exc
        if outside is not None:
            self._warn_outside(outside, stacklevel=3)
        return candidate

    def next_working_day(self, day: date, days: int) -> date:
        """Step ``days`` calendar days forward, then roll forward off days off."""
        return self._leap(day, days, timedelta(days=1), 1, 1)

    def previous_working_day(self, day: date, days: int) -> date:
        """Step ``days`` calendar days back, then roll back off days off."""
        return self._leap(day, days, timedelta(days=1), 1, -1)

    def next_working_day_with_hours(self, moment: datetime, hours: int) -> datetime:
        return self._leap(moment, hours, timedelta(hours=1), 24, 1)

    def previous_working_day_with_hours(self, moment: datetime, hours: int) -> datetime:
        return self._leap(moment, hours, timedelta(hours=1), 24, -1)

    def working_days_between(self, start: date, end: date) -> int:
        """Count working days in ``[start, end)``."""
        count = 0
        current = start
        outside = None
        while current < end:
            if outside is None and not self.covers(current):
                outside = current
            if not self._is_day_off(current):
                count += 1
            current += timedelta(days=1)
        if outside is not None:
            self._warn_outside(outside, stacklevel=2)
        return count
