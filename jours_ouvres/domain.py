"""Domain models shared by the calendar, reports and CLI."""

from __future__ import annotations

import os
from datetime import date
from typing import Any

from pydantic import BaseModel, ValidationError, field_validator

from jours_ouvres.errors import ParamsError

ENV_PREFIX = "JOURS_OUVRES_"


def _parse_bool(value: Any) -> bool:
    if isinstance(value, bool):
        return value
    if value is None:
        raise ValueError("Valeur booleenne requise")
    if isinstance(value, (int, float)):
        return bool(value)
    text = str(value).strip().upper()
    if text in {"OUI", "YES", "TRUE", "1", "O", "Y"}:
        return True
    if text in {"NON", "NO", "FALSE", "0", "N", ""}:
        return False
    raise ValueError(f"Valeur booleenne invalide: {value!r}")


class Holiday(BaseModel):
    date: date
    name: str

    model_config = {"frozen": True}


class Settings(BaseModel):
    """Weekend policy and default year for building a calendar."""

    saturday_off: bool = True
    sunday_off: bool = True
    year: int | None = None

    @field_validator("saturday_off", "sunday_off", mode="before")
    @classmethod
    def _validate_bool(cls, value: Any) -> bool:
        return _parse_bool(value)

    @field_validator("year", mode="before")
    @classmethod
    def _parse_year(cls, value: Any) -> int | None:
        if value is None:
            return None
        if isinstance(value, str):
            text = value.strip()
            if not text:
                return None
            return int(text)
        return value

    def resolve_year(self, fallback: int | None = None) -> int:
        if self.year is not None:
            return self.year
        if fallback is not None:
            return fallback
        return date.today().year

    @classmethod
    def from_env(cls, environ: dict[str, str] | None = None) -> "Settings":
        """Load settings from ``JOURS_OUVRES_*`` environment variables."""
        source = os.environ if environ is None else environ
        values: dict[str, Any] = {}
        for field_name in cls.model_fields:
            key = ENV_PREFIX + field_name.upper()
            if key in source:
                values[field_name] = source[key]
        try:
            return cls.model_validate(values)
        except ValidationError as exc:
            raise ParamsError(str(exc)) from exc
