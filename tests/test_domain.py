import unittest
from datetime import date

from pydantic import ValidationError

from jours_ouvres.domain import Holiday, Settings
from jours_ouvres.errors import ParamsError


class SettingsTests(unittest.TestCase):
    def test_defaults(self) -> None:
        settings = Settings()
        self.assertTrue(settings.saturday_off)
        self.assertTrue(settings.sunday_off)
        self.assertIsNone(settings.year)

    def test_text_booleans(self) -> None:
        settings = Settings(saturday_off="non", sunday_off="OUI")
        self.assertFalse(settings.saturday_off)
        self.assertTrue(settings.sunday_off)

    def test_missing_boolean_is_rejected(self) -> None:
        with self.assertRaises(ValidationError):
            Settings(saturday_off=None)

    def test_from_env(self) -> None:
        settings = Settings.from_env(
            {
                "JOURS_OUVRES_SATURDAY_OFF": "false",
                "JOURS_OUVRES_YEAR": "2024",
                "UNRELATED": "x",
            }
        )
        self.assertFalse(settings.saturday_off)
        self.assertTrue(settings.sunday_off)
        self.assertEqual(settings.year, 2024)

    def test_from_env_empty(self) -> None:
        self.assertEqual(Settings.from_env({}), Settings())

    def test_from_env_invalid(self) -> None:
        with self.assertRaises(ParamsError):
            Settings.from_env({"JOURS_OUVRES_SUNDAY_OFF": "peut-etre"})
        with self.assertRaises(ParamsError):
            Settings.from_env({"JOURS_OUVRES_YEAR": "deux mille"})

    def test_resolve_year(self) -> None:
        self.assertEqual(Settings(year=2018).resolve_year(2020), 2018)
        self.assertEqual(Settings().resolve_year(2020), 2020)
        self.assertEqual(Settings().resolve_year(), date.today().year)


class HolidayTests(unittest.TestCase):
    def test_holiday_is_hashable(self) -> None:
        holiday = Holiday(date=date(2018, 7, 14), name="Fete nationale")
        self.assertIn(holiday, {holiday})


if __name__ == "__main__":
    unittest.main()
