import datetime as dt
from decimal import Decimal

import pytest

from colfmt.core.cultures import get_culture
from colfmt.core.errors import FormatCodeError
from colfmt.formats.display import display_value, format_value

US = get_culture("en-US")
DE = get_culture("de-DE")
FR = get_culture("fr-FR")
ES = get_culture("es-ES")


@pytest.mark.parametrize(
    ("value", "fmt", "culture", "expected"),
    [
        (1234.5, "N2", US, "1,234.50"),
        (Decimal("1234.5"), "N2", US, "1,234.50"),
        (1234.5, "N2", DE, "1.234,50"),
        (1234.5, "N2", FR, "1\u202f234,50"),
        (1234.5, "N0", US, "1,234"),
        (1234.567, "F1", US, "1234.6"),
        (42, "D5", US, "00042"),
        (-42, "D3", US, "-042"),
        (0.1234, "P1", US, "12.3%"),
        (0.5, "P0", DE, "50 %"),
        (1234.5, "C2", US, "$1,234.50"),
        (-3, "C0", US, "-$3"),
        (1234.5, "C2", DE, "1.234,50 €"),
        (1500, "E2", US, "1.50E+003"),
        (42, "G", US, "42"),
        (0.5, "G", US, "0.5"),
        (2.5, "0", US, "3"),
        (-2.5, "0", US, "-3"),
        (1234.4, "0", US, "1234"),
    ],
)
def test_numbers(value, fmt: str, culture, expected: str) -> None:
    assert display_value(value, fmt, culture) == expected


def test_integer_code_on_float_raises_inside_and_falls_back_outside() -> None:
    with pytest.raises(FormatCodeError):
        format_value(1.5, "D2", US)
    assert display_value(1.5, "D2", US) == "1.5"


def test_custom_numeric_pattern_falls_back() -> None:
    assert display_value(5, "#,##0", US) == "5"


def test_non_numeric_values() -> None:
    assert display_value(None, "N2", US) == ""
    assert display_value("abc", "N2", US) == "abc"
    assert display_value(True, "N2", US) == "True"


@pytest.mark.parametrize(
    ("fmt", "culture", "expected"),
    [
        ("d", US, "3/5/2024"),
        ("d", DE, "05.03.2024"),
        ("d", get_culture("en-GB"), "05/03/2024"),
        ("D", US, "Tuesday, March 5, 2024"),
        ("D", ES, "martes, 5 de marzo de 2024"),
        ("yyyy-MM-dd", US, "2024-03-05"),
        ("ddd MMM yy", US, "Tue Mar 24"),
    ],
)
def test_dates(fmt: str, culture, expected: str) -> None:
    assert display_value(dt.date(2024, 3, 5), fmt, culture) == expected


def test_times() -> None:
    v = dt.datetime(2024, 3, 5, 14, 7, 9, 123456)
    assert display_value(v, "t", US) == "2:07 PM"
    assert display_value(v, "T", US) == "2:07:09 PM"
    assert display_value(v, "t", DE) == "14:07"
    assert display_value(v, "yyyy-MM-dd HH:mm:ss.fff", US) == "2024-03-05 14:07:09.123"
    assert display_value(dt.datetime(2024, 1, 1, 0, 5), "hh:mm tt", US) == "12:05 AM"


def test_time_value_without_date_parts_falls_back() -> None:
    t = dt.time(1, 2)
    assert display_value(t, "d", US) == str(t)
    assert display_value(t, "HH:mm", US) == "01:02"
