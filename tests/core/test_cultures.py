import logging

import pytest

from colfmt.core.cultures import INVARIANT, get_culture, list_cultures, register_culture
from colfmt.core.errors import CultureError
from colfmt.core.schema import Culture


def test_builtin_cultures_registered() -> None:
    names = list_cultures()
    for expected in ("en-US", "en-GB", "fr-FR", "de-DE", "es-ES"):
        assert expected in names


@pytest.mark.parametrize("name", ["en-US", "en_us", "EN-us", " en-US "])
def test_lookup_is_normalized(name: str) -> None:
    assert get_culture(name).name == "en-US"


def test_empty_name_is_invariant() -> None:
    assert get_culture(None) is INVARIANT
    assert get_culture("") is INVARIANT


def test_unknown_culture_falls_back_with_warning(caplog) -> None:
    with caplog.at_level(logging.WARNING, logger="colfmt.core.cultures"):
        c = get_culture("xx-YY")
    assert c is INVARIANT
    assert "xx-YY" in caplog.text


def test_unknown_culture_strict_raises() -> None:
    with pytest.raises(CultureError):
        get_culture("xx-YY", strict=True)


def test_register_custom_culture() -> None:
    register_culture(Culture(name="nl-NL", short_date_pattern="d-M-yyyy", date_separator="-"))
    assert get_culture("nl_nl").short_date_pattern == "d-M-yyyy"


def test_known_patterns() -> None:
    assert get_culture("en-US").short_date_pattern == "M/d/yyyy"
    assert get_culture("de-DE").date_separator == "."
    assert get_culture("fr-FR").number_decimal_separator == ","
