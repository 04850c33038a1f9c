"""
Built-in culture registry.

Holds a small set of .NET-compatible cultures (invariant, en-US, en-GB, fr-FR, de-DE,
es-ES) and resolves culture names for the configuration layer and tests. Custom
cultures can be added with ``register_culture``.

Notes:
    - Lookups are case-insensitive and accept "_" for "-" ("en_us" -> "en-US").
    - Non-strict lookups fall back to the invariant culture and log a warning; report
      layout must not fail because of a misspelled culture name.
"""

from __future__ import annotations

import logging

from .errors import CultureError
from .schema import Culture

__all__ = [
    "INVARIANT",
    "get_culture",
    "register_culture",
    "list_cultures",
]

logger = logging.getLogger(__name__)

INVARIANT = Culture(name="")

_EN_US = Culture(
    name="en-US",
    short_date_pattern="M/d/yyyy",
    long_date_pattern="dddd, MMMM d, yyyy",
    short_time_pattern="h:mm tt",
    long_time_pattern="h:mm:ss tt",
    currency_symbol="$",
)

_EN_GB = Culture(
    name="en-GB",
    short_date_pattern="dd/MM/yyyy",
    long_date_pattern="dd MMMM yyyy",
    short_time_pattern="HH:mm",
    long_time_pattern="HH:mm:ss",
    am_designator="am",
    pm_designator="pm",
    currency_symbol="£",
)

_FR_FR = Culture(
    name="fr-FR",
    short_date_pattern="dd/MM/yyyy",
    long_date_pattern="dddd d MMMM yyyy",
    short_time_pattern="HH:mm",
    long_time_pattern="HH:mm:ss",
    day_names=["lundi", "mardi", "mercredi", "jeudi", "vendredi", "samedi", "dimanche"],
    abbreviated_day_names=["lun.", "mar.", "mer.", "jeu.", "ven.", "sam.", "dim."],
    month_names=[
        "janvier",
        "février",
        "mars",
        "avril",
        "mai",
        "juin",
        "juillet",
        "août",
        "septembre",
        "octobre",
        "novembre",
        "décembre",
    ],
    abbreviated_month_names=[
        "janv.",
        "févr.",
        "mars",
        "avr.",
        "mai",
        "juin",
        "juil.",
        "août",
        "sept.",
        "oct.",
        "nov.",
        "déc.",
    ],
    am_designator="",
    pm_designator="",
    number_group_separator=" ",
    number_decimal_separator=",",
    currency_symbol="€",
    currency_symbol_first=False,
    percent_spaced=True,
)

_DE_DE = Culture(
    name="de-DE",
    date_separator=".",
    short_date_pattern="dd.MM.yyyy",
    long_date_pattern="dddd, d. MMMM yyyy",
    short_time_pattern="HH:mm",
    long_time_pattern="HH:mm:ss",
    day_names=["Montag", "Dienstag", "Mittwoch", "Donnerstag", "Freitag", "Samstag", "Sonntag"],
    abbreviated_day_names=["Mo", "Di", "Mi", "Do", "Fr", "Sa", "So"],
    month_names=[
        "Januar",
        "Februar",
        "März",
        "April",
        "Mai",
        "Juni",
        "Juli",
        "August",
        "September",
        "Oktober",
        "November",
        "Dezember",
    ],
    abbreviated_month_names=[
        "Jan",
        "Feb",
        "Mär",
        "Apr",
        "Mai",
        "Jun",
        "Jul",
        "Aug",
        "Sep",
        "Okt",
        "Nov",
        "Dez",
    ],
    am_designator="",
    pm_designator="",
    number_group_separator=".",
    number_decimal_separator=",",
    currency_symbol="€",
    currency_symbol_first=False,
    percent_spaced=True,
)

_ES_ES = Culture(
    name="es-ES",
    short_date_pattern="dd/MM/yyyy",
    long_date_pattern="dddd, d' de 'MMMM' de 'yyyy",
    short_time_pattern="H:mm",
    long_time_pattern="H:mm:ss",
    day_names=["lunes", "martes", "miércoles", "jueves", "viernes", "sábado", "domingo"],
    abbreviated_day_names=["lun.", "mar.", "mié.", "jue.", "vie.", "sáb.", "dom."],
    month_names=[
        "enero",
        "febrero",
        "marzo",
        "abril",
        "mayo",
        "junio",
        "julio",
        "agosto",
        "septiembre",
        "octubre",
        "noviembre",
        "diciembre",
    ],
    abbreviated_month_names=[
        "ene.",
        "feb.",
        "mar.",
        "abr.",
        "may.",
        "jun.",
        "jul.",
        "ago.",
        "sept.",
        "oct.",
        "nov.",
        "dic.",
    ],
    am_designator="a. m.",
    pm_designator="p. m.",
    number_group_separator=".",
    number_decimal_separator=",",
    currency_symbol="€",
    currency_symbol_first=False,
    percent_spaced=True,
)


def _key(name: str) -> str:
    return (name or "").strip().replace("_", "-").lower()


# Registry
_CULTURES: dict[str, Culture] = {
    _key(c.name): c for c in (INVARIANT, _EN_US, _EN_GB, _FR_FR, _DE_DE, _ES_ES)
}


def register_culture(culture: Culture) -> None:
    """Add or replace a culture in the registry (keyed by normalized name)."""
    _CULTURES[_key(culture.name)] = culture


def get_culture(name: str | None, *, strict: bool = False) -> Culture:
    """
    Look up a culture by name.

    Args:
        name (str | None): Culture name such as "en-US"; None or "" is the invariant culture.
        strict (bool): Raise instead of falling back.

    Returns:
        Culture: The registered culture, or INVARIANT when unknown and not strict.

    Raises:
        CultureError: If the name is unknown and ``strict`` is True.
    """
    found = _CULTURES.get(_key(name or ""))
    if found is not None:
        return found
    if strict:
        raise CultureError(f"unknown culture {name!r}; known: {list_cultures()}")
    logger.warning(f"Unknown culture {name!r}, using the invariant culture")
    return INVARIANT


def list_cultures() -> list[str]:
    """Names of all registered cultures, in registration order."""
    return [c.name for c in _CULTURES.values()]
