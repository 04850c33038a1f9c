import pytest

from colfmt.core.cultures import get_culture
from colfmt.core.grammar import FormatKind
from colfmt.formats import to_chart_axis_format

US = get_culture("en-US")


@pytest.mark.parametrize(
    ("code", "expected"),
    [
        ("0", ".0f"),
        ("N", ".0f"),
        ("D", ".0f"),
        ("G", ".0f"),
        ("N0", ",.0f"),
        ("N3", ",.3f"),
        ("D8", ",.8f"),
        ("G2", ",.2f"),
        ("P0", ",.0%"),
        ("P2", ",.2%"),
        ("C2", "$,.2f"),
    ],
)
def test_numeric_table(code: str, expected: str) -> None:
    assert to_chart_axis_format(code, US, FormatKind.NUMERIC) == expected


@pytest.mark.parametrize("culture", ["en-US", "de-DE", "fr-FR", ""])
def test_numeric_codes_are_culture_independent(culture: str) -> None:
    for n in range(9):
        assert to_chart_axis_format(f"N{n}", get_culture(culture), FormatKind.NUMERIC) == f",.{n}f"


@pytest.mark.parametrize("code", ["N9", "E2", "#,##0.00"])
def test_unmatched_numeric_passes_through(code: str) -> None:
    assert to_chart_axis_format(code, US, FormatKind.NUMERIC) == code


@pytest.mark.parametrize(
    ("culture", "code", "expected"),
    [
        ("en-US", "d", "%m/%e/%Y"),
        ("en-US", "D", "%A, %B %e, %Y"),
        ("en-US", "t", "%I:%M %p"),
        ("en-US", "g", "%m/%e/%Y %I:%M %p"),
        ("en-GB", "d", "%d/%m/%Y"),
        ("de-DE", "d", "%d.%m.%Y"),
        ("es-ES", "D", "%A, %e de %B de %Y"),
        ("en-US", "yyyy-MM-dd HH:mm:ss.fff", "%Y-%m-%d %H:%M:%S.%L"),
        ("en-US", "yyyyy", "%Y%y"),
    ],
)
def test_datetime_patterns(culture: str, code: str, expected: str) -> None:
    assert to_chart_axis_format(code, get_culture(culture), FormatKind.DATETIME) == expected


def test_date_separator_replaced_after_rewrite() -> None:
    de = get_culture("de-DE")
    assert to_chart_axis_format("dd/MM/yyyy", de, FormatKind.DATETIME) == "%d.%m.%Y"


def test_translated_output_is_stable() -> None:
    done = "%Y %e %S %L %A %B %b %a"
    assert to_chart_axis_format(done, US, FormatKind.DATETIME) == done


def test_quoted_percent_is_escaped() -> None:
    assert to_chart_axis_format("yyyy'%'", US, FormatKind.DATETIME) == "%Y%%"


def test_kind_disambiguates_d() -> None:
    assert to_chart_axis_format("D", US, FormatKind.NUMERIC) == ".0f"
    assert to_chart_axis_format("D", US, FormatKind.DATETIME) == "%A, %B %e, %Y"


def test_text_is_general_format() -> None:
    assert to_chart_axis_format("0", US, FormatKind.TEXT) == "g"
    assert to_chart_axis_format("N2", US, FormatKind.TEXT) == "g"


def test_quoted_slash_is_not_localized() -> None:
    de = get_culture("de-DE")
    assert to_chart_axis_format("yyyy'/'MM", de, FormatKind.DATETIME) == "%Y/%m"
    assert to_chart_axis_format("yyyy/MM", de, FormatKind.DATETIME) == "%Y.%m"
