"""
Report execution context handed to resolvers: culture plus translation hook.

Notes:
    - Translation tables themselves are out of scope; ``translations`` is whatever the
      report layer supplies (text -> translated text). Missing keys pass through.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from colfmt.core.cultures import get_culture
from colfmt.core.schema import Culture, EnumList

__all__ = ["ReportContext"]


@dataclass(frozen=True)
class ReportContext:
    """
    Culture and translations of the report being executed.

    Attributes:
        culture (Culture): Culture used for translation and display.
        translations (dict[str, str]): Text -> translated text.

    Examples:
        >>> ctx = ReportContext.for_culture("fr-FR", {"Count of": "Nombre de"})
        >>> ctx.translate("Count of"), ctx.translate("Sum of")
        ('Nombre de', 'Sum of')
    """

    culture: Culture
    translations: dict[str, str] = field(default_factory=dict)

    @classmethod
    def for_culture(cls, name: str, translations: dict[str, str] | None = None) -> ReportContext:
        return cls(culture=get_culture(name), translations=dict(translations or {}))

    def translate(self, text: str) -> str:
        return self.translations.get(text, text)

    def enum_display_value(self, enum_list: EnumList, value_id: str) -> str:
        """Translated display value of an enum entry; the raw id when absent."""
        entry = enum_list.find_by_id(value_id)
        if entry is None:
            return value_id
        return self.translate(entry.display_value)
