"""
Configuration for colfmt format resolution.

Defines FormatSettings, a frozen dataclass carrying the global defaults that close the
element → column → global format chain, and the culture used for translation and
display. Defaults are sourced from colfmt.core.constants (the single source of truth).

Source of truth
- colfmt.core.constants.DEFAULT_NUMERIC_FORMAT, DEFAULT_DATETIME_FORMAT, DEFAULT_CULTURE
- Culture data comes from colfmt.core.cultures

Import DAG discipline
- Depends only on stdlib and colfmt.core.
- Does not import higher layers (resolve, viz).

Notes
- Precedence: env > TOML > defaults.
- Invalid values are ignored and the previous layer's value is kept.
"""

from __future__ import annotations

import logging
import os
import tomllib
from dataclasses import dataclass, replace
from pathlib import Path
from typing import Any

from colfmt.core.constants import DEFAULT_CULTURE as CORE_DEFAULT_CULTURE
from colfmt.core.constants import DEFAULT_DATETIME_FORMAT as CORE_DATETIME_FORMAT
from colfmt.core.constants import DEFAULT_NUMERIC_FORMAT as CORE_NUMERIC_FORMAT
from colfmt.core.cultures import get_culture
from colfmt.core.errors import CultureError
from colfmt.core.schema import Culture

from .errors import ConfigError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FormatSettings:
    """
    Global format defaults for element resolution.

    Attributes:
        numeric_format (str): Canonical format of numeric elements without element or
            column format (default from colfmt.core.constants).
        datetime_format (str): Canonical format of date/time elements without element or
            column format.
        culture (str): Culture name used when the report context does not supply one.

    Examples:
        >>> from colfmt.io import FormatSettings
        >>> FormatSettings(numeric_format="N2").numeric_format
        'N2'
    """

    numeric_format: str = CORE_NUMERIC_FORMAT
    datetime_format: str = CORE_DATETIME_FORMAT
    culture: str = CORE_DEFAULT_CULTURE

    def culture_info(self) -> Culture:
        """Resolve ``culture`` through the registry (invariant fallback)."""
        return get_culture(self.culture)

    def validate(self) -> FormatSettings:
        """
        Strict check of the settings, for callers that want to fail fast.

        Raises:
            ConfigError: If a format is empty or the culture is unknown.
        """
        if not self.numeric_format.strip():
            raise ConfigError("numeric_format must not be empty")
        if not self.datetime_format.strip():
            raise ConfigError("datetime_format must not be empty")
        try:
            get_culture(self.culture, strict=True)
        except CultureError as exc:
            raise ConfigError(str(exc)) from exc
        return self

    # Configuration loaders (env/TOML) with precedence: env > TOML > defaults.

    @classmethod
    def _apply_mapping(cls, base: FormatSettings, cfg: dict[str, Any] | None) -> FormatSettings:
        """Apply a loose config mapping onto FormatSettings, returning a new instance."""
        if not isinstance(cfg, dict):
            return base

        s = base
        for key in ("numeric_format", "datetime_format", "culture"):
            value = cfg.get(key)
            if isinstance(value, str) and value.strip():
                s = replace(s, **{key: value.strip()})
            elif key in cfg:
                logger.debug(f"Ignoring invalid {key!r} setting: {value!r}")
        return s

    @classmethod
    def from_env(
        cls, base: FormatSettings | None = None, prefix: str = "COLFMT_"
    ) -> FormatSettings:
        """
        Build FormatSettings from environment variables. Precedence is env > base > defaults.

        Recognized variables:
            - COLFMT_NUMERIC_FORMAT
            - COLFMT_DATETIME_FORMAT
            - COLFMT_CULTURE
        """
        s = base or cls()

        mapping: dict[str, Any] = {}
        for key in ("numeric_format", "datetime_format", "culture"):
            v = os.getenv(prefix + key.upper())
            if v:
                mapping[key] = v

        return cls._apply_mapping(s, mapping)

    @classmethod
    def from_toml(cls, path: str | os.PathLike[str] | None = None) -> FormatSettings:
        """
        Build FormatSettings from a TOML file.

        Search order when `path` is None:
            1) ./colfmt.toml (with either a [formats] table or top-level keys)
            2) ./pyproject.toml under [tool.colfmt.formats]

        Returns defaults if no file is present or none is readable.
        """
        s = cls()

        def _load_toml(p: Path) -> dict[str, Any] | None:
            try:
                with p.open("rb") as fh:
                    return tomllib.load(fh)
            except (OSError, tomllib.TOMLDecodeError) as exc:
                logger.warning(f"Cannot read settings from {p}: {exc}")
                return None

        cfg: dict[str, Any] | None = None

        cand: list[Path] = []
        if path is not None:
            cand.append(Path(path))
        else:
            cand.append(Path.cwd() / "colfmt.toml")
            cand.append(Path.cwd() / "pyproject.toml")

        for p in cand:
            if not p.exists():
                continue
            data = _load_toml(p)
            if not isinstance(data, dict):
                continue
            if p.name == "pyproject.toml":
                tool = data.get("tool", {})
                cfg = tool.get("colfmt", {}).get("formats", {}) if isinstance(tool, dict) else None
            else:
                top = data
                if "formats" in top and isinstance(top["formats"], dict):
                    cfg = top["formats"]
                else:
                    cfg = top
            if cfg:
                break

        return cls._apply_mapping(s, cfg)

    @classmethod
    def load(cls, path: str | os.PathLike[str] | None = None) -> FormatSettings:
        """
        Load FormatSettings applying precedence: environment > TOML > defaults.

        Args:
            path: Optional explicit TOML path. If None, search defaults
                (colfmt.toml, pyproject.toml).
        """
        s = cls.from_toml(path)
        s = cls.from_env(base=s)
        return s
