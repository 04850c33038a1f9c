"""
Custom exceptions for the colfmt.io module.

Purpose
- Provide configuration-layer error types, distinct from colfmt.core errors.

Notes
- FormatSettings loaders never raise on bad values (they keep defaults);
  ConfigError is raised only by the explicit ``FormatSettings.validate()``.
"""

from __future__ import annotations


class IoError(Exception):
    """
    Base class for errors raised by colfmt.io.
    """


class ConfigError(IoError):
    """
    Raised when format settings are invalid or unsupported.

    Examples:
        - Empty numeric or date/time default format
        - Unknown culture name
    """
