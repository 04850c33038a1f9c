"""
colfmt.io — Configuration boundary (environment variables and TOML files).

## Public API
- FormatSettings — global default formats and culture, loaded env > TOML > defaults.
- ConfigError — raised by `FormatSettings.validate()`.

## Examples
```python
from colfmt.io import FormatSettings

settings = FormatSettings.load()  # colfmt.toml / pyproject, then COLFMT_* env
settings.culture_info().short_date_pattern
```
"""

from __future__ import annotations

from .config import FormatSettings
from .errors import ConfigError

__all__ = [
    "FormatSettings",
    "ConfigError",
]
