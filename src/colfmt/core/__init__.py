"""
Core package aggregator for colfmt contracts (grammar, schemas, cultures, constants, errors).

## Contracts (single source of truth)
- Grammar — enums, format-code vocabulary, parse helpers.
- Schema — pydantic models for enumerated lists, source columns, the metadata catalog
  and cultures.
- Cultures — built-in culture registry with invariant fallback.
- Constants/Errors — fallback formats, sort sentinels, typed exceptions.

## Notes
- Zero-IO policy: stdlib + pydantic only; no file/network IO.
- Naming policy: enum `.value` and field names are lower_snake.

## Downstream usage
- colfmt.resolve — reads ColumnRef/MetaCatalog and the grammar enums to resolve elements.
- colfmt.formats — classifies canonical codes and expands culture patterns.
- colfmt.io — seeds FormatSettings from `constants` and resolves cultures by name.

## Examples
```python
from colfmt.core.grammar import ColumnType, split_numeric_code
from colfmt.core.schema import ColumnRef
from colfmt.core.cultures import get_culture

col = ColumnRef(id="c1", name="amount", display_name="Amount", type="numeric", format="N2")
col.type is ColumnType.NUMERIC  # True
split_numeric_code(col.format)  # ('N', 2)
get_culture("en-US").short_date_pattern  # 'M/d/yyyy'
```
"""
