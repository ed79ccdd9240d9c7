from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping, Optional, Sequence

from .merge import KEY_HEADER
from .models import ColumnJsonMap

log = logging.getLogger("translations.extract")


def _norm_key(v: Any) -> str | None:
    """None/blank -> None, otherwise the trimmed string."""
    if v is None:
        return None
    s = str(v).strip()
    return s or None


def build_column_jsons(
        rows: Iterable[Mapping[str, Any]],
        key_column: str,
        value_columns: Sequence[str],
) -> ColumnJsonMap:
    """
    One dictionary per value column: {trimmed key cell -> value cell}.

    Rows without a usable key are skipped; a repeated key keeps the value
    of the last row (last-one-wins).
    """
    rows = list(rows)
    out: ColumnJsonMap = {}
    for col in value_columns:
        m: Dict[str, Any] = {}
        skipped = 0
        for row in rows:
            key = _norm_key(row.get(key_column))
            if key is None:
                skipped += 1
                continue
            val = row.get(col)
            m[key] = "" if val is None else val
        if skipped:
            log.debug("column %r: skipped %d row(s) without key", col, skipped)
        out[col] = m
    return out


def default_key_column(headers: Sequence[str], preferred: str = KEY_HEADER) -> Optional[str]:
    if preferred in headers:
        return preferred
    return headers[0] if headers else None


def default_value_columns(headers: Sequence[str], key_column: Optional[str]) -> List[str]:
    return [h for h in headers if h != key_column]
