from __future__ import annotations

import json
from decimal import Decimal
from typing import Any, Dict

from .models import FlatDocument


def _number_text(value: float) -> str:
    """
    Shortest JSON number text as JavaScript prints it:
    2.0 -> "2", 1e-07 -> "1e-7", 1.5e-05 -> "0.000015", 1e+21 -> "1e+21".
    """
    if value.is_integer() and abs(value) < 1e21:
        return str(int(value))
    text = repr(value)
    if "e" not in text:
        return text
    if 1e-6 <= abs(value) < 1:
        return format(Decimal(text), "f")
    mantissa, exp = text.split("e")
    return f"{mantissa}e{exp[0]}{exp[1:].lstrip('0')}"


def _json_text(value: Any) -> str:
    """Compact JSON text matching JSON.stringify for parsed JSON values."""
    if isinstance(value, dict):
        return "{" + ",".join(f"{_json_text(str(k))}:{_json_text(v)}" for k, v in value.items()) + "}"
    if isinstance(value, list):
        return "[" + ",".join(_json_text(v) for v in value) + "]"
    if isinstance(value, float):
        return _number_text(value)
    return json.dumps(value, ensure_ascii=False)


def _scalar_text(value: Any) -> str:
    """Render a JSON scalar the way it appears in JSON text (None -> "")."""
    if value is None:
        return ""
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return _number_text(value)
    return str(value)


def flatten_json(doc: Any, prefix: str = "", sep: str = ".") -> FlatDocument:
    """
    Flatten a nested JSON object into {dotted.path: text}.

    - objects are walked in insertion order
    - lists are not traversed, they are stored as their JSON text
    - scalars become strings, null becomes ""
    - a non-object top level yields an empty mapping
    """
    items: FlatDocument = {}
    if not isinstance(doc, dict):
        return items

    def _walk(obj: Dict[str, Any], parent: str) -> None:
        for k, v in obj.items():
            key = f"{parent}{sep}{k}" if parent else str(k)
            if isinstance(v, dict):
                _walk(v, key)
            elif isinstance(v, list):
                items[key] = _json_text(v)
            else:
                items[key] = _scalar_text(v)

    _walk(doc, prefix)
    return items
