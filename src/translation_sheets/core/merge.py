from __future__ import annotations

import logging
from typing import Any, Dict, Iterable, List, Mapping

from .flatten import flatten_json
from .models import FlatDocument, MergedTable

log = logging.getLogger("translations.merge")

KEY_HEADER = "key"


def _log_prefix_collisions(keys: Iterable[str], sep: str = ".") -> None:
    """'a.b' and 'a.b.c' stay independent keys; only note them."""
    ordered = sorted(keys)
    for shorter, longer in zip(ordered, ordered[1:]):
        if longer.startswith(shorter + sep):
            log.debug("key %r is also a prefix of %r (kept as separate rows)", shorter, longer)


def merge_documents(
        documents: Mapping[str, Any],
        *,
        key_header: str = KEY_HEADER,
) -> MergedTable:
    """
    Flatten each document and union all keys into one sorted table.

    Columns: key_header first, then one column per document name in the
    iteration order of `documents`. Keys a document does not define get "".
    """
    flat: Dict[str, FlatDocument] = {}
    all_keys: set[str] = set()
    for name, doc in documents.items():
        flat[name] = flatten_json(doc)
        all_keys.update(flat[name])
        log.debug("flattened %s: %d keys", name, len(flat[name]))

    if log.isEnabledFor(logging.DEBUG):
        _log_prefix_collisions(all_keys)

    names = list(flat)
    rows: List[Dict[str, str]] = []
    for key in sorted(all_keys):
        row: Dict[str, str] = {key_header: key}
        for name in names:
            row[name] = flat[name].get(key, "")
        rows.append(row)

    log.info("merged %d document(s) into %d key(s)", len(names), len(rows))
    return MergedTable(headers=[key_header, *names], rows=rows)
