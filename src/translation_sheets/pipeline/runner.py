from __future__ import annotations

import json
import logging
import re
from datetime import datetime, timezone
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple, Union

from ..config import ConverterConfig
from ..core.errors import DocumentError, NoDocumentsError, SelectionError
from ..core.extract import build_column_jsons, default_key_column, default_value_columns
from ..core.merge import merge_documents
from ..core.models import BatchResult, ConvertedFile, ParsedSheet, Row
from ..io_backends.router import kind_for_filename, make_backend

log = logging.getLogger("translations.pipeline")

Source = Union[str, bytes]
Sheets = Dict[str, List[ParsedSheet]]

_UNSAFE_FILENAME_CHARS = re.compile(r'[\\/:*?"<>|]')


# ---------------------------------------------------------------------
# Naming
# ---------------------------------------------------------------------
def default_file_name(now: Optional[datetime] = None, prefix: str = "translations") -> str:
    """
    '<prefix>-<UTC ISO-8601 with millis>' with ':' and '.' replaced by '-',
    e.g. translations-2024-05-01T10-20-30-123Z
    """
    now = now or datetime.now(timezone.utc)
    if now.tzinfo is not None:
        now = now.astimezone(timezone.utc)
    stamp = f"{now:%Y-%m-%dT%H:%M:%S}.{now.microsecond // 1000:03d}Z"
    return f"{prefix}-{re.sub(r'[:.]', '-', stamp)}"


def sanitize_file_name(name: str) -> str:
    return _UNSAFE_FILENAME_CHARS.sub("_", name)


def _as_text(source: Source) -> str:
    if isinstance(source, (bytes, bytearray)):
        return bytes(source).decode("utf-8-sig")
    return source


# ---------------------------------------------------------------------
# JSON -> table
# ---------------------------------------------------------------------
def load_json_documents(sources: Mapping[str, Source]) -> BatchResult[Dict[str, Any]]:
    """
    Parse each named JSON text. A broken document is recorded as a
    DocumentError and does not stop the others; input order is kept.
    """
    docs: Dict[str, Any] = {}
    failures: Dict[str, DocumentError] = {}
    for name, source in sources.items():
        try:
            docs[name] = json.loads(_as_text(source))
        except (ValueError, UnicodeDecodeError) as e:
            failures[name] = DocumentError(name, str(e))
            log.warning("Skipping %s: invalid JSON (%s)", name, e)
    return BatchResult(result=docs, failures=failures)


def json_to_table(
        sources: Mapping[str, Source],
        output_format: Optional[str] = None,
        *,
        config: Optional[ConverterConfig] = None,
        now: Optional[datetime] = None,
) -> BatchResult[Optional[ConvertedFile]]:
    """
    Merge named JSON translation files into one CSV/XLSX key table.

    result is None when no document could be parsed; failures lists the
    documents that were left out.
    """
    cfg = config or ConverterConfig()
    fmt = (output_format or cfg.output_format).strip().lower()
    if not sources:
        raise NoDocumentsError("No files selected")

    backend = make_backend(fmt)
    loaded = load_json_documents(sources)
    if not loaded.result:
        return BatchResult(result=None, failures=loaded.failures)

    table = merge_documents(loaded.result, key_header=cfg.key_header)
    data = backend.encode(table.headers, table.rows, cfg.backend_options())
    out = ConvertedFile(
        data=data,
        file_name=default_file_name(now, prefix=cfg.file_prefix),
        extension=backend.extension,
    )
    log.info("Generated %s (%d keys, %d document(s))", out.full_name, len(table.rows), len(loaded.result))
    return BatchResult(result=out, failures=loaded.failures)


# ---------------------------------------------------------------------
# table -> JSON
# ---------------------------------------------------------------------
def parse_tables(sources: Mapping[str, Source]) -> BatchResult[Sheets]:
    """
    Decode CSV/XLSX sources picked by file name; each yields its list of sheets.
    Failures are collected per document.
    """
    sheets: Sheets = {}
    failures: Dict[str, DocumentError] = {}
    for name, source in sources.items():
        kind = kind_for_filename(name)
        data = source.encode("utf-8") if isinstance(source, str) else bytes(source)
        try:
            sheets[name] = make_backend(kind).decode(data, name=name)
        except Exception as e:  # any parser failure belongs to this document only
            failures[name] = DocumentError(name, str(e) or type(e).__name__)
            log.warning("Skipping %s: cannot read %s (%s)", name, kind, e)
            continue
        log.debug("%s: %d sheet(s)", name, len(sheets[name]))
    return BatchResult(result=sheets, failures=failures)


def resolve_selection(
        headers: Sequence[str],
        key_column: Optional[str] = None,
        value_columns: Optional[Sequence[str]] = None,
        *,
        key_header: str = "key",
) -> Tuple[Optional[str], List[str]]:
    """Fill in the default key column and value columns where not given."""
    key = key_column or default_key_column(headers, preferred=key_header)
    cols = list(value_columns) if value_columns is not None else default_value_columns(headers, key)
    return key, cols


def export_column_jsons(
        source_name: str,
        rows: Sequence[Row],
        key_column: Optional[str],
        value_columns: Sequence[str],
        *,
        indent: int = 2,
) -> List[ConvertedFile]:
    """
    One JSON file per selected value column, named
    '<source>_<column>.json' with unsafe filename characters replaced.
    """
    if not key_column:
        raise SelectionError(f"{source_name}: no key column selected")
    if not value_columns:
        raise SelectionError(f"{source_name}: select at least one column to export")

    jsons = build_column_jsons(rows, key_column, value_columns)
    out: List[ConvertedFile] = []
    for col in value_columns:
        text = json.dumps(jsons[col], ensure_ascii=False, indent=indent, default=str)
        out.append(ConvertedFile(
            data=text.encode("utf-8"),
            file_name=f"{sanitize_file_name(source_name)}_{sanitize_file_name(col)}",
            extension="json",
        ))
    log.info("%s: exported %d column(s) keyed by %r", source_name, len(out), key_column)
    return out
