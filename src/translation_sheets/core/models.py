from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Generic, List, TypeVar

import pandas as pd

from .errors import DocumentError

FlatDocument = Dict[str, str]
Row = Dict[str, Any]
ColumnJsonMap = Dict[str, Dict[str, Any]]

T = TypeVar("T")

MEDIA_TYPES: Dict[str, str] = {
    "csv": "text/csv;charset=utf-8",
    "xlsx": "application/vnd.openxmlformats-officedocument.spreadsheetml.sheet",
    "json": "application/json",
}


@dataclass(frozen=True)
class MergedTable:
    """
    Key table built from N flattened documents.

    - headers: ["key", *document names in first-seen order]
    - rows:    one dict per key, sorted by key, every header present
    """
    headers: List[str]
    rows: List[Dict[str, str]]

    def to_frame(self) -> pd.DataFrame:
        return pd.DataFrame(self.rows, columns=self.headers, dtype=str)


@dataclass(frozen=True)
class ParsedSheet:
    """One decoded sheet: header names from the first row, rows keyed by header."""
    name: str
    headers: List[str]
    rows: List[Row] = field(default_factory=list)

    @property
    def is_empty(self) -> bool:
        return not self.headers


@dataclass(frozen=True)
class ConvertedFile:
    """In-memory output buffer tagged with its file extension."""
    data: bytes
    file_name: str
    extension: str

    @property
    def full_name(self) -> str:
        return f"{self.file_name}.{self.extension}"

    @property
    def media_type(self) -> str:
        return MEDIA_TYPES.get(self.extension, "application/octet-stream")


@dataclass
class BatchResult(Generic[T]):
    """Result of a batch call: whatever succeeded plus per-document failures."""
    result: T
    failures: Dict[str, DocumentError] = field(default_factory=dict)

    @property
    def ok(self) -> bool:
        return not self.failures
