from __future__ import annotations

import io
from typing import Any, List, Optional, Sequence

import pandas as pd

from ..core.models import ParsedSheet
from .base import BackendBase, BackendOptions, Rows

_BOM = "\ufeff"


def _escape_csv_cell(v: Any) -> str:
    s = "" if v is None else str(v)
    if any(ch in s for ch in [",", '"', "\n", "\r"]):
        s = '"' + s.replace('"', '""') + '"'
    return s


def to_csv(headers: Sequence[str], rows: Rows) -> str:
    """
    Comma separated, one line per row, columns in header order.
    Lines are joined with '\\n'; no trailing newline.
    """
    lines = [",".join(_escape_csv_cell(h) for h in headers)]
    for row in rows:
        lines.append(",".join(_escape_csv_cell(row.get(h)) for h in headers))
    return "\n".join(lines)


def parse_csv(text: str, name: str = "") -> ParsedSheet:
    """
    First non-empty line -> headers, every further non-empty line -> one row.
    Values are kept as strings; short lines are padded with "", longer
    lines lose the fields past the last header.
    Empty input gives an empty sheet instead of an error.
    """
    if text.startswith(_BOM):
        text = text[len(_BOM):]
    if not text.strip():
        return ParsedSheet(name=name, headers=[], rows=[])

    read_opts = dict(header=None, dtype=str, keep_default_na=False, na_values=[], skip_blank_lines=True)
    try:
        head = pd.read_csv(io.StringIO(text), nrows=1, **read_opts)
    except pd.errors.EmptyDataError:
        return ParsedSheet(name=name, headers=[], rows=[])
    width = head.shape[1]

    # lines wider than the header (e.g. trailing comma) keep their first `width` fields
    raw = pd.read_csv(
        io.StringIO(text),
        engine="python",
        on_bad_lines=lambda fields: fields[:width],
        names=list(range(width)),
        index_col=False,
        **read_opts,
    )

    raw = raw.where(pd.notnull(raw), "")
    headers = [str(h) for h in raw.iloc[0].tolist()]
    rows = [dict(zip(headers, values)) for values in raw.iloc[1:].values.tolist()]
    return ParsedSheet(name=name, headers=headers, rows=rows)


class CSVBackend(BackendBase):
    """
    Plain CSV:
    - one header line, data from line 2
    - UTF-8 without BOM on write, BOM tolerated on read
    - always exactly one sheet
    """

    extension = "csv"

    def encode(
        self,
        headers: Sequence[str],
        rows: Rows,
        options: Optional[BackendOptions] = None,
    ) -> bytes:
        opts = options or BackendOptions()
        return to_csv(headers, rows).encode(opts.encoding)

    def decode(
        self,
        data: bytes,
        name: str = "",
        options: Optional[BackendOptions] = None,
    ) -> List[ParsedSheet]:
        opts = options or BackendOptions()
        text = data.decode(opts.encoding) if isinstance(data, (bytes, bytearray)) else str(data)
        return [parse_csv(text, name=name)]
