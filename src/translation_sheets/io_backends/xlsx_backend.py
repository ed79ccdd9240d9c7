from __future__ import annotations

import io
from typing import Any, List, Optional, Sequence

import xlsxwriter
from openpyxl import load_workbook

from ..core.models import ParsedSheet, Row
from .base import BackendBase, BackendOptions, Rows


# ------------------------------
# Internal: cell helpers
# ------------------------------

def _cell_text(v: Any) -> str:
    return "" if v is None else str(v)


def _is_populated(v: Any) -> bool:
    return v is not None and v != ""


def _column_widths(headers: Sequence[str], rows: Rows, max_width: int) -> List[int]:
    """Longest header/value per column + 2, capped at max_width."""
    widths = [len(str(h)) for h in headers]
    for row in rows:
        for c, h in enumerate(headers):
            widths[c] = max(widths[c], len(_cell_text(row.get(h))))
    return [min(w + 2, max_width) for w in widths]


def _header_cells(values: Sequence[Any]) -> List[str]:
    last = max(i for i, v in enumerate(values) if _is_populated(v))
    return [_cell_text(v) for v in values[: last + 1]]


# ------------------------------
# Encode / decode
# ------------------------------

def to_spreadsheet(
        headers: Sequence[str],
        rows: Rows,
        *,
        sheet_name: str = "Translations",
        max_column_width: int = 50,
        header_fill_rgb: str = "D3D3D3",
) -> bytes:
    """
    Write one worksheet: bold gray header row, data below in header order,
    auto-sized columns, frozen header. Values are written as text.
    """
    buf = io.BytesIO()
    wb = xlsxwriter.Workbook(buf, {"in_memory": True})
    ws = wb.add_worksheet((sheet_name or "Sheet")[:31])

    fmt_header = wb.add_format({
        "bold": True,
        "bg_color": f"#{header_fill_rgb}",
        "align": "left",
        "valign": "vcenter",
    })

    for c, h in enumerate(headers):
        ws.write_string(0, c, str(h), fmt_header)

    for r, row in enumerate(rows, start=1):
        for c, h in enumerate(headers):
            ws.write_string(r, c, _cell_text(row.get(h)))

    for c, w in enumerate(_column_widths(headers, rows, max_column_width)):
        ws.set_column(c, c, w)

    ws.freeze_panes(1, 0)
    wb.close()
    return buf.getvalue()


def parse_spreadsheet(data: bytes) -> List[ParsedSheet]:
    """
    Read every worksheet. Per sheet the first non-empty row holds the headers,
    each later non-empty row becomes {header: value} ("" for missing cells).
    Sheets without a header row are left out.
    """
    if not data:
        return []

    wb = load_workbook(io.BytesIO(data), read_only=True, data_only=True)
    out: List[ParsedSheet] = []
    try:
        for ws in wb.worksheets:
            headers: Optional[List[str]] = None
            rows: List[Row] = []
            for values in ws.iter_rows(values_only=True):
                if not any(_is_populated(v) for v in values):
                    continue
                if headers is None:
                    headers = _header_cells(values)
                    continue
                row: Row = {}
                for i, h in enumerate(headers):
                    v = values[i] if i < len(values) else None
                    row[h] = "" if v is None else v
                rows.append(row)
            if headers:
                out.append(ParsedSheet(name=ws.title, headers=headers, rows=rows))
    finally:
        wb.close()
    return out


# ------------------------------
# ExcelBackend
# ------------------------------

class ExcelBackend(BackendBase):
    """
    XLSX adapter: xlsxwriter for writing, openpyxl for reading.
    """

    extension = "xlsx"

    def encode(
        self,
        headers: Sequence[str],
        rows: Rows,
        options: Optional[BackendOptions] = None,
    ) -> bytes:
        opts = options or BackendOptions()
        return to_spreadsheet(
            headers,
            rows,
            sheet_name=opts.sheet_name,
            max_column_width=opts.max_column_width,
            header_fill_rgb=opts.header_fill_rgb,
        )

    def decode(
        self,
        data: bytes,
        name: str = "",
        options: Optional[BackendOptions] = None,
    ) -> List[ParsedSheet]:
        return parse_spreadsheet(data)
