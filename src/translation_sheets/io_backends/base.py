from __future__ import annotations

from dataclasses import dataclass
from typing import Any, List, Mapping, Optional, Sequence

from ..core.models import ParsedSheet

Rows = Sequence[Mapping[str, Any]]


@dataclass
class BackendOptions:
    """
    Backend-wide switches; a backend ignores what it does not need.

    - sheet_name:       worksheet title for workbook backends
    - max_column_width: cap for auto-sized columns
    - header_fill_rgb:  header background for workbook backends
    - encoding:         text encoding for CSV
    """
    sheet_name: str = "Translations"
    max_column_width: int = 50
    header_fill_rgb: str = "D3D3D3"
    encoding: str = "utf-8"


class BackendBase:
    """Encode a header/rows table to bytes and decode bytes back into sheets."""

    extension: str = ""

    def encode(
        self,
        headers: Sequence[str],
        rows: Rows,
        options: Optional[BackendOptions] = None,
    ) -> bytes:
        raise NotImplementedError

    def decode(
        self,
        data: bytes,
        name: str = "",
        options: Optional[BackendOptions] = None,
    ) -> List[ParsedSheet]:
        raise NotImplementedError
