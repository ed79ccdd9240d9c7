from __future__ import annotations

from typing import Dict, Type

from .base import BackendBase
from .csv_backend import CSVBackend
from .xlsx_backend import ExcelBackend


# Registry of available backends keyed by "kind"
_BACKENDS: Dict[str, Type[BackendBase]] = {
    "csv": CSVBackend,
    "xlsx": ExcelBackend,
}

_SPREADSHEET_SUFFIXES = (".xlsx", ".xls")


def available_kinds() -> list[str]:
    return sorted(_BACKENDS)


def make_backend(kind: str) -> BackendBase:
    """
    Factory returning an instance of the requested backend.

    Parameters
    ----------
    kind : str
        Short identifier used in config/CLI ('csv' or 'xlsx').

    Returns
    -------
    BackendBase
        Fresh instance of the backend.

    Raises
    ------
    KeyError
        If `kind` is unknown.
    """
    k = (kind or "").strip().lower()
    cls = _BACKENDS.get(k)
    if cls is None:
        available = ", ".join(available_kinds())
        raise KeyError(f"Unknown backend kind '{kind}'. Available: {available}")
    return cls()


def kind_for_filename(name: str) -> str:
    """Workbook suffixes map to 'xlsx', anything else is read as CSV."""
    return "xlsx" if name.lower().endswith(_SPREADSHEET_SUFFIXES) else "csv"
