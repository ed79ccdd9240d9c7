from .base import BackendBase, BackendOptions
from .csv_backend import CSVBackend, parse_csv, to_csv
from .router import kind_for_filename, make_backend
from .xlsx_backend import ExcelBackend, parse_spreadsheet, to_spreadsheet

__all__ = [
    "BackendBase",
    "BackendOptions",
    "CSVBackend",
    "ExcelBackend",
    "kind_for_filename",
    "make_backend",
    "parse_csv",
    "parse_spreadsheet",
    "to_csv",
    "to_spreadsheet",
]
