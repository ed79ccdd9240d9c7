"""
Convert nested JSON translation files to a CSV/XLSX key table and back.

- core:        flatten, merge, column extraction, data model, errors
- io_backends: CSV and XLSX codecs
- pipeline:    batch operations with per-document failures
"""
from .config import ConverterConfig, load_config
from .core import (
    BatchResult,
    ConversionError,
    ConvertedFile,
    DocumentError,
    MergedTable,
    NoDocumentsError,
    ParsedSheet,
    SelectionError,
    build_column_jsons,
    flatten_json,
    merge_documents,
)
from .io_backends import parse_csv, parse_spreadsheet, to_csv, to_spreadsheet
from .pipeline import default_file_name, export_column_jsons, json_to_table, parse_tables

__version__ = "0.1.0"

__all__ = [
    "BatchResult",
    "ConversionError",
    "ConvertedFile",
    "ConverterConfig",
    "DocumentError",
    "MergedTable",
    "NoDocumentsError",
    "ParsedSheet",
    "SelectionError",
    "build_column_jsons",
    "default_file_name",
    "export_column_jsons",
    "flatten_json",
    "json_to_table",
    "load_config",
    "merge_documents",
    "parse_csv",
    "parse_spreadsheet",
    "parse_tables",
    "to_csv",
    "to_spreadsheet",
]
