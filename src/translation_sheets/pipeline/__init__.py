from .runner import (
    default_file_name,
    export_column_jsons,
    json_to_table,
    load_json_documents,
    parse_tables,
    resolve_selection,
    sanitize_file_name,
)

__all__ = [
    "default_file_name",
    "export_column_jsons",
    "json_to_table",
    "load_json_documents",
    "parse_tables",
    "resolve_selection",
    "sanitize_file_name",
]
