from .errors import ConversionError, DocumentError, NoDocumentsError, SelectionError
from .extract import build_column_jsons, default_key_column, default_value_columns
from .flatten import flatten_json
from .merge import KEY_HEADER, merge_documents
from .models import BatchResult, ConvertedFile, MergedTable, ParsedSheet

__all__ = [
    "BatchResult",
    "ConversionError",
    "ConvertedFile",
    "DocumentError",
    "KEY_HEADER",
    "MergedTable",
    "NoDocumentsError",
    "ParsedSheet",
    "SelectionError",
    "build_column_jsons",
    "default_key_column",
    "default_value_columns",
    "flatten_json",
    "merge_documents",
]
