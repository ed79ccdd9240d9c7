from __future__ import annotations


class ConversionError(Exception):
    """Base class for all conversion failures."""


class DocumentError(ConversionError):
    """A single input document could not be parsed (invalid JSON, corrupt workbook, ...)."""

    def __init__(self, document: str, reason: str) -> None:
        self.document = document
        self.reason = reason
        super().__init__(f"{document}: {reason}")


class SelectionError(ConversionError, ValueError):
    """Key column or value columns missing for an export."""


class NoDocumentsError(SelectionError):
    """A batch conversion was requested without any documents."""
