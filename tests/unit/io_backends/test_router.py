import pytest

from translation_sheets.io_backends.csv_backend import CSVBackend
from translation_sheets.io_backends.router import kind_for_filename, make_backend
from translation_sheets.io_backends.xlsx_backend import ExcelBackend


def test_make_backend_known_kinds():
    assert isinstance(make_backend("csv"), CSVBackend)
    assert isinstance(make_backend(" XLSX "), ExcelBackend)


def test_make_backend_unknown_kind():
    with pytest.raises(KeyError) as e:
        make_backend("ods")
    assert "Available: csv, xlsx" in str(e.value)


@pytest.mark.parametrize(
    "name, kind",
    [("app.xlsx", "xlsx"), ("OLD.XLS", "xlsx"), ("app.csv", "csv"), ("notes.txt", "csv")],
)
def test_kind_for_filename(name, kind):
    assert kind_for_filename(name) == kind
