from translation_sheets.io_backends.csv_backend import CSVBackend, parse_csv, to_csv


HEADERS = ["key", "en", "fr"]
ROWS = [
    {"key": "a", "en": "1", "fr": "uno"},
    {"key": "b", "en": "2", "fr": ""},
]


def test_to_csv_plain():
    assert to_csv(HEADERS, ROWS) == "key,en,fr\na,1,uno\nb,2,"


def test_to_csv_quotes_only_when_needed():
    rows = [{"key": "k", "en": "x,y", "fr": 'say "hi"'}, {"key": "n", "en": "line\nbreak", "fr": "plain"}]
    assert to_csv(HEADERS, rows) == 'key,en,fr\nk,"x,y","say ""hi"""\nn,"line\nbreak",plain'


def test_to_csv_missing_and_none_values_are_empty():
    assert to_csv(["key", "en"], [{"key": "a"}, {"key": "b", "en": None}]) == "key,en\na,\nb,"


def test_round_trip_reproduces_table():
    sheet = parse_csv(to_csv(HEADERS, ROWS))
    assert sheet.headers == HEADERS
    assert sheet.rows == ROWS


def test_round_trip_restores_special_characters():
    rows = [{"key": "k", "en": "x,y"}, {"key": "q", "en": 'a "b"\nc'}]
    sheet = parse_csv(to_csv(["key", "en"], rows))
    assert sheet.rows == rows


def test_empty_input():
    sheet = parse_csv("")
    assert sheet.headers == []
    assert sheet.rows == []
    assert sheet.is_empty
    assert parse_csv("\n\n").headers == []


def test_header_only():
    sheet = parse_csv("key,en\n")
    assert sheet.headers == ["key", "en"]
    assert sheet.rows == []


def test_blank_lines_are_skipped():
    sheet = parse_csv("\nkey,en\n\na,1\n\nb,2\n")
    assert sheet.headers == ["key", "en"]
    assert sheet.rows == [{"key": "a", "en": "1"}, {"key": "b", "en": "2"}]


def test_values_stay_text():
    sheet = parse_csv("key,en\n001,NA\ntrue,1.50\n")
    assert sheet.rows == [{"key": "001", "en": "NA"}, {"key": "true", "en": "1.50"}]


def test_short_lines_are_padded():
    sheet = parse_csv("key,en,fr\na,1\n")
    assert sheet.rows == [{"key": "a", "en": "1", "fr": ""}]


def test_bom_and_crlf():
    sheet = parse_csv("\ufeffkey,en\r\na,1\r\n")
    assert sheet.headers == ["key", "en"]
    assert sheet.rows == [{"key": "a", "en": "1"}]


def test_backend_encode_decode():
    backend = CSVBackend()
    data = backend.encode(["key", "de"], [{"key": "gruss", "de": "Grüß Gott"}])
    assert data == "key,de\ngruss,Grüß Gott".encode("utf-8")
    sheets = backend.decode(data, name="de.csv")
    assert len(sheets) == 1
    assert sheets[0].name == "de.csv"
    assert sheets[0].rows == [{"key": "gruss", "de": "Grüß Gott"}]


def test_backend_decode_empty_bytes():
    sheets = CSVBackend().decode(b"")
    assert len(sheets) == 1
    assert sheets[0].headers == []
    assert sheets[0].rows == []


def test_long_lines_and_trailing_commas_are_cut_to_header_width():
    sheet = parse_csv("key,en\na,1,\nb,2,x\n")
    assert sheet.headers == ["key", "en"]
    assert sheet.rows == [{"key": "a", "en": "1"}, {"key": "b", "en": "2"}]


def test_long_line_keeps_quoted_fields():
    sheet = parse_csv('key,en\n"a,b","x ""y""",extra,more\nc,3\n')
    assert sheet.rows == [{"key": "a,b", "en": 'x "y"'}, {"key": "c", "en": "3"}]
