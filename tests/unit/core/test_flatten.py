import json

from translation_sheets.core.flatten import flatten_json


def test_nested_objects_become_dotted_keys():
    """{a:{b:{c:x}}} -> exactly one entry a.b.c"""
    assert flatten_json({"a": {"b": {"c": "x"}}}) == {"a.b.c": "x"}


def test_arrays_are_stored_as_json_text():
    """lists are not traversed, no per-element keys"""
    assert flatten_json({"items": ["p", "q"]}) == {"items": '["p","q"]'}


def test_array_of_objects_and_unicode_kept_verbatim():
    out = flatten_json({"menu": [{"label": "Été"}, 1, None]})
    assert out == {"menu": '[{"label":"Été"},1,null]'}


def test_scalars_and_null():
    doc = {"s": "text", "n": None, "i": 3, "f": 1.5, "whole": 2.0, "t": True, "no": False}
    assert flatten_json(doc) == {
        "s": "text",
        "n": "",
        "i": "3",
        "f": "1.5",
        "whole": "2",
        "t": "true",
        "no": "false",
    }


def test_insertion_order_is_preserved():
    doc = {"z": "1", "a": {"y": "2", "b": "3"}, "m": "4"}
    assert list(flatten_json(doc)) == ["z", "a.y", "a.b", "m"]


def test_prefix_is_prepended():
    assert flatten_json({"title": "Hi"}, prefix="home") == {"home.title": "Hi"}


def test_empty_nested_object_contributes_nothing():
    assert flatten_json({"a": {}, "b": "x"}) == {"b": "x"}


def test_non_object_top_level_gives_empty_result():
    assert flatten_json(["a", "b"]) == {}
    assert flatten_json("text") == {}
    assert flatten_json(None) == {}


def test_numbers_use_javascript_number_text():
    doc = json.loads('{"tiny": 1e-7, "small": 1.5e-5, "big": 1e21, "huge": 1e16, "neg": -2.50}')
    assert flatten_json(doc) == {
        "tiny": "1e-7",
        "small": "0.000015",
        "big": "1e+21",
        "huge": "10000000000000000",
        "neg": "-2.5",
    }


def test_numbers_inside_arrays_match_json_stringify():
    doc = json.loads('{"xs": [1.0, 2.5, 1e-7, {"n": 3.0, "ok": true}, "a/\\"b"]}')
    assert flatten_json(doc) == {"xs": '[1,2.5,1e-7,{"n":3,"ok":true},"a/\\"b"]'}
