import pytest

from translation_sheets.config import ConverterConfig, config_from_mapping, load_config


def test_defaults_without_path():
    cfg = load_config(None)
    assert cfg == ConverterConfig()
    assert cfg.key_header == "key"
    assert cfg.max_column_width == 50


def test_load_yaml_with_section(tmp_path):
    p = tmp_path / "cfg.yaml"
    p.write_text("converter:\n  output_format: csv\n  sheet_name: Strings\n", encoding="utf-8")
    cfg = load_config(p)
    assert cfg.output_format == "csv"
    assert cfg.sheet_name == "Strings"
    assert cfg.backend_options().sheet_name == "Strings"


def test_load_flat_yaml_and_empty_file(tmp_path):
    p = tmp_path / "flat.yaml"
    p.write_text("max_column_width: 80\n", encoding="utf-8")
    assert load_config(p).max_column_width == 80
    empty = tmp_path / "empty.yaml"
    empty.write_text("", encoding="utf-8")
    assert load_config(empty) == ConverterConfig()


def test_unknown_keys_rejected():
    with pytest.raises(ValueError) as e:
        config_from_mapping({"converter": {"colour": "red"}})
    assert "colour" in str(e.value)


def test_invalid_values_rejected():
    with pytest.raises(ValueError):
        ConverterConfig(output_format="ods")
    with pytest.raises(ValueError):
        ConverterConfig(max_column_width=0)


def test_overrides_ignore_none():
    cfg = ConverterConfig().with_overrides(output_format="csv", file_prefix=None)
    assert cfg.output_format == "csv"
    assert cfg.file_prefix == "translations"
