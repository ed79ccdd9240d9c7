from __future__ import annotations

from dataclasses import dataclass, fields, replace
from pathlib import Path
from typing import Any, Dict, Mapping, Optional, Union

import yaml

from .io_backends.base import BackendOptions

OUTPUT_FORMATS = ("csv", "xlsx")


@dataclass(frozen=True)
class ConverterConfig:
    """
    Settings shared by both conversion directions.

    YAML (either flat or below a `converter:` key):

        converter:
          key_header: key
          sheet_name: Translations
          max_column_width: 50
          header_fill_rgb: D3D3D3
          file_prefix: translations
          output_format: xlsx
          json_indent: 2
    """
    key_header: str = "key"
    sheet_name: str = "Translations"
    max_column_width: int = 50
    header_fill_rgb: str = "D3D3D3"
    file_prefix: str = "translations"
    output_format: str = "xlsx"
    json_indent: int = 2

    def __post_init__(self) -> None:
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(
                f"Unknown output_format '{self.output_format}'. Available: {', '.join(OUTPUT_FORMATS)}"
            )
        if int(self.max_column_width) <= 0:
            raise ValueError("max_column_width must be positive")

    def backend_options(self) -> BackendOptions:
        return BackendOptions(
            sheet_name=self.sheet_name,
            max_column_width=self.max_column_width,
            header_fill_rgb=self.header_fill_rgb,
        )

    def with_overrides(self, **overrides: Any) -> "ConverterConfig":
        """CLI flags win over file values; None means 'not given'."""
        given = {k: v for k, v in overrides.items() if v is not None}
        return replace(self, **given) if given else self


def config_from_mapping(raw: Mapping[str, Any]) -> ConverterConfig:
    section = raw.get("converter", raw) if isinstance(raw, Mapping) else {}
    if not isinstance(section, Mapping):
        raise ValueError("'converter' section must be a mapping")
    known = {f.name for f in fields(ConverterConfig)}
    unknown = sorted(set(section) - known)
    if unknown:
        raise ValueError(f"Unknown config key(s): {unknown}. Allowed: {sorted(known)}")
    return ConverterConfig(**dict(section))


def load_config(path: Optional[Union[str, Path]]) -> ConverterConfig:
    """Read a YAML config; no path -> defaults."""
    if not path:
        return ConverterConfig()
    with open(path, "r", encoding="utf-8") as f:
        raw: Dict[str, Any] = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        raise ValueError(f"Config {path} must contain a mapping at top level")
    return config_from_mapping(raw)
