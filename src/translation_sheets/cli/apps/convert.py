from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Dict, List, Optional

from translation_sheets.cli.logging_utils import setup_logging
from translation_sheets.cli.runtime import run_cli
from translation_sheets.config import OUTPUT_FORMATS, ConverterConfig, load_config
from translation_sheets.core.errors import SelectionError
from translation_sheets.core.models import ConvertedFile, ParsedSheet
from translation_sheets.pipeline import (
    export_column_jsons,
    json_to_table,
    parse_tables,
    resolve_selection,
)

log = logging.getLogger("translations.cli")

EXIT_PARTIAL = 2


# ---------------------------------------------------------------------
# I/O helpers (the only place that touches the file system)
# ---------------------------------------------------------------------
def _read_sources(paths: List[str]) -> Dict[str, bytes]:
    sources: Dict[str, bytes] = {}
    for p in paths:
        path = Path(p)
        if path.name in sources:
            log.warning("%s: another input has the same file name; only the last one is used", path)
        sources[path.name] = path.read_bytes()
    return sources


def _write(out_dir: Path, f: ConvertedFile) -> Path:
    out_dir.mkdir(parents=True, exist_ok=True)
    target = out_dir / f.full_name
    target.write_bytes(f.data)
    return target


def _pick_sheet(name: str, sheets: List[ParsedSheet], wanted: Optional[str]) -> Optional[ParsedSheet]:
    if wanted is None:
        return sheets[0] if sheets else None
    for s in sheets:
        if s.name == wanted:
            return s
    log.warning("%s: no sheet named %r (available: %s)", name, wanted, [s.name for s in sheets])
    return None


# ---------------------------------------------------------------------
# Commands
# ---------------------------------------------------------------------
def _cmd_json2sheet(args: argparse.Namespace, cfg: ConverterConfig) -> int:
    cfg = cfg.with_overrides(output_format=args.format, file_prefix=args.prefix)
    batch = json_to_table(_read_sources(args.inputs), config=cfg)
    for name, err in batch.failures.items():
        log.error("%s: %s", name, err.reason)
    if batch.result is None:
        log.error("No valid JSON document; nothing written.")
        return 1
    target = _write(Path(args.output), batch.result)
    log.info("Done. Wrote output to %s", target)
    return EXIT_PARTIAL if batch.failures else 0


def _cmd_sheet2json(args: argparse.Namespace, cfg: ConverterConfig) -> int:
    batch = parse_tables(_read_sources(args.inputs))
    failed = set(batch.failures)
    for name, err in batch.failures.items():
        log.error("%s: %s", name, err.reason)

    out_dir = Path(args.output)
    for name, sheets in batch.result.items():
        sheet = _pick_sheet(name, sheets, args.sheet)
        if sheet is None or sheet.is_empty:
            log.warning("%s: no data found", name)
            continue
        key, cols = resolve_selection(
            sheet.headers, args.key, args.columns, key_header=cfg.key_header
        )
        try:
            if key is not None and key not in sheet.headers:
                raise SelectionError(f"{name}: key column {key!r} not found in {sheet.headers}")
            unknown = [c for c in cols if c not in sheet.headers]
            if unknown:
                raise SelectionError(f"{name}: column(s) {unknown} not found in {sheet.headers}")
            files = export_column_jsons(name, sheet.rows, key, cols, indent=cfg.json_indent)
        except SelectionError as e:
            log.error("%s", e)
            failed.add(name)
            continue
        for f in files:
            log.info("Wrote %s", _write(out_dir, f))
    return EXIT_PARTIAL if failed else 0


# ---------------------------------------------------------------------
# CLI
# ---------------------------------------------------------------------
def build_arg_parser() -> argparse.ArgumentParser:
    common = argparse.ArgumentParser(add_help=False)
    common.add_argument("inputs", nargs="+", help="Input files")
    common.add_argument("-o", "--output", default=".", help="Output directory (default: .)")
    common.add_argument("--config", help="Path to a config YAML (see ConverterConfig).")
    common.add_argument("-v", "--verbose", action="count", default=0, help="Increase verbosity (repeatable)")
    common.add_argument("--debug", action="store_true", help="Show full tracebacks on errors")

    parser = argparse.ArgumentParser(
        prog="translation-sheets",
        description="Convert JSON translation files to a CSV/XLSX key table and back.",
    )
    sub = parser.add_subparsers(dest="command", required=True)

    j2s = sub.add_parser("json2sheet", parents=[common], help="Merge JSON files into one key table.")
    j2s.add_argument("--format", choices=OUTPUT_FORMATS, help="Output format (default from config: xlsx)")
    j2s.add_argument("--prefix", help="File name prefix (default: translations)")
    j2s.set_defaults(func=_cmd_json2sheet)

    s2j = sub.add_parser("sheet2json", parents=[common], help="Export table columns as JSON files.")
    s2j.add_argument("--key", help="Key column (default: 'key' if present, else first column)")
    s2j.add_argument("--columns", nargs="+", help="Value columns to export (default: all but key)")
    s2j.add_argument("--sheet", help="Worksheet name for XLSX input (default: first sheet)")
    s2j.set_defaults(func=_cmd_sheet2json)
    return parser


def main(argv: Optional[list[str]] = None) -> int:
    args = build_arg_parser().parse_args(argv)
    setup_logging(args.verbose)
    cfg = load_config(args.config)
    return args.func(args, cfg)


def console_main() -> None:
    run_cli(main)


if __name__ == "__main__":
    console_main()
