"""Command-line interface for tomlmeta."""

from __future__ import annotations

import argparse
import json
import logging
import sys
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any

from rich.console import Console
from rich.table import Table

from tomlmeta.config import MetaOptions, load_options
from tomlmeta.exceptions import ConfigError, MetaDecodeError, TomlMetaError
from tomlmeta.sdk import convert
from tomlmeta.values import stringify

logger = logging.getLogger(__name__)

EXIT_NO_METADATA = 2
EXIT_DECODE_ERROR = 3
EXIT_CONFIG_ERROR = 4


def _package_version() -> str:
    try:
        return version("tomlmeta")
    except PackageNotFoundError:
        return "0.0.0"


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(prog="tomlmeta")
    parser.add_argument("--version", action="version", version=f"%(prog)s {_package_version()}")

    subparsers = parser.add_subparsers(dest="command", required=True)

    render_parser = subparsers.add_parser("render", help="Render a markdown file to HTML")
    render_parser.add_argument("file", help="Markdown file to read ('-' for stdin)")
    render_parser.add_argument("--config", default=None, help="Path to a JSON options file")
    render_parser.add_argument("--table", action="store_true", help="Render metadata as a table")
    render_parser.add_argument("--output", "-o", default=None, help="Write HTML here instead of stdout")
    render_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    meta_parser = subparsers.add_parser("meta", help="Print the metadata of a markdown file")
    meta_parser.add_argument("file", help="Markdown file to read ('-' for stdin)")
    meta_parser.add_argument("--config", default=None, help="Path to a JSON options file")
    meta_parser.add_argument("--json", action="store_true", help="Print metadata as JSON")
    meta_parser.add_argument("--verbose", "-v", action="store_true", help="Enable debug logging")

    return parser


def _read_source(file: str) -> str:
    if file == "-":
        return sys.stdin.read()
    path = Path(file)
    try:
        return path.read_text(encoding="utf-8")
    except OSError as exc:
        raise ConfigError(f"failed reading markdown file: {path}") from exc


def _options(args: argparse.Namespace) -> MetaOptions:
    options = load_options(args.config) if args.config else MetaOptions()
    if getattr(args, "table", False):
        options = options.model_copy(update={"table_mode": True})
    return options


def _metadata_table(data: dict[str, Any]) -> Table:
    table = Table("Key", "Value")
    for key, value in data.items():
        table.add_row(key, stringify(value))
    return table


def _run_render(args: argparse.Namespace) -> int:
    conversion = convert(_read_source(args.file), options=_options(args))
    if args.output:
        output = Path(args.output)
        try:
            output.write_text(conversion.html, encoding="utf-8")
        except OSError as exc:
            raise ConfigError(f"failed writing HTML file: {output}") from exc
        logger.debug("wrote %s", output)
    else:
        sys.stdout.write(conversion.html)
    return 0


def _run_meta(args: argparse.Namespace) -> int:
    options = _options(args).model_copy(update={"stores_in_context": True})
    data = convert(_read_source(args.file), options=options).try_meta()
    if data is None:
        print("error: no metadata block found", file=sys.stderr)
        return EXIT_NO_METADATA
    if args.json:
        print(json.dumps(data, indent=2, ensure_ascii=False, default=stringify))
    else:
        Console().print(_metadata_table(data))
    return 0


def main(argv: list[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s %(message)s", stream=sys.stderr)

    try:
        if args.command == "render":
            return _run_render(args)
        return _run_meta(args)
    except MetaDecodeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_DECODE_ERROR
    except ConfigError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return EXIT_CONFIG_ERROR
    except TomlMetaError as exc:  # pragma: no cover - defensive fallback
        print(f"error: {exc}", file=sys.stderr)
        return 1
