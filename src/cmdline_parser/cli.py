"""Command-line interface for cmdline-parser."""

from __future__ import annotations

import argparse
import json
import sys
import tomllib
from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path
from typing import Any, TextIO

from cmdline_parser.tokens import DEFAULT_MODE, Mode, Token

CONFIG_FILENAME = "cmdline-parser.toml"
FORMATS = ("lines", "spans", "json")
DEFAULT_FORMAT = "lines"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    lines: list[str] | None
    mode: Mode
    output_format: str
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="cmdline-parser",
        description="Split command lines into arguments using cmd- or bash-style quoting",
    )
    p.add_argument(
        "lines",
        nargs="*",
        metavar="LINE",
        help="Command line to split (default: read lines from stdin)",
    )
    p.add_argument(
        "-m",
        "--mode",
        default=None,
        metavar="MODE",
        help="Quoting convention: cmd, bash or native (default: bash)",
    )
    p.add_argument(
        "-f",
        "--format",
        default=None,
        metavar="FORMAT",
        help="Output format: lines, spans or json (default: lines)",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_FILENAME})",
    )
    p.add_argument("--debug", action="store_true", help="Dump tokens to stderr")
    return p


def parse_mode_arg(s: str) -> Mode:
    """Parse a mode name into a Mode."""
    try:
        return Mode.from_name(s)
    except ValueError as exc:
        raise argparse.ArgumentTypeError(str(exc)) from exc


def parse_format_arg(s: str) -> str:
    """Validate an output format name."""
    key = s.strip().lower()
    if key not in FORMATS:
        raise argparse.ArgumentTypeError(
            f"unknown output format: {s!r} (expected {', '.join(FORMATS)})"
        )
    return key


def load_config(config_path: Path | None, search_dir: Path) -> dict[str, Any]:
    """Load a TOML config file.

    An auto-discovered file that does not exist yields an empty dict; an
    explicitly requested one that does not exist is an error.
    """
    path = config_path if config_path is not None else search_dir / CONFIG_FILENAME

    if not path.is_file():
        if config_path is not None:
            raise argparse.ArgumentTypeError(f"config file not found: {path}")
        return {}

    try:
        with open(path, "rb") as f:
            return tomllib.load(f)
    except (tomllib.TOMLDecodeError, UnicodeDecodeError) as exc:
        raise argparse.ArgumentTypeError(f"invalid config file {path}: {exc}") from exc


def resolve_options(args: argparse.Namespace, search_dir: Path | None = None) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, search_dir if search_dir is not None else Path("."))

    # Mode: config < CLI
    mode = DEFAULT_MODE
    cfg_mode = config.get("mode")
    if cfg_mode is not None:
        mode = parse_mode_arg(str(cfg_mode))
    if args.mode is not None:
        mode = parse_mode_arg(args.mode)

    # Output format: config < CLI
    output_format = DEFAULT_FORMAT
    cfg_format = config.get("format")
    if cfg_format is not None:
        output_format = parse_format_arg(str(cfg_format))
    if args.format is not None:
        output_format = parse_format_arg(args.format)

    return CliOptions(
        lines=list(args.lines) if args.lines else None,
        mode=mode,
        output_format=output_format,
        debug=args.debug,
    )


def read_lines(stream: TextIO) -> list[str]:
    """Read input lines from *stream*, dropping line terminators."""
    return [line.rstrip("\r\n") for line in stream]


def format_tokens(tokens: list[Token], output_format: str) -> str:
    """Render the tokens of one input line in the requested format."""
    if output_format == "json":
        items = [
            {"start": t.span.start, "end": t.span.end, "value": t.value} for t in tokens
        ]
        return json.dumps(items, ensure_ascii=False) + "\n"
    if output_format == "spans":
        return "".join(f"{t.span.start}..{t.span.end}\t{t.value}\n" for t in tokens)
    return "".join(f"{t.value}\n" for t in tokens)


def run(options: CliOptions, lines: Iterable[str], out: TextIO, err: TextIO) -> None:
    """Tokenize each line and write the formatted result to *out*."""
    from cmdline_parser.debug import dump_tokens
    from cmdline_parser.parser import tokenize

    lines = list(lines)
    for i, line in enumerate(lines):
        tokens = tokenize(line, options.mode)
        if options.debug:
            err.write(f"line {i + 1}: {line!r}\n")
            dump_tokens(tokens, file=err)
        out.write(format_tokens(tokens, options.output_format))
        # Blank line between groups of values so lines stay distinguishable
        if options.output_format == "lines" and len(lines) > 1 and i < len(lines) - 1:
            out.write("\n")


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.lines is not None:
        lines = options.lines
    else:
        try:
            lines = read_lines(sys.stdin)
        except UnicodeDecodeError as exc:
            print(f"error: cannot decode input: {exc}", file=sys.stderr)
            return 2
    run(options, lines, sys.stdout, sys.stderr)
    return 0
