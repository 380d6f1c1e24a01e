"""Command-line interface for calclex."""

from __future__ import annotations

import argparse
import json
import sys
import tomllib
from dataclasses import dataclass
from pathlib import Path
from typing import Any

from calclex.errors import LexError
from calclex.tokens import Token

FORMATS = ("text", "json")


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path | None  # None: read stdin, or use inline source
    source: str | None
    output_file: Path | None
    format: str
    positions: bool
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="calclex",
        description="Tokenizer for the calc expression language",
    )
    p.add_argument("input", nargs="?", help="Input .calc file (default: stdin, also '-')")
    p.add_argument("-c", "--source", metavar="TEXT", help="Tokenize TEXT instead of a file")
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    p.add_argument(
        "--format",
        choices=FORMATS,
        default=None,
        help="Output format (default: text)",
    )
    p.add_argument(
        "--positions",
        action="store_true",
        default=None,
        help="Prefix each token with line:column",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help="Config file (default: auto-discover calclex.toml)",
    )
    p.add_argument("--debug", action="store_true", help="Dump token counts to stderr")
    return p


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / "calclex.toml"

    if not path.is_file():
        return {}

    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise argparse.ArgumentTypeError(f"invalid config file {path}: {exc}") from exc


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    if args.source is not None and args.input is not None:
        raise argparse.ArgumentTypeError("INPUT and --source are mutually exclusive")

    input_file = Path(args.input) if args.input not in (None, "-") else None
    input_dir = input_file.parent if input_file is not None else Path(".")
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    # Output settings: config < CLI
    fmt = "text"
    positions = False
    cfg_output = config.get("output")
    if isinstance(cfg_output, dict):
        cfg_format = cfg_output.get("format")
        if cfg_format is not None:
            if cfg_format not in FORMATS:
                raise argparse.ArgumentTypeError(
                    f"invalid output format in config: {cfg_format!r} "
                    f"(expected one of {', '.join(FORMATS)})"
                )
            fmt = cfg_format
        cfg_positions = cfg_output.get("positions")
        if isinstance(cfg_positions, bool):
            positions = cfg_positions
    if args.format is not None:
        fmt = args.format
    if args.positions is not None:
        positions = args.positions

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        source=args.source,
        output_file=output_file,
        format=fmt,
        positions=positions,
        debug=args.debug,
    )


def source_name(options: CliOptions) -> str:
    """Name used for the input in error messages."""
    if options.source is not None:
        return "<source>"
    if options.input_file is None:
        return "<stdin>"
    return str(options.input_file)


def render_tokens(tokens: list[Token], fmt: str, *, positions: bool = False) -> str:
    """Render a token list in the given output format."""
    from calclex.debug import format_token

    if fmt == "json":
        rows = [
            {
                "type": tok.type.name,
                "lexeme": tok.lexeme,
                "line": tok.span.start.line,
                "column": tok.span.start.column,
                "offset": tok.span.start.offset,
            }
            for tok in tokens
        ]
        return json.dumps(rows, indent=2, ensure_ascii=False) + "\n"
    return "".join(format_token(tok, positions=positions) + "\n" for tok in tokens)


def tokenize_file(options: CliOptions) -> str:
    """Read, tokenize, and render the selected input."""
    from calclex.debug import dump_summary
    from calclex.lexer import tokenize

    if options.source is not None:
        source = options.source
    elif options.input_file is None:
        source = sys.stdin.read()
    else:
        source = options.input_file.read_text(encoding="utf-8")

    tokens = tokenize(source)

    if options.debug:
        dump_summary(tokens, file=sys.stderr)

    return render_tokens(tokens, options.format, positions=options.positions)


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    try:
        output = tokenize_file(options)
    except LexError as exc:
        print(exc.format(source_name(options)), file=sys.stderr)
        return 1
    except (OSError, UnicodeDecodeError) as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if options.output_file:
        options.output_file.write_text(output, encoding="utf-8")
    else:
        sys.stdout.write(output)

    return 0
