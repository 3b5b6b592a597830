"""Command-line interface for Winter."""

from __future__ import annotations

import argparse
import logging
import sys
import tomllib
from collections.abc import Iterator
from dataclasses import dataclass
from itertools import islice
from pathlib import Path
from typing import Any, TextIO

from winter import __version__
from winter.errors import LexError
from winter.tokens import Token

logger = logging.getLogger(__name__)

CONFIG_NAME = "winter.toml"


@dataclass(frozen=True, slots=True)
class CliOptions:
    """Parsed CLI options."""

    input_file: Path
    output_file: Path | None
    hardened: bool
    limit: int | None
    debug: bool


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser (separate function for testability)."""
    p = argparse.ArgumentParser(
        prog="winter",
        description="Winter(preter) can run W code. W is a simple language; "
        "this prints the tokens of a W source file.",
    )
    p.add_argument(
        "-i",
        "--input",
        required=True,
        metavar="FILE_TO_INTERPRET",
        help="The file to interpret",
    )
    p.add_argument("-o", "--output", help="Output file (default: stdout)")
    mode = p.add_mutually_exclusive_group()
    mode.add_argument(
        "--hardened",
        dest="hardened",
        action="store_true",
        default=None,
        help="Skip whole whitespace runs and consume illegal characters",
    )
    mode.add_argument(
        "--literal",
        dest="hardened",
        action="store_false",
        default=None,
        help="Skip one whitespace character per token; never consume illegal characters (default)",
    )
    p.add_argument(
        "--limit",
        type=parse_limit,
        default=None,
        metavar="N",
        help="Stop after N tokens",
    )
    p.add_argument(
        "--config",
        metavar="FILE",
        help=f"Config file (default: auto-discover {CONFIG_NAME})",
    )
    p.add_argument("--debug", action="store_true", help="Log debug messages to stderr")
    p.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    return p


def parse_limit(s: str) -> int:
    """Parse a positive token limit."""
    try:
        value = int(s)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid limit (expected a number): {s}") from None
    if value < 1:
        raise argparse.ArgumentTypeError(f"invalid limit (must be at least 1): {s}")
    return value


def load_config(config_path: Path | None, input_dir: Path) -> dict[str, Any]:
    """Load a TOML config file, returning an empty dict on missing/absent file."""
    path = config_path if config_path is not None else input_dir / CONFIG_NAME

    if not path.is_file():
        logger.debug("no config file at %s", path)
        return {}

    logger.debug("loading config from %s", path)
    with open(path, "rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as exc:
            raise argparse.ArgumentTypeError(f"invalid config file {path}: {exc}") from exc


def resolve_options(args: argparse.Namespace) -> CliOptions:
    """Merge config file and CLI args into CliOptions.

    Precedence: defaults < config file < CLI flags.
    """
    input_file = Path(args.input)
    input_dir = input_file.parent
    if not input_dir.parts:
        input_dir = Path(".")

    config_path = Path(args.config) if args.config else None
    config = load_config(config_path, input_dir)

    hardened = False
    limit: int | None = None
    cfg_lexer = config.get("lexer")
    if isinstance(cfg_lexer, dict):
        cfg_hardened = cfg_lexer.get("hardened")
        if cfg_hardened is not None:
            if not isinstance(cfg_hardened, bool):
                raise argparse.ArgumentTypeError(
                    f"invalid config: lexer.hardened must be true or false, got {cfg_hardened!r}"
                )
            hardened = cfg_hardened
        cfg_limit = cfg_lexer.get("limit")
        if cfg_limit is not None:
            # bool is an int subclass; reject it explicitly
            if isinstance(cfg_limit, bool) or not isinstance(cfg_limit, int) or cfg_limit < 1:
                raise argparse.ArgumentTypeError(
                    f"invalid config: lexer.limit must be a positive integer, got {cfg_limit!r}"
                )
            limit = cfg_limit

    if args.hardened is not None:
        hardened = args.hardened
    if args.limit is not None:
        limit = args.limit

    output_file = Path(args.output) if args.output else None

    return CliOptions(
        input_file=input_file,
        output_file=output_file,
        hardened=hardened,
        limit=limit,
        debug=args.debug,
    )


def lex_file(options: CliOptions, *, file: TextIO | None = None) -> int:
    """Read a W file and write its tokens to *file* as they are produced.

    Returns the number of tokens written. Tokens scanned before a LexError
    are already written when the error propagates.
    """
    from winter.debug import dump_tokens
    from winter.lexer import Lexer, scan

    source = options.input_file.read_text(encoding="utf-8")
    logger.debug(
        "scanning %s (%d chars, %s mode)",
        options.input_file,
        len(source),
        "hardened" if options.hardened else "literal",
    )

    tokens: Iterator[Token]
    if options.limit is not None:
        # Capped: a stuck illegal character repeats up to the limit
        tokens = islice(Lexer(source, hardened=options.hardened), options.limit)
    else:
        tokens = (tok for _, tok in scan(source, hardened=options.hardened))

    count = dump_tokens(tokens, file=file if file is not None else sys.stdout)
    logger.debug("produced %d tokens", count)
    return count


def _write_tokens(options: CliOptions, file: TextIO) -> int:
    try:
        lex_file(options, file=file)
    except LexError as exc:
        file.flush()
        print(exc.format(str(options.input_file)), file=sys.stderr)
        return 1
    return 0


def main(argv: list[str] | None = None) -> int:
    """CLI entry point. Returns exit code (0/1/2). Does not call sys.exit()."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.debug:
        logging.basicConfig(level=logging.DEBUG, format="%(name)s: %(message)s")

    try:
        options = resolve_options(args)
    except argparse.ArgumentTypeError as exc:
        print(f"error: {exc}", file=sys.stderr)
        return 2

    if not options.input_file.exists():
        print(f"error: This file does not exist: {options.input_file}", file=sys.stderr)
        return 1

    if options.output_file:
        with open(options.output_file, "w", encoding="utf-8") as f:
            return _write_tokens(options, f)
    return _write_tokens(options, sys.stdout)
