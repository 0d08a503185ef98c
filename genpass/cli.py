"""CLI for genpass: generate random passwords from selected character categories."""

import argparse
import random
import sys
from typing import List, Optional

from rich.console import Console
from rich.markup import escape

from .config import load_config, save_config
from .generator import GenpassError, generate
from .logger_config import setup_logging

console = Console(highlight=False)
err_console = Console(stderr=True)

EPILOG = """\
examples:
  genpass                  12 characters from every category
  genpass -len 16          16 characters
  genpass -inc l,n         lowercase letters and numbers only
  genpass -exc "0O1Il"     skip look-alike characters
  genpass -exc=-_          use '=' when the value starts with '-'
"""

def _to_int(value: str) -> int:
    try:
        return int(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"expected an integer, got {value!r}")

def _non_negative_int(value: str) -> int:
    n = _to_int(value)
    if n < 0:
        raise argparse.ArgumentTypeError(f"must be >= 0, got {n}")
    return n

def _positive_int(value: str) -> int:
    n = _to_int(value)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n

def build_parser() -> argparse.ArgumentParser:
    cfg = load_config()
    parser = argparse.ArgumentParser(
        prog="genpass",
        description="Generate a random password.",
        epilog=EPILOG,
        formatter_class=argparse.RawDescriptionHelpFormatter,
        allow_abbrev=False,
    )
    parser.add_argument("-len", "--length", type=_non_negative_int, help="password length (default %(default)s)")
    parser.add_argument(
        "-inc", "--include", type=str,
        help="l,u,n,s for lowercase, uppercase, numbers, symbols; empty means all (default %(default)r)",
    )
    parser.add_argument("-exc", "--exclude", type=str, help="characters to exclude")
    parser.add_argument("-copies", "--copies", type=_positive_int, default=1, help="how many passwords to generate")
    parser.add_argument("-seed", "--seed", type=int, help="seed a reproducible (non-secure) random source")
    parser.add_argument(
        "-save", "--save-defaults", action="store_true",
        help="remember -len/-inc/-exc as the new defaults",
    )
    parser.add_argument("-v", "--verbose", action="store_true", help="debug logging on stderr")
    parser.set_defaults(length=cfg["length"], include=cfg["include"], exclude=cfg["exclude"])
    return parser

def cmd_generate(args) -> int:
    rng = random.Random(args.seed) if args.seed is not None else None
    # build everything first so a failure never leaves partial output
    try:
        passwords = [
            generate(length=args.length, includes=args.include, exclude=args.exclude, rng=rng)
            for _ in range(args.copies)
        ]
    except GenpassError as e:
        err_console.print(f"[red]Error:[/red] {escape(str(e))}")
        return 1
    # only options that just produced a password are worth remembering
    if args.save_defaults:
        try:
            save_config({"length": args.length, "include": args.include, "exclude": args.exclude})
        except OSError as e:
            err_console.print(f"[red]Failed to save defaults:[/red] {escape(str(e))}")
            return 1
    for pw in passwords:
        console.out(pw, highlight=False)
    return 0

def main(argv: Optional[List[str]] = None) -> int:
    setup_logging()
    parser = build_parser()
    args = parser.parse_args(argv)
    logger = setup_logging(args.verbose)
    if args.seed is not None:
        logger.warning("using a seeded random source; output is reproducible and not secure")
    return cmd_generate(args)

if __name__ == "__main__":
    sys.exit(main())
