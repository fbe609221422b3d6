from __future__ import annotations

import argparse
from dataclasses import dataclass

VERSION = "0.1"
SEPARATOR = "--"


@dataclass(frozen=True)
class InvocationArgs:
    input: str | None
    carried_args: tuple[str, ...] | None


@dataclass(frozen=True)
class CliOptions:
    verbose: bool


def split_trailing(argv: list[str]) -> tuple[list[str], list[str] | None]:
    """Split at the first `--`; everything after it belongs to the launched program."""
    if SEPARATOR not in argv:
        return list(argv), None
    i = argv.index(SEPARATOR)
    return list(argv[:i]), list(argv[i + 1 :])


def _build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="rrun",
        usage="%(prog)s [-h] [-V] [-v] [input] [-- args ...]",
        description="Compile and run a single Rust file, or 'cargo run' inside a git project.",
        epilog="Arguments after '--' are passed to your program unchanged.",
    )
    parser.add_argument(
        "input",
        nargs="?",
        default=None,
        help="main source file, execute 'cargo run' if empty",
    )
    parser.add_argument("-V", "--version", action="version", version=f"%(prog)s {VERSION}")
    parser.add_argument(
        "-v",
        "--verbose",
        action="store_true",
        help="Echo each spawned command to stderr",
    )
    return parser


def parse_invocation(argv: list[str]) -> tuple[InvocationArgs, CliOptions]:
    head, tail = split_trailing(argv)
    ns = _build_parser().parse_args(head)
    carried = tuple(tail) if tail else None
    return InvocationArgs(input=ns.input, carried_args=carried), CliOptions(verbose=bool(ns.verbose))
