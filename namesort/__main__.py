from argparse import Namespace
from os import environ
from pathlib import Path
from sys import argv, exit, stderr, stdin, stdout
from typing import BinaryIO, Sequence, TextIO

from std2.argparse import ArgparseError, ArgParser
from std2.pickle.types import DecodeError
from yaml import YAMLError

from .consts import SETTINGS_VAR
from .io import SourceError, read_lines, write_lines
from .logging import log
from .settings import ValidationError, load
from .sort import debug_renders, namesort, originals
from .timeit import timeit

_USAGE = """
namesort [-d] [file]

Sort names, one per line, by their last name. The last name is
the last capitalized word of a line, titles such as Dr. or Prof.
are skipped. Reads from file or stdin, writes to stdout.

-d      debug: show the tagged components of each line
-h      show this help

N: name, L: lower case word, O: other, T: title, S: space
"""


def _parse_args(args: Sequence[str]) -> Namespace:
    parser = ArgParser(add_help=False)
    parser.add_argument("-h", dest="help", action="store_true", default=False)
    parser.add_argument("-d", dest="debug", action="store_true", default=False)
    parser.add_argument("file", nargs="?", default=None)
    return parser.parse_args(args)


def main(args: Sequence[str], source: BinaryIO, sink: BinaryIO, err: TextIO) -> int:
    try:
        ns = _parse_args(args)
    except ArgparseError as e:
        log.debug("%s", e)
        print(_USAGE.strip(), file=err)
        return 1

    if ns.help:
        print(_USAGE.strip(), file=err)
        return 1

    user_config = environ.get(SETTINGS_VAR)
    try:
        settings = load(Path(user_config) if user_config else None)
    except (OSError, YAMLError, DecodeError, ValidationError) as e:
        log.error("%s", f"bad settings -- {e}")
        return 1

    if ns.debug and ns.file is None and not settings.cli.debug_stdin:
        log.debug("%s", "-d requires a file")
        print(_USAGE.strip(), file=err)
        return 1

    try:
        with timeit("read"):
            lines = read_lines(
                settings.io, source=Path(ns.file) if ns.file is not None else source
            )
    except SourceError as e:
        print(f"Error. {e}", file=err)
        return 1
    else:
        ordered = namesort(lines)
        emit = debug_renders(ordered) if ns.debug else originals(ordered)
        write_lines(settings.io, sink=sink, lines=emit)
        return 0


def cli() -> None:
    code = main(argv[1:], source=stdin.buffer, sink=stdout.buffer, err=stderr)
    exit(code)


if __name__ == "__main__":
    cli()
