from __future__ import annotations

import logging
import sys

from typing import Sequence

import argp

from argp import Option
from argp import OptionFlag
from argp import OptionParser
from argp import ParseError


OPTIONS = [
    Option(doc="OPTIONS:"),
    Option("a", doc="enable option a"),
    Option("b", "bb", doc="run in mode b"),
    Option("s", "silent", doc="run in silent mode"),
    Option("q", flags=OptionFlag.ALIAS),
    Option("o", "output", "<file>", doc="specify the file to output"),
    Option("1", doc="run only once"),
    Option(doc=""),
    Option("h", "help", doc="print help and exit"),
    Option("V", "version", doc="print version and exit"),
    Option(long="debug", flags=OptionFlag.HIDDEN, doc="log parsing steps"),
]


def main(argv: Sequence[str] | None = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    parser = OptionParser(OPTIONS, usage="ARG1 ARG2...")

    try:
        result = parser.parse_args(argv)
    except ParseError as err:
        parser.error(str(err))

    if result.has_opt("debug"):
        logging.basicConfig(level=logging.DEBUG)
        # parse again so the steps are logged
        result = parser.parse_args(argv)

    if result.has_opt("help"):
        parser.print_help()
        return 0
    if result.has_opt("version"):
        print(argp.__version__)
        return 0

    # Here the program would dispatch on the matched options; we just
    # show what was found, in order.
    for opt in result.options:
        print(f"{opt.input_string}: {opt.optarg}")
    print("Arguments:", ", ".join(result.args) if result.args else "(none)")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
