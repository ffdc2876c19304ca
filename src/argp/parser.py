from __future__ import annotations

import logging
import os
import sys

from dataclasses import dataclass
from typing import IO
from typing import Iterable
from typing import NoReturn

from argp.errors import BadOptionError
from argp.errors import MissingArgumentError
from argp.errors import ParseError
from argp.errors import UnexpectedArgumentError
from argp.formatters import HelpFormatter
from argp.option import Option
from argp.option import OptionTable


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Result:
    """
    One option matched on the command line.

    'option' is always the canonical table entry, even when an alias was
    typed; 'input_string' is the name as typed (eg. "f" for "-f",
    "ffff" for "--ffff=x") and 'optarg' the argument, or "" if none.
    """

    option: Option
    input_string: str
    optarg: str = ""

    @property
    def short(self) -> str | None:
        return self.option.short

    @property
    def long(self) -> str | None:
        return self.option.long

    @property
    def arg_name(self) -> str:
        return self.option.arg_name

    @property
    def doc(self) -> str:
        return self.option.doc

    def is_named(self, name: str) -> bool:
        return self.option.is_named(name)

    def with_default(self, default: str) -> str:
        if not self.optarg.strip():
            return default
        return self.optarg


@dataclass(frozen=True)
class ParseResult:
    options: tuple[Result, ...] = ()
    args: tuple[str, ...] = ()

    def get_opts(self, name: str) -> list[Result]:
        """Return every matched option named 'name', short or long."""
        return [result for result in self.options if result.is_named(name)]

    def get_opt(self, name: str) -> Result | None:
        for result in self.options:
            if result.is_named(name):
                return result
        return None

    def has_opt(self, name: str) -> bool:
        return self.get_opt(name) is not None

    def get_value(self, name: str, default: str | None = None) -> str | None:
        result = self.get_opt(name)
        if result is None or not result.optarg.strip():
            return default
        return result.optarg


class _ParsingState:
    """
    Scanning position of a single parse_args() call.

      args : [string]
        the argument list being parsed; never modified
      optidx : int
        index of the element being looked at
      subopt : int
        index into args[optidx] while inside a cluster of short
        options such as "-abc"; 0 otherwise
    """

    def __init__(self, args: list[str]) -> None:
        self.args = args
        self.optidx = 0
        self.subopt = 0

    def at_end(self) -> bool:
        return self.optidx >= len(self.args)

    def rest(self) -> list[str]:
        return self.args[self.optidx :]


class OptionParser:
    """
    Class attributes:
      formatter_class : type[HelpFormatter]
        formatter built when none is passed to the constructor

    Instance attributes:
      table : OptionTable
        the option table; only read, so one parser may be shared
      prog : string
        the name of the current program (to override
        os.path.basename(sys.argv[0]))
      usage : string
        usage text of the positional arguments, eg. "FILE..."
      formatter : HelpFormatter

    All parsing state lives in a _ParsingState made per parse_args()
    call, so an OptionParser is safe to use from several threads.
    """

    formatter_class: type[HelpFormatter] = HelpFormatter

    def __init__(
        self,
        options: Iterable[Option],
        prog: str | None = None,
        usage: str | None = None,
        formatter: HelpFormatter | None = None,
    ) -> None:
        self.table = OptionTable.wrap(options)
        self.prog = prog
        self.usage = usage
        if formatter is None:
            formatter = self.formatter_class()
        self.formatter = formatter

    # -- Option-parsing methods ----------------------------------------

    def parse_args(self, args: Iterable[str]) -> ParseResult:
        """
        parse_args(args : [string]) -> ParseResult

        Parse the command-line options found in 'args', usually
        sys.argv[1:].  Options and positional arguments may be mixed;
        both keep their own order.  On the first bad option a
        ParseError is raised whose 'result' holds the positional
        arguments seen before it (and no options).
        """
        state = _ParsingState(list(args))
        options: list[Result] = []
        largs: list[str] = []

        try:
            self._process_args(state, options, largs)
        except ParseError as err:
            err.result = ParseResult((), tuple(largs))
            logger.debug("Parsing stopped at argument %d: %s", state.optidx, err)
            raise

        return ParseResult(tuple(options), tuple(largs))

    def _process_args(
        self, state: _ParsingState, options: list[Result], largs: list[str]
    ) -> None:
        while True:
            if state.subopt > 0:
                # continue a cluster of short options, eg. "b" in "-abc"
                options.append(self._process_short_opt(state))
                continue

            if state.at_end():
                return

            arg = state.args[state.optidx]
            # A bare "-" is a positional argument, like any word that
            # does not start with a dash.
            if len(arg) < 2 or arg[0] != "-":
                logger.debug("Positional argument %r", arg)
                largs.append(arg)
                state.optidx += 1
            elif arg == "--":
                state.optidx += 1
                logger.debug("Terminator found, %d argument(s) left", len(state.rest()))
                largs.extend(state.rest())
                state.optidx = len(state.args)
                return
            elif arg[:2] == "--":
                options.append(self._process_long_opt(state))
            else:
                state.subopt = 1
                options.append(self._process_short_opt(state))

    def _process_long_opt(self, state: _ParsingState) -> Result:
        arg = state.args[state.optidx]

        # The name is split off before the lookup, so "--file=x" looks
        # up "file".
        opt, eq, optarg = arg[2:].partition("=")
        had_explicit_value = bool(eq)

        option = self.table.find_long(opt)
        if option is None:
            raise BadOptionError(Option.placeholder(long=opt))

        state.optidx += 1

        if not option.takes_arg:
            if had_explicit_value:
                raise UnexpectedArgumentError(option)
            optarg = ""
        elif not option.arg_optional and not had_explicit_value:
            if state.at_end():
                raise MissingArgumentError(option)
            optarg = state.args[state.optidx]
            state.optidx += 1

        # An optional argument is only ever taken from after the "=".
        logger.debug("Matched --%s as %s, argument %r", opt, option, optarg)
        return Result(option, opt, optarg)

    def _process_short_opt(self, state: _ParsingState) -> Result:
        arg = state.args[state.optidx]
        ch = arg[state.subopt]

        option = self.table.find_short(ch)
        if option is None:
            raise BadOptionError(Option.placeholder(short=ch))

        if not option.takes_arg:
            state.subopt += 1
            if state.subopt >= len(arg):
                state.subopt = 0
                state.optidx += 1
            logger.debug("Matched -%s as %s", ch, option)
            return Result(option, ch)

        # The rest of the cluster is the argument, eg. "-oFILE".
        optarg = arg[state.subopt + 1 :]
        state.subopt = 0
        state.optidx += 1

        if not optarg and not option.arg_optional:
            if state.at_end():
                raise MissingArgumentError(option)
            optarg = state.args[state.optidx]
            state.optidx += 1

        logger.debug("Matched -%s as %s, argument %r", ch, option, optarg)
        return Result(option, ch, optarg)

    # -- Feedback methods ----------------------------------------------

    def get_prog_name(self) -> str:
        if self.prog is None:
            return os.path.basename(sys.argv[0])
        return self.prog

    def format_usage(self) -> str:
        return self.formatter.format_usage(self.get_prog_name(), self.usage or "")

    def format_option_help(self) -> str:
        return self.formatter.format_option_list(self.table)

    def format_help(self) -> str:
        return self.format_usage() + self.format_option_help()

    def print_usage(self, file: IO[str] | None = None) -> None:
        """print_usage(file : file = stdout)

        Print the one line usage message for the current program to
        'file' (default stdout).
        """
        if file is None:
            file = sys.stdout
        file.write(self.format_usage())

    def print_help(self, file: IO[str] | None = None) -> None:
        """print_help(file : file = stdout)

        Print the usage line followed by the option listing to 'file'
        (default stdout).
        """
        if file is None:
            file = sys.stdout
        file.write(self.format_help())

    def exit(self, status: int = 0, msg: str | None = None) -> NoReturn:
        if msg:
            sys.stderr.write(msg)
        sys.exit(status)

    def error(self, msg: str) -> NoReturn:
        """error(msg : string)

        Print a usage message incorporating 'msg' to stderr and exit.
        parse_args() never calls this; it is for programs handling a
        ParseError.
        """
        self.print_usage(sys.stderr)
        self.exit(2, f"{self.get_prog_name()}: error: {msg}\n")


def parse_args(options: Iterable[Option], args: Iterable[str]) -> ParseResult:
    """
    Parse 'args' against the option table 'options'.

    Shorthand for OptionParser(options).parse_args(args).
    """
    return OptionParser(options).parse_args(args)
