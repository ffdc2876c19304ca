from __future__ import annotations

from typing import TYPE_CHECKING


if TYPE_CHECKING:
    from argp.option import Option
    from argp.parser import ParseResult


class ArgpError(Exception):
    def __init__(self, msg: str) -> None:
        self.msg = msg

    def __str__(self) -> str:
        return self.msg


class OptionError(ArgpError):
    """
    Raised if an Option instance is created with invalid or
    inconsistent arguments.
    """

    def __init__(self, msg: str, option_id: str = "") -> None:
        self.msg = msg
        self.option_id = option_id

    def __str__(self) -> str:
        if self.option_id:
            return f"option {self.option_id}: {self.msg}"
        return self.msg


class TableError(OptionError):
    """
    Raised if an option table is malformed, eg. an alias entry with
    no preceding option to attach to.
    """


class ParseError(ArgpError):
    """
    Base class for errors seen on the command line.

    Instance attributes:
      option : Option
        the canonical option that failed, or a placeholder holding only
        the identifier the user typed when no option matched
      result : ParseResult
        the partial outcome; holds no options, only the positional
        arguments gathered before the failing token
    """

    message: str = "parse error"

    def __init__(self, option: Option, result: ParseResult | None = None) -> None:
        self.option = option
        self.result = result
        self.msg = str(self)

    def __str__(self) -> str:
        long, short = self.option.long, self.option.short
        if long is not None and short:
            return f"{self.message}: --{long} (-{short})"
        if long is not None:
            return f"{self.message}: --{long}"
        return f"{self.message}: -{short or ''}"


class BadOptionError(ParseError):
    """
    Raised if an invalid option is seen on the command line.
    """

    message = "invalid option"


class MissingArgumentError(ParseError):
    """
    Raised if an option requiring an argument reaches the end of the
    argument list without one.
    """

    message = "option requires an argument"


class UnexpectedArgumentError(ParseError):
    """
    Raised if a long option that takes no argument is given one with '='.
    """

    message = "option takes no arguments"
