from __future__ import annotations

from argp.errors import ArgpError
from argp.errors import BadOptionError
from argp.errors import MissingArgumentError
from argp.errors import OptionError
from argp.errors import ParseError
from argp.errors import TableError
from argp.errors import UnexpectedArgumentError
from argp.formatters import HelpFormatter
from argp.formatters import print_option_list
from argp.formatters import print_usage
from argp.option import OPTION_ALIAS
from argp.option import OPTION_ARG_OPTIONAL
from argp.option import OPTION_HIDDEN
from argp.option import Option
from argp.option import OptionFlag
from argp.option import OptionTable
from argp.parser import OptionParser
from argp.parser import ParseResult
from argp.parser import Result
from argp.parser import parse_args


__version__ = "1.0.0"

__all__ = [
    "OPTION_ALIAS",
    "OPTION_ARG_OPTIONAL",
    "OPTION_HIDDEN",
    "ArgpError",
    "BadOptionError",
    "HelpFormatter",
    "MissingArgumentError",
    "Option",
    "OptionError",
    "OptionFlag",
    "OptionParser",
    "OptionTable",
    "ParseError",
    "ParseResult",
    "Result",
    "TableError",
    "UnexpectedArgumentError",
    "parse_args",
    "print_option_list",
    "print_usage",
]
