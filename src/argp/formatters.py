from __future__ import annotations

from typing import IO
from typing import Iterable

from argp.option import Option
from argp.option import OptionTable


class HelpFormatter:
    """
    Formats the usage line and the option listing of an option table.

    Each option row is made of two columns:
      * the option strings and argument name,
        eg. (" -x", or " -f, --file <file>")
      * the option's doc text, one physical line per line of doc

    The left column is padded to 'column_width' and separated from the
    doc by 'gap' spaces.  Rows that do not fit simply push the doc to
    the right.

    Instance attributes:
      column_width : int
        width the left column is padded to, including the indent
      indent : int
        number of spaces in front of the option strings
      gap : int
        number of spaces between the two columns
      _short_arg_fmt : { bool : str }
        format of the argument after a short option with no long name,
        keyed by "argument is optional": " %s" ("-x ARG") or "[%s]"
        ("-x[ARG]")
      _long_arg_fmt : { bool : str }
        same for long options: " %s" ("--file ARG") or "[=%s]"
        ("--file[=ARG]")
    """

    def __init__(self, column_width: int = 25, indent: int = 1, gap: int = 2) -> None:
        if column_width < 1:
            raise ValueError(f"invalid column width: {column_width!r}")
        if indent < 0:
            raise ValueError(f"invalid indent: {indent!r}")
        if gap < 0:
            raise ValueError(f"invalid gap: {gap!r}")
        self.column_width = column_width
        self.indent = indent
        self.gap = gap
        self._short_arg_fmt = {False: " %s", True: "[%s]"}
        self._long_arg_fmt = {False: " %s", True: "[=%s]"}

    def format_usage(self, prog: str, args_usage: str = "") -> str:
        usage = f"Usage: {prog} [options...] {args_usage}"
        return usage.rstrip() + "\n"

    def format_heading(self, heading: str) -> str:
        return f"{heading}\n"

    def format_option_strings(
        self, option: Option, aliases: Iterable[Option] = ()
    ) -> str:
        """
        Return the left column for 'option' and its aliases: all short
        names, then all long names, with the argument name attached to
        the long names (or to the short names when there is no long one).
        """
        names = [option, *aliases]
        shorts = [opt.short for opt in names if opt.short is not None]
        longs = [opt.long for opt in names if opt.long is not None]

        if option.takes_arg and not longs:
            arg = self._short_arg_fmt[option.arg_optional] % option.arg_name
        else:
            arg = ""
        short_opts = [f"-{short}{arg}" for short in shorts]

        if option.takes_arg:
            arg = self._long_arg_fmt[option.arg_optional] % option.arg_name
        else:
            arg = ""
        long_opts = [f"--{long}{arg}" for long in longs]

        result = [" " * self.indent]
        if short_opts:
            result.append(", ".join(short_opts))
        else:
            # keep long names aligned with those of rows that have "-x, "
            result.append("    ")
        if short_opts and long_opts:
            result.append(", ")
        result.append(", ".join(long_opts))
        return "".join(result)

    def format_option(self, option: Option, aliases: Iterable[Option] = ()) -> str:
        left = self.format_option_strings(option, aliases)
        gap = " " * self.gap
        result = []
        for line in option.doc.split("\n"):
            result.append("%-*s%s%s\n" % (self.column_width, left, gap, line))
            left = ""
        return "".join(result)

    def format_option_list(self, options: Iterable[Option]) -> str:
        table = OptionTable.wrap(options)
        result = []
        for option, aliases in table.groups():
            if option.is_hidden:
                continue
            if option.is_doc:
                # category header, or a spacer line when the doc is empty
                result.append(self.format_heading(option.doc))
            else:
                result.append(self.format_option(option, aliases))
        return "".join(result)


def print_option_list(
    file: IO[str], options: Iterable[Option], formatter: HelpFormatter | None = None
) -> None:
    """
    Write the option listing of 'options' to 'file'.
    """
    formatter = formatter or HelpFormatter()
    file.write(formatter.format_option_list(options))


def print_usage(
    file: IO[str],
    options: Iterable[Option],
    prog: str,
    args_usage: str = "",
    formatter: HelpFormatter | None = None,
) -> None:
    """
    Write the usage line, eg. "Usage: prog [options...] FILE...",
    followed by the option listing of 'options' to 'file'.
    """
    formatter = formatter or HelpFormatter()
    file.write(formatter.format_usage(prog, args_usage))
    file.write(formatter.format_option_list(options))
