"""Shared option tables for argp tests."""

import pytest

from argp import Option
from argp import OptionFlag


@pytest.fixture
def options():
    """A table with every kind of entry: categories, aliases, hidden, optional args."""
    return [
        Option(doc="CATEGORY 000:"),
        Option("a", "aaa", doc="enable option a"),
        Option("b", "bbb", doc="enable option b"),
        Option("c", "ccc", doc="enable option c"),
        Option("d", "ddd", "<ARG>"),
        Option("e", "eee", "<ARG>", OptionFlag.ARG_OPTIONAL),
        Option("p", doc="enable option p"),
        Option("q", doc="enable option q"),
        Option("r", doc="enable option r"),
        Option("1", doc="enable option 1"),
        Option(" ", "secret", flags=OptionFlag.HIDDEN, doc="hidden option"),
        Option(doc="CATEGORY 111:"),
        Option("o", "output", "<buf>", doc="specify output buffer"),
        Option("x", "xxxx", "<arg>", doc="enable option x"),
        Option("f", "file", "<file>", doc="file to open"),
        Option(" ", "ffff", flags=OptionFlag.ALIAS),
        Option(" ", "fgfg", flags=OptionFlag.ALIAS),
        Option("F", "    ", flags=OptionFlag.ALIAS),
        Option("K", "kind", "<kind>", OptionFlag.ARG_OPTIONAL, doc="specify kind"),
        Option(doc="CATEGORY 222:"),
        Option("h", "help", doc="print help and exit"),
        Option("V", "version", doc="print version and exit"),
    ]
