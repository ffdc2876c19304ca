from __future__ import annotations

import enum

from collections.abc import Sequence
from dataclasses import dataclass
from typing import Callable
from typing import ClassVar
from typing import Iterable
from typing import Iterator
from typing import overload

from argp.errors import OptionError
from argp.errors import TableError


class OptionFlag(enum.IntFlag):
    """
    Behavioural flags of an option table entry.

    ARG_OPTIONAL
        the argument may be omitted; when given it must be attached,
        eg. "-oARG" or "--option=ARG", never a separate element
    HIDDEN
        leave the entry (and its aliases) out of the help listing
    ALIAS
        the entry is another name for the nearest preceding real option;
        matches resolve to that option
    """

    NONE = 0
    ARG_OPTIONAL = 0x1
    HIDDEN = 0x2
    ALIAS = 0x4


OPTION_ARG_OPTIONAL = OptionFlag.ARG_OPTIONAL
OPTION_HIDDEN = OptionFlag.HIDDEN
OPTION_ALIAS = OptionFlag.ALIAS

_ALL_FLAGS = OptionFlag.ARG_OPTIONAL | OptionFlag.HIDDEN | OptionFlag.ALIAS


def _is_blank(s: str | None, chars: str | None = None) -> bool:
    return s is None or not s.strip(chars)


@dataclass(frozen=True)
class Option:
    """
    A single entry of an option table.

    An entry is either a real option, an alias of the nearest preceding
    real option (flag ALIAS), or a documentation line with neither
    a short nor a long name (used as category header or spacer).

    Instance attributes:
      short : str | None
        single character name, matched as "-x"
      long : str | None
        long name, matched as "--name"
      arg_name : str
        name of the argument shown in help; empty if no argument is taken
      flags : OptionFlag
      doc : str
        description, or the text of a documentation line
    """

    short: str | None = None
    long: str | None = None
    arg_name: str = ""
    flags: OptionFlag = OptionFlag.NONE
    doc: str = ""

    # Called in order after the fields are set; each raises OptionError
    # on a problem.  Filled in after the methods are defined.
    CHECK_METHODS: ClassVar[list[Callable[[Option], None]]]

    def __post_init__(self) -> None:
        for checker in self.CHECK_METHODS:
            checker(self)

    @classmethod
    def placeholder(cls, short: str | None = None, long: str | None = None) -> Option:
        """
        Build an unchecked entry holding only the identifier seen on the
        command line, for reporting options that are not in the table.
        """
        option = object.__new__(cls)
        for name, value in (
            ("short", short),
            ("long", long),
            ("arg_name", ""),
            ("flags", OptionFlag.NONE),
            ("doc", ""),
        ):
            object.__setattr__(option, name, value)
        return option

    def _set(self, name: str, value: object) -> None:
        object.__setattr__(self, name, value)

    def _check_names(self) -> None:
        # A blank short (NUL or space) or a whitespace-only long name
        # means the name is unused.
        short = None if _is_blank(self.short, " \0") else self.short
        long = None if _is_blank(self.long) else self.long
        self._set("short", short)
        self._set("long", long)

        if short is not None:
            if len(short) != 1:
                raise OptionError(
                    f"invalid short option {short!r}: must be a single character",
                    str(self),
                )
            if short == "-":
                raise OptionError("invalid short option '-'", str(self))
        if long is not None:
            if long.startswith("-"):
                raise OptionError(
                    f"invalid long option {long!r}: must not start with a dash",
                    str(self),
                )
            if "=" in long or any(ch.isspace() for ch in long):
                raise OptionError(
                    f"invalid long option {long!r}: "
                    "must not contain '=' or whitespace",
                    str(self),
                )

    def _check_arg_name(self) -> None:
        if _is_blank(self.arg_name):
            self._set("arg_name", "")

    def _check_flags(self) -> None:
        try:
            flags = OptionFlag(self.flags)
        except (TypeError, ValueError):
            raise OptionError(f"invalid flags: {self.flags!r}", str(self))
        if int(flags) & ~int(_ALL_FLAGS):
            raise OptionError(f"unknown flags: {int(flags):#x}", str(self))
        self._set("flags", flags)

        if flags & OptionFlag.ALIAS and self.short is None and self.long is None:
            raise OptionError("an alias must have a short or long name", str(self))
        if flags & OptionFlag.ARG_OPTIONAL and not self.arg_name:
            raise OptionError(
                "ARG_OPTIONAL must not be supplied for an option without arg_name",
                str(self),
            )

    CHECK_METHODS = [_check_names, _check_arg_name, _check_flags]

    # -- Miscellaneous methods -----------------------------------------

    def __str__(self) -> str:
        names = []
        if self.short is not None:
            names.append(f"-{self.short}")
        if self.long is not None:
            names.append(f"--{self.long}")
        return "/".join(names)

    @property
    def is_alias(self) -> bool:
        return bool(self.flags & OptionFlag.ALIAS)

    @property
    def is_hidden(self) -> bool:
        return bool(self.flags & OptionFlag.HIDDEN)

    @property
    def is_doc(self) -> bool:
        return self.short is None and self.long is None and not self.is_alias

    @property
    def takes_arg(self) -> bool:
        return bool(self.arg_name)

    @property
    def arg_optional(self) -> bool:
        return bool(self.flags & OptionFlag.ARG_OPTIONAL)

    def is_named(self, name: str) -> bool:
        """Return True if 'name' is the short or long name of this option."""
        if _is_blank(name):
            return False
        return name == self.short or name == self.long


class OptionTable(Sequence[Option]):
    """
    An ordered, read-only sequence of Option entries.

    Order matters twice: it is the order of the help listing, and an
    alias belongs to the nearest real option before it.  Each alias is
    bound to that option once, when the table is built; an alias right
    after a documentation line has none and is rejected.

    Instance attributes:
      _options : (Option)
      _canonical : (int)
        for every position, the position of the entry it resolves to
    """

    def __init__(self, options: Iterable[Option] = ()) -> None:
        self._options: tuple[Option, ...] = tuple(options)
        self._canonical: tuple[int, ...] = self._bind_aliases()

    @classmethod
    def wrap(cls, options: Iterable[Option]) -> OptionTable:
        if isinstance(options, OptionTable):
            return options
        return cls(options)

    def _bind_aliases(self) -> tuple[int, ...]:
        canonical = []
        current = None
        for index, option in enumerate(self._options):
            if not isinstance(option, Option):
                raise TypeError(f"not an Option instance: {option!r}")
            if not option.is_alias:
                # doc entries resolve to themselves but take no aliases
                current = None if option.is_doc else index
                canonical.append(index)
            elif current is None:
                raise TableError(
                    "alias has no preceding option to attach to", str(option)
                )
            else:
                canonical.append(current)
        return tuple(canonical)

    @overload
    def __getitem__(self, index: int) -> Option:
        ...

    @overload
    def __getitem__(self, index: slice) -> Sequence[Option]:
        ...

    def __getitem__(self, index):
        return self._options[index]

    def __len__(self) -> int:
        return len(self._options)

    def __repr__(self) -> str:
        return f"<{self.__class__.__name__} of {len(self)} entries>"

    def canonical(self, index: int) -> Option:
        return self._options[self._canonical[index]]

    def aliases(self, index: int) -> tuple[Option, ...]:
        """Return the run of alias entries right after position 'index'."""
        run = []
        for option in self._options[index + 1 :]:
            if not option.is_alias:
                break
            run.append(option)
        return tuple(run)

    def groups(self) -> Iterator[tuple[Option, tuple[Option, ...]]]:
        """Yield every non-alias entry together with its aliases."""
        for index, option in enumerate(self._options):
            if not option.is_alias:
                yield option, self.aliases(index)

    # -- Lookup methods ------------------------------------------------
    # Plain scans; option tables are small.

    def find_long(self, name: str) -> Option | None:
        if not name:
            return None
        for index, option in enumerate(self._options):
            if option.long == name:
                return self.canonical(index)
        return None

    def find_short(self, char: str) -> Option | None:
        if not char:
            return None
        for index, option in enumerate(self._options):
            if option.short == char:
                return self.canonical(index)
        return None
