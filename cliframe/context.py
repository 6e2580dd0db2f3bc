"""The context handed to actions: parsed flags, arguments and their lineage."""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import Any

from .command import Command
from .errors import RequiredFlagsError
from .flags import Flag
from .flagset import FlagError, FlagSet


def _flag_display_name(raw: str) -> str:
    parts = raw.split(",")
    name = parts[0].strip()
    for part in parts:
        part = part.strip()
        if len(part) > len(name):
            name = part
    return name


def _display_names(flag_set: FlagSet) -> Iterator[str]:
    for raw in flag_set.visit():
        name = _flag_display_name(raw)
        if name:
            yield name


class Context:
    """Parsed flags and arguments for one level of an application run.

    ``app`` is any object with ``flags`` and, optionally, an
    ``invalid_flag_access_handler(context, name)`` callable.
    """

    def __init__(
        self,
        app: Any = None,
        flag_set: FlagSet | None = None,
        parent: Context | None = None,
    ) -> None:
        self.app = app
        self.flag_set = flag_set if flag_set is not None else FlagSet()
        self.parent = parent
        self.shell_complete = False
        self.data: dict[Any, Any] | None = None
        if parent is not None:
            self.data = parent.data
            self.shell_complete = parent.shell_complete
        if self.data is None:
            self.data = {}
        self.command = Command()

    def num_flags(self) -> int:
        """Return how many flags were given at this level."""
        return self.flag_set.n_flag()

    def set(self, name: str, value: str) -> None:
        """Set the named flag, looking through this context and its parents."""
        flag_set = self.lookup_flag_set(name)
        if flag_set is None:
            raise FlagError(f"no such flag -{name}")
        flag_set.set(name, value)

    def is_set(self, name: str) -> bool:
        """Return whether the flag was given, from the command line or elsewhere."""
        flag_set = self.lookup_flag_set(name)
        if flag_set is None:
            return False
        if name in flag_set.visit():
            return True
        flag = self.lookup_flag(name)
        return flag is not None and flag.is_set()

    def local_flag_names(self) -> list[str]:
        """Return the names of the flags given at this level."""
        return list(_display_names(self.flag_set))

    def flag_names(self) -> list[str]:
        """Return the names of the flags given here and in every parent."""
        return [name for ctx in self.lineage() for name in _display_names(ctx.flag_set)]

    def lineage(self) -> list[Context]:
        """Return this context followed by its ancestors, child first."""
        chain = []
        current: Context | None = self
        while current is not None:
            chain.append(current)
            current = current.parent
        return chain

    def count(self, name: str) -> int:
        """Return how many times a counting flag was given, or 0."""
        flag_set = self.lookup_flag_set(name)
        if flag_set is None:
            return 0
        counter = getattr(flag_set.lookup(name), "count", None)
        if callable(counter):
            return counter()
        if isinstance(counter, int) and not isinstance(counter, bool):
            return counter
        return 0

    def value(self, name: str) -> Any:
        """Return the value of the named flag, or None if it is unknown."""
        flag_set = self.lookup_flag_set(name)
        if flag_set is None:
            return None
        return flag_set.lookup(name).get()

    def args(self) -> list[str]:
        """Return the arguments left after the flags."""
        return self.flag_set.args()

    def n_arg(self) -> int:
        """Return the number of arguments left after the flags."""
        return len(self.args())

    def lookup_flag(self, name: str) -> Flag | None:
        """Find the flag definition with the given name in commands or the app."""
        for ctx in self.lineage():
            if ctx.command is None:
                continue
            for flag in ctx.command.flags:
                if name in flag.names():
                    return flag
        if self.app is not None:
            for flag in getattr(self.app, "flags", None) or []:
                if name in flag.names():
                    return flag
        return None

    def lookup_flag_set(self, name: str) -> FlagSet | None:
        """Return the nearest flag set defining the name, or None."""
        for ctx in self.lineage():
            if ctx.flag_set is not None and ctx.flag_set.lookup(name) is not None:
                return ctx.flag_set
        self._on_invalid_flag(name)
        return None

    def check_required_flags(self, flags: Iterable[Flag]) -> None:
        """Raise RequiredFlagsError naming each required flag not given."""
        missing = []
        for flag in flags:
            is_required = getattr(flag, "is_required", None)
            if not (callable(is_required) and is_required()):
                continue
            present = False
            flag_name = ""
            for key in flag.names():
                flag_name = key
                if self.is_set(key.strip()):
                    present = True
            if not present and flag_name:
                missing.append(flag_name)
        if missing:
            raise RequiredFlagsError(missing)

    def _on_invalid_flag(self, name: str) -> None:
        current: Context | None = self
        while current is not None:
            handler = getattr(current.app, "invalid_flag_access_handler", None)
            if current.app is not None and handler is not None:
                handler(current, name)
                return
            current = current.parent