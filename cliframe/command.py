"""Commands and subcommands of an application."""

from __future__ import annotations

from collections.abc import Callable, Iterable
from dataclasses import dataclass, field
from typing import Any

from .flags import Flag
from .flags import has_flag as _has_flag
from .flags import new_flag_set as _new_flag_set
from .flags import visible_flags as _visible_flags
from .flagset import FlagSet


@dataclass(eq=False)
class Command:
    """A command of an application, possibly with subcommands of its own."""

    name: str = ""
    aliases: list[str] = field(default_factory=list)
    usage: str = ""
    usage_text: str = ""
    description: str = ""
    args_usage: str = ""
    category: str = ""
    bash_complete: Callable[[Any], None] | None = None
    before: Callable[[Any], None] | None = None
    after: Callable[[Any], None] | None = None
    action: Callable[[Any], None] | None = None
    on_usage_error: Callable[[Any, BaseException, bool], None] | None = None
    subcommands: list[Command] = field(default_factory=list)
    flags: list[Flag] = field(default_factory=list)
    skip_flag_parsing: bool = False
    hide_help: bool = False
    hide_help_command: bool = False
    hidden: bool = False
    use_short_option_handling: bool = False
    help_name: str = ""
    custom_help_template: str = ""
    command_name_path: list[str] | None = None

    def full_name(self) -> str:
        """Return the name including the names of parent commands."""
        if self.command_name_path is None:
            return self.name
        return " ".join(self.command_name_path)

    def names(self) -> list[str]:
        """Return the name followed by the aliases."""
        return [self.name, *self.aliases]

    def has_name(self, name: str) -> bool:
        """Return whether the name or one of the aliases equals name."""
        return name in self.names()

    def visible_flags(self) -> list[Flag]:
        """Return the flags that are not hidden."""
        return _visible_flags(self.flags)

    def append_flag(self, flag: Flag) -> None:
        """Add the flag unless this very flag is already present."""
        if not _has_flag(self.flags, flag):
            self.flags.append(flag)

    def new_flag_set(self) -> FlagSet:
        """Build a flag set holding this command's flags."""
        return _new_flag_set(self.name, self.flags)


def has_command(commands: Iterable[Command], command: Command) -> bool:
    """Return whether this very command object is among the commands."""
    return any(existing is command for existing in commands)