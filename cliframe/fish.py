"""Lines of a fish shell completion script for an application."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field

from .command import Command
from .flags import DocGenerationFlag, Flag


def escape_single_quotes(text: str) -> str:
    """Escape single quotes for use inside a single-quoted fish string."""
    return text.replace("'", "\\'")


def file_flag_option(flag: Flag) -> str:
    """Return " -f" unless the flag takes a file name."""
    if getattr(flag, "takes_file", False):
        return ""
    return " -f"


@dataclass
class FishCompleter:
    """Builds fish completion lines for an application called ``name``.

    Command names seen by ``prepare_commands`` collect in ``all_commands``.
    """

    name: str
    help_flag: Flag | None = None
    all_commands: list[str] = field(default_factory=list)

    def subcommand_helper(self, previous_commands: Iterable[str]) -> str:
        """Return the fish condition for completing after the given commands."""
        previous = list(previous_commands)
        if previous:
            return f"__fish_seen_subcommand_from {' '.join(previous)}"
        return f"__fish_{self.name}_no_subcommand"

    def prepare_flags(
        self, flags: Iterable[Flag | None], previous_commands: Iterable[str]
    ) -> list[str]:
        """Return a completion line for each documentable flag."""
        previous = list(previous_commands)
        completions = []
        for flag in flags:
            if not isinstance(flag, DocGenerationFlag):
                continue
            line = f"complete -c {self.name} -n '{self.subcommand_helper(previous)}'"
            line += file_flag_option(flag)
            for position, option in enumerate(flag.names()):
                kind = "-l" if position == 0 else "-s"
                line += f" {kind} {option.strip()}"
            if flag.takes_value():
                line += " -r"
            if flag.help_text():
                line += f" -d '{escape_single_quotes(flag.help_text())}'"
            completions.append(line)
        return completions

    def prepare_commands(
        self, commands: Iterable[Command], previous_commands: Iterable[str]
    ) -> list[str]:
        """Return completion lines for the visible commands and their flags."""
        previous = list(previous_commands)
        completions: list[str] = []
        for command in commands:
            if command.hidden:
                continue
            names = command.names()
            line = (
                f"complete -r -c {self.name} -n '{self.subcommand_helper(previous)}'"
                f" -a '{' '.join(names)}'"
            )
            if command.usage:
                line += f" -d '{escape_single_quotes(command.usage)}'"
            if not command.hide_help:
                completions.extend(self.prepare_flags([self.help_flag], names))
            self.all_commands.extend(names)
            completions.append(line)
            completions.extend(self.prepare_flags(command.visible_flags(), names))
            if command.subcommands:
                completions.extend(self.prepare_commands(command.subcommands, names))
        return completions