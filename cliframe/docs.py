"""Markdown fragments that document an application's commands and flags."""

from __future__ import annotations

from collections.abc import Iterable

from .command import Command
from .flags import DocGenerationFlag, Flag


def prepare_commands(commands: Iterable[Command], level: int = 0) -> list[str]:
    """Return a markdown section for each visible command, subcommands included."""
    sections: list[str] = []
    for command in commands:
        if command.hidden:
            continue
        usage_text = prepare_usage_text(command)
        usage = prepare_usage(command, usage_text)
        prepared = (
            f"{'#' * (level + 2)} {', '.join(command.names())}\n\n{usage}{usage_text}"
        )
        flags = prepare_args_with_values(command.visible_flags())
        if flags:
            prepared += "\n" + "\n".join(flags)
        sections.append(prepared)
        if command.subcommands:
            sections.extend(prepare_commands(command.subcommands, level + 1))
    return sections


def prepare_args_with_values(flags: Iterable[Flag]) -> list[str]:
    """Return bold flag names with their value marker and details."""
    return prepare_flags(flags, ", ", "**", "**", '""', True)


def prepare_args_synopsis(flags: Iterable[Flag]) -> list[str]:
    """Return flag names in the bracketed form used in a synopsis."""
    return prepare_flags(flags, "|", "[", "]", "[value]", False)


def prepare_flags(
    flags: Iterable[Flag],
    sep: str,
    opener: str,
    closer: str,
    value: str,
    add_details: bool,
) -> list[str]:
    """Describe each documentable flag on a line of its own, sorted."""
    lines = []
    for flag in flags:
        if not isinstance(flag, DocGenerationFlag):
            continue
        described = opener
        for name in flag.names():
            trimmed = name.strip()
            if len(described) > len(opener):
                described += sep
            described += f"--{trimmed}" if len(trimmed) > 1 else f"-{trimmed}"
        described += closer
        if flag.takes_value():
            described += f"={value}"
        if add_details:
            described += flag_details(flag)
        lines.append(described + "\n")
    return sorted(lines)


def flag_details(flag: DocGenerationFlag) -> str:
    """Return the usage of a flag followed by its default value, if any."""
    description = flag.help_text()
    value = flag.value_text()
    if value:
        description += f" (default: {value})"
    return ": " + description


def prepare_usage_text(command: Command) -> str:
    """Format a command's usage text as a code block or a quoted note."""
    if not command.usage_text:
        return ""
    prepared = command.usage_text.strip("\n")
    if "\n" in prepared:
        return "".join(f"    {line}\n" for line in prepared.split("\n"))
    return f">{prepared}\n"


def prepare_usage(command: Command, usage_text: str) -> str:
    """Return the command's usage line, with a blank line if usage text follows."""
    if not command.usage:
        return ""
    usage = command.usage + "\n"
    if usage_text:
        usage += "\n"
    return usage