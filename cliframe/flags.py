"""Flag interfaces and the helpers that parse, normalise and describe flags."""

from __future__ import annotations

import json
import os
import re
import sys
from abc import ABC, abstractmethod
from collections.abc import Iterable

from .flagset import FlagError, FlagSet

DEFAULT_PLACEHOLDER = "value"

_COMMA_WHITESPACE = re.compile(r"[, ]+.*", re.DOTALL)


class Flag(ABC):
    """A command-line flag that can be installed into a flag set."""

    @abstractmethod
    def apply(self, flag_set: FlagSet) -> None:
        """Define this flag in the given flag set."""

    @abstractmethod
    def names(self) -> list[str]:
        """Return the name followed by the aliases."""

    @abstractmethod
    def is_set(self) -> bool:
        """Return whether the flag received a value."""

    def __str__(self) -> str:
        return stringify_flag(self)


class DocGenerationFlag(Flag):
    """A flag that can describe itself for help and documentation."""

    @abstractmethod
    def takes_value(self) -> bool:
        """Return whether the flag takes a value."""

    @abstractmethod
    def help_text(self) -> str:
        """Return the usage text."""

    @abstractmethod
    def value_text(self) -> str:
        """Return the value as text, or "" when the flag takes no value."""

    @abstractmethod
    def shown_default(self) -> str:
        """Return the default shown in help."""

    @abstractmethod
    def env_var_names(self) -> list[str]:
        """Return the environment variables the flag reads."""


def new_flag_set(name: str, flags: Iterable[Flag]) -> FlagSet:
    """Build a flag set holding the given flags."""
    flag_set = FlagSet(name)
    for flag in flags:
        flag.apply(flag_set)
    return flag_set


def _copy_flag(name: str, source, flag_set: FlagSet) -> None:
    serialize = getattr(source, "serialize", None)
    text = serialize() if callable(serialize) else str(source)
    try:
        flag_set.set(name, text)
    except (ValueError, FlagError):
        pass


def normalize_flags(flags: Iterable[Flag], flag_set: FlagSet) -> None:
    """Copy a value given under one name of a flag to its other names."""
    visited = set(flag_set.visit())
    for flag in flags:
        parts = flag.names()
        if len(parts) == 1:
            continue
        found_name = None
        found = None
        for part in parts:
            name = part.strip(" ")
            if name in visited:
                if found is not None:
                    raise FlagError(
                        f"Cannot use two forms of the same flag: {name} {found_name}"
                    )
                found_name, found = name, flag_set.lookup(name)
        if found is None:
            continue
        for part in parts:
            name = part.strip(" ")
            if name not in visited:
                _copy_flag(name, found, flag_set)


def visible_flags(flags: Iterable[Flag]) -> list[Flag]:
    """Return the flags that report themselves as visible."""
    visible = []
    for flag in flags:
        is_visible = getattr(flag, "is_visible", None)
        if callable(is_visible) and is_visible():
            visible.append(flag)
    return visible


def has_flag(flags: Iterable[Flag], flag: Flag) -> bool:
    """Return whether this very flag object is among the flags."""
    return any(existing is flag for existing in flags)


def prefix_for(name: str) -> str:
    """Return "-" for one-letter names and "--" otherwise."""
    return "-" if len(name) == 1 else "--"


def unquote_usage(usage: str) -> tuple[str, str]:
    """Return the placeholder marked with backticks and the usage without them."""
    start = usage.find("`")
    if start != -1:
        end = usage.find("`", start + 1)
        if end != -1:
            name = usage[start + 1:end]
            return name, usage[:start] + name + usage[end + 1:]
    return "", usage


def prefixed_names(names: list[str], placeholder: str) -> str:
    """Join the names with their dash prefixes and placeholder."""
    prefixed = ""
    last = len(names) - 1
    for position, name in enumerate(names):
        if not name:
            continue
        prefixed += prefix_for(name) + name
        if placeholder:
            prefixed += " " + placeholder
        if position < last:
            prefixed += ", "
    return prefixed


def with_env_hint(env_vars: list[str], text: str) -> str:
    """Append the environment variables a flag reads."""
    if not env_vars:
        return text
    if sys.platform == "win32":
        prefix, suffix, sep = "%", "%", "%, %"
    else:
        prefix, suffix, sep = "$", "", ", $"
    return f"{text} [{prefix}{sep.join(env_vars)}{suffix}]"


def with_file_hint(file_path: str, text: str) -> str:
    """Append the file a flag reads its value from."""
    return f"{text} [{file_path}]" if file_path else text


def flag_names(name: str, aliases: Iterable[str]) -> list[str]:
    """Return the name and aliases, each cut at its first comma or space."""
    return [_COMMA_WHITESPACE.sub("", part) for part in [name, *aliases]]


def format_default(text: str) -> str:
    """Return the default-value note shown in help."""
    return f" (default: {text})"


def stringify_flag(flag: Flag) -> str:
    """Return the help line for a flag, or "" if it cannot describe itself."""
    if not isinstance(flag, DocGenerationFlag):
        return ""
    placeholder, usage = unquote_usage(flag.help_text())
    if flag.takes_value() and not placeholder:
        placeholder = DEFAULT_PLACEHOLDER
    default = flag.shown_default()
    default_text = format_default(default) if default else ""
    usage_with_default = (usage + default_text).strip()
    return with_env_hint(
        flag.env_var_names(),
        f"{prefixed_names(flag.names(), placeholder)}\t{usage_with_default}",
    )


def stringify_slice_flag(usage: str, names: list[str], default_values: list[str]) -> str:
    """Return the help line for a flag that may be given several times."""
    placeholder, usage = unquote_usage(usage)
    if not placeholder:
        placeholder = DEFAULT_PLACEHOLDER
    default = format_default(", ".join(default_values)) if default_values else ""
    usage_with_default = f"{usage}{default}".strip()
    prefixed = prefixed_names(names, placeholder)
    return f"{prefixed} [ {prefixed} ]\t{usage_with_default}"


def flag_from_env_or_file(env_vars: Iterable[str], file_path: str) -> tuple[str, str] | None:
    """Return the first value found and where it came from, or None.

    Environment variables are tried first, then the comma separated files.
    """
    for env_var in env_vars:
        env_var = env_var.strip()
        if env_var in os.environ:
            return os.environ[env_var], f"environment variable {json.dumps(env_var)}"
    for candidate in file_path.split(","):
        if not candidate:
            continue
        try:
            with open(candidate, encoding="utf-8") as handle:
                data = handle.read()
        except OSError:
            continue
        return data, f"file {json.dumps(file_path)}"
    return None


def split_multi_values(value: str) -> list[str]:
    """Split a comma separated value."""
    return value.split(",")