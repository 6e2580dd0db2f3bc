"""A small command-line flag set with typed values."""

from __future__ import annotations

import json
import math
import re
from abc import ABC, abstractmethod
from collections.abc import Iterable, Iterator
from decimal import Decimal

_PARSE_ERROR = "parse error"
_TRUE_WORDS = {"1", "t", "T", "TRUE", "true", "True"}
_FALSE_WORDS = {"0", "f", "F", "FALSE", "false", "False"}
_OCTAL = re.compile(r"([+-]?)0([0-7_]+)")


class FlagError(Exception):
    """Raised when flags cannot be defined, set or parsed."""


def _quote(text: str) -> str:
    return json.dumps(text, ensure_ascii=False)


def _format_float(number: float) -> str:
    if math.isnan(number):
        return "NaN"
    if math.isinf(number):
        return "+Inf" if number > 0 else "-Inf"
    if number == 0:
        return "-0" if math.copysign(1.0, number) < 0 else "0"
    dec = Decimal(repr(number)).normalize()
    sign, digits, exponent = dec.as_tuple()
    sci = len(digits) + exponent - 1
    if sci < -4 or sci >= 21:
        mantissa = str(digits[0])
        if len(digits) > 1:
            mantissa += "." + "".join(str(d) for d in digits[1:])
        return f"{'-' if sign else ''}{mantissa}e{'+' if sci >= 0 else '-'}{abs(sci):02d}"
    return format(dec, "f")


class Value(ABC):
    """A value a flag holds; it parses text given on the command line."""

    is_bool_flag = False

    @abstractmethod
    def set(self, text: str) -> None:
        """Parse text into the value, raising ValueError when it is invalid."""

    @abstractmethod
    def get(self) -> object:
        """Return the current value."""

    @abstractmethod
    def __str__(self) -> str:
        """Return the value as text."""


class BoolValue(Value):
    """A boolean value; counts how often it was set."""

    is_bool_flag = True

    def __init__(self, value: bool = False) -> None:
        self.value = value
        self.count = 0

    def set(self, text: str) -> None:
        if text in _TRUE_WORDS:
            self.value = True
        elif text in _FALSE_WORDS:
            self.value = False
        else:
            raise ValueError(_PARSE_ERROR)
        self.count += 1

    def get(self) -> bool:
        return self.value

    def __str__(self) -> str:
        return "true" if self.value else "false"


class StringValue(Value):
    """A text value."""

    def __init__(self, value: str = "") -> None:
        self.value = value

    def set(self, text: str) -> None:
        self.value = text

    def get(self) -> str:
        return self.value

    def __str__(self) -> str:
        return self.value


class IntValue(Value):
    """An integer value parsed in the given base; base 0 reads the prefix."""

    def __init__(self, value: int = 0, base: int = 0) -> None:
        self.value = value
        self.base = base

    def set(self, text: str) -> None:
        if not text or text != text.strip() or ("_" in text and self.base != 0):
            raise ValueError(_PARSE_ERROR)
        try:
            octal = _OCTAL.fullmatch(text) if self.base == 0 else None
            if octal:
                self.value = int(octal.group(1) + octal.group(2), 8)
            else:
                self.value = int(text, self.base)
        except ValueError:
            raise ValueError(_PARSE_ERROR) from None

    def get(self) -> int:
        return self.value

    def __str__(self) -> str:
        return str(self.value)


class FloatValue(Value):
    """A floating point value."""

    def __init__(self, value: float = 0.0) -> None:
        self.value = float(value)

    def set(self, text: str) -> None:
        if not text or text != text.strip() or "_" in text:
            raise ValueError(_PARSE_ERROR)
        try:
            self.value = float(text)
        except ValueError:
            raise ValueError(_PARSE_ERROR) from None

    def get(self) -> float:
        return self.value

    def __str__(self) -> str:
        return _format_float(self.value)


class FlagSet:
    """A named set of flags that parses an argument list."""

    def __init__(self, name: str = "") -> None:
        self.name = name
        self.parsed = False
        self._values: dict[str, Value] = {}
        self._usage: dict[str, str] = {}
        self._actual: set[str] = set()
        self._args: list[str] = []

    def add(self, name: str, value: Value, usage: str = "") -> None:
        """Define a flag; several names may share one value."""
        if name.startswith("-"):
            raise FlagError(f"flag {_quote(name)} begins with -")
        if "=" in name:
            raise FlagError(f"flag {_quote(name)} contains =")
        if name in self._values:
            prefix = f"{self.name} " if self.name else ""
            raise FlagError(f"{prefix}flag redefined: {name}")
        self._values[name] = value
        self._usage[name] = usage

    def lookup(self, name: str) -> Value | None:
        """Return the value of the named flag, or None if it is not defined."""
        return self._values.get(name)

    def usage(self, name: str) -> str:
        """Return the usage text the named flag was defined with."""
        return self._usage.get(name, "")

    def set(self, name: str, text: str) -> None:
        """Set the named flag from text and mark it as given."""
        value = self._values.get(name)
        if value is None:
            raise FlagError(f"no such flag -{name}")
        value.set(text)
        self._actual.add(name)

    def parse(self, args: Iterable[str]) -> None:
        """Parse flags from args; what follows the flags is kept as arguments."""
        self.parsed = True
        self._args = list(args)
        while self._parse_one():
            pass

    def _parse_one(self) -> bool:
        if not self._args:
            return False
        arg = self._args[0]
        if len(arg) < 2 or arg[0] != "-":
            return False
        minuses = 1
        if arg[1] == "-":
            minuses = 2
            if len(arg) == 2:
                self._args.pop(0)
                return False
        name = arg[minuses:]
        if not name or name[0] in "-=":
            raise FlagError(f"bad flag syntax: {arg}")
        self._args.pop(0)

        has_value = False
        text = ""
        if "=" in name[1:]:
            cut = name.index("=", 1)
            name, text, has_value = name[:cut], name[cut + 1:], True

        value = self._values.get(name)
        if value is None:
            if name in ("help", "h"):
                raise FlagError("flag: help requested")
            raise FlagError(f"flag provided but not defined: -{name}")

        if value.is_bool_flag:
            if has_value:
                try:
                    value.set(text)
                except ValueError as exc:
                    raise FlagError(
                        f"invalid boolean value {_quote(text)} for -{name}: {exc}"
                    ) from exc
            else:
                try:
                    value.set("true")
                except ValueError as exc:
                    raise FlagError(f"invalid boolean flag {name}: {exc}") from exc
        else:
            if not has_value and self._args:
                text, has_value = self._args.pop(0), True
            if not has_value:
                raise FlagError(f"flag needs an argument: -{name}")
            try:
                value.set(text)
            except ValueError as exc:
                raise FlagError(
                    f"invalid value {_quote(text)} for flag -{name}: {exc}"
                ) from exc

        self._actual.add(name)
        return True

    def visit(self) -> Iterator[str]:
        """Yield the names of the flags that were given, in sorted order."""
        yield from sorted(self._actual)

    def n_flag(self) -> int:
        """Return how many flags were given."""
        return len(self._actual)

    def args(self) -> list[str]:
        """Return the arguments left after the flags."""
        return list(self._args)