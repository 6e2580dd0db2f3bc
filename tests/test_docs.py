from __future__ import annotations

from dataclasses import dataclass, field

from cliframe.command import Command
from cliframe.docs import (
    flag_details,
    prepare_args_synopsis,
    prepare_args_with_values,
    prepare_commands,
    prepare_flags,
    prepare_usage,
    prepare_usage_text,
)
from cliframe.flags import DocGenerationFlag, Flag
from cliframe.flagset import FlagSet, StringValue


@dataclass(eq=False)
class _StubFlag(DocGenerationFlag):
    name: str
    aliases: list[str] = field(default_factory=list)
    usage: str = ""
    value: str = ""
    takes: bool = False
    hidden: bool = False

    def apply(self, flag_set):
        for name in self.names():
            flag_set.add(name, StringValue(self.value), self.usage)

    def names(self):
        return [self.name, *self.aliases]

    def is_set(self):
        return False

    def takes_value(self):
        return self.takes

    def help_text(self):
        return self.usage

    def value_text(self):
        return self.value

    def shown_default(self):
        return self.value

    def env_var_names(self):
        return []

    def is_visible(self):
        return not self.hidden


class _PlainFlag(Flag):
    def apply(self, flag_set: FlagSet) -> None:
        flag_set.add("plain", StringValue())

    def names(self):
        return ["plain"]

    def is_set(self):
        return False

    def is_visible(self):
        return True


def _socket():
    return _StubFlag("socket", ["s"], "some 'usage' text", "value", takes=True)


def _another():
    return _StubFlag("another-flag", ["b"], "another usage text")


def test_prepare_usage_text_empty():
    assert prepare_usage_text(Command()) == ""


def test_prepare_usage_text_single_line():
    cmd = Command(usage_text="Single line usage text")
    assert prepare_usage_text(cmd) == ">Single line usage text\n"


def test_prepare_usage_text_multiline():
    cmd = Command(
        usage_text="\nUsage for the usage text\n- Should be a part of the same code block\n"
    )
    expected = (
        "    Usage for the usage text\n"
        "    - Should be a part of the same code block\n"
    )
    assert prepare_usage_text(cmd) == expected


def test_prepare_usage_text_multiline_embedded_markdown():
    cmd = Command(
        usage_text=(
            "\nUsage for the usage text\n\n```\nfunc() { ... }\n```\n\n"
            "Should be a part of the same code block\n"
        )
    )
    expected = (
        "    Usage for the usage text\n"
        "    \n"
        "    ```\n"
        "    func() { ... }\n"
        "    ```\n"
        "    \n"
        "    Should be a part of the same code block\n"
    )
    assert prepare_usage_text(cmd) == expected


def test_prepare_usage_empty():
    assert prepare_usage(Command(), "") == ""


def test_prepare_usage_simple():
    cmd = Command(usage="simple usage text")
    assert prepare_usage(cmd, "") == "simple usage text\n"


def test_prepare_usage_with_usage_text():
    cmd = Command(usage="simple usage text")
    assert prepare_usage(cmd, "a non-empty string") == "simple usage text\n\n"


def test_flag_details_with_and_without_default():
    assert flag_details(_socket()) == ": some 'usage' text (default: value)"
    assert flag_details(_another()) == ": another usage text"


def test_prepare_args_synopsis():
    result = prepare_args_synopsis([_socket(), _another()])
    assert result == ["[--another-flag|-b]\n", "[--socket|-s]=[value]\n"]


def test_prepare_flags_skips_flags_without_docs():
    result = prepare_flags([_PlainFlag(), _another()], "|", "<", ">", "v", False)
    assert result == ["<--another-flag|-b>\n"]


def test_prepare_commands_with_usage_text():
    cmd = Command(name="sub-usage", usage="standard usage text", usage_text="Single line of UsageText")
    assert prepare_commands([cmd], 1) == [
        "### sub-usage\n\nstandard usage text\n\n>Single line of UsageText\n"
    ]