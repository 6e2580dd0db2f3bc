from __future__ import annotations

from dataclasses import dataclass, field

from cliframe.command import Command
from cliframe.fish import FishCompleter, escape_single_quotes, file_flag_option
from cliframe.flags import DocGenerationFlag
from cliframe.flagset import StringValue


@dataclass(eq=False)
class _StubFlag(DocGenerationFlag):
    name: str
    aliases: list[str] = field(default_factory=list)
    usage: str = ""
    takes: bool = False
    takes_file: bool = False
    hidden: bool = False

    def apply(self, flag_set):
        for name in self.names():
            flag_set.add(name, StringValue(), self.usage)

    def names(self):
        return [self.name, *self.aliases]

    def is_set(self):
        return False

    def takes_value(self):
        return self.takes

    def help_text(self):
        return self.usage

    def value_text(self):
        return ""

    def shown_default(self):
        return ""

    def env_var_names(self):
        return []

    def is_visible(self):
        return not self.hidden


def _help():
    return _StubFlag("help", ["h"], "show help")


def test_escape_single_quotes():
    assert escape_single_quotes("some 'usage' text") == "some \\'usage\\' text"


def test_file_flag_option():
    assert file_flag_option(_StubFlag("logfile", takes_file=True)) == ""
    assert file_flag_option(_StubFlag("flag")) == " -f"


def test_subcommand_helper():
    completer = FishCompleter("greet")
    assert completer.subcommand_helper([]) == "__fish_greet_no_subcommand"
    assert completer.subcommand_helper(["config", "c"]) == "__fish_seen_subcommand_from config c"


def test_prepare_flags():
    completer = FishCompleter("greet")
    flags = [
        _StubFlag("socket", ["s"], "some 'usage' text", takes=True, takes_file=True),
        _StubFlag("flag", ["fl", "f"], takes=True),
        _StubFlag("another-flag", ["b"], "another usage text"),
        None,
    ]
    assert completer.prepare_flags(flags, []) == [
        "complete -c greet -n '__fish_greet_no_subcommand' -l socket -s s -r -d 'some \\'usage\\' text'",
        "complete -c greet -n '__fish_greet_no_subcommand' -f -l flag -s fl -s f -r",
        "complete -c greet -n '__fish_greet_no_subcommand' -f -l another-flag -s b -d 'another usage text'",
    ]


def test_prepare_commands_simple():
    completer = FishCompleter("greet", help_flag=_help())
    info = Command(name="info", aliases=["i", "in"], usage="retrieve generic information")
    hidden = Command(name="hidden-command", hidden=True)
    assert completer.prepare_commands([info, hidden], []) == [
        "complete -c greet -n '__fish_seen_subcommand_from info i in' -f -l help -s h -d 'show help'",
        "complete -r -c greet -n '__fish_greet_no_subcommand' -a 'info i in' -d 'retrieve generic information'",
    ]
    assert completer.all_commands == ["info", "i", "in"]


def test_prepare_commands_nested_without_help():
    completer = FishCompleter("greet", help_flag=_help())
    sub = Command(
        name="sub-config",
        aliases=["s", "ss"],
        usage="another usage test",
        hide_help=True,
    )
    config = Command(
        name="config",
        aliases=["c"],
        usage="another usage test",
        hide_help=True,
        flags=[_StubFlag("another-flag", ["b"], "another usage text")],
        subcommands=[sub],
    )
    assert completer.prepare_commands([config], []) == [
        "complete -r -c greet -n '__fish_greet_no_subcommand' -a 'config c' -d 'another usage test'",
        "complete -c greet -n '__fish_seen_subcommand_from config c' -f -l another-flag -s b -d 'another usage text'",
        "complete -r -c greet -n '__fish_seen_subcommand_from config c' -a 'sub-config s ss' -d 'another usage test'",
    ]
    assert completer.all_commands == ["config", "c", "sub-config", "s", "ss"]


def test_prepare_commands_without_help_flag_defined():
    completer = FishCompleter("greet")
    cmd = Command(name="some-command")
    assert completer.prepare_commands([cmd], []) == [
        "complete -r -c greet -n '__fish_greet_no_subcommand' -a 'some-command'",
    ]