# cliframe

Building blocks for command-line applications in Python. The package has no
dependencies outside the standard library.

## What is in it

- **`cliframe.flagset`**: `FlagSet` holds typed values (`BoolValue`,
  `StringValue`, `IntValue`, `FloatValue`, all subclasses of `Value`).
  `FlagSet.parse` reads `-name`, `--name`, `-name value` and `--name=value`.
  It stops at the first positional argument or after `--`. Errors are raised
  as `FlagError`, for example `flag provided but not defined: -x` or
  `flag needs an argument: -i`. Use `visit()` to get the flags that were
  given, `n_flag()` to count them and `args()` to get the arguments that are
  left. `BoolValue` also counts how many times it was set.
- **`cliframe.flags`**: the abstract `Flag` and `DocGenerationFlag` bases, and
  helpers that work with them:
  - `new_flag_set` builds a `FlagSet` from flags.
  - `normalize_flags` copies a value given under one name of a flag to its
    other names. It raises `FlagError` if two names of the same flag were
    both given.
  - `visible_flags` and `has_flag` pick flags out of a list.
  - `stringify_flag` and `stringify_slice_flag` write help lines, using
    `unquote_usage`, `prefixed_names`, `with_env_hint`, `with_file_hint` and
    `format_default`.
  - `flag_names` cuts each name at its first comma or space.
  - `flag_from_env_or_file` returns the first value found in the given
    environment variables, then in the given comma-separated files.
  - `split_multi_values` splits a value on commas.
- **`cliframe.context`**: a `Context` holds the `FlagSet` of one level and a
  link to its parent. Its methods look through the whole lineage: `value`,
  `set`, `is_set`, `count`, `lineage`, `local_flag_names`, `flag_names`,
  `args`, `n_arg`, `lookup_flag` and `lookup_flag_set`.
  `check_required_flags` raises `RequiredFlagsError` for required flags that
  were not given. The `app` it is given may be any object with a `flags` list
  and, if wanted, an `invalid_flag_access_handler(context, name)` callable.
  That handler is called when an unknown flag name is looked up.
- **`cliframe.command`**: `Command` is a dataclass with a name, aliases,
  usage texts, flags, subcommands and callback fields. It has `names`,
  `has_name`, `full_name`, `visible_flags`, `append_flag` and
  `new_flag_set`. The module also has `has_command`.
- **`cliframe.errors`**: `ExitError` (made by `exit_error`) carries an exit
  code. `MultiError` wraps several errors, and `RequiredFlagsError` names
  missing flags. `handle_exit_coder(err, exiter, err_writer)` prints the
  error and calls `exiter` with its exit code. For a `MultiError` it prints
  each error and uses the last exit code found, or 1. By default it uses
  `sys.exit` and `sys.stderr`.
- **`cliframe.docs`**: `prepare_commands`, `prepare_flags`,
  `prepare_args_with_values`, `prepare_args_synopsis`, `flag_details`,
  `prepare_usage_text` and `prepare_usage` turn commands and flags into
  Markdown fragments.
- **`cliframe.fish`**: `FishCompleter(name, help_flag)` writes `complete`
  lines for the fish shell for flags (`prepare_flags`) and for commands with
  their subcommands (`prepare_commands`). It collects the command names it
  has seen in `all_commands`. `escape_single_quotes` and `file_flag_option`
  are exposed as well.

## Example

```python
from cliframe.flagset import FlagSet, BoolValue, StringValue

fs = FlagSet("greet")
fs.add("loud", BoolValue(), "shout the greeting")
fs.add("name", StringValue("world"), "who to greet")
fs.parse(["--loud", "--name=Ada", "extra"])

fs.lookup("name").get()   # "Ada"
list(fs.visit())          # ["loud", "name"]
fs.args()                 # ["extra"]
```

A context looks values up through its parents:

```python
from cliframe.context import Context
from cliframe.flagset import FlagSet, IntValue

parent_set = FlagSet("top")
parent_set.add("top-flag", IntValue(13))
child_set = FlagSet("child")
child_set.add("myflag", IntValue(12))

ctx = Context(None, child_set, Context(None, parent_set))
ctx.value("top-flag")     # 13
ctx.value("unknown")      # None
```

Exit codes:

```python
import io
from cliframe.errors import exit_error, handle_exit_coder

out = io.StringIO()
codes = []
handle_exit_coder(exit_error("galactic perimeter breach", 9),
                  exiter=codes.append, err_writer=out)
codes                     # [9]
```

## What it does not do

cliframe provides parts, not a finished framework:

- There is no application class that runs a command tree. `Command` stores
  its callbacks, but nothing here dispatches subcommands, runs
  before/action/after hooks or prints help screens.
- There are no ready-made flag classes. To describe a flag, subclass `Flag`
  or `DocGenerationFlag` and install a `Value` from `cliframe.flagset`.
- The docs and fish modules produce fragments and completion lines. They
  do not render a whole Markdown page, a man page or a complete fish script.
- The package installs no command-line program.

## Running the tests

```
pip install -e .[test]
pytest
```