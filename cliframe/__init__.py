"""Building blocks for command-line applications: flag sets, flag helpers, contexts, commands, errors, Markdown fragments and fish completions."""

__version__ = "0.1.0"

__all__ = ["command", "context", "docs", "errors", "fish", "flags", "flagset"]