"""CLI subcommands."""

from cutlayout.cli.commands.validate import validate_command

__all__ = ["validate_command"]
