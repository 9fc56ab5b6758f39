"""CLI entry point for jj-namer.

This module provides the main CLI application that combines the default
command and the config subcommands into a single interface.
"""

import typer

from jjnamer.cli.config import config_app
from jjnamer.cli.main import main_command

# Main application
app = typer.Typer(
    name="jj-namer",
    help="jj-namer: name jj bookmarks from your commit messages with a local LLM",
    add_completion=False,
)

# Add subcommand groups
app.add_typer(config_app, name="config")

# Set the main callback for default behavior (includes --version flag)
app.callback(invoke_without_command=True)(main_command)


__all__ = [
    "app",
    "config_app",
    "main_command",
]
