"""CLI commands for global configuration management."""

import os

import typer

from jjnamer import global_config
from jjnamer.config import ENV_VARS, config_keys, load_config, validate_value
from jjnamer.global_config import GlobalConfigError

# Subcommand group for configuration management
config_app = typer.Typer(
    name="config",
    help="Manage global jj-namer configuration in ~/.jjnamer/",
    add_completion=False,
)


@config_app.command("show")
def config_show() -> None:
    """Show the effective configuration and where it comes from."""
    try:
        config = load_config()
        file_values = global_config.load_global_config()
    except GlobalConfigError as e:
        typer.echo(f"Error reading configuration: {e}", err=True)
        raise typer.Exit(1)

    config_file = global_config.get_config_file_path()
    if global_config.is_configured():
        typer.echo(f"Current jj-namer configuration ({config_file}):")
    else:
        typer.echo(f"No configuration file at {config_file}; showing defaults.")
    typer.echo()

    for key in config_keys():
        value = getattr(config, key)
        env_var = ENV_VARS.get(key)
        if env_var and os.getenv(env_var):
            source = f"env {env_var}"
        elif key in file_values:
            source = "file"
        else:
            source = "default"
        typer.echo(f"  {key}: {'not set' if value is None else value}  ({source})")


@config_app.command("set")
def config_set(
    key: str = typer.Argument(..., help="Configuration key (e.g. model, host, timeout, prefix)"),
    value: str = typer.Argument(..., help="New value"),
) -> None:
    """Set a value in ~/.jjnamer/config.yaml."""
    try:
        validated = validate_value(key, value)
        global_config.set_config_value(key, validated)
    except GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    typer.echo(f"✓ {key} set to {validated}")


@config_app.command("unset")
def config_unset(
    key: str = typer.Argument(..., help="Configuration key to remove"),
) -> None:
    """Remove a value from ~/.jjnamer/config.yaml."""
    try:
        removed = global_config.unset_config_value(key)
    except GlobalConfigError as e:
        typer.echo(f"Error: {e}", err=True)
        raise typer.Exit(1)

    if removed:
        typer.echo(f"✓ {key} removed")
    else:
        typer.echo(f"{key} is not set in {global_config.get_config_file_path()}")
