"""Main CLI command for generating and publishing a bookmark name."""

from typing import Optional

import typer

from jjnamer import __version__
from jjnamer.config import load_config
from jjnamer.global_config import GlobalConfigError
from jjnamer.llm import LLMError, get_provider
from jjnamer.logging import configure_logging
from jjnamer.pipeline import generate_bookmark
from jjnamer.vcs import JujutsuVcs, PushRejected, VcsError
from jjnamer.cli.utils import report_error


def main_command(
    ctx: typer.Context,
    revision: Optional[str] = typer.Option(
        None,
        "--revision",
        "-r",
        help="Revset whose commit messages are summarized [default: trunk()..@]",
    ),
    prefix: Optional[str] = typer.Option(
        None,
        "--prefix",
        "-p",
        help="Prefix for the bookmark, joined with '/' (e.g. your username)",
    ),
    dry_run: bool = typer.Option(
        False,
        "--dry-run",
        help="Print the bookmark name and the jj commands without running them",
    ),
    model: Optional[str] = typer.Option(
        None,
        "--model",
        "-m",
        help="Ollama model to use [default: llama3.2]",
    ),
    host: Optional[str] = typer.Option(
        None,
        "--host",
        help="Ollama server URL [default: http://localhost:11434]",
    ),
    timeout: Optional[float] = typer.Option(
        None,
        "--timeout",
        help="Seconds to wait for the model [default: 120]",
    ),
    remote: Optional[str] = typer.Option(
        None,
        "--remote",
        help="Git remote to push to (jj's default when not set)",
    ),
    allow_new: Optional[bool] = typer.Option(
        None,
        "--allow-new/--no-allow-new",
        help="Pass --allow-new to 'jj git push' [default: on]",
    ),
    full_descriptions: Optional[bool] = typer.Option(
        None,
        "--full-descriptions/--first-lines",
        help="Summarize whole descriptions instead of their first lines",
    ),
    verbose: bool = typer.Option(
        False,
        "--verbose",
        "-v",
        help="Show debug output (jj commands, prompt size, raw model reply)",
    ),
    version: bool = typer.Option(
        False,
        "--version",
        help="Show the version and exit",
        is_eager=True,
    ),
) -> None:
    """Name a jj bookmark after your commit messages, then create and push it."""
    # If a subcommand is invoked, don't run the default behavior
    if ctx.invoked_subcommand is not None:
        return

    if version:
        typer.echo(f"jj-namer {__version__}")
        raise typer.Exit(0)

    configure_logging(verbose=verbose)

    try:
        config = load_config(
            revision=revision,
            prefix=prefix,
            model=model,
            host=host,
            timeout=timeout,
            remote=remote,
            allow_new=allow_new,
            full_descriptions=full_descriptions,
        )
    except GlobalConfigError as e:
        raise typer.Exit(report_error(e))

    vcs = JujutsuVcs(config.jj_executable)
    provider = get_provider(config)

    typer.echo(f"Summarizing {config.revision} with {config.model}...", err=True)

    try:
        result = generate_bookmark(
            vcs,
            provider,
            revision=config.revision,
            prefix=config.prefix,
            dry_run=dry_run,
            remote=config.remote,
            allow_new=config.allow_new,
            full_descriptions=config.full_descriptions,
        )
    except PushRejected as e:
        exit_code = report_error(e)
        typer.echo("The bookmark was created locally but not pushed.", err=True)
        raise typer.Exit(exit_code)
    except (VcsError, LLMError) as e:
        raise typer.Exit(report_error(e))

    bookmark = result.bookmark
    if bookmark.dry_run:
        for command in bookmark.commands:
            typer.echo(f"[dry run] {command}", err=True)
    else:
        for output in (bookmark.create_output, bookmark.push_output):
            if output:
                typer.echo(output, err=True)

    typer.echo(result.name)
