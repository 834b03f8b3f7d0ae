"""CLI entrypoint for fzwalk."""

from __future__ import annotations

import json
from pathlib import Path

import click
from pydantic import ValidationError

from fzwalk.config.store import SettingsStore
from fzwalk.paths import settings_path
from fzwalk.runtime_logging import configure_runtime_logging
from fzwalk.search.renderer import Terminal
from fzwalk.search.searcher import Searcher
from fzwalk.version import __version__


class DefaultCommandGroup(click.Group):
    """Route ``fzwalk QUERY ...`` to the ``search`` command."""

    default_command = "search"

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        if args and args[0] not in self.commands and args[0] not in ctx.help_option_names:
            args = [self.default_command, *args]
        return super().parse_args(ctx, args)


@click.group(
    cls=DefaultCommandGroup,
    invoke_without_command=True,
    context_settings={"help_option_names": ["-h", "--help"]},
)
@click.pass_context
def main(ctx: click.Context) -> None:
    """fzwalk: live fuzzy search for file and directory names.

    \b
    fzwalk QUERY [ROOT] is shorthand for fzwalk search QUERY [ROOT].
    A query spelled like a command (about, search, settings) needs the
    explicit form:
        fzwalk search about
    """
    if ctx.invoked_subcommand is None:
        ctx.invoke(search)


@main.command()
@click.argument("query", required=False)
@click.argument(
    "root",
    required=False,
    default=".",
    type=click.Path(exists=True, file_okay=False, path_type=Path),
)
@click.option("--verbose", is_flag=True, help="Report directories that cannot be read")
@click.option("--workers", type=click.IntRange(1, 256), help="Traversal thread pool size")
@click.option("--plain", is_flag=True, help="Print only the final ranking")
@click.option("--no-color", is_flag=True, help="Do not highlight matched characters")
@click.option("--show-all", is_flag=True, help="List every match after the summary")
@click.option("--respect-ignore", is_flag=True, help="Skip entries matched by .gitignore")
@click.option("--log-level", help="Runtime log level (off, error, warning, info, debug)")
def search(
    query: str | None,
    root: Path,
    verbose: bool,
    workers: int | None,
    plain: bool,
    no_color: bool,
    show_all: bool,
    respect_ignore: bool,
    log_level: str | None,
) -> None:
    """Search ROOT (default: current directory) for names matching QUERY."""
    if not query:
        raise click.UsageError("No query provided")

    configure_runtime_logging(level=log_level)
    settings = SettingsStore().load()
    if workers is not None:
        settings.search.workers = workers
    if respect_ignore:
        settings.search.respect_ignore = True
    if no_color:
        settings.display.color = False

    stdout = click.get_text_stream("stdout")
    live = settings.display.live and not plain and stdout.isatty()

    def report_unreadable(path: Path) -> None:
        click.echo(f"Error reading directory: {click.format_filename(path)}", err=True)

    searcher = Searcher(
        root,
        query,
        settings=settings,
        verbose=verbose,
        live=live,
        show_all=show_all,
        terminal=Terminal(),
        on_unreadable=report_unreadable,
    )
    report = searcher.search()

    if settings.display.show_elapsed:
        click.echo(f"Time elapsed: {report.elapsed_s:.3f}s")


@main.group("settings")
def settings_group() -> None:
    """Inspect or change persistent settings."""


@settings_group.command("path")
def settings_path_command() -> None:
    """Print settings file path."""
    click.echo(str(settings_path()))


@settings_group.command("show")
def settings_show() -> None:
    """Print every setting as key = value."""
    for key, value in SettingsStore().load().setting_items():
        click.echo(f"{key} = {value}")


@settings_group.command("set")
@click.argument("key")
@click.argument("value")
def settings_set(key: str, value: str) -> None:
    """Set a dotted KEY (e.g. search.workers) to VALUE."""
    try:
        SettingsStore().update(key, value)
    except KeyError as exc:
        raise click.ClickException(str(exc.args[0]))
    except ValidationError as exc:
        raise click.ClickException(f"Invalid value for {key}: {exc.errors()[0]['msg']}")
    click.echo(f"{key} = {value}")


@main.command()
def about() -> None:
    """Show version and project summary."""
    payload = {
        "name": "fzwalk",
        "version": __version__,
        "description": "Live fuzzy file name search over a directory tree",
    }
    click.echo(json.dumps(payload, indent=2))


if __name__ == "__main__":
    main()
