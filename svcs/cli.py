"""Command line interface for SVCS."""

from __future__ import annotations

import logging
from pathlib import Path

import click

from svcs import __version__
from svcs.config import DEFAULT_VCS_DIR
from svcs.vcs.engine import Engine
from svcs.vcs.index import AddOutcome
from svcs.vcs.repo import Repository, VcsError

logger = logging.getLogger(__name__)

MAN_PAGE = """\
These are SVCS commands:
config     Get and set a username.
add        Add a file to the index.
log        Show commit logs.
commit     Save changes.
checkout   Restore a file."""


def _unknown_command(name: str) -> click.Command:
    def report() -> None:
        click.echo(f"'{name}' is not a SVCS command.")

    return click.Command(
        name,
        callback=report,
        context_settings={"ignore_unknown_options": True, "allow_extra_args": True},
        add_help_option=False,
    )


class SvcsGroup(click.Group):
    """Click group with the SVCS usage page and error reporting.

    Unknown subcommands and expected :class:`VcsError` failures are
    reported on stdout and exit with status 0.
    """

    def get_help(self, ctx: click.Context) -> str:
        return MAN_PAGE

    def resolve_command(self, ctx, args):
        cmd_name = args[0]
        if self.get_command(ctx, cmd_name) is None:
            return cmd_name, _unknown_command(cmd_name), args[1:]
        return super().resolve_command(ctx, args)

    def invoke(self, ctx: click.Context):
        try:
            return super().invoke(ctx)
        except VcsError as exc:
            click.echo(str(exc))
            return None


def _engine(ctx: click.Context) -> Engine:
    if "engine" not in ctx.obj:
        ctx.obj["engine"] = Engine(ctx.obj["repo"])
    return ctx.obj["engine"]


@click.group(
    cls=SvcsGroup,
    invoke_without_command=True,
    context_settings={"ignore_unknown_options": True},
)
@click.option(
    "--repo-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_VCS_DIR,
    show_default=True,
    help="Repository directory",
)
@click.option("--verbose", "-v", is_flag=True, help="Verbose output")
@click.version_option(version=__version__, prog_name="svcs")
@click.pass_context
def cli(ctx: click.Context, repo_dir: Path, verbose: bool) -> None:
    """Simple version control for a flat list of tracked files."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s:%(name)s:%(message)s",
    )

    ctx.ensure_object(dict)
    ctx.obj["repo"] = Repository(repo_dir)
    logger.debug("Using %r", ctx.obj["repo"])

    if ctx.invoked_subcommand is None:
        click.echo(MAN_PAGE)


@cli.command()
@click.argument("username", required=False)
@click.pass_context
def config(ctx: click.Context, username: str | None) -> None:
    """Get and set a username."""
    current = _engine(ctx).config(
        username,
        prompt=lambda: click.prompt(
            "Please, tell me who you are.",
            prompt_suffix="\n",
            default="",
            show_default=False,
        ),
    )
    click.echo(f"The username is {current}.")


@cli.command()
@click.argument("path", required=False)
@click.pass_context
def add(ctx: click.Context, path: str | None) -> None:
    """Add a file to the index."""
    engine = _engine(ctx)
    if path is not None:
        if engine.add(path) is AddOutcome.TRACKED:
            click.echo(f"The file '{Path(path).name}' is tracked.")
        return

    tracked = engine.tracked_files()
    if not tracked:
        click.echo("Add a file to the index.")
        return
    click.echo("Tracked files:")
    for name in tracked:
        click.echo(name)


@cli.command()
@click.argument("message", required=False)
@click.pass_context
def commit(ctx: click.Context, message: str | None) -> None:
    """Save changes."""
    _engine(ctx).commit(message)
    click.echo("Changes are committed.")


@cli.command()
@click.pass_context
def log(ctx: click.Context) -> None:
    """Show commit logs."""
    for line in _engine(ctx).log():
        click.echo(line)


@cli.command()
@click.argument("commit_id", required=False)
@click.pass_context
def checkout(ctx: click.Context, commit_id: str | None) -> None:
    """Restore a file."""
    _engine(ctx).checkout(commit_id)
    click.echo(f"Switched to commit {commit_id}.")


def main() -> None:
    cli(obj={})
