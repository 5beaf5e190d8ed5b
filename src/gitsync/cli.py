"""CLI for gitsync repository routing."""

import sys

import click
import structlog

from gitsync.config.logging import configure_logging
from gitsync.core.exceptions import GitSyncError

logger = structlog.get_logger(__name__)


def _load_config(ctx: click.Context):
    """Load the configuration, exiting when the file is missing."""
    from gitsync.config.store import Config

    try:
        config = Config(config_file=ctx.obj.get("config_file"))
        config.check_file_exist()
    except GitSyncError as e:
        logger.debug("Configuration unavailable", error=e.message, details=e.details)
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)
    return config


@click.group()
@click.option("--config", "-c", "config_file", help="Path to the config file (default: .gitsync.json)")
@click.option("--verbose", "-v", is_flag=True, help="Enable verbose logging")
@click.pass_context
def cli(ctx: click.Context, config_file: str | None, verbose: bool) -> None:
    """gitsync: route monorepo sub-directories to their external repositories."""
    from gitsync.config.settings import get_settings

    settings = get_settings()
    log_level = "DEBUG" if verbose else settings.log_level
    configure_logging(log_level=log_level, json_logs=settings.json_logs)
    ctx.ensure_object(dict)
    ctx.obj["config_file"] = config_file


@cli.command()
@click.option("--include", "-i", multiple=True, help="Include glob patterns")
@click.option("--exclude", "-e", multiple=True, help="Exclude glob patterns")
@click.pass_context
def repos(ctx: click.Context, include: tuple[str, ...], exclude: tuple[str, ...]) -> None:
    """List configured repositories.

    Prints the display source dir, real source dir and target of each
    repository, separated by tabs.
    """
    config = _load_config(ctx)
    for repo in config.filter_repos_by_source_dir(list(include), list(exclude)):
        click.echo(f"{repo.display_source_dir}\t{repo.real_source_dir}\t{repo.target}")


@cli.command()
@click.argument("files", nargs=-1)
@click.pass_context
def changed(ctx: click.Context, files: tuple[str, ...]) -> None:
    """Print the source dirs of repositories affected by FILES."""
    config = _load_config(ctx)
    for repo in config.get_repos_by_files(files):
        click.echo(repo.display_source_dir)


@cli.command("repo-dir")
@click.argument("source_dir")
@click.option("--clone", is_flag=True, help="Clone the target when the directory is new")
@click.pass_context
def repo_dir(ctx: click.Context, source_dir: str, clone: bool) -> None:
    """Print the local working directory of the repository at SOURCE_DIR."""
    config = _load_config(ctx)
    try:
        repo = config.get_repo_by_source_dir(source_dir)
        click.echo(config.get_repo_dir_by_repo(repo, clone=clone))
    except GitSyncError as e:
        click.echo(f"Error: {e.message}", err=True)
        sys.exit(1)


@cli.command()
@click.option("--include", "-i", multiple=True, help="Include glob patterns")
@click.option("--exclude", "-e", multiple=True, help="Exclude glob patterns")
@click.option("--clone", is_flag=True, help="Clone targets into new directories")
@click.pass_context
def resolve(
    ctx: click.Context,
    include: tuple[str, ...],
    exclude: tuple[str, ...],
    clone: bool,
) -> None:
    """Resolve the working directory of every selected repository.

    A failure for one repository does not stop the others; the command
    exits with status 1 if any repository failed.
    """
    config = _load_config(ctx)
    selected = config.filter_repos_by_source_dir(list(include), list(exclude))
    result = config.get_resolver().resolve_many(selected, clone=clone)

    for source_dir, directory in result.directories.items():
        click.echo(f"{source_dir}\t{directory}")
    for source_dir, error in result.errors.items():
        message = error.message if isinstance(error, GitSyncError) else str(error)
        click.echo(f"Error: {source_dir}: {message}", err=True)

    if not result.ok:
        sys.exit(1)


if __name__ == "__main__":
    cli()
