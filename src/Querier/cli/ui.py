"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

import sys
from pathlib import Path

import click
from dotenv import load_dotenv

from Querier.cli.runner import CommandRunner
from Querier.config import load_config


@click.group(help="Querier: answer boolean keyword queries against a crawler index.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False, exists=True),
    default=None,
    help="YAML file overriding the built-in defaults.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path | None) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.

    Args:
        ctx: Click context.
        config_path: Optional path to YAML config file.
    """
    load_dotenv()

    try:
        cfg = load_config(config_path)
    except (TypeError, ValueError) as e:
        raise click.ClickException(f"invalid config: {e}") from e
    ctx.obj = cfg


@cli.command("query")
@click.argument("page_directory", type=click.Path(path_type=Path))
@click.argument("index_file", type=click.Path(path_type=Path))
@click.pass_context
def query_cmd(ctx: click.Context, page_directory: Path, index_file: Path) -> None:
    """Read queries from stdin and print ranked matches.

    PAGE_DIRECTORY is a crawler output directory (with a .crawler file);
    INDEX_FILE is the indexer output for it.

    Args:
        ctx: Click context.
        page_directory: Crawler output directory.
        index_file: Index file path.
    """
    stdin = sys.stdin
    runner = CommandRunner(ctx.obj)
    runner.run_query(
        action=ctx.command.name,
        page_dir=page_directory,
        index_path=index_file,
        lines=stdin,
        interactive=stdin.isatty(),
    )
