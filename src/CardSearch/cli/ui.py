"""Click CLI interface definitions.

Defines the command-line interface structure and routes commands
to their respective runners.
"""

from __future__ import annotations

from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from CardSearch.cli.runner import CommandRunner
from CardSearch.config import load_config_with_defaults
from CardSearch.config.app import DEFAULT_CONFIG_PATH


@click.group(help="CardSearch: search the Scryfall card catalog and print in terminal.")
@click.option(
    "--config",
    "config_path",
    type=click.Path(path_type=Path, dir_okay=False),
    default=DEFAULT_CONFIG_PATH,
    show_default=True,
    help="Path to YAML config file, merged over the defaults.",
)
@click.pass_context
def cli(ctx: click.Context, config_path: Path) -> None:
    """CLI entry group.

    Loads environment variables from .env file before processing config.
    """
    load_dotenv()

    ctx.obj = load_config_with_defaults(config_path)


@cli.command("search")
@click.argument("query")
@click.option("--limit", type=click.IntRange(min=1), default=None, help="Maximum number of cards.")
@click.pass_context
def search_cmd(ctx: click.Context, query: str, limit: Optional[int]) -> None:
    """Search cards with Scryfall query syntax, e.g. 'c:r t:instant cmc<=2'."""
    CommandRunner(ctx.obj).run_search(ctx.command.name, query, limit=limit)


@cli.command("random")
@click.argument("query", required=False)
@click.pass_context
def random_cmd(ctx: click.Context, query: Optional[str]) -> None:
    """Print one random card, optionally matching QUERY."""
    CommandRunner(ctx.obj).run_random(ctx.command.name, query)


@cli.command("named")
@click.argument("name")
@click.option("--fuzzy", is_flag=True, help="Accept partial or misspelled names.")
@click.option("--set", "set_code", default=None, help="Restrict to a printing from this set code.")
@click.pass_context
def named_cmd(ctx: click.Context, name: str, fuzzy: bool, set_code: Optional[str]) -> None:
    """Print the card called NAME."""
    CommandRunner(ctx.obj).run_named(ctx.command.name, name, fuzzy=fuzzy, set_code=set_code)
