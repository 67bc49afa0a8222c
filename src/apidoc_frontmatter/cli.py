"""Click CLI for apidoc-frontmatter — add or remove API doc frontmatter."""

from __future__ import annotations

import logging
import sys
from typing import Any

import click
from rich.console import Console
from rich.logging import RichHandler

from apidoc_frontmatter.categories import CategoryTable, build_category_table
from apidoc_frontmatter.config.hierarchy import load_config_hierarchy
from apidoc_frontmatter.errors import ConfigurationError
from apidoc_frontmatter.report import render_categories, render_report

console = Console()
error_console = Console(stderr=True)


def _setup_logging(verbosity: int, default_level: str = "WARNING") -> None:
    """Configure logging based on verbosity level."""
    level = logging.getLevelName(str(default_level).upper())
    if not isinstance(level, int):
        level = logging.WARNING
    if verbosity == 1:
        level = logging.INFO
    elif verbosity >= 2:
        level = logging.DEBUG

    logging.basicConfig(
        level=level,
        format="%(message)s",
        handlers=[RichHandler(console=error_console, show_time=False, show_path=False)],
        force=True,
    )


def _load_table(config: dict[str, Any]) -> CategoryTable:
    """Build the classification table from resolved config, exiting on bad values."""
    try:
        return build_category_table(config.get("categories"), order_step=int(config["order_step"]))
    except (ConfigurationError, ValueError, TypeError) as e:
        error_console.print(f"[red]Configuration error:[/red] {e}")
        sys.exit(1)


def _run(operation: str, config: dict[str, Any], dry_run: bool, **options: Any) -> None:
    from apidoc_frontmatter.pipeline.batch import run_batch

    table = _load_table(config)
    report = run_batch(operation, config["root"], table, dry_run=dry_run, **options)
    render_report(report, console)

    if report.has_errors:
        error_console.print("[red]Completed with errors.[/red]")
        sys.exit(1)
    console.print("[green]Done![/green]")


root_option = click.option(
    "--root",
    type=click.Path(file_okay=False),
    default=None,
    help="API docs root containing the category folders (default: content/docs/api).",
)
dry_run_option = click.option(
    "--dry-run", is_flag=True, default=False, help="Report outcomes without writing files."
)
verbose_option = click.option(
    "-v", "--verbose", count=True, help="Increase verbosity (-v info, -vv debug)."
)


@click.group()
@click.version_option(package_name="apidoc-frontmatter")
def cli() -> None:
    """apidoc-frontmatter — manage frontmatter on generated API reference docs."""


@cli.command()
@root_option
@dry_run_option
@click.option("--product", type=str, default=None, help="Product name used in descriptions.")
@click.option("--order-step", type=int, default=None, help="Spacing between category base orders.")
@verbose_option
def add(
    root: str | None,
    dry_run: bool,
    product: str | None,
    order_step: int | None,
    verbose: int,
) -> None:
    """Add frontmatter to markdown files that do not have it yet."""
    config = load_config_hierarchy(root=root, product_name=product, order_step=order_step)
    _setup_logging(verbose, config.get("log_level", "WARNING"))
    _run("inject", config, dry_run, product_name=config["product_name"])


@cli.command()
@root_option
@dry_run_option
@click.option(
    "--normalize",
    is_flag=True,
    default=False,
    help="Trim surrounding blank lines and end the file with a single newline.",
)
@verbose_option
def remove(root: str | None, dry_run: bool, normalize: bool, verbose: int) -> None:
    """Remove frontmatter from markdown files, restoring the original body."""
    config = load_config_hierarchy(root=root, normalize=normalize or None)
    _setup_logging(verbose, config.get("log_level", "WARNING"))
    _run("strip", config, dry_run, normalize=bool(config["normalize"]))


@cli.command("categories")
@click.option("--order-step", type=int, default=None, help="Spacing between category base orders.")
def list_categories(order_step: int | None) -> None:
    """Show the folder classification table."""
    config = load_config_hierarchy(order_step=order_step)
    render_categories(_load_table(config), console)


def main() -> None:
    """Entry point for the CLI."""
    cli()
