"""WOLFLIX category CLI.

Builds categories through the bootstrap container so the same validation
rules that guard the domain are applied to command-line input.

Behavior
- Human-oriented notices go to **stderr**; the created category goes to
  **stdout** (as a Rich table, or JSON with ``--json``).
- Nothing is persisted: the catalog has no storage layer.

Failure modes
- A field violating its constraints → ``ClickException`` carrying the exact
  validation message (exit status 1).
- An unsupported ``WOLFLIX_ID_GENERATOR`` → ``ClickException`` with guidance.
"""

from __future__ import annotations

import json
import logging

import click
import click_extra as clickx
from rich.console import Console
from rich.table import Table

from wolflix import config
from wolflix.bootstrap import AppContainer, bootstrap
from wolflix.domain.entities import CategorySnapshot
from wolflix.domain.errors import EntityValidationError

from .helpers import error, success

logger = logging.getLogger(__name__)


def _get_container() -> AppContainer:
    try:
        return bootstrap()
    except config.UnknownIdGeneratorError as e:
        raise click.ClickException(str(e)) from e


def _to_json(snapshot: CategorySnapshot) -> str:
    return json.dumps(
        {
            "id": snapshot.id,
            "name": snapshot.name,
            "description": snapshot.description,
            "created_at": snapshot.created_at.isoformat(),
            "is_active": snapshot.is_active,
        },
        ensure_ascii=False,
    )


def _to_table(snapshot: CategorySnapshot) -> Table:
    table = Table(title="Category", show_header=False)
    table.add_column("field", style="bold")
    table.add_column("value")
    table.add_row("id", snapshot.id)
    table.add_row("name", snapshot.name)
    table.add_row("description", snapshot.description)
    table.add_row("created_at", snapshot.created_at.isoformat())
    table.add_row("is_active", str(snapshot.is_active))
    return table


@click.group(cls=clickx.ExtraGroup)
def category() -> None:
    """Category commands."""


@category.command()
@click.argument("name")
@click.argument("description")
@click.option(
    "--inactive",
    is_flag=True,
    help="Create the category as inactive (default: active).",
)
@click.option("--json", "as_json", is_flag=True, help="Print the category as JSON.")
def create(name: str, description: str, inactive: bool, as_json: bool) -> None:
    """Create a category and print it."""
    container = _get_container()
    try:
        created = container.new_category(name, description, is_active=not inactive)
    except EntityValidationError as e:
        logger.warning("Category rejected: %s", e.message)
        raise click.ClickException(e.message) from e

    logger.info("Category %s created", created.id)
    snapshot = created.snapshot()
    if as_json:
        click.echo(_to_json(snapshot))
    else:
        Console().print(_to_table(snapshot))


@category.command()
@click.argument("name")
@click.argument("description")
def check(name: str, description: str) -> None:
    """Validate a name and description without printing a category."""
    container = _get_container()
    try:
        container.new_category(name, description)
    except EntityValidationError as e:
        error(e.message)
        click.get_current_context().exit(1)
    success("Category is valid.")
