"""Shared fixtures for CLI end-to-end tests."""

import logging

import click
import pytest
from click.testing import CliRunner

from wolflix.entrypoints.cli.main import wolflix

# pylint: disable=redefined-outer-name

DEMO_COMMAND = "log-demo"


@click.command()
def log_demo():
    """Log one line per level from a Wolflix logger and a foreign one.

    The last record is a DEBUG emitted after every WARNING, so it stays in
    the flight-recorder buffer unless the buffer is force-flushed.
    """
    own = logging.getLogger("wolflix.demo")
    foreign = logging.getLogger("some.thirdparty")
    own.debug("This is a debug-level test message.")
    own.info("This is an info-level test message.")
    own.warning("This is a warning-level test message.")
    own.error("This is an error-level test message.")
    own.critical("This is a critical-level test message.")
    foreign.debug("This is a debug-level third-party test message.")
    foreign.info("This is an info-level third-party test message.")
    foreign.warning("This is a warning-level third-party test message.")
    own.debug("This is a final debug-level test message.")


def _unregister(group: click.Group, name: str) -> None:
    # Click-Extra groups also index commands per help section.
    group.commands.pop(name, None)
    sections = list(getattr(group, "_sections", []))
    default = getattr(group, "_default_section", None)
    if default is not None:
        sections.append(default)
    for section in sections:
        getattr(section, "commands", {}).pop(name, None)


@pytest.fixture
def registered_log_demo():
    """Expose ``wolflix log-demo`` while the test runs."""
    wolflix.add_command(log_demo, name=DEMO_COMMAND)
    yield DEMO_COMMAND
    _unregister(wolflix, DEMO_COMMAND)


@pytest.fixture
def runner():
    return CliRunner()


@pytest.fixture
def fs(runner):
    """Run the test inside a throwaway working directory."""
    with runner.isolated_filesystem():
        yield
