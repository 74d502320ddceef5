"""Top-level ``wolflix`` command.

The group only sets up logging for the invocation; the actual work lives
in subcommand groups registered at the bottom of this module:

    $ wolflix --version
    $ wolflix -v category create "Terror" "Filmes de terror"
"""

import logging
from pathlib import Path

import click
import click_extra as clickx
from platformdirs import user_log_dir

from wolflix import __version__
from wolflix.logging import (
    LoggingSettings,
    configure_logging,
    log_startup,
    verbosity_to_level,
)

from .category import category as category_group
from .helpers.log_level_parser import parse_log_level

logger = logging.getLogger(__name__)

DEFAULT_LOG_PATH = (
    Path(user_log_dir("wolflix", appauthor=False, ensure_exists=True)) / "latest.log"
)


@clickx.extra_group(
    version=__version__,
    params=[
        clickx.ColorOption(show_envvar=True),
        clickx.TimerOption(show_envvar=True),
        clickx.ExtraVersionOption(),
    ],
)
@click.option(
    "-v",
    "--verbose",
    count=True,
    help="Show more log output; repeat for more (-v INFO, -vv DEBUG).",
)
@click.option(
    "-q",
    "--quiet",
    count=True,
    help="Show less log output; repeat for less (-q ERROR, -qq CRITICAL).",
)
@click.option(
    "--debug/--no-debug",
    default=False,
    help="Developer console layout: timestamps, logger names and source paths.",
)
@click.option(
    "--log-path",
    type=click.Path(dir_okay=False, path_type=Path),
    default=DEFAULT_LOG_PATH,
    envvar="WOLFLIX_LOG_PATH",
    show_default=True,
    show_envvar=True,
    help="File the flight recorder writes to.",
)
@click.option(
    "--flight-recorder/--no-flight-recorder",
    default=True,
    show_default=True,
    help=(
        "Buffer DEBUG records in memory, independently of -v/-q, and write "
        "them to --log-path as soon as a WARNING or worse is logged."
    ),
)
@click.option(
    "--flight-recorder-capacity",
    type=click.IntRange(min=1),
    default=2000,
    hidden=True,
    envvar="WOLFLIX_FLIGHT_RECORDER_CAPACITY",
)
@click.option(
    "--force-flush/--no-force-flush",
    default=False,
    show_default=True,
    help="Also write the flight-recorder buffer on exit when nothing went wrong.",
)
@click.option(
    "-L",
    "--logger-level",
    "logger_levels",
    multiple=True,
    callback=parse_log_level,
    metavar="NAME=LEVEL",
    help=(
        "Minimum level for one logger, applied to every sink. "
        "Repeatable, e.g. -L wolflix.bootstrap=DEBUG."
    ),
)
@clickx.pass_context
def wolflix(  # pylint: disable=too-many-arguments, too-many-positional-arguments
    ctx: click.Context,
    verbose: int,
    quiet: int,
    debug: bool,
    log_path: Path,
    flight_recorder: bool,
    flight_recorder_capacity: int,
    force_flush: bool,
    logger_levels: dict[str, int],
) -> None:
    """WOLFLIX catalog command-line interface.

    Classify catalog items into named categories and check category data
    against the catalog's rules straight from the shell.
    """
    settings = LoggingSettings(
        console_level=verbosity_to_level(verbose, quiet),
        debug=debug,
        color=ctx.color is not False,
        log_path=log_path,
        flight_recorder=flight_recorder,
        flight_capacity=flight_recorder_capacity,
        force_flush=force_flush,
        logger_levels=logger_levels,
    )
    handlers = configure_logging(settings)
    log_startup(logger, settings, handlers, app_version=__version__)
    ctx.call_on_close(logging.shutdown)


wolflix.add_command(category_group)
