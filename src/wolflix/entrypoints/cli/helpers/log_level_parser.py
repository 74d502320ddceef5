"""``-L NAME=LEVEL`` option parsing.

Pairs may be given by repeating the option or packed into one value
separated by commas or spaces (``-L "a=INFO,b=DEBUG"``).
"""

import logging
import re

import click

# Noisy libraries start at WARNING; -L overrides them.
DEFAULT_LIB_LEVELS = {"ulid": logging.WARNING}

_SEPARATORS = re.compile(r"[,\s]+")


def _normalize_items(value: str | list[str] | tuple[str, ...]) -> list[str]:
    chunks = [value] if isinstance(value, str) else list(value)
    return [item for chunk in chunks for item in _SEPARATORS.split(chunk) if item]


def _to_level(text: str) -> int:
    level = logging.getLevelNamesMapping().get(text.strip().upper())
    if level is None:
        raise click.BadParameter(f"Invalid log level: {text}")
    return level


def parse_log_level(
    ctx: click.Context,  # pylint: disable=unused-argument
    param: click.Parameter | None,  # pylint: disable=unused-argument
    value: str | list[str] | tuple[str, ...],
) -> dict[str, int]:
    """Turn the raw ``-L`` values into ``{logger name: numeric level}``.

    The result always starts from `DEFAULT_LIB_LEVELS`; a later pair for
    the same logger replaces an earlier one.

    Raises:
        click.BadParameter: On a pair without ``=``, with an empty name, or
            with an unknown level name.
    """
    levels = dict(DEFAULT_LIB_LEVELS)
    for item in _normalize_items(value):
        name, sep, level_text = item.partition("=")
        if not sep or not name.strip():
            raise click.BadParameter(f"Expected NAME=LEVEL, got {item!r}")
        levels[name.strip()] = _to_level(level_text)
    return levels
