"""Validation primitives for domain entities.

Each primitive checks a single constraint on one field and raises
`EntityValidationError` with a message built from the field label. On
success they return ``None``; they have no other side effects.

Entities compose these in a fixed order: the first violated rule decides
which message surfaces, so callers must keep the sequence stable.
"""

from wolflix.domain import messages
from wolflix.domain.errors import EntityValidationError


def not_null(value: object | None, field_name: str) -> None:
    """Fail when ``value`` is ``None``.

    This is an identity check only: empty or blank strings pass.

    Raises:
        EntityValidationError: If ``value`` is ``None``.
    """
    if value is None:
        raise EntityValidationError(messages.null_message(field_name))


def not_null_or_empty(value: str | None, field_name: str) -> None:
    """Fail when ``value`` is ``None``, empty, or whitespace only.

    Raises:
        EntityValidationError: If ``value`` is missing or blank.
    """
    if value is None or not value.strip():
        raise EntityValidationError(messages.null_message(field_name))


def min_length(
    value: str, field_name: str, minimum: int = messages.NAME_MIN_LENGTH_LIMIT
) -> None:
    """Fail when ``value`` is shorter than ``minimum`` characters.

    Raises:
        EntityValidationError: If ``len(value) < minimum``.
    """
    if len(value) < minimum:
        raise EntityValidationError(messages.min_length_message(field_name, minimum))


def max_length(value: str, field_name: str) -> None:
    """Fail when ``value`` is longer than 255 characters.

    The bound is fixed; use `max_length_description` for long-text fields.

    Raises:
        EntityValidationError: If ``len(value) > 255``.
    """
    if len(value) > messages.NAME_MAX_LENGTH_LIMIT:
        raise EntityValidationError(messages.max_length_message(field_name))


def max_length_description(value: str, field_name: str) -> None:
    """Fail when ``value`` is longer than 10.000 characters.

    Raises:
        EntityValidationError: If ``len(value) > 10000``.
    """
    if len(value) > messages.DESCRIPTION_MAX_LENGTH_LIMIT:
        raise EntityValidationError(messages.max_length_description_message(field_name))
