"""Configuration utilities for WOLFLIX.

This module centralizes small helpers and constants related to application configuration.
"""

import os

ID_GENERATOR_ENV = "WOLFLIX_ID_GENERATOR"  # pragma: no mutate
ID_GENERATOR_CHOICES = ("uuid4", "ulid", "simple")  # pragma: no mutate
DEFAULT_ID_GENERATOR = "uuid4"  # pragma: no mutate


class UnknownIdGeneratorError(Exception):
    """Raised when WOLFLIX_ID_GENERATOR names an unsupported generator."""

    def __init__(self, name: str) -> None:
        super().__init__(
            f"Unknown ID generator '{name}' "
            f"(expected one of: {', '.join(ID_GENERATOR_CHOICES)})."
        )
        self.name = name


def get_id_generator_name() -> str:
    """Get the configured ID generator name from the environment.

    Returns:
        The lower-cased value of `WOLFLIX_ID_GENERATOR`, or ``"uuid4"`` when
        it is unset or empty.

    Raises:
        UnknownIdGeneratorError: If the value is not a supported generator.
    """
    if not (name := os.environ.get(ID_GENERATOR_ENV, "").strip().lower()):
        return DEFAULT_ID_GENERATOR
    if name not in ID_GENERATOR_CHOICES:
        raise UnknownIdGeneratorError(name)
    return name
