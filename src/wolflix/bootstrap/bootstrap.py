"""Bootstrap the category factory with its ID generator and clock."""

from __future__ import annotations

import logging
from dataclasses import dataclass

from wolflix import config
from wolflix.adapters.clocks import SystemClock
from wolflix.adapters.id_generators import (
    SimpleIdGenerator,
    ULIDGenerator,
    UUIDv4Generator,
)
from wolflix.domain.entities import Category
from wolflix.interfaces.clock import Clock
from wolflix.interfaces.id_generator import IdGenerator

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AppContainer:
    """A class to hold application wiring."""

    id_generator: IdGenerator
    clock: Clock

    def new_category(
        self, name: str, description: str, is_active: bool = True
    ) -> Category:
        """Create a category wired to this container's ID generator and clock.

        Raises:
            EntityValidationError: If the category fields are invalid.
        """
        category = Category(
            name,
            description,
            is_active,
            id_generator=self.id_generator,
            clock=self.clock,
        )
        logger.debug("Created category %s (active=%s)", category.id, is_active)
        return category


def build_id_generator(name: str) -> IdGenerator:
    """Build the ID generator registered under ``name``.

    Raises:
        UnknownIdGeneratorError: If ``name`` is not a supported generator.
    """
    match name:
        case "uuid4":
            return UUIDv4Generator()
        case "ulid":
            return ULIDGenerator()
        case "simple":
            return SimpleIdGenerator()
        case _:
            raise config.UnknownIdGeneratorError(name)


def bootstrap() -> AppContainer:
    """Bootstrap the application from the environment configuration."""
    name = config.get_id_generator_name()
    logger.debug("Using ID generator: %s", name)
    return AppContainer(id_generator=build_id_generator(name), clock=SystemClock())
