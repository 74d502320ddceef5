"""Base classes for all entities."""

import abc
import uuid

from wolflix.interfaces.id_generator import IdGenerator


class Entity(abc.ABC):
    """Generic base class for all entities.

    An entity is identified by its ``id``, which is assigned exactly once at
    construction and never changes. Two entities are equal when they are of
    the same type and share the same ``id``, whatever their attributes hold.
    """

    def __init__(self, id_generator: IdGenerator | None = None) -> None:
        """Assign a fresh identity.

        Args:
            id_generator: Source of the new identifier. When omitted, a
                random UUIDv4 string is used.
        """
        self._id: str = (
            id_generator.new_id() if id_generator is not None else str(uuid.uuid4())
        )

    @property
    def id(self) -> str:  # pylint: disable=invalid-name
        """The unique identifier of the entity."""
        return self._id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity):
            return NotImplemented
        return type(self) is type(other) and self._id == other._id

    def __hash__(self) -> int:
        return hash((type(self), self._id))


class AggregateRoot(Entity):  # pylint: disable=too-few-public-methods
    """Entity that is the sole entry point for viewing and mutating itself.

    Aggregate roots own any entities nested inside them; callers never reach
    those directly.
    """
