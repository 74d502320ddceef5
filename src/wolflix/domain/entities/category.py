"""Category Aggregate"""

from dataclasses import dataclass
from datetime import datetime, timezone

from wolflix.domain import messages, validation
from wolflix.interfaces.clock import Clock
from wolflix.interfaces.id_generator import IdGenerator

from .base import AggregateRoot

# pylint: disable=too-many-arguments


@dataclass(frozen=True)
class CategorySnapshot:
    """Read-only view of a category at a point in time."""

    id: str  # pylint: disable=invalid-name
    name: str
    description: str
    created_at: datetime
    is_active: bool


class Category(AggregateRoot):
    """Aggregate root representing a content category.

    Every state-changing operation writes its fields first and validates the
    resulting state afterwards. A failed operation therefore leaves the
    attempted values on the instance; callers that keep a reference after an
    `EntityValidationError` must discard it.

    Note: This is NOT thread-safe. Callers sharing an instance across threads
    must serialize access themselves.
    """

    def __init__(
        self,
        name: str,
        description: str,
        is_active: bool = True,
        *,
        id_generator: IdGenerator | None = None,
        clock: Clock | None = None,
    ) -> None:
        """Create a new category.

        Args:
            name: Category name; 3 to 255 characters, not blank.
            description: Category description; up to 10.000 characters, not blank.
            is_active: Initial activation status.
            id_generator: Identity source; a random UUIDv4 when omitted.
            clock: Source of ``created_at``; the UTC wall clock when omitted.

        Raises:
            EntityValidationError: If any field violates its constraints.
        """
        super().__init__(id_generator)
        self._created_at: datetime = (
            clock.now() if clock is not None else datetime.now(timezone.utc)
        )
        self._is_active: bool = is_active
        self._name: str = name
        self._description: str = description
        self.validate()

    # --- State ---

    @property
    def name(self) -> str:
        """The category name."""
        return self._name

    @property
    def description(self) -> str:
        """The category description."""
        return self._description

    @property
    def created_at(self) -> datetime:
        """When the category was created."""
        return self._created_at

    @property
    def is_active(self) -> bool:
        """Whether the category is active."""
        return self._is_active

    # --- Mutations ---

    def activate(self) -> None:
        """Mark the category as active. Does nothing if it already is."""
        self._is_active = True
        self.validate()

    def deactivate(self) -> None:
        """Mark the category as inactive. Does nothing if it already is."""
        self._is_active = False
        self.validate()

    def update(self, name: str | None = None, description: str | None = None) -> None:
        """Replace the name and/or description.

        A value that is ``None``, empty or whitespace only is skipped and the
        current value is kept; it is not an error.

        Args:
            name: New name, or ``None`` to keep the current one.
            description: New description, or ``None`` to keep the current one.

        Raises:
            EntityValidationError: If the resulting state is invalid.
        """
        if name is not None and name.strip():
            self._name = name
        if description is not None and description.strip():
            self._description = description
        self.validate()

    # --- Validation ---

    def validate(self) -> None:
        """Check every field, in order.

        The first failing rule decides the error, so an empty name is
        reported as empty rather than too short.

        Raises:
            EntityValidationError: On the first violated rule.
        """
        validation.not_null_or_empty(self._name, messages.NAME_FIELD)
        validation.not_null_or_empty(self._description, messages.DESCRIPTION_FIELD)
        validation.min_length(
            self._name, messages.NAME_FIELD, messages.NAME_MIN_LENGTH_LIMIT
        )
        validation.max_length(self._name, messages.NAME_FIELD)
        validation.max_length_description(
            self._description, messages.DESCRIPTION_FIELD
        )

    # --- Views ---

    def snapshot(self) -> CategorySnapshot:
        """Return an immutable copy of the current state."""
        return CategorySnapshot(
            id=self.id,
            name=self._name,
            description=self._description,
            created_at=self._created_at,
            is_active=self._is_active,
        )

    def __repr__(self) -> str:
        return (
            f"Category(id={self.id!r}, name={self._name!r}, "
            f"is_active={self._is_active!r})"
        )
