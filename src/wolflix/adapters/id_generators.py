"""Concrete `IdGenerator` implementations.

Selected by name through `wolflix.bootstrap.build_id_generator`:

=========  ======================  ==========================================
name       class                   ids look like
=========  ======================  ==========================================
``uuid4``  `UUIDv4Generator`       ``"3f2b8c1e-9a4d-4c7e-8b1f-2d6e5a9c0b7a"``
``ulid``   `ULIDGenerator`         ``"01HXZ3K8Q9V7N2M4P6R8T0W2Y4"``
``simple`` `SimpleIdGenerator`     ``"00000000000000000000000001"``
=========  ======================  ==========================================
"""

import threading
import uuid

from ulid import monotonic

from wolflix.interfaces.id_generator import IdGenerator

# pylint: disable=too-few-public-methods


class UUIDv4Generator(IdGenerator):
    """Random UUID4 strings; the catalog's default identity source."""

    def new_id(self) -> str:
        return str(uuid.uuid4())


class ULIDGenerator(IdGenerator):
    """Monotonic ULID strings, sortable by creation order.

    `ulid.monotonic` keeps ids increasing within one millisecond; the lock
    keeps that true when several threads share one generator.
    """

    def __init__(self) -> None:
        self._lock = threading.Lock()

    def new_id(self) -> str:
        with self._lock:
            return str(monotonic.new())


class SimpleIdGenerator(IdGenerator):
    """Zero-padded counter ids, for tests and demos.

    Args:
        length: Width of the padded id (26, the length of a ULID, by default).
    """

    def __init__(self, length: int = 26) -> None:
        self._length = length
        self._issued = 0

    def new_id(self) -> str:
        self._issued += 1
        return str(self._issued).zfill(self._length)
