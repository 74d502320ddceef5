"""Entities package.

All entities are defined in this package and inherit from the base `Entity`
class in `base.py`. They are re-exported here to provide a single,
convenient import path.
"""

from .base import AggregateRoot, Entity
from .category import Category, CategorySnapshot

__all__ = ["AggregateRoot", "Category", "CategorySnapshot", "Entity"]
