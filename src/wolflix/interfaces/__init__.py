"""Interfaces (application boundary) for WOLFLIX.

Defines framework-free contracts shared by the domain, adapters and
bootstrap: ID generators and clocks. Business rules stay out of this
package.

Dependency rule: this package is independent; do not import from any
`wolflix.*` modules. It may be imported by `wolflix.domain`,
`wolflix.adapters` and `wolflix.bootstrap`.
"""

from .clock import Clock
from .id_generator import IdGenerator

__all__ = ["Clock", "IdGenerator"]
