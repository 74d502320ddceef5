"""Bootstrap (composition root) for WOLFLIX.

Assembles the application at runtime: wires concrete adapters (ID
generators, clocks) into the factories the entrypoints use, and reads
configuration.

Import rules:
- Entry points import *this* package (not adapters/interfaces/domain).
- This package may import: `wolflix.adapters`, `wolflix.interfaces`,
  `wolflix.domain`, and `wolflix.config`.
- Inner layers must not import `wolflix.bootstrap`.

Public surface:
- Re-export composition factories from this module; keep wiring helpers internal.
- No business rules live here; this is assembly only.
"""

from .bootstrap import AppContainer, bootstrap, build_id_generator

__all__ = ["AppContainer", "bootstrap", "build_id_generator"]
