"""Domain layer for WOLFLIX.

Contains business rules: entities, validation primitives and the messages
they raise. This package is deliberately technology-agnostic.

Dependency rule: do not import from `wolflix.adapters`, `wolflix.bootstrap`
or `wolflix.entrypoints`. Ports from `wolflix.interfaces` may be used for
typing injected collaborators.
"""
