"""WOLFLIX test suite.

Folder taxonomy
- unit/         : Isolated, fast checks of a single module/class/function.
- integration/  : Adapter-specific behavior exercised against the real libraries.
- contract/     : Shared behavior/invariants enforced across multiple implementations.
- e2e/          : User-visible flows through the command-line interface.
- fixtures/     : Shared pytest fixtures (test data factories).
- helpers/      : Shared utilities (no tests here).

General guidance
- Keep unit fast and deterministic; inject `SimpleIdGenerator` and `FrozenClock`
  instead of relying on randomness or the wall clock.
- Contract parametrizes implementations to ensure consistent behavior.
- Property-based tests live with the layer they exercise and use @pytest.mark.property.
- Suggested markers: unit, integration, contract, e2e, property, slow
"""
