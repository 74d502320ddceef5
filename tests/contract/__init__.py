"""Contract tests.

Purpose
- Define port behavior once (`IdGenerator`, `Clock`) and run it against every
  adapter so implementations stay interchangeable.

Guidelines
- Parametrize implementations via fixtures in the port's folder conftest.
- Assert only the public contract, not adapter internals.
"""
