"""Integration tests.

Purpose
- Exercise adapter-specific behavior against the real third-party libraries
  (ulid-py) and the standard library pieces they wrap (uuid).

Guidelines
- Assert on properties only the concrete adapter promises (formats, versions).
- Shared behavior belongs in `tests/contract/` instead.
- Mark as 'integration'.
"""
