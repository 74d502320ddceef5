"""Unit tests.

Purpose
- Verify a single module/class/function in isolation.

Guidelines
- No real I/O; inject `SimpleIdGenerator` and `FrozenClock` for determinism.
- Prefer behavior-centric assertions over implementation details.
- Keep tests small, fast, and deterministic.
"""
