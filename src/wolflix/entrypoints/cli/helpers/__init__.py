"""CLI helpers for WOLFLIX.

Utilities used by the command-line interface: logger-level option parsing
and message emitters that write to stderr with emoji→ASCII fallbacks.
"""

from .messages import error, success

__all__ = ["error", "success"]
