"""Command-line interface for WOLFLIX."""
