"""Entry points for WOLFLIX (currently the command-line interface)."""
