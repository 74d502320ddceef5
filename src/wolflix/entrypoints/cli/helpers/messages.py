"""Status lines for the Wolflix CLI.

Both helpers print to stderr, leaving stdout free for ``--json`` output.
Emoji glyphs degrade to ASCII markers on terminals that cannot encode them.
"""

import click


def _encodable(text: str) -> bool:
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    try:
        text.encode(getattr(stream, "encoding", None) or "ascii")
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _encodable(emoji) else fallback


def success_glyph() -> str:
    """``"✅"``, or ``"[OK]"`` when stderr cannot encode it."""
    return _glyph("✅", "[OK]")


def error_glyph() -> str:
    """``"❌"``, or ``"[X]"`` when stderr cannot encode it."""
    return _glyph("❌", "[X]")


def success(msg: str) -> None:
    """Print ``msg`` in bold green, e.g. ``✅  Category is valid.``"""
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Print ``msg`` in bold red, e.g. ``❌  Nome não deve ser vazio ou nulo``"""
    click.secho(f"{error_glyph()}  {msg}", fg="red", bold=True, err=True)
