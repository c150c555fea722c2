"""Terminal message helpers for the INTERACTOR CLI.

Render status lines with emoji glyphs, falling back to ASCII when stderr
cannot encode them. Messages go to stderr so stdout stays machine-readable.
"""

import click


def _supports_character(character: str) -> bool:
    """Return True if ``character`` can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def _glyph(emoji: str, fallback: str) -> str:
    return emoji if _supports_character(emoji) else fallback


def success_glyph() -> str:
    """Return "✅" or the ASCII fallback "[OK]"."""
    return _glyph("✅", "[OK]")  # pragma: no mutate


def failure_glyph() -> str:
    """Return "❌" or the ASCII fallback "[X]"."""
    return _glyph("❌", "[X]")  # pragma: no mutate


def caution_glyph() -> str:
    """Return "⚠️" or the ASCII fallback "[!]"."""
    return _glyph("⚠️", "[!]")  # pragma: no mutate


def success(msg: str) -> None:
    """Emit a green, bold success line to stderr.

    Example:
        ``✅  create_post succeeded``
    """
    click.secho(f"{success_glyph()}  {msg}", fg="green", bold=True, err=True)


def failure(msg: str) -> None:
    """Emit a red, bold failure line to stderr.

    Example:
        ``❌  create_post failed [inappropriate_title]``
    """
    click.secho(f"{failure_glyph()}  {msg}", fg="red", bold=True, err=True)


def warn(msg: str) -> None:
    """Emit a yellow, bold warning line to stderr."""
    click.secho(f"{caution_glyph()}  {msg}", fg="yellow", bold=True, err=True)
