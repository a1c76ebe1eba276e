"""Status lines for the caretrack CLI.

Status lines go to stderr, so stdout carries only command feedback and
listings. Emoji markers fall back to ASCII on terminals that cannot encode
them.
"""

import click

CAUTION = ("⚠️", "[!]")  # pragma: no mutate
SUCCESS = ("✅", "[OK]")  # pragma: no mutate
ERROR = ("❌", "[X]")  # pragma: no mutate


def _supports_character(character: str) -> bool:
    """Return True if *character* can be encoded on stderr."""
    stream = click.get_text_stream("stderr")  # pragma: no mutate
    encoding = getattr(stream, "encoding", None) or "ascii"
    try:
        character.encode(encoding)
    except UnicodeEncodeError:
        return False
    return True


def glyph(marker: tuple[str, str]) -> str:
    """Pick the emoji of an ``(emoji, fallback)`` pair if stderr can show it."""
    emoji, fallback = marker
    return emoji if _supports_character(emoji) else fallback


def warn(msg: str) -> None:
    """Print a bold yellow warning line to stderr.

    Example:
        ``⚠️  This will upgrade the database schema.``
    """
    click.secho(f"{glyph(CAUTION)}  {msg}", fg="yellow", bold=True, err=True)


def success(msg: str) -> None:
    """Print a bold green success line to stderr."""
    click.secho(f"{glyph(SUCCESS)}  {msg}", fg="green", bold=True, err=True)


def error(msg: str) -> None:
    """Print a bold red error line to stderr.

    Multi-line messages (e.g. a command's usage) keep their line breaks; only
    the first line carries the marker.
    """
    click.secho(f"{glyph(ERROR)}  {msg}", fg="red", bold=True, err=True)
