"""Command line error taxonomy.

Each error is a click exception carrying the process exit status, so click's
standalone mode prints the message and exits with the right code.
"""

from __future__ import annotations
import click

USAGE = "Usage: unjumble [-alpha|-len|-longest] [-include letter] letters [dictionary]"


class UnjumbleError(click.ClickException):
    """Base class: print the bare message to stderr and exit with ``exit_code``."""

    exit_code = 1

    def show(self, file=None) -> None:
        click.echo(self.format_message(), file=file, err=True)


class UnjumbleUsageError(UnjumbleError):
    """Bad options or arguments."""

    exit_code = 1

    def __init__(self, reason: str | None = None):
        super().__init__(USAGE)
        self.reason = reason


class DictionaryNotOpenable(UnjumbleError):
    exit_code = 2

    def __init__(self, filename: str):
        super().__init__(f'unjumble: file "{filename}" can not be opened')
        self.filename = filename


class DictionaryUnreadable(UnjumbleError):
    """The dictionary opened but failed while being read (I/O or decoding)."""

    exit_code = 2

    def __init__(self, filename: str):
        super().__init__(f'unjumble: file "{filename}" can not be read')
        self.filename = filename


class LettersTooShort(UnjumbleError):
    exit_code = 3

    def __init__(self):
        super().__init__("unjumble: must supply at least three letters")


class LettersNotAlphabetic(UnjumbleError):
    exit_code = 4

    def __init__(self):
        super().__init__("unjumble: can only unjumble alphabetic characters")


__all__ = [
    "USAGE",
    "UnjumbleError",
    "UnjumbleUsageError",
    "DictionaryNotOpenable",
    "DictionaryUnreadable",
    "LettersTooShort",
    "LettersNotAlphabetic",
]
