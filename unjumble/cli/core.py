"""Core CLI module - the ``unjumble`` command.

Parses and validates arguments, loads configuration, runs the matching
service and prints one matched word per line on stdout. Errors are reported
on stderr with a distinct exit status per error kind (see ``errors``).
"""

from __future__ import annotations
import click
import logging

from ..config import deep_merge, load_typed_config
from ..services.unjumble_service import UnjumbleRequest, run_unjumble
from ..version import __version__
from .errors import DictionaryUnreadable, UnjumbleUsageError
from .validation import select_order, validate_dictionary, validate_include, validate_letters

logger = logging.getLogger(__name__)


class UnjumbleCommand(click.Command):
    """Command that reports every parser error as the unjumble usage error (exit 1)."""

    def parse_args(self, ctx: click.Context, args: list[str]) -> list[str]:
        try:
            return super().parse_args(ctx, args)
        except UnjumbleUsageError:
            raise
        except click.UsageError as e:
            logger.debug(f"Usage error: {e.format_message()}")
            raise UnjumbleUsageError(e.format_message()) from e


@click.command(cls=UnjumbleCommand, name="unjumble")
@click.version_option(version=__version__, prog_name="unjumble")
@click.option("-alpha", "--alpha", "alpha", count=True, help="Print matches in alphabetical order")
@click.option("-len", "--len", "length", count=True, help="Print matches grouped by length, longest first")
@click.option("-longest", "--longest", "longest", count=True, help="Print only the longest matches")
@click.option("-include", "--include", "include", metavar="LETTER", default=None,
              help="Only print words containing LETTER")
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging on stderr")
@click.argument("letters")
@click.argument("dictionary", required=False)
@click.pass_context
def cli(ctx: click.Context, alpha: int, length: int, longest: int, include: str | None,
        verbose: bool, letters: str, dictionary: str | None):
    """Find every dictionary word that can be made from LETTERS.

    Each letter of LETTERS may be used at most as many times as it appears.
    Matching ignores case; words are printed as they appear in the
    dictionary, one per line.

    \b
    Ordering (pick at most one, default: dictionary order):
      -alpha      alphabetical
      -len        grouped by length, longest group first
      -longest    only the longest words

    \b
    Examples:
      unjumble listen
      unjumble -alpha -include e listen words.txt

    DICTIONARY defaults to the configured word list (UNJUMBLE__DICTIONARY__PATH,
    /usr/share/dict/words when unset).
    """
    overrides = {"log_level": "DEBUG"} if verbose else None
    if isinstance(ctx.obj, dict):
        cfg = deep_merge(ctx.obj, overrides) if overrides else ctx.obj
    else:
        cfg = load_typed_config(overrides).to_dict()
        ctx.obj = cfg

    order = select_order(alpha, length, longest, default=str(cfg.get("matching", {}).get("order", "none")))
    required_letter = validate_include(include)
    validate_letters(letters)
    if dictionary is None:
        dictionary = str(cfg.get("dictionary", {}).get("path", "/usr/share/dict/words"))
    validate_dictionary(dictionary)

    request = UnjumbleRequest(
        letters=letters,
        required_letter=required_letter,
        order=order,
        dictionary=dictionary,
    )
    try:
        result = run_unjumble(request, config=cfg)
    except (OSError, UnicodeDecodeError) as e:
        logger.debug(f"Reading {dictionary} failed: {e}")
        raise DictionaryUnreadable(dictionary) from e

    for word in result.words:
        click.echo(word)


__all__ = ["cli", "UnjumbleCommand"]
