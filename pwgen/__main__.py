"""
CLI interface for pwgen.
"""

import sys
import logging
from typing import Optional, Tuple

import click
import pyperclip

from . import __version__
from .exceptions import CharacterSetParseError, GenerationExhaustedError, RequirementsError
from .generator import Configuration, PasswordGenerator, Style
from .generator.charset import CharacterSet
from .generator.config import (
    DEFAULT_MINIMUM_LENGTH,
    DEFAULT_REQUIRED_CHARACTER_SETS,
    DEFAULT_SEPARATOR,
)
from .utils.validation import character_set_name, parse_character_set, validate_separator


logger = logging.getLogger(__name__)


class CharacterSetParamType(click.ParamType):
    """Click parameter accepting a character set name or a [...] literal."""

    name = "set"

    def convert(self, value, param, ctx) -> CharacterSet:
        if isinstance(value, CharacterSet):
            return value
        try:
            return parse_character_set(value)
        except CharacterSetParseError as e:
            self.fail(str(e), param, ctx)


CHARACTER_SET = CharacterSetParamType()


def _check_separator(ctx: click.Context, param: click.Parameter, value: str) -> str:
    if not validate_separator(value):
        raise click.BadParameter("Please specify exactly one separator character.")
    return value


def _copy_to_clipboard(password: str) -> None:
    """Copy a password to the clipboard, reporting failures without aborting."""
    try:
        pyperclip.copy(password)
        click.echo("🔐 Password copied to clipboard.", err=True)
    except pyperclip.PyperclipException as e:
        logger.warning(f"Clipboard unavailable: {e}")
        click.echo(f"Could not copy to clipboard: {e}", err=True)


@click.command(context_settings={"help_option_names": ["-h", "--help"]})
@click.option(
    "--minimum-length",
    "-l",
    default=DEFAULT_MINIMUM_LENGTH,
    type=click.IntRange(min=1),
    metavar="AMOUNT",
    help=f"Minimum number of password characters (default: {DEFAULT_MINIMUM_LENGTH}). "
    "Exact length with --random and --no-group.",
)
@click.option(
    "--random",
    "-r",
    "use_random",
    is_flag=True,
    help="Choose every character uniformly at random instead of generating a more typeable password",
)
@click.option("--no-group", "-g", is_flag=True, help="Don't split the password into groups")
@click.option(
    "--separator",
    "-s",
    default=DEFAULT_SEPARATOR,
    callback=_check_separator,
    metavar="CHARACTER",
    help=f"Group separator character (default: {DEFAULT_SEPARATOR})",
)
@click.option(
    "--allowed",
    "-a",
    default="unambiguous",
    type=CHARACTER_SET,
    help="Allowed characters: lower, upper, digits, special, ascii, alphanum, "
    "unambiguous or [custom] (default: unambiguous)",
)
@click.option(
    "--required",
    "-R",
    multiple=True,
    type=CHARACTER_SET,
    help="Character set the password must contain a character of. Repeatable "
    "(default: lower, upper, digits; random style only)",
)
@click.option("--repeated-limit", type=int, metavar="AMOUNT", help="Longest allowed run of one repeated character")
@click.option(
    "--consecutive-limit",
    type=int,
    metavar="AMOUNT",
    help='Longest allowed run of consecutive characters like "abc" or "321"',
)
@click.option(
    "--lenient",
    is_flag=True,
    help="Ignore required sets without allowed characters instead of failing",
)
@click.option(
    "--number",
    "-n",
    default=1,
    type=click.IntRange(min=1),
    metavar="AMOUNT",
    help="Number of passwords to generate, one per line (default: 1)",
)
@click.option(
    "--max-attempts",
    type=click.IntRange(min=1),
    metavar="AMOUNT",
    help="Give up after this many rejected candidates per password (default: unlimited)",
)
@click.option("--copy", "-c", is_flag=True, help="Copy the last password to the clipboard")
@click.option("--verbose", "-v", is_flag=True, help="Log generation details to stderr")
@click.version_option(__version__, "--version", prog_name="pwgen")
def cli(minimum_length: int, use_random: bool, no_group: bool, separator: str,
        allowed: CharacterSet, required: Tuple[CharacterSet, ...],
        repeated_limit: Optional[int], consecutive_limit: Optional[int],
        lenient: bool, number: int, max_attempts: Optional[int], copy: bool,
        verbose: bool) -> None:
    """pwgen - Generate passwords matching declarative requirements."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    required_sets = required or DEFAULT_REQUIRED_CHARACTER_SETS
    logger.debug(
        f"Allowed {character_set_name(allowed)}, required "
        f"{', '.join(character_set_name(charset) for charset in required_sets)}"
    )

    config = Configuration(
        style=Style.RANDOM if use_random else Style.NICE,
        minimum_length=minimum_length,
        grouped=not no_group,
        separator=separator,
        allowed_characters=allowed,
        required_character_sets=tuple(required_sets),
        repeated_character_limit=repeated_limit,
        consecutive_character_limit=consecutive_limit,
        strict=not lenient,
    )

    try:
        generator = PasswordGenerator(config, max_attempts=max_attempts)
        logger.debug(generator.get_charset_info())

        password = None
        for password in generator.generate_many(number):
            click.echo(password)

    except (RequirementsError, GenerationExhaustedError) as e:
        click.echo(f"Error: {e}", err=True)
        sys.exit(1)

    if copy and password is not None:
        _copy_to_clipboard(password)


def main() -> None:
    """Main entry point for the CLI application."""
    cli()


if __name__ == "__main__":
    main()
