"""
Input validation utilities for pwgen.
"""

from typing import Dict

from ..exceptions import CharacterSetParseError
from ..generator.charset import (
    CharacterSet,
    ALPHANUMERIC,
    ASCII,
    DIGITS,
    LOWER,
    SPECIAL,
    UNAMBIGUOUS,
    UPPER,
    limit_to_ascii,
)

# Names accepted wherever a character set is expected
NAMED_CHARACTER_SETS: Dict[str, CharacterSet] = {
    "lower": LOWER,
    "upper": UPPER,
    "digits": DIGITS,
    "special": SPECIAL,
    "ascii": ASCII,
    "alphanum": ALPHANUMERIC,
    "unambiguous": UNAMBIGUOUS,
}


def parse_character_set(text: str) -> CharacterSet:
    """
    Parse a character set name or a custom ``[...]`` literal.

    Names are case-insensitive. Literal characters outside the ASCII preset
    are dropped and duplicates collapsed.

    Args:
        text: Set name (e.g. "lower") or literal (e.g. "[abc]")

    Returns:
        The parsed character set

    Raises:
        CharacterSetParseError: If the text is neither a known name nor a literal
    """
    named = NAMED_CHARACTER_SETS.get(text.lower())
    if named is not None:
        return named

    if len(text) < 2 or not text.startswith("[") or not text.endswith("]"):
        raise CharacterSetParseError(get_validation_error_message(text))

    return limit_to_ascii(text[1:-1])


def character_set_name(charset: CharacterSet) -> str:
    """
    Describe a character set the way parse_character_set accepts it.

    Args:
        charset: Any character set

    Returns:
        Preset name, or the characters wrapped in brackets
    """
    for name, named in NAMED_CHARACTER_SETS.items():
        if charset == named:
            return name
    return f"[{charset}]"


def validate_separator(separator: str) -> bool:
    """
    Validate a group separator.

    Args:
        separator: The separator to validate

    Returns:
        True if the separator is exactly one character
    """
    return isinstance(separator, str) and len(separator) == 1


def get_validation_error_message(text: str) -> str:
    """
    Get a descriptive error message for an unknown character set.

    Args:
        text: The text that failed to parse

    Returns:
        Error message naming the accepted forms
    """
    if not text:
        return "Character set cannot be empty"

    names = ", ".join(NAMED_CHARACTER_SETS)
    return (
        f'No character set named "{text}" found ({names}). '
        "To specify a custom set, surround a string of characters with [ and ]"
    )
