"""
Password generation from a requirements dictionary.

Accepts the requirement keys used by browser password managers
(``PasswordMinLength``, ``PasswordMaxLength``, ``PasswordAllowedCharacters``,
``PasswordRequiredCharacters``, ``PasswordRepeatedCharacterLimit``,
``PasswordConsecutiveCharacterLimit``) and picks the most readable password
format that fits them.
"""

import logging
from typing import Any, Dict, List, Optional

from .exceptions import RequirementsError
from .generator.charset import CharacterSet, ALPHANUMERIC, AMBIGUOUS, DIGITS, UPPER
from .generator.config import Configuration, Style, DEFAULT_REQUIRED_CHARACTER_SETS
from .generator.password_generator import PasswordGenerator
from .generator.resolver import resolve


logger = logging.getLogger(__name__)

DEFAULT_UNAMBIGUOUS_CHARACTERS = ALPHANUMERIC - AMBIGUOUS

NICE_NUMBER_OF_CHARACTERS = 18
CLASSIC_NUMBER_OF_CHARACTERS = 12
# Length of the default "xxx-xxx-xxx-xxx" format
CLASSIC_PASSWORD_LENGTH = 15
# Length of the default "xxxxxx-xxxxxx-xxxxxx" format
NICE_PASSWORD_LENGTH = 20

DASH = "-"


def _as_character_set(value: Any) -> CharacterSet:
    if isinstance(value, CharacterSet):
        return value
    return CharacterSet(value)


def _fits(config: Configuration, min_length: int, max_length: Optional[int]) -> bool:
    try:
        length = resolve(config).password_length
    except RequirementsError:
        return False
    return length >= min_length and (not max_length or length <= max_length)


def _nice_configuration(
    min_length: int,
    max_length: Optional[int],
    allowed: Optional[CharacterSet],
    required_sets: List[CharacterSet],
) -> Optional[Configuration]:
    """Pick a pronounceable format if the requirements allow one."""
    if allowed is not None and not all(char in allowed for char in DEFAULT_UNAMBIGUOUS_CHARACTERS):
        return None

    if len(required_sets) > NICE_PASSWORD_LENGTH:
        return None

    if sum(1 for charset in required_sets if charset == DIGITS) > 1:
        return None
    if sum(1 for charset in required_sets if charset == UPPER) > 1:
        return None

    unambiguous_plus_dash = DEFAULT_UNAMBIGUOUS_CHARACTERS | DASH
    if any((charset & unambiguous_plus_dash).is_empty() for charset in required_sets):
        return None

    dash_allowed = allowed is None or DASH in allowed
    for grouped in ([True, False] if dash_allowed else [False]):
        config = Configuration(
            style=Style.NICE,
            minimum_length=NICE_NUMBER_OF_CHARACTERS,
            grouped=grouped,
            separator=DASH,
            allowed_characters=allowed if allowed is not None else DEFAULT_UNAMBIGUOUS_CHARACTERS,
        )
        if _fits(config, min_length, max_length):
            return config
    return None


def configuration_from_requirements(requirements: Optional[Dict[str, Any]]) -> Configuration:
    """
    Translate a requirements dictionary into a generator configuration.

    Args:
        requirements: Requirement keys and values; missing keys use defaults

    Returns:
        Configuration for a nice password if the requirements permit one,
        otherwise for a classic password
    """
    requirements = requirements or {}

    min_length = requirements.get("PasswordMinLength") or 0
    max_length = requirements.get("PasswordMaxLength")
    if max_length and min_length > max_length:
        # An impossible minimum is ignored
        min_length = 0

    allowed_value = requirements.get("PasswordAllowedCharacters")
    allowed = _as_character_set(allowed_value) if allowed_value else None

    required_value = requirements.get("PasswordRequiredCharacters")
    if required_value:
        required_sets = [_as_character_set(value) for value in required_value]
        if allowed is not None:
            required_sets = [charset for charset in required_sets if charset & allowed]
    else:
        required_sets = list(DEFAULT_REQUIRED_CHARACTER_SETS)

    repeated_limit = requirements.get("PasswordRepeatedCharacterLimit")
    consecutive_limit = requirements.get("PasswordConsecutiveCharacterLimit")

    config = _nice_configuration(min_length, max_length, allowed, required_sets)
    if config is not None:
        logger.debug("Requirements allow a nice password")
        return Configuration(
            style=config.style,
            minimum_length=config.minimum_length,
            grouped=config.grouped,
            separator=config.separator,
            allowed_characters=config.allowed_characters,
            repeated_character_limit=repeated_limit,
            consecutive_character_limit=consecutive_limit,
        )

    # Default classic format is "xxx-xxx-xxx-xxx"
    grouped = True
    number_of_characters = CLASSIC_NUMBER_OF_CHARACTERS
    if min_length and min_length > CLASSIC_PASSWORD_LENGTH:
        grouped = False
        number_of_characters = min_length
    if max_length and max_length < CLASSIC_PASSWORD_LENGTH:
        grouped = False
        number_of_characters = max_length

    if allowed is None:
        allowed = DEFAULT_UNAMBIGUOUS_CHARACTERS
    elif DASH not in allowed:
        grouped = False

    if grouped:
        # Dashes only appear as separators in the grouped format
        allowed = allowed - DASH

    # Requirements that can never all be met are dropped
    if len(required_sets) > number_of_characters:
        required_sets = []

    return Configuration(
        style=Style.RANDOM,
        minimum_length=number_of_characters,
        grouped=grouped,
        separator=DASH,
        allowed_characters=allowed,
        required_character_sets=tuple(required_sets),
        character_pool=allowed,
        repeated_character_limit=repeated_limit,
        consecutive_character_limit=consecutive_limit,
        strict=False,
    )


def generate_password_matching_requirements(requirements: Optional[Dict[str, Any]] = None) -> str:
    """
    Generate a password matching a requirements dictionary.

    Args:
        requirements: Requirement keys and values; missing keys use defaults

    Returns:
        Generated password string

    Raises:
        RequirementsError: If no characters are left to generate from
    """
    config = configuration_from_requirements(requirements)
    return PasswordGenerator(config).generate()
