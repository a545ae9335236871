"""
Turn a Configuration into a validated generation plan.

Every check that can be decided up front happens here. Repeated and
consecutive character limits are only enforced by the retry loop.
"""

import logging
from dataclasses import dataclass
from typing import List, Optional, Tuple

from ..exceptions import (
    EmptyCharacterPool,
    InvalidRequiredCharacterSet,
    MoreCharacterSetsThanCharacters,
    NicePasswordMissingAllowedCharacters,
)
from .charset import (
    CharacterSet,
    DIGITS,
    LOWER_CONSONANTS,
    LOWER_VOWELS,
    UPPER_CONSONANTS,
    UPPER_VOWELS,
)
from .config import Configuration, Style
from .nice import WORD_LENGTH, DIGIT_WORD_LENGTH


logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class GenerationPlan:
    """Concrete generation parameters derived from a Configuration."""

    style: Style
    number_of_characters: int
    number_of_splits: int
    group_size: int
    separator: str
    required_character_sets: Tuple[CharacterSet, ...]
    character_pool: CharacterSet
    lower_consonants: CharacterSet
    upper_consonants: CharacterSet
    lower_vowels: CharacterSet
    upper_vowels: CharacterSet
    digits: CharacterSet
    repeated_character_limit: Optional[int]
    consecutive_character_limit: Optional[int]

    @property
    def grouped(self) -> bool:
        """Whether separators are inserted into generated passwords."""
        return self.number_of_splits > 0

    @property
    def generated_length(self) -> int:
        """Number of characters produced by the style generator, before grouping."""
        if self.style is Style.RANDOM:
            return self.number_of_characters
        additional_words = _ceil_div(max(self.number_of_characters - WORD_LENGTH, 0), WORD_LENGTH)
        return additional_words * WORD_LENGTH + DIGIT_WORD_LENGTH

    @property
    def password_length(self) -> int:
        """Length of every password generated from this plan, separators included."""
        length = self.generated_length
        if self.grouped:
            length += _ceil_div(length, self.group_size) - 1
        return length


def _ceil_div(numerator: int, denominator: int) -> int:
    return -(-numerator // denominator)


def _drop_separator_sets(
    required_sets: List[CharacterSet], separator: str, number_of_splits: int
) -> List[CharacterSet]:
    """Drop one set containing the separator per inserted separator, earliest first."""
    to_drop = [i for i, charset in enumerate(required_sets) if separator in charset][:number_of_splits]
    return [charset for i, charset in enumerate(required_sets) if i not in to_drop]


def _resolve_limit(limit: Optional[int]) -> Optional[int]:
    if limit is None or limit < 1:
        return None
    return limit


def resolve(config: Configuration) -> GenerationPlan:
    """
    Resolve a configuration into a generation plan.

    Args:
        config: Requested password configuration

    Returns:
        The resolved, read-only generation plan

    Raises:
        MoreCharacterSetsThanCharacters: More required sets than characters (random style)
        InvalidRequiredCharacterSet: A required set shares nothing with the
            allowed characters (random style, strict policy)
        EmptyCharacterPool: Nothing to draw characters from (random style)
        NicePasswordMissingAllowedCharacters: A syllable role has no allowed
            character (nice style)
    """
    style = config.style
    allowed = config.allowed_characters

    # Calculate the number of characters and splits such that the resulting
    # length satisfies the minimum length
    group_size = style.group_size
    number_of_splits = 0
    if config.grouped:
        split_size = group_size + 1
        number_of_splits = max(_ceil_div(config.minimum_length - group_size, split_size), 0)
        number_of_characters = group_size + number_of_splits * group_size
    else:
        number_of_characters = config.minimum_length

    required_sets = [charset for charset in config.required_character_sets if charset]
    # Separators appear in every grouped password anyway
    required_sets = _drop_separator_sets(required_sets, config.separator, number_of_splits)
    intersected = [charset & allowed for charset in required_sets]

    lower_consonants = LOWER_CONSONANTS & allowed
    upper_consonants = UPPER_CONSONANTS & allowed
    lower_vowels = LOWER_VOWELS & allowed
    upper_vowels = UPPER_VOWELS & allowed
    digits = DIGITS & allowed

    if style is Style.RANDOM:
        pool_override = None
        if config.character_pool is not None:
            # Required characters have to come out of the pool being drawn from
            pool_override = config.character_pool & allowed
            intersected = [charset & pool_override for charset in intersected]

        if config.strict:
            resolved_sets = intersected
        else:
            resolved_sets = [charset for charset in intersected if charset]

        if len(resolved_sets) > number_of_characters:
            raise MoreCharacterSetsThanCharacters(len(resolved_sets), number_of_characters)

        if not all(resolved_sets):
            raise InvalidRequiredCharacterSet()

        if pool_override is not None:
            character_pool = pool_override
        else:
            character_pool = CharacterSet.union_of(resolved_sets)
        if not character_pool:
            raise EmptyCharacterPool()
    else:
        if not all([lower_consonants, upper_consonants, lower_vowels, upper_vowels, digits]):
            raise NicePasswordMissingAllowedCharacters()

        # The nice generator guarantees its own composition
        resolved_sets = []
        character_pool = CharacterSet.union_of([lower_consonants, lower_vowels, digits])

    repeated_limit = _resolve_limit(config.repeated_character_limit)
    if style is Style.NICE and repeated_limit != 1:
        # Only "no repeats at all" can be enforced on syllable passwords
        repeated_limit = None

    plan = GenerationPlan(
        style=style,
        number_of_characters=number_of_characters,
        number_of_splits=number_of_splits,
        group_size=group_size,
        separator=config.separator,
        required_character_sets=tuple(resolved_sets),
        character_pool=character_pool,
        lower_consonants=lower_consonants,
        upper_consonants=upper_consonants,
        lower_vowels=lower_vowels,
        upper_vowels=upper_vowels,
        digits=digits,
        repeated_character_limit=repeated_limit,
        consecutive_character_limit=_resolve_limit(config.consecutive_character_limit),
    )

    logger.debug(
        f"Resolved {style.value} plan: {number_of_characters} characters, "
        f"{number_of_splits} splits, {len(resolved_sets)} required sets, "
        f"pool of {len(character_pool)}"
    )
    return plan
