"""
Generator configuration and defaults.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Optional, Tuple

from .charset import CharacterSet, DIGITS, LOWER, UNAMBIGUOUS, UPPER


class Style(Enum):
    """Password style."""

    RANDOM = "random"  # uniformly random characters
    NICE = "nice"  # pronounceable syllables, one digit, one uppercase letter

    @property
    def group_size(self) -> int:
        return 3 if self is Style.RANDOM else 6


DEFAULT_MINIMUM_LENGTH = 18
DEFAULT_SEPARATOR = "-"
DEFAULT_ALLOWED_CHARACTERS = UNAMBIGUOUS
DEFAULT_REQUIRED_CHARACTER_SETS = (LOWER, UPPER, DIGITS)


@dataclass(frozen=True)
class Configuration:
    style: Style = Style.NICE
    minimum_length: int = DEFAULT_MINIMUM_LENGTH
    grouped: bool = True
    separator: str = DEFAULT_SEPARATOR
    allowed_characters: CharacterSet = DEFAULT_ALLOWED_CHARACTERS
    required_character_sets: Tuple[CharacterSet, ...] = field(
        default=DEFAULT_REQUIRED_CHARACTER_SETS
    )
    # Random style draws from the union of the required sets unless a pool is given
    character_pool: Optional[CharacterSet] = None
    # None or < 1 disables the limit
    repeated_character_limit: Optional[int] = None
    consecutive_character_limit: Optional[int] = None
    # Strict: a required set emptied by the allowed characters is an error.
    # Lenient: such sets are dropped.
    strict: bool = True

    def __post_init__(self) -> None:
        if len(self.separator) != 1:
            raise ValueError("Separator must be exactly one character")
        # Accept lists from callers but keep the stored value hashable
        object.__setattr__(self, "required_character_sets", tuple(self.required_character_sets))


DEFAULT_CONFIG = Configuration()
