"""
Password generation satisfying a set of declarative requirements.
"""

import logging
from typing import Iterable, Iterator, Optional

from ..exceptions import GenerationExhaustedError
from .charset import CharacterSet
from .classic import classic_password
from .config import (
    Configuration,
    Style,
    DEFAULT_ALLOWED_CHARACTERS,
    DEFAULT_CONFIG,
    DEFAULT_MINIMUM_LENGTH,
    DEFAULT_REQUIRED_CHARACTER_SETS,
    DEFAULT_SEPARATOR,
)
from .grouping import group_characters
from .nice import nice_password
from .resolver import GenerationPlan, resolve
from .validators import (
    contains_required_characters,
    within_consecutive_character_limit,
    within_repeated_character_limit,
)


logger = logging.getLogger(__name__)


class PasswordGenerator:
    """Generate passwords matching a resolved configuration."""

    def __init__(self, config: Optional[Configuration] = None, max_attempts: Optional[int] = None):
        """
        Initialize password generator and resolve its requirements.

        Args:
            config: Password requirements (DEFAULT_CONFIG if None)
            max_attempts: Give up after this many rejected candidates
                (unbounded if None)

        Raises:
            RequirementsError: If the requirements can never be met
        """
        if max_attempts is not None and max_attempts < 1:
            raise ValueError("max_attempts must be at least 1")

        self.config = config if config is not None else DEFAULT_CONFIG
        self.max_attempts = max_attempts
        self.plan: GenerationPlan = resolve(self.config)

    def _candidate(self) -> str:
        plan = self.plan
        if plan.style is Style.RANDOM:
            password = classic_password(plan.number_of_characters, plan.character_pool)
        else:
            password = nice_password(
                plan.number_of_characters,
                lower_consonants=plan.lower_consonants,
                upper_consonants=plan.upper_consonants,
                lower_vowels=plan.lower_vowels,
                upper_vowels=plan.upper_vowels,
                digits=plan.digits,
            )

        if plan.grouped:
            password = group_characters(password, plan.separator, plan.group_size)
        return password

    def _meets_requirements(self, password: str) -> bool:
        """
        Check a candidate against every active validator.

        Args:
            password: Candidate password, separators included

        Returns:
            True if the candidate satisfies the plan
        """
        plan = self.plan

        if plan.required_character_sets and not contains_required_characters(
            password, plan.required_character_sets
        ):
            return False

        if not within_repeated_character_limit(password, plan.repeated_character_limit):
            return False

        if not within_consecutive_character_limit(password, plan.consecutive_character_limit):
            return False

        return True

    def generate(self) -> str:
        """
        Generate a password, regenerating until all requirements are met.

        Returns:
            Generated password string

        Raises:
            GenerationExhaustedError: If max_attempts candidates were rejected
        """
        attempts = 0
        while True:
            password = self._candidate()
            attempts += 1
            if self._meets_requirements(password):
                if attempts > 1:
                    logger.debug(f"Accepted password after {attempts} attempts")
                return password

            if self.max_attempts is not None and attempts >= self.max_attempts:
                raise GenerationExhaustedError(
                    f"No password met the requirements within {attempts} attempts"
                )

    def generate_many(self, count: int) -> Iterator[str]:
        """Yield ``count`` independently generated passwords."""
        for _ in range(count):
            yield self.generate()

    def get_charset_info(self) -> str:
        """
        Get human-readable description of the resolved plan.

        Returns:
            Description of style, length and character pool
        """
        plan = self.plan
        info = f"{plan.style.value} style, {plan.password_length} characters"
        if plan.grouped:
            info += f" in groups of {plan.group_size} separated by {plan.separator!r}"
        if plan.style is Style.RANDOM:
            info += f", {len(plan.character_pool)} possible characters"
            info += f", {len(plan.required_character_sets)} required sets"
        return info


def generate_password(style: Style = Style.NICE,
                      minimum_length: int = DEFAULT_MINIMUM_LENGTH,
                      grouped: bool = True,
                      separator: str = DEFAULT_SEPARATOR,
                      allowed_characters: CharacterSet = DEFAULT_ALLOWED_CHARACTERS,
                      required_character_sets: Iterable[CharacterSet] = DEFAULT_REQUIRED_CHARACTER_SETS,
                      repeated_character_limit: Optional[int] = None,
                      consecutive_character_limit: Optional[int] = None,
                      strict: bool = True) -> str:
    """
    Convenience function to generate a password.

    Args:
        style: Random or nice (pronounceable) password
        minimum_length: Minimum password length; exact length for
            ungrouped random passwords
        grouped: Split the password into groups with the separator
        separator: Group separator character
        allowed_characters: Characters the password may contain
        required_character_sets: Sets that must each be represented
            (random style)
        repeated_character_limit: Longest allowed run of one character
        consecutive_character_limit: Longest allowed run like "abc" or "321"
        strict: Fail instead of dropping required sets that share no
            character with the allowed characters

    Returns:
        Generated password string
    """
    config = Configuration(
        style=style,
        minimum_length=minimum_length,
        grouped=grouped,
        separator=separator,
        allowed_characters=allowed_characters,
        required_character_sets=tuple(required_character_sets),
        repeated_character_limit=repeated_character_limit,
        consecutive_character_limit=consecutive_character_limit,
        strict=strict,
    )

    generator = PasswordGenerator(config)

    return generator.generate()
