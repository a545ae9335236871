"""
Custom exceptions for pwgen.
"""

from typing import Optional


class PwgenException(Exception):
    """Base exception for pwgen."""

    pass


class RequirementsError(PwgenException):
    """Password requirements cannot be satisfied."""

    prefix = "Unable to meet requirements:"
    description = "Invalid password requirements"

    def __init__(self, message: Optional[str] = None):
        super().__init__(f"{self.prefix} {message or self.description}")


class MoreCharacterSetsThanCharacters(RequirementsError):
    """More required character sets than password characters."""

    def __init__(self, required_count: int, number_of_characters: int):
        self.required_count = required_count
        self.number_of_characters = number_of_characters
        super().__init__(
            f"More required character sets ({required_count}) specified than "
            f"number of password characters ({number_of_characters}) to generate"
        )


class InvalidRequiredCharacterSet(RequirementsError):
    """A required character set shares no character with the allowed characters."""

    description = (
        "Intersection of a required character set with the allowed characters is empty. "
        "Allowed characters must contain at least one character of each required set"
    )


class EmptyCharacterPool(RequirementsError):
    """No characters available to draw from."""

    description = (
        "No characters available to randomly choose from. "
        "Required character sets must include at least one non-empty set"
    )


class NicePasswordMissingAllowedCharacters(RequirementsError):
    """Allowed characters lack a consonant, vowel or digit for the nice style."""

    description = (
        'For a password of style "nice", allowed characters must contain '
        "a lowercase and uppercase consonant and vowel and a digit"
    )


class CharacterSetParseError(PwgenException):
    """Character set name or literal could not be parsed."""

    pass


class GenerationExhaustedError(PwgenException):
    """No valid password was produced within the allowed number of attempts."""

    pass
