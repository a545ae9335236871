"""
Checks applied to every candidate password.
"""

from typing import Iterable, Optional

from .charset import CharacterSet


def contains_required_characters(password: str, required_sets: Iterable[CharacterSet]) -> bool:
    """Check that every required set has at least one member in the password."""
    password_chars = set(password)
    return all(not password_chars.isdisjoint(required_set) for required_set in required_sets)


def longest_repeated_run(password: str) -> int:
    """Length of the longest run of one character repeating itself."""
    longest = 0
    current = 0
    previous: Optional[str] = None
    for char in password:
        current = current + 1 if char == previous else 1
        previous = char
        longest = max(longest, current)
    return longest


def longest_consecutive_run(password: str) -> int:
    """
    Length of the longest ascending or descending run of code points.

    Both "123"/"abc" and "321"/"cba" are consecutive. A change of direction
    starts a new run that includes the turning character.
    """
    if not password:
        return 0

    longest = 1
    current = 1
    ascending: Optional[bool] = None
    codes = [ord(char) for char in password]
    for previous, code in zip(codes, codes[1:]):
        if code == previous + 1:
            step_ascending = True
        elif code == previous - 1:
            step_ascending = False
        else:
            ascending = None
            current = 1
            continue

        if step_ascending != ascending:
            ascending = step_ascending
            current = 1
        current += 1
        longest = max(longest, current)
    return longest


def within_repeated_character_limit(password: str, limit: Optional[int]) -> bool:
    """Check the repeated-character limit; a missing or non-positive limit always passes."""
    if limit is None or limit < 1:
        return True
    return longest_repeated_run(password) <= limit


def within_consecutive_character_limit(password: str, limit: Optional[int]) -> bool:
    """Check the consecutive-character limit; a missing or non-positive limit always passes."""
    if limit is None or limit < 1:
        return True
    return longest_consecutive_run(password) <= limit
