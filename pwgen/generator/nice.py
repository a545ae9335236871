"""
Pronounceable ("more typeable") passwords.

A password is a run of consonant-vowel-consonant syllables, paired into
six-letter words, plus one word carrying a single digit at its start or end.
One letter is then uppercased.
"""

import secrets

from .charset import CharacterSet

WORD_LENGTH = 6
# Syllable + consonant + vowel + digit
DIGIT_WORD_LENGTH = 6


def nice_password(
    minimum_count: int,
    lower_consonants: CharacterSet,
    upper_consonants: CharacterSet,
    lower_vowels: CharacterSet,
    upper_vowels: CharacterSet,
    digits: CharacterSet,
) -> str:
    """
    Generate a pronounceable password of at least ``minimum_count`` characters.

    All five role sets must be non-empty.

    Args:
        minimum_count: Minimum number of characters
        lower_consonants: Consonants used for syllables
        upper_consonants: Consonants used when uppercasing a consonant
        lower_vowels: Vowels used for syllables
        upper_vowels: Vowels used when uppercasing a vowel
        digits: Digits to choose the single digit from

    Returns:
        Password containing exactly one digit and one uppercase letter,
        never starting with the digit
    """

    def syllable() -> str:
        return lower_consonants.random_element() + lower_vowels.random_element() + lower_consonants.random_element()

    def word() -> str:
        return syllable() + syllable()

    # Generate enough words to satisfy the minimum number of characters
    needed = max(minimum_count - WORD_LENGTH, 0)
    additional_words = (needed + WORD_LENGTH - 1) // WORD_LENGTH
    components = [word() for _ in range(additional_words)]

    digit_word = syllable() + lower_consonants.random_element() + lower_vowels.random_element()

    # Position 0 (digit in front of the first word) is never drawn, so the
    # password cannot start with a digit
    position = secrets.randbelow(additional_words * 2 + 1) + 1
    if position % 2 == 0:
        digit_word = digits.random_element() + digit_word
    else:
        digit_word = digit_word + digits.random_element()
    components.insert(position // 2, digit_word)

    chars = list("".join(components))
    while True:
        index = secrets.randbelow(len(chars))
        char = chars[index]
        if char in lower_consonants:
            chars[index] = upper_consonants.random_element()
        elif char in lower_vowels:
            chars[index] = upper_vowels.random_element()
        else:
            continue
        return "".join(chars)
