"""
Unit tests for password generation functionality.
"""

import re
from unittest.mock import patch

import pytest

from pwgen.exceptions import GenerationExhaustedError, InvalidRequiredCharacterSet
from pwgen.generator import DEFAULT_CONFIG, Configuration, PasswordGenerator, Style, generate_password
from pwgen.generator.charset import (
    CharacterSet,
    ALPHANUMERIC,
    DIGITS,
    LOWER,
    LOWER_CONSONANTS,
    LOWER_VOWELS,
    UPPER,
    UPPER_CONSONANTS,
    UPPER_VOWELS,
)
from pwgen.generator.classic import classic_password
from pwgen.generator.grouping import group_characters
from pwgen.generator.nice import nice_password
from pwgen.generator.validators import longest_consecutive_run, longest_repeated_run


def make_nice_password(minimum_count):
    return nice_password(
        minimum_count,
        lower_consonants=LOWER_CONSONANTS,
        upper_consonants=UPPER_CONSONANTS,
        lower_vowels=LOWER_VOWELS,
        upper_vowels=UPPER_VOWELS,
        digits=DIGITS,
    )


class TestClassicPassword:
    """Test uniformly random passwords."""

    def test_length_and_pool(self):
        """Test that every character comes from the pool."""
        pool = CharacterSet("abc123")
        password = classic_password(40, pool)

        assert len(password) == 40
        assert all(c in pool for c in password)

    def test_zero_length(self):
        """Test that no draws give an empty password."""
        assert classic_password(0, LOWER) == ""


class TestNicePassword:
    """Test pronounceable passwords."""

    @pytest.mark.parametrize("minimum_count, length", [(1, 6), (6, 6), (7, 12), (12, 12), (18, 18)])
    def test_length(self, minimum_count, length):
        """Test word count for a minimum number of characters."""
        assert len(make_nice_password(minimum_count)) == length

    def test_composition(self):
        """Test one digit, one uppercase letter and no leading digit."""
        for _ in range(200):
            password = make_nice_password(18)

            assert sum(c.isdigit() for c in password) == 1
            assert sum(c.isupper() for c in password) == 1
            assert not password[0].isdigit()
            assert all(c.isalnum() for c in password)

    def test_syllable_structure(self):
        """Test that letters alternate consonant-vowel-consonant."""
        password = make_nice_password(1).lower()
        letters = re.sub(r"\d", "", password)

        assert letters[0] in LOWER_CONSONANTS
        assert letters[1] in LOWER_VOWELS
        assert letters[2] in LOWER_CONSONANTS
        assert letters[3] in LOWER_CONSONANTS
        assert letters[4] in LOWER_VOWELS

    @patch("pwgen.generator.nice.secrets.randbelow")
    def test_digit_appended_to_first_word(self, mock_randbelow):
        """Test the lowest digit position puts the digit word first, digit last."""
        mock_randbelow.side_effect = [0, 0]

        password = make_nice_password(18)

        assert password[5].isdigit()
        assert password[0] in UPPER_CONSONANTS

    @patch("pwgen.generator.nice.secrets.randbelow")
    def test_digit_prepended_to_later_word(self, mock_randbelow):
        """Test an even digit position prepends the digit to a later word."""
        mock_randbelow.side_effect = [3, 0]

        password = make_nice_password(18)

        assert password[12].isdigit()
        assert not password[0].isdigit()

    @patch("pwgen.generator.nice.secrets.randbelow")
    def test_digit_never_uppercased(self, mock_randbelow):
        """Test that landing on the digit picks another index."""
        mock_randbelow.side_effect = [0, 5, 1]

        password = make_nice_password(18)

        assert password[5].isdigit()
        assert password[1] in UPPER_VOWELS
        assert sum(c.isupper() for c in password) == 1


class TestGrouping:
    """Test separator insertion."""

    def test_group_characters(self):
        """Test chunks with a shorter last group."""
        assert group_characters("abcdefgh", "-", 3) == "abc-def-gh"
        assert group_characters("abcdef", "-", 3) == "abc-def"
        assert group_characters("abc", "_", 6) == "abc"
        assert group_characters("", "-", 3) == ""

    def test_invalid_group_size(self):
        """Test that groups need at least one character."""
        with pytest.raises(ValueError):
            group_characters("abc", "-", 0)


class TestPasswordGenerator:
    """Test the generate-and-validate loop."""

    def test_grouped_random_password(self):
        """Test the default classic format."""
        generator = PasswordGenerator(Configuration(
            style=Style.RANDOM,
            minimum_length=12,
            grouped=True,
            allowed_characters=ALPHANUMERIC,
            required_character_sets=[LOWER, UPPER, DIGITS],
        ))

        for _ in range(50):
            password = generator.generate()

            assert re.fullmatch(r"[A-Za-z0-9]{3}(-[A-Za-z0-9]{3}){3}", password)
            assert any(c.islower() for c in password)
            assert any(c.isupper() for c in password)
            assert any(c.isdigit() for c in password)

    def test_grouped_nice_password(self):
        """Test the default pronounceable format."""
        generator = PasswordGenerator(Configuration(style=Style.NICE, minimum_length=18))

        for _ in range(50):
            password = generator.generate()

            assert re.fullmatch(r"[A-Za-z0-9]{6}(-[A-Za-z0-9]{6}){2}", password)
            assert sum(c.isdigit() for c in password) == 1
            assert sum(c.isupper() for c in password) == 1
            assert not password[0].isdigit()

    def test_length_matches_plan(self):
        """Test generated lengths against the resolved plan."""
        for style in Style:
            for grouped in (True, False):
                generator = PasswordGenerator(Configuration(style=style, minimum_length=25, grouped=grouped))

                assert len(generator.generate()) == generator.plan.password_length
                assert generator.plan.password_length >= 25

    def test_custom_separator(self):
        """Test a custom separator."""
        password = generate_password(style=Style.RANDOM, minimum_length=7, separator="_")

        assert re.fullmatch(r"[^_]{3}_[^_]{3}", password)

    def test_required_sets_always_present(self):
        """Test that every required set is represented."""
        required = [CharacterSet("a"), CharacterSet("b"), CharacterSet("c"), CharacterSet("d")]
        generator = PasswordGenerator(Configuration(
            style=Style.RANDOM,
            minimum_length=4,
            grouped=False,
            allowed_characters=ALPHANUMERIC,
            required_character_sets=required,
        ))

        for _ in range(20):
            assert sorted(generator.generate()) == ["a", "b", "c", "d"]

    def test_separator_satisfies_required_set(self):
        """Test that a separator-only required set is dropped when grouping."""
        config = Configuration(
            style=Style.RANDOM,
            minimum_length=12,
            allowed_characters=ALPHANUMERIC,
            required_character_sets=[CharacterSet("-"), LOWER],
        )
        password = PasswordGenerator(config).generate()

        assert "-" in password

        with pytest.raises(InvalidRequiredCharacterSet):
            PasswordGenerator(Configuration(
                style=Style.RANDOM,
                minimum_length=12,
                grouped=False,
                allowed_characters=ALPHANUMERIC,
                required_character_sets=[CharacterSet("-"), LOWER],
            ))

    def test_repeated_character_limit(self):
        """Test that runs of one character are bounded."""
        generator = PasswordGenerator(Configuration(
            style=Style.RANDOM,
            minimum_length=12,
            grouped=False,
            allowed_characters=CharacterSet("ab"),
            required_character_sets=[CharacterSet("ab")],
            repeated_character_limit=2,
        ))

        for _ in range(20):
            assert longest_repeated_run(generator.generate()) <= 2

    def test_consecutive_character_limit(self):
        """Test that ascending and descending runs are bounded."""
        generator = PasswordGenerator(Configuration(
            style=Style.RANDOM,
            minimum_length=10,
            grouped=False,
            allowed_characters=DIGITS,
            required_character_sets=[DIGITS],
            consecutive_character_limit=2,
        ))

        for _ in range(20):
            assert longest_consecutive_run(generator.generate()) <= 2

    def test_nice_repeated_limit_of_one(self):
        """Test that nice passwords can exclude doubled characters."""
        generator = PasswordGenerator(Configuration(style=Style.NICE, repeated_character_limit=1))

        for _ in range(20):
            assert longest_repeated_run(generator.generate()) == 1

    def test_max_attempts(self):
        """Test the optional retry ceiling."""
        generator = PasswordGenerator(Configuration(
            style=Style.RANDOM,
            minimum_length=5,
            grouped=False,
            allowed_characters=CharacterSet("a"),
            required_character_sets=[CharacterSet("a")],
            repeated_character_limit=1,
        ), max_attempts=10)

        with pytest.raises(GenerationExhaustedError):
            generator.generate()

    def test_invalid_max_attempts(self):
        """Test that the ceiling must be positive."""
        with pytest.raises(ValueError):
            PasswordGenerator(Configuration(), max_attempts=0)

    def test_default_configuration(self):
        """Test that a generator without configuration uses the defaults."""
        generator = PasswordGenerator()

        assert generator.config is DEFAULT_CONFIG
        assert generator.plan.style is Style.NICE
        assert re.fullmatch(r"[A-Za-z0-9]{6}(-[A-Za-z0-9]{6}){2}", generator.generate())

    def test_generate_many(self):
        """Test generating several passwords."""
        generator = PasswordGenerator(Configuration(style=Style.RANDOM))
        passwords = list(generator.generate_many(5))

        assert len(passwords) == 5
        assert all(len(p) == generator.plan.password_length for p in passwords)

    def test_retries_until_valid(self):
        """Test that rejected candidates are regenerated."""
        generator = PasswordGenerator(Configuration(
            style=Style.RANDOM,
            minimum_length=3,
            grouped=False,
            allowed_characters=ALPHANUMERIC,
            required_character_sets=[LOWER, DIGITS],
        ))

        with patch.object(generator, "_candidate", side_effect=["abc", "123", "a1b"]) as mock_candidate:
            assert generator.generate() == "a1b"

        assert mock_candidate.call_count == 3

    def test_charset_info(self):
        """Test the plan description."""
        generator = PasswordGenerator(Configuration(
            style=Style.RANDOM,
            minimum_length=12,
            allowed_characters=ALPHANUMERIC,
        ))

        info = generator.get_charset_info()
        assert "random style" in info
        assert "15 characters" in info
        assert "groups of 3" in info
        assert "62 possible characters" in info

    def test_password_uniqueness(self):
        """Test that generated passwords are unique."""
        passwords = {generate_password() for _ in range(100)}

        assert len(passwords) == 100


class TestGeneratePassword:
    """Test the convenience function."""

    def test_default_password(self):
        """Test default password generation."""
        password = generate_password()

        assert len(password) == 20
        assert password.count("-") == 2

    def test_ungrouped_random(self):
        """Test exact length of ungrouped random passwords."""
        for length in [4, 8, 16, 32, 64, 128]:
            password = generate_password(style=Style.RANDOM, minimum_length=length, grouped=False)
            assert len(password) == length

    def test_lenient_policy(self):
        """Test that lenient resolution drops unusable required sets."""
        password = generate_password(
            style=Style.RANDOM,
            minimum_length=10,
            grouped=False,
            allowed_characters=LOWER,
            required_character_sets=[LOWER, UPPER],
            strict=False,
        )

        assert all(c.islower() for c in password)
