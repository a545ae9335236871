"""
Ordered, duplicate-free character sets and the named presets built from them.
"""

import secrets
from typing import FrozenSet, Iterable, Iterator, Tuple


class CharacterSet:
    """Immutable set of single characters that remembers insertion order."""

    __slots__ = ("_chars", "_members")

    def __init__(self, chars: Iterable[str] = ""):
        """
        Build a character set, collapsing duplicates.

        Args:
            chars: Any iterable of single characters (a plain string works)

        Raises:
            ValueError: If an element is not exactly one character
        """
        ordered = []
        seen = set()
        for char in chars:
            if not isinstance(char, str) or len(char) != 1:
                raise ValueError(f"Character set elements must be single characters, got {char!r}")
            if char not in seen:
                seen.add(char)
                ordered.append(char)

        self._chars: Tuple[str, ...] = tuple(ordered)
        self._members: FrozenSet[str] = frozenset(seen)

    @classmethod
    def union_of(cls, sets: Iterable["CharacterSet"]) -> "CharacterSet":
        """Union of many sets, keeping first-seen order."""
        return cls(char for charset in sets for char in charset)

    def union(self, other: Iterable[str]) -> "CharacterSet":
        return CharacterSet(self._chars + tuple(other))

    def intersection(self, other: Iterable[str]) -> "CharacterSet":
        other_members = _members_of(other)
        return CharacterSet(char for char in self._chars if char in other_members)

    def difference(self, other: Iterable[str]) -> "CharacterSet":
        other_members = _members_of(other)
        return CharacterSet(char for char in self._chars if char not in other_members)

    __or__ = union
    __and__ = intersection
    __sub__ = difference

    def is_empty(self) -> bool:
        return not self._chars

    def random_element(self) -> str:
        """
        Pick a member uniformly at random.

        Uses the OS random source; ``secrets`` rejects out-of-range draws
        instead of reducing them modulo the set size.

        Raises:
            IndexError: If the set is empty
        """
        if not self._chars:
            raise IndexError("Cannot choose from an empty character set")
        return secrets.choice(self._chars)

    def __contains__(self, char: object) -> bool:
        return char in self._members

    def __iter__(self) -> Iterator[str]:
        return iter(self._chars)

    def __len__(self) -> int:
        return len(self._chars)

    def __bool__(self) -> bool:
        return bool(self._chars)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CharacterSet):
            return NotImplemented
        return self._members == other._members

    def __hash__(self) -> int:
        return hash(self._members)

    def __str__(self) -> str:
        return "".join(self._chars)

    def __repr__(self) -> str:
        return f"CharacterSet({str(self)!r})"


def _members_of(chars: Iterable[str]) -> FrozenSet[str]:
    if isinstance(chars, CharacterSet):
        return chars._members
    return frozenset(chars)


# Character sets
LOWER = CharacterSet("abcdefghijklmnopqrstuvwxyz")
UPPER = CharacterSet("ABCDEFGHIJKLMNOPQRSTUVWXYZ")
DIGITS = CharacterSet("0123456789")
SPECIAL = CharacterSet(r"-~!@#$%^&*_+=`|(){}[:;\"'<>,.?/ ]")

ASCII = CharacterSet.union_of([LOWER, UPPER, DIGITS, SPECIAL])
ALPHANUMERIC = CharacterSet.union_of([LOWER, UPPER, DIGITS])

# Characters easily confused with others ("l" vs "1", "O" vs "0")
AMBIGUOUS = CharacterSet("lO")
UNAMBIGUOUS = ASCII - AMBIGUOUS

# Syllable roles for pronounceable passwords
LOWER_VOWELS = CharacterSet("aeiouy")
UPPER_VOWELS = CharacterSet("AEIOUY")
LOWER_CONSONANTS = LOWER - LOWER_VOWELS
UPPER_CONSONANTS = UPPER - UPPER_VOWELS


def limit_to_ascii(chars: Iterable[str]) -> CharacterSet:
    """Keep only the characters that are part of the ASCII preset."""
    return ASCII & chars
