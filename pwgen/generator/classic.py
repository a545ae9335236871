"""
Classic passwords: independent uniform draws from a character pool.
"""

from .charset import CharacterSet


def classic_password(count: int, pool: CharacterSet) -> str:
    """Draw ``count`` characters from ``pool`` with replacement."""
    return "".join(pool.random_element() for _ in range(count))
