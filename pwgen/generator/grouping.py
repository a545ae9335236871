"""
Split passwords into readable groups.
"""


def group_characters(password: str, separator: str, group_size: int) -> str:
    """
    Insert ``separator`` between consecutive chunks of ``group_size`` characters.

    The last chunk may be shorter than ``group_size``.
    """
    if group_size < 1:
        raise ValueError("Group size must be at least 1")

    chunks = [password[i:i + group_size] for i in range(0, len(password), group_size)]
    return separator.join(chunks)
