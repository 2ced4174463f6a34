"""Ordinal substring search and loose string comparison.

`position_of` compares code points exactly and is never locale-aware.
`matches` and `comprises` are deliberately loose: they ignore case and
surrounding whitespace.
"""

__docformat__ = 'google'

__all__ = [
    'position_of',
    'matches',
    'comprises'
]

from stringext.core import require_text

def position_of(text: str, find: str, start: int = 0) -> int:
    """
    Find the first occurrence of a substring or character at or after an offset.

    Args:
        text: String to search
        find: Substring or single character to search for
        start: Zero-based offset to begin searching from, between 0 and len(text)

    Returns:
        Zero-based index of the first occurrence, or -1 if not found

    Raises:
        InvalidArgumentError: If text or find is None
        IndexError: If start is negative or greater than len(text)

    Example:
        >>> position_of('a{{X}}b', '{{')
        1
        >>> position_of('a/b/c', '/', 2)
        3
        >>> position_of('Straße', 'SS')
        -1
    """
    require_text(text, 'text')
    require_text(find, 'find')

    if start < 0 or start > len(text):
        raise IndexError(f'start {start} is outside the range 0..{len(text)} of input: {text!r}')

    return text.find(find, start)

def matches(text: str, match: str) -> bool:
    """
    Check if two strings are equal, ignoring case and surrounding whitespace.

    Example:
        >>> matches(' Portland ', 'PORTLAND')
        True
    """
    require_text(text, 'text')
    require_text(match, 'match')
    return text.strip().lower() == match.strip().lower()

def comprises(text: str, match: str) -> bool:
    """
    Check if a string contains another, ignoring case and surrounding whitespace.

    Example:
        >>> comprises('Cross Lake Twp', ' LAKE ')
        True
    """
    return match.strip().lower() in text.strip().lower()
