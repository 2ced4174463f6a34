"""Whitespace and case normalization."""

__docformat__ = 'google'

__all__ = [
    'clean_whitespace',
    'clean'
]

from stringext.core import chain_operations
from stringext.patterns import REPEATED_SPACES_PATTERN, TAB, WHITESPACE_SEPARATOR

def replace_tabs(text: str) -> str:
    """
    @private
    """
    return text.replace(TAB, WHITESPACE_SEPARATOR)

def squish_spaces(text: str) -> str:
    """
    @private
    """
    return REPEATED_SPACES_PATTERN.sub(WHITESPACE_SEPARATOR, text)

def clean_whitespace(text: str) -> str:
    """
    Replace tabs with spaces, reduce repeated spaces to one, and trim.

    Newlines inside the string are preserved.

    Example:
        >>> clean_whitespace('a\\t\\tb   c ')
        'a b c'
    """
    cleaning_functions = [
        replace_tabs
        , squish_spaces
        , str.strip
    ]
    return chain_operations(text, cleaning_functions)

def clean(text: str) -> str:
    """
    Trim and lowercase a string.

    Example:
        >>> clean('  Dover-Foxcroft ')
        'dover-foxcroft'
    """
    return chain_operations(text, [str.strip, str.lower])
