"""Quote and unquote strings for display or for embedding in other text.

A None value is rendered as '<null>' rather than raising, so these helpers
are safe to use in log and error messages.
"""

__docformat__ = 'google'

__all__ = [
    'double_quote',
    'single_quote',
    'unquote',
    'use_single_quotes'
]

from typing import Optional
from stringext.patterns import DOUBLE_QUOTE, SINGLE_QUOTE, NULL_PLACEHOLDER

def _or_placeholder(text: Optional[str]) -> str:
    return NULL_PLACEHOLDER if text is None else text

def double_quote(text: Optional[str]) -> str:
    """
    Trim a string and wrap it in double quotes.

    Example:
        >>> double_quote(' T4 R3 ')
        '"T4 R3"'
        >>> double_quote(None)
        '"<null>"'
    """
    return DOUBLE_QUOTE + _or_placeholder(text).strip() + DOUBLE_QUOTE

def single_quote(text: Optional[str]) -> str:
    """
    Trim a string, convert its double quotes to single quotes, and wrap it in single quotes.

    Example:
        >>> single_quote('say "hi"')
        "'say 'hi''"
    """
    return SINGLE_QUOTE + use_single_quotes(_or_placeholder(text).strip()) + SINGLE_QUOTE

def unquote(text: str) -> str:
    """
    Trim whitespace, then strip surrounding double quotes.

    Example:
        >>> unquote(' "Portland" ')
        'Portland'
    """
    return text.strip().strip(DOUBLE_QUOTE)

def use_single_quotes(text: Optional[str]) -> str:
    return _or_placeholder(text).replace(DOUBLE_QUOTE, SINGLE_QUOTE)
