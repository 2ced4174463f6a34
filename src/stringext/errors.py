"""Exceptions raised by the string helpers.

Expected non-matches are reported through return values (-1, None or an
empty string). These exceptions are reserved for malformed calls and for
the one hard failure in `stringext.extraction.extract_text_between`.
"""

__docformat__ = 'google'

__all__ = [
    'StringExtError',
    'InvalidArgumentError',
    'MarkerNotFoundError'
]

class StringExtError(Exception):
    """Base class for all errors raised by this package."""

class InvalidArgumentError(StringExtError, ValueError):
    """
    A required argument is missing or malformed.

    Raised for a None input where text is required, a separator that is not
    a single character, or an unsupported coercion target.
    """

class MarkerNotFoundError(StringExtError, ValueError):
    """
    The end marker does not occur anywhere in the input text.

    Args:
        marker: The marker that could not be found
        text: The full input text that was searched
    """
    def __init__(self, marker: str, text: str):
        self.marker = marker
        self.text = text
        super().__init__(f'End marker {marker!r} not found in input: {text!r}')
