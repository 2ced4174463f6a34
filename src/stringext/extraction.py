"""Marker-delimited extraction and delimiter-based segmentation.

Failure policy differs between the two ends of an extraction window:
a missing start marker is an ordinary non-match and returns None, while a
missing end marker means the input is malformed and raises
`stringext.errors.MarkerNotFoundError`.
"""

__docformat__ = 'google'

__all__ = [
    'extract_text_between',
    'segment'
]

import logging
from typing import Optional
from stringext.core import require_text
from stringext.errors import InvalidArgumentError, MarkerNotFoundError
from stringext.patterns import DEFAULT_SEPARATOR, WHITESPACE_SEPARATOR, TAB
from stringext.search import position_of

logger = logging.getLogger(__name__)

def extract_text_between(text: str, start_marker: str, end_marker: str) -> Optional[str]:
    """
    Extract the text between a start marker and the first end marker after it.

    Neither marker is included in the result. The search for the end marker
    begins one character after the start of the start marker, so an end
    marker overlapping the start marker ends the window and yields an empty
    string.

    Args:
        text: Input string
        start_marker: Token marking the start of the text to extract
        end_marker: Token marking the end of the text to extract

    Returns:
        Text between the markers, an empty string if the markers are adjacent
        or no end marker follows the start marker, or None if the start marker
        is absent

    Raises:
        MarkerNotFoundError: If the start marker is present but the end marker
            does not occur anywhere in the input
        InvalidArgumentError: If text is None

    Example:
        >>> extract_text_between('Hello {{name}}!', '{{', '}}')
        'name'
        >>> extract_text_between('a{{}}b', '{{', '}}')
        ''
        >>> extract_text_between('no-markers-here', '{{', '}}') is None
        True
        >>> extract_text_between('}}a{{b', '{{', '}}')
        ''
        >>> extract_text_between('|||X||', '||', '||')
        ''
    """
    start = position_of(text, start_marker)

    if start == -1:
        logger.debug('Start marker %r not found in input: %r', start_marker, text)
        return None

    if position_of(text, end_marker) == -1:
        raise MarkerNotFoundError(end_marker, text)

    content_start = start + len(start_marker)
    end = position_of(text, end_marker, min(start + 1, len(text)))

    if end == -1:
        logger.debug('End marker %r only occurs before start marker %r', end_marker, start_marker)
        return ''

    if end - content_start > 0:
        return text[content_start:end]
    else:
        return ''

def segment(text: str, index: int, separator: str = DEFAULT_SEPARATOR) -> str:
    """
    Split a string on a separator character and take one segment.

    When the separator is a space, tabs are treated as spaces.

    Args:
        text: Input string
        index: Zero-based position of the segment to return
        separator: Single character marking each split point

    Returns:
        The requested segment, or an empty string if index is out of range

    Raises:
        InvalidArgumentError: If text is None or separator is not a single character

    Example:
        >>> segment('users/42/profile', 1)
        '42'
        >>> segment('a/b/c', 9)
        ''
        >>> segment('a\\tb c', 1, ' ')
        'b'
        >>> segment('/a', 0)
        ''
    """
    require_text(text, 'text')

    if separator is None or len(separator) != 1:
        raise InvalidArgumentError(f'separator must be a single character, got: {separator!r}')

    if separator == WHITESPACE_SEPARATOR:
        text = text.replace(TAB, WHITESPACE_SEPARATOR)

    segments = text.split(separator)

    if 0 <= index < len(segments):
        return segments[index]
    else:
        return ''
