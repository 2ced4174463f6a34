"""Helpers for trimming and splitting sequences of strings.

The element-wise helpers accept any iterable of strings and return a list,
or accept a `pandas.Series` and return a new Series with the same index.
"""

__docformat__ = 'google'

__all__ = [
    'trim_all',
    'trim_all_no_blanks',
    'all_uppercase',
    'to_list',
    'to_array',
    'to_series'
]

import pandas as pd
from typing import Iterable, List, Tuple, Union
from stringext.patterns import LIST_SEPARATOR

Strings = Union[Iterable[str], pd.Series]

def trim_all(items: Strings) -> Union[List[str], pd.Series]:
    """
    Strip leading and trailing whitespace from each item.

    Example:
        >>> trim_all([' a ', 'b\\t', ''])
        ['a', 'b', '']
    """
    if isinstance(items, pd.Series):
        return items.str.strip()
    return [item.strip() for item in items]

def trim_all_no_blanks(items: Strings) -> Union[List[str], pd.Series]:
    """
    Strip each item and drop items left empty.

    Args:
        items: Strings to clean

    Returns:
        Trimmed items with blanks removed. A Series keeps the index labels
        of the items that survive.

    Example:
        >>> trim_all_no_blanks([' a ', '   ', 'b'])
        ['a', 'b']
    """
    trimmed = trim_all(items)
    if isinstance(trimmed, pd.Series):
        return trimmed[trimmed.str.len() > 0]
    return [item for item in trimmed if len(item) > 0]

def all_uppercase(items: Strings) -> Union[List[str], pd.Series]:
    if isinstance(items, pd.Series):
        return items.str.upper()
    return list(map(str.upper, items))

def to_list(text: str, separator: str = LIST_SEPARATOR) -> List[str]:
    """
    Split a string into a list of trimmed, non-blank items.

    Args:
        text: String to split
        separator: Character marking each split point

    Returns:
        List of items with surrounding whitespace removed and blanks dropped

    Example:
        >>> to_list(' a \\n\\n b ')
        ['a', 'b']
        >>> to_list('ED, MD,,ND', ',')
        ['ED', 'MD', 'ND']
    """
    return trim_all_no_blanks(text.split(separator))

def to_array(text: str, separator: str = LIST_SEPARATOR) -> Tuple[str, ...]:
    """
    Split a string into an immutable tuple of trimmed, non-blank items.

    Example:
        >>> to_array('a\\nb')
        ('a', 'b')
    """
    return tuple(to_list(text, separator))

def to_series(text: str, separator: str = LIST_SEPARATOR) -> pd.Series:
    """
    Split a string into a Series of trimmed, non-blank items.

    Note:
        The result has a fresh RangeIndex, unlike `trim_all_no_blanks`
        on a Series.
    """
    return pd.Series(to_list(text, separator), dtype=object)
