"""Constants and regex patterns shared by the string helpers.
"""

__docformat__ = 'google'

import re
from typing import Dict, List

## Defaults
DEFAULT_SEPARATOR: str = '/'
"""Separator used by `stringext.extraction.segment` when none is given.

Suits path-like strings such as 'users/42/profile'."""

LIST_SEPARATOR: str = '\n'
"""Separator used by `stringext.lists.to_list` and friends when none is given."""

WHITESPACE_SEPARATOR: str = ' '
"""Separator value that switches `stringext.extraction.segment` into
whitespace mode, where tabs are treated as spaces."""

TAB: str = '\t'

NULL_PLACEHOLDER: str = '<null>'
"""Rendered in place of a missing value by the quoting helpers.

Used in `stringext.quoting`."""

## Quoting
DOUBLE_QUOTE: str = '"'
SINGLE_QUOTE: str = "'"

## Coercion
BOOLEAN_LITERALS: Dict[str, bool] = {
    'true': True,
    'false': False
}
"""Lowercase text values accepted as booleans.

Used in `stringext.coercion.try_parse`."""

SUPPORTED_TARGETS: List[type] = [bool, int, float, str]
"""Builtin types accepted by `stringext.coercion.try_parse`, in addition to
`enum.Enum` subclasses."""

# Patterns
REPEATED_SPACES_PATTERN: re.Pattern = re.compile(' {2,}')
"""Matches runs of two or more space characters.

Only the space character is matched; tabs are replaced beforehand and
newlines are left alone.

Used in `stringext.cleaning.clean_whitespace`."""

INTEGER_PATTERN: re.Pattern = re.compile(r'\s*[+-]?[0-9]+\s*')
"""Matches an optionally signed decimal integer with surrounding whitespace.

Digit separators such as '1_000' or '1,000' are rejected.

Used in `stringext.coercion.try_parse` with `re.Pattern.fullmatch`."""

DIGIT_SEPARATOR: str = '_'
"""Underscore digit grouping that Python's numeric literals allow but text
conversion rejects.

Used in `stringext.coercion.try_parse` for floats."""
