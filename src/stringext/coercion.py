"""Lenient conversion of text to primitive types.

All conversions go through `try_parse`, which never raises for text it
cannot parse. It returns a caller-supplied default, or the target type's
zero value, instead.

Supported targets:
    * bool: 'true' or 'false' in any case
    * int: optionally signed decimal digits
    * float: anything accepted by `float` except underscore digit separators
    * str: any text
    * `enum.Enum` subclasses: a member name in any case, or a member's integer value
"""

__docformat__ = 'google'

__all__ = [
    'try_parse',
    'zero_value',
    'to_enum',
    'to_bool',
    'to_int',
    'to_float'
]

import logging
from enum import Enum
from typing import Any, Callable, Dict, Optional, Type, TypeVar
from stringext.errors import InvalidArgumentError
from stringext.patterns import BOOLEAN_LITERALS, DIGIT_SEPARATOR, INTEGER_PATTERN, SUPPORTED_TARGETS

logger = logging.getLogger(__name__)

T = TypeVar('T')
E = TypeVar('E', bound=Enum)

def _parse_bool(text: str) -> bool:
    try:
        return BOOLEAN_LITERALS[text.strip().lower()]
    except KeyError:
        raise ValueError(f'Not a boolean literal: {text!r}') from None

def _parse_int(text: str) -> int:
    if INTEGER_PATTERN.fullmatch(text) is None:
        raise ValueError(f'Not an integer: {text!r}')
    return int(text)

def _parse_float(text: str) -> float:
    if DIGIT_SEPARATOR in text:
        raise ValueError(f'Digit separators are not accepted: {text!r}')
    return float(text)

def _parse_str(text: str) -> str:
    if not isinstance(text, str):
        raise TypeError(f'Not a string: {text!r}')
    return text

PARSERS: Dict[type, Callable[[str], Any]] = {
    bool: _parse_bool,
    int: _parse_int,
    float: _parse_float,
    str: _parse_str
}
"""@private"""

def _enum_parser(enum_type: Type[E]) -> Callable[[str], E]:
    def parse(text: str) -> E:
        name = text.strip().upper()
        for member_name, member in enum_type.__members__.items():
            if member_name.upper() == name:
                return member
        return enum_type(_parse_int(text))
    return parse

def _is_enum(target: Any) -> bool:
    return isinstance(target, type) and issubclass(target, Enum)

def _parser_for(target: Type[T]) -> Callable[[str], T]:
    if _is_enum(target):
        return _enum_parser(target)
    if target not in SUPPORTED_TARGETS:
        raise InvalidArgumentError(f'Unsupported conversion target: {target!r}')
    return PARSERS[target]

def zero_value(target: Type[T]) -> Optional[T]:
    """
    Value returned by `try_parse` when parsing fails and no default is given.

    For builtins this is the result of calling the type with no arguments.
    For an Enum it is the member whose value is 0, or None if there is none.

    Example:
        >>> zero_value(int), zero_value(bool), zero_value(str)
        (0, False, '')
    """
    if _is_enum(target):
        return next((m for m in target if m.value == 0), None)
    _parser_for(target)
    return target()

def try_parse(text: Optional[str], target: Type[T], default: Optional[T] = None) -> Optional[T]:
    """
    Convert text to the target type, falling back to a default on failure.

    Args:
        text: Text to convert. None is treated as unparseable.
        target: bool, int, float, str, or an Enum subclass
        default: Value returned on failure. If None, the zero value of
            target is returned (see `zero_value`).

    Returns:
        Converted value, or the fallback

    Raises:
        InvalidArgumentError: If target is not a supported type

    Example:
        >>> try_parse(' 42 ', int)
        42
        >>> try_parse('abc', int)
        0
        >>> try_parse('abc', int, -1)
        -1
        >>> try_parse('TRUE', bool)
        True
    """
    parser = _parser_for(target)
    if text is not None:
        try:
            return parser(text)
        except (TypeError, ValueError) as e:
            logger.debug('Could not convert %r to %s: %s', text, target.__name__, e)

    return zero_value(target) if default is None else default

def to_enum(text: Optional[str], enum_type: Type[E]) -> Optional[E]:
    """
    Convert text to an Enum member by name, ignoring case.

    Args:
        text: Member name or integer value
        enum_type: Enum subclass to convert to

    Returns:
        Matching member, the member with value 0 if nothing matches, or None
        if the enum has no such member
    """
    if not _is_enum(enum_type):
        raise InvalidArgumentError(f'Not an Enum type: {enum_type!r}')
    return try_parse(text, enum_type)

def to_bool(text: Optional[str]) -> bool:
    return try_parse(text, bool)

def to_int(text: Optional[str]) -> int:
    return try_parse(text, int)

def to_float(text: Optional[str]) -> float:
    """
    Convert text to a float, or 0.0 if it cannot be parsed.

    Example:
        >>> to_float('1.5e3')
        1500.0
        >>> to_float('')
        0.0
    """
    return try_parse(text, float)
