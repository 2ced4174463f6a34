__docformat__ = 'google'

__all__ = [
    'chain_operations',
    'require_text'
]

from functools import reduce
from typing import Any, Callable, Iterable
from stringext.errors import InvalidArgumentError

def chain_operations(value: Any, operations: Iterable[Callable]) -> Any:
    """
    Pass a value through each function in turn.

    Args:
        value: Initial value
        operations: Functions that each take and return a single value

    Returns:
        Result of the last operation

    Example:
        >>> chain_operations('  Abc ', [str.strip, str.lower])
        'abc'
    """
    return reduce(lambda result, operation: operation(result), operations, value)

def require_text(value: Any, name: str) -> str:
    """
    @private
    """
    if value is None:
        raise InvalidArgumentError(f'{name} must not be None')
    return value
