"""Small helpers shared across stringkit modules.
"""

__docformat__ = 'google'

__all__ = [
    'chain_operations',
    'resolve_pattern',
    'resolve_enum'
]

import logging
import re
from enum import Enum
from functools import reduce
from typing import Callable, Iterable, Optional, Type, TypeVar, Union

logger = logging.getLogger(__name__)

E = TypeVar('E', bound=Enum)

def chain_operations(value: str, operations: Iterable[Callable[[str], str]]) -> str:
    """
    Apply a sequence of single-argument functions to a value, in order.

    Example:
        >>> chain_operations('  Hello  ', [str.strip, str.lower])
        'hello'
    """
    return reduce(lambda acc, operation: operation(acc), operations, value)

def resolve_pattern(custom: Optional[Union[str, re.Pattern]], default: re.Pattern) -> re.Pattern:
    """
    Pick a caller-supplied pattern over a default one.

    Args:
        custom: Compiled pattern, uncompiled pattern string, or None
        default: Pattern used when custom is None

    Returns:
        re.Pattern: Compiled pattern to test against

    Raises:
        re.error: If custom is a malformed pattern string.
    """
    if custom is None:
        return default
    elif isinstance(custom, re.Pattern):
        return custom
    else:
        logger.debug('Compiling custom pattern %r', custom)
        return re.compile(custom)

def resolve_enum(value: Union[str, E], enum: Type[E]) -> E:
    """
    Look up an enumeration member by member or by value.

    Raises:
        ValueError: If value is not a valid member of the enumeration.

    Example:
        >>> from stringkit.entities import PadPosition
        >>> resolve_enum('start', PadPosition)
        <PadPosition.START: 'start'>
    """
    if isinstance(value, enum):
        return value
    try:
        return enum(value)
    except ValueError:
        valid = ', '.join(repr(member.value) for member in enum)
        raise ValueError(f'Unknown {enum.__name__} {value!r}; expected one of {valid}') from None
