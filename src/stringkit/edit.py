"""Length and content edits, plus builders for reusable add/remove pairs.

The builders (`prefix`, `suffix`, `quote`, `bracket`) return small frozen
objects from `stringkit.entities` bound to a single delimiter, so they can be
created once and shared:

    >>> slash = prefix('/')
    >>> slash.add('path')
    '/path'
    >>> slash.remove('/path')
    'path'
"""

__docformat__ = 'google'

__all__ = [
    # Builders
    'prefix',
    'suffix',
    'quote',
    'bracket',
    # Functions
    'wrap',
    'unwrap',
    'trim',
    'truncate',
    'pad',
    'repeat'
]

from typing import Optional, Union
from stringkit.entities import (
    Affix,
    BracketStyle,
    Delimiter,
    DelimiterLike,
    PadPosition,
    QuoteStyle,
    Wrapper
)
from stringkit.helpers import resolve_enum
from stringkit.lookups import delimiter_data

def prefix(value: str) -> Affix:
    """
    Build an add/remove pair for a prefix.

    Example:
        >>> slash = prefix('/')
        >>> slash.add('/path')
        '/path'
    """
    return Affix(value, at_start=True)

def suffix(value: str) -> Affix:
    """
    Build an add/remove pair for a suffix.

    Example:
        >>> slash = suffix('/')
        >>> slash.add('path')
        'path/'
        >>> slash.remove('path/')
        'path'
    """
    return Affix(value, at_start=False)

def wrap(text: Optional[str], delimiter: DelimiterLike) -> str:
    """
    Surround a string with a delimiter.

    Wrapping is unconditional, so wrapping twice nests the delimiters.

    Args:
        text: String to wrap
        delimiter: A single literal used on both sides, or a start/end pair
            (see `stringkit.entities.Delimiter.resolve`)

    Example:
        >>> wrap('hello', '"')
        '"hello"'
        >>> wrap('hello', {'start': '[', 'end': ']'})
        '[hello]'
    """
    return Delimiter.resolve(delimiter).wrap(text)

def unwrap(text: Optional[str], delimiter: DelimiterLike) -> str:
    """
    Remove a delimiter from both ends of a string.

    The text is only changed when it starts with the start literal and
    ends with the end literal.

    Example:
        >>> unwrap('"hello"', '"')
        'hello'
        >>> unwrap('[hello]', ('[', ']'))
        'hello'
        >>> unwrap('[hello', ('[', ']'))
        '[hello'
    """
    return Delimiter.resolve(delimiter).unwrap(text)

def quote(style: Union[str, QuoteStyle] = QuoteStyle.DOUBLE) -> Wrapper:
    """
    Build an add/remove pair for a quote style.

    Args:
        style: 'single', 'double' or 'backtick'

    Raises:
        ValueError: If style is not a known quote style.

    Example:
        >>> dq = quote('double')
        >>> dq.add('hello')
        '"hello"'
        >>> dq.remove('"hello"')
        'hello'
    """
    style = resolve_enum(style, QuoteStyle)
    return Wrapper(delimiter_data().quote_delimiters[style.value])

def bracket(style: Union[str, BracketStyle] = BracketStyle.ROUND) -> Wrapper:
    """
    Build an add/remove pair for a bracket style.

    Args:
        style: 'round', 'square', 'curly' or 'angle'

    Raises:
        ValueError: If style is not a known bracket style.

    Example:
        >>> rb = bracket('round')
        >>> rb.add('hello')
        '(hello)'
        >>> rb.remove('(hello)')
        'hello'
    """
    style = resolve_enum(style, BracketStyle)
    return Wrapper(delimiter_data().bracket_delimiters[style.value])

def trim(text: Optional[str], max_length: Optional[int] = None, trim_char: str = '...') -> str:
    """
    Cut a string to a maximum length and mark the cut.

    The marker is appended after the kept characters, so a trimmed result
    is `max_length + len(trim_char)` characters long.

    Args:
        text: String to trim
        max_length: Number of characters to keep. None or 0 disables trimming.
        trim_char: Marker appended when the string is cut

    Example:
        >>> trim('Hello World', 5)
        'Hello...'
        >>> trim('Hello World', 5, '~')
        'Hello~'
        >>> trim('Hello', 10)
        'Hello'
    """
    if not text:
        return ''
    if not max_length:
        return text
    if len(text) > max_length:
        return f'{text[:max_length]}{trim_char}'
    return text

truncate = trim
"""Alias of `trim`."""

def pad(
        text: Optional[str],
        length: int,
        char: str = ' ',
        position: Union[str, PadPosition] = PadPosition.BOTH
        ) -> str:
    """
    Pad a string to a target length.

    When padding both sides, an odd extra character goes on the right.

    Args:
        text: String to pad
        length: Target length
        char: Padding character
        position: 'start', 'end' or 'both'

    Raises:
        ValueError: If padding is needed and position is not a known pad position.

    Example:
        >>> pad('hello', 10)
        '  hello   '
        >>> pad('hello', 10, '*', 'start')
        '*****hello'
        >>> pad('hello', 10, '-', 'end')
        'hello-----'
    """
    if not text:
        return ''
    if len(text) >= length:
        return text

    position = resolve_enum(position, PadPosition)
    deficit = length - len(text)
    if position is PadPosition.START:
        return char * deficit + text
    elif position is PadPosition.END:
        return text + char * deficit
    else:
        left = deficit // 2
        return char * left + text + char * (deficit - left)

def repeat(text: Optional[str], count: int) -> str:
    """
    Repeat a string.

    Example:
        >>> repeat('ha', 3)
        'hahaha'
        >>> repeat('ha', 0)
        ''
    """
    if not text or count < 1:
        return ''
    return text * count
