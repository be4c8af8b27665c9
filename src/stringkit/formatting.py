"""Display formatting: masking, search-term highlighting, initials and class-name joining.
"""

__docformat__ = 'google'

__all__ = [
    'mask',
    'highlight',
    'initials',
    'cn'
]

import re
from typing import Optional, Union
from stringkit.entities import Delimiter, DelimiterLike
from stringkit.patterns import INITIAL_PATTERN, WHITESPACE_PATTERN

DEFAULT_HIGHLIGHT: Delimiter = Delimiter('<mark>', '</mark>')
"""Delimiter used by `highlight` when no wrapper is given."""

def mask(text: Optional[str], visible_chars: int = 4, mask_char: str = '*') -> str:
    """
    Hide all but the last few characters of a string.

    Args:
        text: String to mask
        visible_chars: Number of trailing characters left readable.
            Negative values are treated as 0.
        mask_char: Character that replaces each hidden character

    Example:
        >>> mask('1234567890')
        '******7890'
        >>> mask('1234567890', 2, '#')
        '########90'
        >>> mask('123', 4)
        '123'
    """
    if not text:
        return ''
    visible_chars = max(visible_chars, 0)
    if len(text) <= visible_chars:
        return text
    hidden = len(text) - visible_chars
    return mask_char * hidden + text[hidden:]

def highlight(
        text: Optional[str],
        search: Optional[str],
        wrapper: DelimiterLike = DEFAULT_HIGHLIGHT,
        case_sensitive: bool = False
        ) -> str:
    """
    Wrap every occurrence of a search term.

    The search term is matched literally; regex metacharacters in it have
    no special meaning.

    Args:
        text: String to search in
        search: Literal term to highlight
        wrapper: Delimiter placed around each match (single literal or start/end pair)
        case_sensitive: Match case exactly if True

    Returns:
        Text with each non-overlapping match wrapped, or the text unchanged
        if search is empty

    Example:
        >>> highlight('Hello world', 'world')
        'Hello <mark>world</mark>'
        >>> highlight('Hello World', 'o', {'start': '[', 'end': ']'})
        'Hell[o] W[o]rld'
        >>> highlight('1+1=2', '1+1', '**')
        '**1+1**=2'
    """
    if not text:
        return ''
    if not search:
        return text
    delimiter = Delimiter.resolve(wrapper)
    flags = 0 if case_sensitive else re.IGNORECASE
    pattern = re.compile(re.escape(search), flags)
    return pattern.sub(lambda m: f'{delimiter.start}{m.group(0)}{delimiter.end}', text)

def initials(text: Optional[str], max_initials: Optional[int] = None) -> str:
    """
    Extract upper-case initials from a name.

    Words whose first character does not upper-case to an ASCII letter
    (digits, symbols, accented letters) are skipped.

    Args:
        text: Name or phrase
        max_initials: Keep at most this many initials. None or 0 keeps all.

    Example:
        >>> initials('John Doe')
        'JD'
        >>> initials('John Michael Doe', 2)
        'JM'
        >>> initials('ada @lovelace 3rd')
        'A'
        >>> initials('émile zola')
        'Z'
    """
    if not text:
        return ''
    words = WHITESPACE_PATTERN.split(text.strip())
    letters = [word[:1].upper() for word in words]
    letters = [letter for letter in letters if INITIAL_PATTERN.search(letter)]
    if max_initials:
        letters = letters[:max_initials]
    return ''.join(letters)

def _class_name(value: Union[str, int, float, bool]) -> str:
    if isinstance(value, bool):
        return str(value).lower()
    return str(value)

def cn(*values: Union[str, int, float, bool, None]) -> str:
    """
    Join class names, dropping falsy values.

    Note:
        `0`, `False`, `None` and `''` are all dropped, so a class literally
        named `0` cannot be passed as the integer 0.

    Example:
        >>> is_active = True
        >>> cn('btn', is_active and 'active', None, 'primary')
        'btn active primary'
        >>> cn('col-12', 0, 'visible')
        'col-12 visible'
    """
    return ' '.join(_class_name(value) for value in values if value)
