"""Lightweight format validators for email addresses, URLs and phone numbers.

The default patterns in `stringkit.patterns` are deliberately permissive
heuristics, not RFC-complete grammars. Pass `custom_regex` when stricter
validation is needed. A custom pattern is searched rather than fully
matched, so anchor it with `^` and `\\Z` if the whole string must match.
"""

__docformat__ = 'google'

__all__ = [
    'is_email',
    'is_url',
    'is_phone',
    'email',
    'url',
    'phone'
]

import re
from typing import Optional, Union
from stringkit.helpers import resolve_pattern
from stringkit.patterns import EMAIL_PATTERN, URL_PATTERN, PHONE_PATTERN

PatternLike = Union[str, re.Pattern]

def _test(text: Optional[str], custom_regex: Optional[PatternLike], default: re.Pattern) -> bool:
    if not text:
        return False
    return resolve_pattern(custom_regex, default).search(text) is not None

def is_email(text: Optional[str], custom_regex: Optional[PatternLike] = None) -> bool:
    """
    Check if a string looks like an email address.

    Args:
        text: String to validate
        custom_regex: Pattern (compiled or string) used instead of
            `stringkit.patterns.EMAIL_PATTERN`

    Raises:
        re.error: If custom_regex is a malformed pattern string.

    Example:
        >>> is_email('test@example.com')
        True
        >>> is_email('invalid-email')
        False
        >>> is_email('admin@localhost', r'^\\w+@localhost$')
        True
    """
    return _test(text, custom_regex, EMAIL_PATTERN)

def is_url(text: Optional[str], custom_regex: Optional[PatternLike] = None) -> bool:
    """
    Check if a string looks like a URL.

    A scheme is optional, so bare host and path shapes are accepted.

    Example:
        >>> is_url('https://example.com')
        True
        >>> is_url('example.com/path/to')
        True
        >>> is_url('not-a-url')
        False
    """
    return _test(text, custom_regex, URL_PATTERN)

def is_phone(text: Optional[str], custom_regex: Optional[PatternLike] = None) -> bool:
    """
    Check if a string looks like a phone number.

    Example:
        >>> is_phone('(123) 456-7890')
        True
        >>> is_phone('123.456.7890')
        True
        >>> is_phone('call me')
        False
    """
    return _test(text, custom_regex, PHONE_PATTERN)

email = is_email
"""Alias of `is_email`."""

url = is_url
"""Alias of `is_url`."""

phone = is_phone
"""Alias of `is_phone`."""
