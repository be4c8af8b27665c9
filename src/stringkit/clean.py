"""Whitespace cleanup, HTML tag stripping and HTML escaping.

`strip_html` is a regex, not an HTML parser: it removes anything between
`<` and the next `>`, so use it on markup you trust and never as a
sanitizer.
"""

__docformat__ = 'google'

__all__ = [
    'remove_whitespace',
    'normalize_whitespace',
    'normal_whitespace',
    'strip_html',
    'escape_html',
    'unescape_html'
]

from typing import Optional
from stringkit.patterns import (
    WHITESPACE_PATTERN,
    HTML_TAG_PATTERN,
    HTML_ESCAPES,
    HTML_UNESCAPES,
    HTML_ESCAPE_PATTERN,
    HTML_ENTITY_PATTERN
)

def remove_whitespace(text: Optional[str]) -> str:
    """
    Remove all whitespace.

    Example:
        >>> remove_whitespace('  a  b  c  ')
        'abc'
    """
    if not text:
        return ''
    return WHITESPACE_PATTERN.sub('', text)

def normalize_whitespace(text: Optional[str]) -> str:
    """
    Collapse whitespace runs to a single space and strip both ends.

    Example:
        >>> normalize_whitespace('  multiple   spaces  ')
        'multiple spaces'
        >>> normalize_whitespace('tab\\tand\\nnewline')
        'tab and newline'
    """
    if not text:
        return ''
    return WHITESPACE_PATTERN.sub(' ', text).strip()

normal_whitespace = normalize_whitespace
"""Alias of `normalize_whitespace`."""

def strip_html(text: Optional[str]) -> str:
    """
    Remove HTML tags, keeping the text between them.

    Example:
        >>> strip_html('<p>Hello <strong>World</strong></p>')
        'Hello World'
    """
    if not text:
        return ''
    return HTML_TAG_PATTERN.sub('', text)

def escape_html(text: Optional[str]) -> str:
    """
    Escape the five reserved HTML characters.

    Example:
        >>> escape_html('<div>Hello & goodbye</div>')
        '&lt;div&gt;Hello &amp; goodbye&lt;/div&gt;'
    """
    if not text:
        return ''
    return HTML_ESCAPE_PATTERN.sub(lambda m: HTML_ESCAPES[m.group(0)], text)

def unescape_html(text: Optional[str]) -> str:
    """
    Reverse `escape_html`.

    Only `&amp;`, `&lt;`, `&gt;`, `&quot;` and `&#39;` are recognized.

    Example:
        >>> unescape_html('&lt;div&gt;Hello &amp; goodbye&lt;/div&gt;')
        '<div>Hello & goodbye</div>'
        >>> unescape_html('&copy; &#39;quoted&#39;')
        "&copy; 'quoted'"
    """
    if not text:
        return ''
    return HTML_ENTITY_PATTERN.sub(lambda m: HTML_UNESCAPES[m.group(0)], text)
