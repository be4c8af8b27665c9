"""Case and token transforms.

This module provides functions for converting arbitrary human text into
programmatic identifiers (camelCase, PascalCase, snake_case, SCREAMING_SNAKE_CASE,
kebab-case, URL slugs) and back into human-readable capitalized text.

Case conversion only recognizes ASCII letters and digits as word characters.
Everything else is treated as a separator.

All functions return an empty string when given None or an empty string.
"""

__docformat__ = 'google'

__all__ = [
    # Functions
    'capitalize',
    'title_case',
    'camel',
    'pascal',
    'snake',
    'snake_scream',
    'kebab',
    'convert_case',
    'slugify',
    'reverse'
]

from typing import Callable, Dict, Optional, Union
from stringkit.entities import CaseStyle
from stringkit.helpers import chain_operations, resolve_enum
from stringkit.patterns import (
    WORD_BOUNDARY_PATTERN,
    LEADING_UPPER_PATTERN,
    LEADING_LOWER_PATTERN,
    CAPITAL_PATTERN,
    NON_ALNUM_PATTERN,
    LEADING_UNDERSCORE_PATTERN,
    LEADING_DASH_PATTERN,
    SLUG_DROP_PATTERN,
    SLUG_SEPARATOR_PATTERN,
    SLUG_TRIM_PATTERN
)

def _upper_first(word: str) -> str:
    return word[:1].upper() + word[1:]

def capitalize(text: Optional[str], full_sentence: bool = True) -> str:
    """
    Capitalize every word of a sentence, or only its first character.

    Args:
        text: String to capitalize
        full_sentence: If True, lower-case the string and capitalize each
            space-delimited word. If False, upper-case the first character
            and leave the rest untouched.

    Returns:
        Capitalized string

    Example:
        >>> capitalize('hello world')
        'Hello World'
        >>> capitalize('hELLO wORLD')
        'Hello World'
        >>> capitalize('hello world', False)
        'Hello world'
    """
    if not text:
        return ''
    if full_sentence:
        words = text.lower().split(' ')
        return ' '.join(map(_upper_first, words)) or text
    else:
        return _upper_first(text)

def title_case(text: Optional[str]) -> str:
    """Shorthand for `capitalize(text, full_sentence=True)`."""
    return capitalize(text, full_sentence=True)

def _boundary_to_upper(match) -> str:
    return match.group(1).upper()

def camel(text: Optional[str]) -> str:
    """
    Convert a string to camelCase.

    Separator runs are removed and the character after each run is upper-cased.
    Existing capitals inside a word are kept.

    Example:
        >>> camel('hello world')
        'helloWorld'
        >>> camel('Hello-World')
        'helloWorld'
        >>> camel('user_id')
        'userId'
    """
    if not text:
        return ''
    converted = WORD_BOUNDARY_PATTERN.sub(_boundary_to_upper, text)
    return LEADING_UPPER_PATTERN.sub(lambda m: m.group(0).lower(), converted)

def pascal(text: Optional[str]) -> str:
    """
    Convert a string to PascalCase.

    Example:
        >>> pascal('hello world')
        'HelloWorld'
        >>> pascal('hello-world')
        'HelloWorld'
    """
    if not text:
        return ''
    converted = WORD_BOUNDARY_PATTERN.sub(_boundary_to_upper, text)
    return LEADING_LOWER_PATTERN.sub(lambda m: m.group(0).upper(), converted)

def _separate(text: str, separator: str) -> str:
    leading = LEADING_UNDERSCORE_PATTERN if separator == '_' else LEADING_DASH_PATTERN
    separating_functions = [
        lambda s: CAPITAL_PATTERN.sub(f'{separator}\\1', s)
        , lambda s: NON_ALNUM_PATTERN.sub(separator, s)
        , lambda s: leading.sub('', s)
    ]
    return chain_operations(text, separating_functions)

def snake(text: Optional[str]) -> str:
    """
    Convert a string to snake_case.

    Example:
        >>> snake('helloWorld')
        'hello_world'
        >>> snake('Hello World')
        'hello_world'
    """
    if not text:
        return ''
    return _separate(text, '_').lower()

def snake_scream(text: Optional[str]) -> str:
    """
    Convert a string to SCREAMING_SNAKE_CASE.

    Example:
        >>> snake_scream('helloWorld')
        'HELLO_WORLD'
        >>> snake_scream('Hello World')
        'HELLO_WORLD'
    """
    if not text:
        return ''
    return _separate(text, '_').upper()

def kebab(text: Optional[str]) -> str:
    """
    Convert a string to kebab-case.

    Example:
        >>> kebab('helloWorld')
        'hello-world'
        >>> kebab('Hello World')
        'hello-world'
    """
    if not text:
        return ''
    return _separate(text, '-').lower()

CASE_CONVERTERS: Dict[CaseStyle, Callable[[Optional[str]], str]] = {
    CaseStyle.CAMEL: camel,
    CaseStyle.PASCAL: pascal,
    CaseStyle.SNAKE: snake,
    CaseStyle.SCREAMING_SNAKE: snake_scream,
    CaseStyle.KEBAB: kebab
}
"""@private"""

def convert_case(text: Optional[str], style: Union[str, CaseStyle]) -> str:
    """
    Convert a string to the given case style.

    Args:
        text: String to convert
        style: A `stringkit.entities.CaseStyle` or its value
            ('camel', 'pascal', 'snake', 'screaming-snake', 'kebab')

    Raises:
        ValueError: If style is not a known case style.

    Example:
        >>> convert_case('hello world', 'screaming-snake')
        'HELLO_WORLD'
        >>> convert_case('hello world', CaseStyle.PASCAL)
        'HelloWorld'
    """
    converter = CASE_CONVERTERS[resolve_enum(style, CaseStyle)]
    return converter(text)

def slugify(text: Optional[str]) -> str:
    """
    Create a URL-friendly slug.

    Operations performed:
        1. Lower-case and strip outer whitespace
        2. Drop characters other than ASCII word characters, whitespace and hyphens
        3. Collapse runs of whitespace, underscores and hyphens to a single hyphen
        4. Strip hyphens from both ends

    Example:
        >>> slugify('Hello World!')
        'hello-world'
        >>> slugify('  Multiple   Spaces  ')
        'multiple-spaces'
    """
    if not text:
        return ''
    slug_functions = [
        str.lower
        , str.strip
        , lambda s: SLUG_DROP_PATTERN.sub('', s)
        , lambda s: SLUG_SEPARATOR_PATTERN.sub('-', s)
        , lambda s: SLUG_TRIM_PATTERN.sub('', s)
    ]
    return chain_operations(text, slug_functions)

def reverse(text: Optional[str]) -> str:
    """
    Reverse a string by code point.

    Note:
        Combining marks and other multi-code-point graphemes are not kept
        together, so accented text built from combining characters may
        come out with marks attached to the wrong letter.

    Example:
        >>> reverse('hello')
        'olleh'
    """
    if not text:
        return ''
    return text[::-1]
