"""Regex patterns and lookup tables used to transform, clean and validate strings.
"""

__docformat__ = 'google'

import re
from typing import Dict

# Base character sets for patterns
ALNUM = "A-Za-z0-9"
"""@private"""

NOT_ALNUM = f"[^{ALNUM}]+"
"""@private"""

WORD = f"{ALNUM}_"
"""@private"""

## Case conversion
# Building blocks
UPPER: str = "([A-Z])"
"""Uncompiled regex building block capturing a single ASCII capital letter."""

BOUNDARY: str = f"{NOT_ALNUM}(.|$)"
"""Uncompiled regex building block matching a word boundary and the character after it.

A boundary is any run of characters that are not ASCII letters or digits.
The character following the run is captured so it can be upper-cased. A run
at the very end of the string captures an empty string."""

# Patterns
WORD_BOUNDARY_PATTERN: re.Pattern = re.compile(BOUNDARY)
"""Compiled regex matching a separator run and the first character of the next word.

Used in `stringkit.transform.camel` and `stringkit.transform.pascal`."""

LEADING_UPPER_PATTERN: re.Pattern = re.compile("^[A-Z]")
"""Compiled regex matching a capital letter at the start of a string.

Used in `stringkit.transform.camel`."""

LEADING_LOWER_PATTERN: re.Pattern = re.compile("^[a-z]")
"""Compiled regex matching a lower-case letter at the start of a string.

Used in `stringkit.transform.pascal`."""

CAPITAL_PATTERN: re.Pattern = re.compile(UPPER)
"""Compiled regex capturing every ASCII capital letter.

Used in `stringkit.transform.snake`, `stringkit.transform.snake_scream`
and `stringkit.transform.kebab` to insert a separator before each capital."""

NON_ALNUM_PATTERN: re.Pattern = re.compile(NOT_ALNUM)
"""Compiled regex matching any run of characters that are not ASCII letters or digits.

Used in `stringkit.transform.snake`, `stringkit.transform.snake_scream`
and `stringkit.transform.kebab`."""

LEADING_UNDERSCORE_PATTERN: re.Pattern = re.compile("^_")
LEADING_DASH_PATTERN: re.Pattern = re.compile("^-")

## Slugs
SLUG_DROP_PATTERN: re.Pattern = re.compile(f"[^{WORD}\\s-]")
"""Compiled regex matching characters that are not allowed in a slug.

Allowed characters are ASCII word characters, whitespace and hyphens.

Used in `stringkit.transform.slugify`."""

SLUG_SEPARATOR_PATTERN: re.Pattern = re.compile("[\\s_-]+")
"""Compiled regex matching runs of whitespace, underscores and hyphens.

Used in `stringkit.transform.slugify`."""

SLUG_TRIM_PATTERN: re.Pattern = re.compile("^-+|-+$")
"""Compiled regex matching hyphens at either end of a slug.

Used in `stringkit.transform.slugify`."""

## Initials
# Patterns
INITIAL_PATTERN: re.Pattern = re.compile("[A-Z]")
"""Compiled regex matching an ASCII capital letter anywhere in a string.

Used in `stringkit.formatting.initials` to discard initials that are digits,
symbols or non-ASCII letters."""

## Cleaning
# Patterns
WHITESPACE_PATTERN: re.Pattern = re.compile("\\s+")
"""Compiled regex matching any run of whitespace.

Used in `stringkit.clean.remove_whitespace`, `stringkit.clean.normalize_whitespace`
and `stringkit.formatting.initials`."""

HTML_TAG_PATTERN: re.Pattern = re.compile("<[^>]*>")
"""Compiled regex matching a single HTML tag.

Matches from `<` to the nearest `>`. Tags are not parsed, so a literal
`<` in plain text will swallow everything up to the next `>`.

Used in `stringkit.clean.strip_html`."""

## HTML escaping
# Constants
HTML_ESCAPES: Dict[str, str] = {
    '&': '&amp;',
    '<': '&lt;',
    '>': '&gt;',
    '"': '&quot;',
    "'": '&#39;',
}
"""Reserved HTML characters and the entities they are escaped to."""

HTML_UNESCAPES: Dict[str, str] = {entity: char for char, entity in HTML_ESCAPES.items()}
"""Entities recognized by `stringkit.clean.unescape_html` and the characters they stand for.

Only these five entities are recognized; numeric character references other
than `&#39;` are left alone."""

# Patterns
HTML_ESCAPE_PATTERN: re.Pattern = re.compile(
    f"[{''.join(map(re.escape, HTML_ESCAPES))}]"
    )
"""Compiled regex matching any reserved HTML character.

Used in `stringkit.clean.escape_html`."""

HTML_ENTITY_PATTERN: re.Pattern = re.compile(
    '|'.join(map(re.escape, HTML_UNESCAPES))
    )
"""Compiled regex matching any entity listed in `HTML_UNESCAPES`.

Used in `stringkit.clean.unescape_html`."""

## Validation
# Building blocks
SCHEME: str = "(https?://)?"
HOST: str = "([0-9a-z.-]+)"
TLD: str = "([a-z.]{2,6})"
PATH: str = f"[/{WORD} .-]*"

# Patterns
EMAIL_PATTERN: re.Pattern = re.compile("^[^\\s@]+@[^\\s@]+\\.[^\\s@]+\\Z")
"""Default pattern for `stringkit.validate.is_email`.

Accepts anything shaped like `local@domain.tld` without whitespace or extra
`@` characters. This is a heuristic, not an RFC 5322 validator.
"""

URL_PATTERN: re.Pattern = re.compile(f"^{SCHEME}{HOST}\\.{TLD}{PATH}/?\\Z")
"""Default pattern for `stringkit.validate.is_url`.

Accepts an optional `http://` or `https://` scheme, a lower-case host, a
two to six character top-level domain and a path made of slashes, word
characters, spaces, dots and hyphens. Query strings, fragments, ports and
upper-case hosts do not match.
"""

PHONE_PATTERN: re.Pattern = re.compile(
    "^\\+?\\(?[0-9]{1,4}\\)?[-\\s.]?\\(?[0-9]{1,4}\\)?[-\\s.]?[0-9]{1,9}\\Z"
    )
"""Default pattern for `stringkit.validate.is_phone`.

Accepts an optional `+`, then up to three digit groups separated by at most
one dash, space or dot, where the first two groups may sit in parentheses.
"""
