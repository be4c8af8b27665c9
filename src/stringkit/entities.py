"""Value objects and enumerations shared by the transform, edit and formatting modules.
"""

__docformat__ = 'google'

__all__ = [
    # Enumerations
    'CaseStyle',
    'PadPosition',
    'QuoteStyle',
    'BracketStyle',
    # Classes
    'Delimiter',
    'Affix',
    'Wrapper'
]

from dataclasses import dataclass
from enum import Enum
from collections.abc import Mapping
from typing import Optional, Tuple, Union

class CaseStyle(Enum):
    """
    Enumeration of case styles accepted by `stringkit.transform.convert_case`.
    """
    CAMEL = "camel"
    PASCAL = "pascal"
    SNAKE = "snake"
    SCREAMING_SNAKE = "screaming-snake"
    KEBAB = "kebab"

class PadPosition(Enum):
    """
    Enumeration of sides that `stringkit.edit.pad` can pad.
    """
    START = "start"
    END = "end"
    BOTH = "both"

class QuoteStyle(Enum):
    """
    Enumeration of quote styles accepted by `stringkit.edit.quote`.

    Quote characters are defined in `stringkit/data/delimiters.yaml`.
    """
    SINGLE = "single"
    DOUBLE = "double"
    BACKTICK = "backtick"

class BracketStyle(Enum):
    """
    Enumeration of bracket styles accepted by `stringkit.edit.bracket`.

    Bracket pairs are defined in `stringkit/data/delimiters.yaml`.
    """
    ROUND = "round"
    SQUARE = "square"
    CURLY = "curly"
    ANGLE = "angle"

DelimiterLike = Union['Delimiter', str, Mapping[str, str], Tuple[str, str]]

@dataclass(frozen=True)
class Delimiter:
    """
    A pair of literal strings placed around a piece of text.

    Args:
        start: Literal placed before the text
        end: Literal placed after the text

    Example:
        >>> Delimiter.symmetric('"')
        Delimiter(start='"', end='"')
        >>> Delimiter.pair('<mark>', '</mark>')
        Delimiter(start='<mark>', end='</mark>')
    """
    start: str
    end: str

    @classmethod
    def symmetric(cls, literal: str) -> 'Delimiter':
        """Delimiter that uses the same literal on both sides."""
        return cls(literal, literal)

    @classmethod
    def pair(cls, start: str, end: str) -> 'Delimiter':
        """Delimiter with distinct start and end literals."""
        return cls(start, end)

    @classmethod
    def resolve(cls, value: DelimiterLike) -> 'Delimiter':
        """
        Normalize any supported delimiter value to a `Delimiter`.

        Args:
            value: A `Delimiter`, a single literal used on both sides, a mapping
                with `start` and `end` keys, or a `(start, end)` tuple

        Returns:
            Delimiter: The resolved start and end literals

        Raises:
            TypeError: If value is not one of the supported shapes.

        Example:
            >>> Delimiter.resolve('*')
            Delimiter(start='*', end='*')
            >>> Delimiter.resolve({'start': '[', 'end': ']'})
            Delimiter(start='[', end=']')
            >>> Delimiter.resolve(('{{', '}}'))
            Delimiter(start='{{', end='}}')
        """
        if isinstance(value, cls):
            return value
        elif isinstance(value, str):
            return cls.symmetric(value)
        elif isinstance(value, Mapping):
            return cls.pair(value['start'], value['end'])
        elif isinstance(value, tuple) and len(value) == 2:
            return cls.pair(*value)
        else:
            raise TypeError(f'Cannot build a delimiter from {value!r}')

    def wrap(self, text: Optional[str]) -> str:
        if not text:
            return ''
        return f'{self.start}{text}{self.end}'

    def unwrap(self, text: Optional[str]) -> str:
        if not text:
            return ''
        if text.startswith(self.start) and text.endswith(self.end):
            return text[len(self.start):len(text) - len(self.end)]
        return text

@dataclass(frozen=True)
class Affix:
    """
    A literal bound to one end of a string, with `add` and `remove` operations.

    Built by `stringkit.edit.prefix` and `stringkit.edit.suffix`.

    Args:
        value: The literal to add or remove
        at_start: True for a prefix, False for a suffix
    """
    value: str
    at_start: bool = True

    def _present(self, text: str) -> bool:
        if self.at_start:
            return text.startswith(self.value)
        return text.endswith(self.value)

    def add(self, text: Optional[str]) -> str:
        """
        Attach the affix unless the text already carries it.

        Example:
            >>> slash = Affix('/')
            >>> slash.add('path')
            '/path'
            >>> slash.add('/path')
            '/path'
        """
        if not text:
            return ''
        if self._present(text):
            return text
        return self.value + text if self.at_start else text + self.value

    def remove(self, text: Optional[str]) -> str:
        """
        Strip one occurrence of the affix if the text carries it.

        Example:
            >>> Affix('.txt', at_start=False).remove('notes.txt')
            'notes'
        """
        if not text:
            return ''
        if not self.value or not self._present(text):
            return text
        if self.at_start:
            return text[len(self.value):]
        return text[:len(text) - len(self.value)]

@dataclass(frozen=True)
class Wrapper:
    """
    A delimiter bound to `add` (wrap) and `remove` (unwrap) operations.

    Built by `stringkit.edit.quote` and `stringkit.edit.bracket`.

    Example:
        >>> square = Wrapper(Delimiter('[', ']'))
        >>> square.add('hello')
        '[hello]'
        >>> square.remove('[hello]')
        'hello'
    """
    delimiter: Delimiter

    def add(self, text: Optional[str]) -> str:
        return self.delimiter.wrap(text)

    def remove(self, text: Optional[str]) -> str:
        return self.delimiter.unwrap(text)
