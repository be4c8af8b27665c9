"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
import logging

from . import transform
from . import edit
from . import clean
from . import formatting
from . import validate
from . import patterns
from . import entities

from .transform import *
from .edit import *
from .clean import *
from .formatting import *
from .validate import is_email, is_url, is_phone
from .entities import Delimiter

valid = validate
"""Alias of `stringkit.validate` (`valid.email`, `valid.url`, `valid.phone`)."""

format = formatting
"""Alias of `stringkit.formatting`. Left out of `__all__` so star imports keep the builtin `format`."""

logging.getLogger(__name__).addHandler(logging.NullHandler())

__all__ = [
    # Modules
    'transform',
    'edit',
    'clean',
    'formatting',
    'validate',
    'valid',
    'patterns',
    'entities',
    # Classes
    'Delimiter',
    # Functions
    *transform.__all__,
    *edit.__all__,
    *clean.__all__,
    *formatting.__all__,
    'is_email',
    'is_url',
    'is_phone'
]
