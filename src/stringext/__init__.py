"""
.. include:: ../../README.md

See individual module documentation for detailed information.
"""
from . import search
from . import extraction
from . import lists
from . import cleaning
from . import quoting
from . import coercion
from . import errors

from .search import *
from .extraction import *
from .lists import *
from .cleaning import *
from .quoting import *
from .coercion import *
from .errors import *

__all__ = [
    'search',
    'extraction',
    'lists',
    'cleaning',
    'quoting',
    'coercion',
    'errors',
    *search.__all__,
    *extraction.__all__,
    *lists.__all__,
    *cleaning.__all__,
    *quoting.__all__,
    *coercion.__all__,
    *errors.__all__
]
