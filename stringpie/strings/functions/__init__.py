"""
Free functions over sequences of strings.

Every function takes the sequence as its first argument, accepts ``None`` as
an absent sequence and never mutates its input. Functions that produce a
sequence always return a new list, which is empty rather than None when
nothing is left.

The ``Strings`` collection exposes the same operations as chainable methods.
"""

from .strings_contains import strings_contains
from .strings_first import strings_first
from .strings_first_or import strings_first_or
from .strings_last import strings_last
from .strings_last_or import strings_last_or
from .strings_len import strings_len
from .strings_max import strings_max
from .strings_min import strings_min
from .strings_only import strings_only
from .strings_transform import strings_transform
from .strings_without import strings_without

__all__: list[str] = [
    "strings_contains",
    "strings_first",
    "strings_first_or",
    "strings_last",
    "strings_last_or",
    "strings_len",
    "strings_max",
    "strings_min",
    "strings_only",
    "strings_transform",
    "strings_without",
]
