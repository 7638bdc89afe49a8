"""
Chainable operations over sequences of strings.

The operations come in two equivalent styles. Free functions take the
sequence as their first argument:

    >>> strings_only(["Bob", "Sally", "John", "Jane"], lambda s: len(s) <= 3)
    ['Bob']

The ``Strings`` collection exposes the same operations as methods that
return new collections, so they can be chained:

    >>> Strings(["Bob", "Sally", "John", "Jane"]).without(prefix("J")).transform(to_upper()).last()
    'SALLY'

No operation mutates its input. ``None`` is accepted wherever a sequence is
expected and behaves like an empty one; operations that return a sequence
return an empty one instead of None.
"""

from .conditions import prefix, suffix
from .functions import (
    strings_contains,
    strings_first,
    strings_first_or,
    strings_last,
    strings_last_or,
    strings_len,
    strings_max,
    strings_min,
    strings_only,
    strings_transform,
    strings_without,
)
from .strings import Strings
from .transforms import to_lower, to_upper, trim
from .types import StringConditionFunc, StringTransformFunc

__all__: list[str] = [
    "StringConditionFunc",
    "StringTransformFunc",
    "Strings",
    "prefix",
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
    "suffix",
    "to_lower",
    "to_upper",
    "trim",
]
