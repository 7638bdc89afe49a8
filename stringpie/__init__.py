"""stringpie public interface."""

from .strings import (
    StringConditionFunc,
    Strings,
    StringTransformFunc,
    prefix,
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
    suffix,
    to_lower,
    to_upper,
    trim,
)

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

__version__ = "0.1.0"
