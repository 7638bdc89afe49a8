from __future__ import annotations

from collections.abc import Iterator
from typing import overload

from rsb.collections.readonly_collection import ReadonlyCollection

from stringpie.strings.functions.strings_contains import strings_contains
from stringpie.strings.functions.strings_first import strings_first
from stringpie.strings.functions.strings_first_or import strings_first_or
from stringpie.strings.functions.strings_last import strings_last
from stringpie.strings.functions.strings_last_or import strings_last_or
from stringpie.strings.functions.strings_len import strings_len
from stringpie.strings.functions.strings_max import strings_max
from stringpie.strings.functions.strings_min import strings_min
from stringpie.strings.functions.strings_only import strings_only
from stringpie.strings.functions.strings_transform import strings_transform
from stringpie.strings.functions.strings_without import strings_without
from stringpie.strings.types.string_condition_func import StringConditionFunc
from stringpie.strings.types.string_transform_func import StringTransformFunc


class Strings(ReadonlyCollection[str]):
    """
    An immutable, chainable sequence of strings.

    Each method is the chained version of the free function with the same
    name in ``stringpie.strings.functions``. Methods that produce a sequence
    return a new ``Strings``, so calls can be chained:

        >>> (
        ...     Strings(["Bob", "Sally", "John", "Jane"])
        ...     .without(prefix("J"))
        ...     .transform(to_upper())
        ...     .last()
        ... )
        'SALLY'
    """

    @classmethod
    def of(cls, *values: str) -> Strings:
        return cls(elements=list(values))

    @classmethod
    def empty(cls) -> Strings:
        return cls(elements=[])

    def contains(self, looking_for: str) -> bool:
        return strings_contains(self.elements, looking_for)

    def only(self, condition: StringConditionFunc) -> Strings:
        return Strings(elements=strings_only(self.elements, condition))

    def without(self, condition: StringConditionFunc) -> Strings:
        return Strings(elements=strings_without(self.elements, condition))

    def transform(self, fn: StringTransformFunc) -> Strings:
        return Strings(elements=strings_transform(self.elements, fn))

    def first_or(self, default_value: str) -> str:
        return strings_first_or(self.elements, default_value)

    def last_or(self, default_value: str) -> str:
        return strings_last_or(self.elements, default_value)

    def first(self) -> str:
        return strings_first(self.elements)

    def last(self) -> str:
        return strings_last(self.elements)

    def len(self) -> int:
        return strings_len(self.elements)

    def min(self) -> str:
        return strings_min(self.elements)

    def max(self) -> str:
        return strings_max(self.elements)

    def to_list(self) -> list[str]:
        return list(self.elements)

    def __len__(self) -> int:
        return strings_len(self.elements)

    def __iter__(self) -> Iterator[str]:
        return iter(self.elements)

    def __contains__(self, item: object) -> bool:
        return isinstance(item, str) and strings_contains(self.elements, item)

    @overload
    def __getitem__(self, index: int) -> str: ...

    @overload
    def __getitem__(self, index: slice) -> Strings: ...

    def __getitem__(self, index: int | slice) -> str | Strings:
        if isinstance(index, slice):
            return Strings(elements=list(self.elements[index]))

        return self.elements[index]

    def __eq__(self, other: object) -> bool:
        if isinstance(other, Strings):
            return list(self.elements) == list(other.elements)

        if isinstance(other, (list, tuple)):
            return list(self.elements) == list(other)

        return NotImplemented

    def __repr__(self) -> str:
        return f"Strings({list(self.elements)!r})"
