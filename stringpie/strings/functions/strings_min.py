from collections.abc import Sequence


def strings_min(ss: Sequence[str] | None) -> str:
    """
    Returns the smallest element, or an empty string if there are none.

    Comparison is ordinal (by code point), not locale-aware, so uppercase
    letters sort before lowercase ones:

        >>> strings_min(["bar", "Baz", "qux", "foo"])
        'Baz'
    """
    if not ss:
        return ""

    smallest = ss[0]
    for s in ss:
        if s < smallest:
            smallest = s

    return smallest
