from collections.abc import Sequence


def strings_max(ss: Sequence[str] | None) -> str:
    """Returns the largest element by ordinal comparison, or an empty string."""
    if not ss:
        return ""

    largest = ss[0]
    for s in ss:
        if s > largest:
            largest = s

    return largest
