from collections.abc import Sequence


def strings_contains(ss: Sequence[str] | None, looking_for: str) -> bool:
    """
    Checks whether a string exists in the sequence.

    The match is exact and case-sensitive. An empty string only matches an
    empty-string element, so ``strings_contains([], "")`` is False.

    Args:
        ss: The strings to search. ``None`` behaves like an empty sequence.
        looking_for: The value to find.

    Returns:
        bool: True if any element is equal to ``looking_for``.
    """
    if not ss:
        return False

    for s in ss:
        if s == looking_for:
            return True

    return False
