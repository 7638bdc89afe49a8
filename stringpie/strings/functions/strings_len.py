from collections.abc import Sequence


def strings_len(ss: Sequence[str] | None) -> int:
    return len(ss) if ss is not None else 0
