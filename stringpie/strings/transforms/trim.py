from stringpie.strings.types.string_transform_func import StringTransformFunc


def trim(chars: str | None = None) -> StringTransformFunc:
    """
    Builds a transform that strips leading and trailing characters.

    Args:
        chars: The characters to remove. Defaults to whitespace.

    Returns:
        StringTransformFunc: The stripping transform.
    """

    def transform(s: str) -> str:
        return s.strip(chars)

    return transform
