from stringpie.strings.types.string_transform_func import StringTransformFunc


def to_lower() -> StringTransformFunc:
    return str.lower
