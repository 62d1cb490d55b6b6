from pprint import pformat


def payload_repr(
    v: object,
    max_length: int = 200,
    depth: int = 3,
    width: int = 80,
    *,
    compact: bool = True,
) -> str:
    text = pformat(v, depth=depth, width=width, compact=compact)
    if len(text) > max_length:
        return text[:max_length] + "..."
    return text
