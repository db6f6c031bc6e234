"""Lenient integer parsing."""

_SPACE = frozenset(" \t\n\v\f\r")
_DIGITS = frozenset("0123456789")


def atoi(text: str) -> int:
    """Parse a leading decimal integer, ignoring what follows; 0 if none.

    Leading whitespace and one sign are accepted. The result wraps to a
    32-bit signed integer.
    """
    rest = text.lstrip("".join(_SPACE))
    sign = 1
    if rest[:1] in ("-", "+"):
        sign = -1 if rest[0] == "-" else 1
        rest = rest[1:]
    number = 0
    for char in rest:
        if char not in _DIGITS:
            break
        number = number * 10 + int(char)
    number = (number * sign) & 0xFFFFFFFF
    return number - (1 << 32) if number >= 1 << 31 else number