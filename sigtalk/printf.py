"""A small printf supporting the conversions c, s, p, d, i, u, x, X and %."""

import sys
from typing import Optional, TextIO

DEC = "0123456789"
HEX = "0123456789abcdef"
UPHEX = "0123456789ABCDEF"

# Conversions that take an argument; "%" and unknown specifiers take none.
_CONSUMING = frozenset("cspdiuxX")


def _wrap(number: int, bits: int, signed: bool) -> int:
    """Reduce ``number`` to a machine integer of the given width."""
    number &= (1 << bits) - 1
    if signed and number >= 1 << (bits - 1):
        number -= 1 << bits
    return number


def to_base(number: int, digits: str) -> str:
    """Render a non-negative integer with ``digits`` as the digit alphabet."""
    if number < 0:
        raise ValueError("to_base needs a non-negative number")
    if len(digits) < 2:
        raise ValueError("a base needs at least two digits")
    base = len(digits)
    out = []
    while True:
        number, remainder = divmod(number, base)
        out.append(digits[remainder])
        if not number:
            break
    return "".join(reversed(out))


def format_int(number: int) -> str:
    """Render a signed decimal integer."""
    if number < 0:
        return "-" + to_base(-number, DEC)
    return to_base(number, DEC)


def format_pointer(address: int) -> str:
    """Render an address as ``0x``-prefixed hex, or ``(nil)`` for zero."""
    if not address:
        return "(nil)"
    return "0x" + to_base(address, HEX)


def format_string(value: Optional[str]) -> str:
    """Render a string, or ``(null)`` when there is none."""
    return "(null)" if value is None else value


def _format_char(value) -> str:
    if isinstance(value, str):
        if len(value) != 1:
            raise ValueError("%c needs a single character")
        return value
    return chr(value & 0xFF)


def format_conversion(spec: str, value=None) -> str:
    """Render one conversion; unknown specifiers produce nothing."""
    if spec in ("d", "i"):
        return format_int(_wrap(value, 32, signed=True))
    if spec == "c":
        return _format_char(value)
    if spec == "s":
        return format_string(value)
    if spec == "u":
        return to_base(_wrap(value, 32, signed=False), DEC)
    if spec == "x":
        return to_base(_wrap(value, 32, signed=False), HEX)
    if spec == "X":
        return to_base(_wrap(value, 32, signed=False), UPHEX)
    if spec == "p":
        return format_pointer(_wrap(value, 64, signed=False))
    if spec == "%":
        return "%"
    return ""


def sprintf(template: str, *args) -> str:
    """Format ``template`` with ``args`` and return the text."""
    pieces = []
    values = iter(args)
    chars = iter(template)
    for char in chars:
        if char != "%":
            pieces.append(char)
            continue
        spec = next(chars, None)
        if spec is None:
            break
        value = None
        if spec in _CONSUMING:
            try:
                value = next(values)
            except StopIteration:
                raise ValueError(f"no argument left for %{spec}") from None
        pieces.append(format_conversion(spec, value))
    return "".join(pieces)


def printf(template: str, *args, stream: Optional[TextIO] = None) -> int:
    """Write the formatted text to ``stream`` (stdout by default); return its length."""
    text = sprintf(template, *args)
    out = sys.stdout if stream is None else stream
    out.write(text)
    out.flush()
    return len(text)