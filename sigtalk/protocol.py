"""Bit-level message framing: a 32-bit length followed by the bytes, LSB first."""

from typing import Iterator, Optional, Union


class BitPacker:
    """Collects bits, least significant first, into fixed-width integers."""

    def __init__(self, width: int):
        if width < 1:
            raise ValueError("width must be positive")
        self.width = width
        self._position = 0
        self._value = 0

    def push(self, bit) -> Optional[int]:
        """Add one bit; return the packed value once ``width`` bits are in."""
        if bit:
            self._value |= 1 << self._position
        self._position += 1
        if self._position < self.width:
            return None
        value = self._value
        self._position = 0
        self._value = 0
        return value


class Receiver:
    """Reassembles messages from a stream of bits.

    A completed length of zero is ignored and another length is read; a
    completed zero byte is dropped and not counted.
    """

    def __init__(self):
        self._reset()

    def _reset(self) -> None:
        self._packer = BitPacker(32)
        self._size = 0
        self._buffer = bytearray()

    def feed(self, bit) -> Optional[bytes]:
        """Take one bit; return the whole message when its last bit arrives."""
        value = self._packer.push(bit)
        if not value:
            return None
        if not self._size:
            size = value - (1 << 32) if value >= 1 << 31 else value
            if size < 0:
                raise ValueError(f"invalid message length {size}")
            self._size = size
            self._packer = BitPacker(8)
            return None
        self._buffer.append(value)
        if len(self._buffer) < self._size:
            return None
        message = bytes(self._buffer)
        self._reset()
        return message


def encode_bits(message: Union[bytes, str]) -> Iterator[int]:
    """Yield the bits that carry ``message``: length header, then payload."""
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    if len(data) >= 1 << 31:
        raise ValueError("message too long")
    for byte in len(data).to_bytes(4, "little") + data:
        for position in range(8):
            yield (byte >> position) & 1