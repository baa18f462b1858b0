"""The bit-level wire format shared by the signal client and server.

A message travels as its UTF-8 bytes followed by one NUL byte. Each byte is
sent as eight bits, least significant bit first. The client marks a set bit
with SIGUSR1 and a clear bit with SIGUSR2.
"""

from __future__ import annotations

from typing import Iterator, Optional, Union

BITS_PER_BYTE = 8
TERMINATOR = 0


def encode_bits(message: Union[str, bytes]) -> Iterator[int]:
    """Yield the bits of *message* and its terminating NUL, LSB first."""
    data = message.encode("utf-8") if isinstance(message, str) else bytes(message)
    for byte in (*data, TERMINATOR):
        for shift in range(BITS_PER_BYTE):
            yield (byte >> shift) & 1


class MessageDecoder:
    """Rebuild messages from a stream of bits produced by :func:`encode_bits`."""

    def __init__(self, encoding: str = "utf-8") -> None:
        self.encoding = encoding
        self._buffer = bytearray()
        self._byte = 0
        self._count = 0

    @property
    def pending_bits(self) -> int:
        """Number of bits received towards the byte being assembled."""
        return self._count

    @property
    def pending_bytes(self) -> bytes:
        """Bytes of the message received so far."""
        return bytes(self._buffer)

    def feed(self, bit: int) -> Optional[str]:
        """Take one bit; return the finished message when its NUL arrives."""
        if bit not in (0, 1):
            raise ValueError(f"a bit must be 0 or 1, got {bit!r}")
        if bit:
            self._byte |= 1 << self._count
        self._count += 1
        if self._count < BITS_PER_BYTE:
            return None

        byte = self._byte
        self._byte = 0
        self._count = 0
        if byte != TERMINATOR:
            self._buffer.append(byte)
            return None
        message = self._buffer.decode(self.encoding, errors="replace")
        self._buffer.clear()
        return message

    def reset(self) -> None:
        """Discard any partly received byte and message."""
        self._buffer.clear()
        self._byte = 0
        self._count = 0