"""Byte and bit readers over files and in-memory buffers."""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from os import PathLike
from pathlib import Path
from typing import Union

END_OF_STREAM = -1
"""Value returned by ``read`` once a stream has no more bytes."""

PathArg = Union[str, "PathLike[str]"]


def _to_signed(value: int, bits: int) -> int:
    value &= (1 << bits) - 1
    if value >= 1 << (bits - 1):
        value -= 1 << bits
    return value


class Stream(ABC):
    """A source of bytes with helpers for multi-byte values."""

    @abstractmethod
    def read(self) -> int:
        """Return the next byte (0-255), or ``END_OF_STREAM``."""

    @abstractmethod
    def valid(self) -> bool:
        """Whether the stream is still in a good state."""

    def read_int(self, little_endian: bool = True) -> int:
        """Read a signed 32-bit value.

        With ``little_endian`` true the first byte is the most significant,
        otherwise the last one is.
        """
        a, b, c, d = (self.read() for _ in range(4))
        if not little_endian:
            a, b, c, d = d, c, b, a
        return _to_signed(a << 24 | b << 16 | c << 8 | d, 32)

    def read_short(self, little_endian: bool = True) -> int:
        """Read a signed 16-bit value, ordered like ``read_int``."""
        a, b = self.read(), self.read()
        if not little_endian:
            a, b = b, a
        return _to_signed(a << 8 | b, 16)

    def fill(self, count: int) -> bytes:
        """Read ``count`` bytes; reads past the end come back as 0xFF."""
        return bytes(self.read() & 0xFF for _ in range(max(count, 0)))


class FileByteStream(Stream):
    """Bytes read from a file on disk."""

    def __init__(self, path: PathArg | None = None) -> None:
        self._data = b""
        self._pos = 0
        self._failed = False
        if path is not None:
            self.read_file(path)

    def read_file(self, path: PathArg) -> None:
        """Switch to reading ``path``; the stream turns invalid if it cannot be opened."""
        self._pos = 0
        try:
            self._data = Path(path).read_bytes()
            self._failed = False
        except OSError:
            self._data = b""
            self._failed = True

    def read(self) -> int:
        if self._failed or self._pos >= len(self._data):
            self._failed = True
            return END_OF_STREAM
        byte = self._data[self._pos]
        self._pos += 1
        return byte

    def valid(self) -> bool:
        return not self._failed


class VectorByteStream(Stream):
    """Bytes read from an in-memory buffer.

    A copy of the stream starts again from the beginning of the buffer.
    """

    def __init__(self, data: bytes = b"") -> None:
        self.take(data)

    def take(self, data: bytes) -> None:
        """Replace the buffer and rewind."""
        self._data = bytes(data)
        self._pos = 0

    def read(self) -> int:
        if not self.valid():
            return END_OF_STREAM
        byte = self._data[self._pos]
        self._pos += 1
        return byte

    def position(self, where: int) -> None:
        """Move to byte offset ``where``; offsets past the end mean the end."""
        if where < 0:
            raise ValueError(f"negative stream position: {where}")
        self._pos = min(where, len(self._data))

    def valid(self) -> bool:
        return self._pos != len(self._data)

    def bytes_read(self) -> int:
        """Offset of the next byte to be read."""
        return self._pos

    def __copy__(self) -> VectorByteStream:
        return VectorByteStream(self._data)


class BitReader:
    """Reads values bit by bit, most significant bit first."""

    def __init__(self, stream: Stream | None = None) -> None:
        self.bytes: Stream = stream if stream is not None else VectorByteStream()
        self.bits_left = 0
        self.current_byte = 0

    def parse(self, count: int) -> int:
        """Read ``count`` bits as an unsigned number."""
        value = 0
        for _ in range(count):
            if self.bits_left == 0:
                self.current_byte = self.bytes.read() & 0xFF
                self.bits_left = 8
            self.bits_left -= 1
            value = (value << 1) | ((self.current_byte >> self.bits_left) & 1)
        return value

    def __copy__(self) -> BitReader:
        clone = BitReader(copy.copy(self.bytes))
        clone.bits_left = self.bits_left
        clone.current_byte = self.current_byte
        return clone