"""Network headers that carry the length of the message that follows them.

Every message exchanged between client and server is preceded by a header
holding its length. Write the header, then the packed message:

    header = Bcd2BytesHeader()
    header.length = len(packed)
    header.write_to(conn)
    conn.write(packed)

and read them back the same way:

    header = Bcd2BytesHeader()
    header.read_from(conn)
    packed = conn.read(header.length)
"""

from __future__ import annotations

import re
from abc import ABC, abstractmethod
from typing import BinaryIO

from .prefix.core import PrefixError
from .prefix.bcd import bcd_decode, bcd_encode

MAX_UINT16 = 0xFFFF
MAX_MESSAGE_LENGTH = 2048
_SESSION_CONTROL_INDICATOR = ord("2")

_DECIMAL = re.compile(r"[+-]?[0-9]+")


class HeaderError(ValueError):
    """Raised when a header cannot be written or read."""


def _read_exact(stream: BinaryIO, size: int) -> bytes:
    """Read exactly ``size`` bytes, raising on a short read."""
    chunks = []
    remaining = size
    while remaining > 0:
        chunk = stream.read(remaining)
        if not chunk:
            break
        chunks.append(chunk)
        remaining -= len(chunk)
    data = b"".join(chunks)
    if len(data) < size:
        raise EOFError("EOF" if not data else "unexpected EOF")
    return data


def _write(stream: BinaryIO, data: bytes) -> int:
    written = stream.write(data)
    return len(data) if written is None else written


class Header(ABC):
    """Writes and reads the encoded length of a message."""

    def __init__(self, length: int = 0) -> None:
        self.length = length

    @property
    def length(self) -> int:
        """The length of the message."""
        return self._length

    @length.setter
    def length(self, value: int) -> None:
        self._length = value

    @abstractmethod
    def write_to(self, stream: BinaryIO) -> int:
        """Write the encoded length to ``stream`` and return the bytes written."""

    @abstractmethod
    def read_from(self, stream: BinaryIO) -> int:
        """Read the header from ``stream``, store the length and return the bytes read."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(length={self.length})"


class Ascii4BytesHeader(Header):
    """Length written as four ASCII decimal digits."""

    def write_to(self, stream: BinaryIO) -> int:
        return _write(stream, f"{self.length:04d}".encode("ascii"))

    def read_from(self, stream: BinaryIO) -> int:
        try:
            raw = _read_exact(stream, 4)
        except EOFError as exc:
            raise HeaderError(f"reading header: {exc}") from exc
        text = raw.decode("latin-1")
        if not _DECIMAL.fullmatch(text):
            raise HeaderError(f'converting header to int: invalid syntax: "{text}"')
        self.length = int(text)
        return len(raw)


class Bcd2BytesHeader(Header):
    """Length written as four packed BCD digits in two bytes."""

    def write_to(self, stream: BinaryIO) -> int:
        try:
            encoded = bcd_encode(f"{self.length:04d}")
        except PrefixError as exc:
            raise HeaderError(str(exc)) from exc
        return _write(stream, encoded)

    def read_from(self, stream: BinaryIO) -> int:
        try:
            raw = _read_exact(stream, 2)
        except EOFError as exc:
            raise HeaderError(f"reading header: {exc}") from exc
        try:
            digits = bcd_decode(raw, 4)
        except PrefixError as exc:
            raise HeaderError(str(exc)) from exc
        self.length = int(digits)
        return len(raw)


class _UInt16LengthHeader(Header):
    @Header.length.setter
    def length(self, value: int) -> None:
        if value > MAX_UINT16:
            raise HeaderError(
                f"length {value} exceeds max length for 2 bytes header {MAX_UINT16}"
            )
        self._length = value & MAX_UINT16


class Binary2BytesHeader(_UInt16LengthHeader):
    """Length written as a big-endian unsigned 16-bit integer."""

    def write_to(self, stream: BinaryIO) -> int:
        _write(stream, self.length.to_bytes(2, "big"))
        return 2

    def read_from(self, stream: BinaryIO) -> int:
        try:
            raw = _read_exact(stream, 2)
        except EOFError as exc:
            raise HeaderError(f"reading uint16 from reader: {exc}") from exc
        self.length = int.from_bytes(raw, "big")
        return 2


class VmlHeader(_UInt16LengthHeader):
    """Four-byte header: 16-bit big-endian length, a reserved byte and indicators.

    ``is_session_control`` is set when the message format indicator marks a
    session control message (heartbeat or idle time).
    """

    def __init__(self, length: int = 0, is_session_control: bool = False) -> None:
        super().__init__(length)
        self.is_session_control = is_session_control

    def write_to(self, stream: BinaryIO) -> int:
        if self.length > MAX_MESSAGE_LENGTH:
            raise HeaderError(
                f"length {self.length} exceeds max length {MAX_MESSAGE_LENGTH}"
            )
        try:
            return _write(stream, self.length.to_bytes(2, "big") + b"\x00\x00")
        except OSError as exc:
            raise HeaderError(f"writing header: {exc}") from exc

    def read_from(self, stream: BinaryIO) -> int:
        try:
            raw = _read_exact(stream, 4)
        except EOFError as exc:
            raise HeaderError(f"reading 4 bytes from reader: {exc}") from exc
        self.length = int.from_bytes(raw[:2], "big")
        if self.length > MAX_MESSAGE_LENGTH:
            raise HeaderError(
                f"length {self.length} exceeds max length {MAX_MESSAGE_LENGTH}"
            )
        try:
            indicators = bcd_decode(raw[3:], 2)
        except PrefixError as exc:
            raise HeaderError(f"decoding indicators: {exc}") from exc
        self.is_session_control = indicators[0] == _SESSION_CONTROL_INDICATOR
        return len(raw)

    def __repr__(self) -> str:
        return (
            f"VmlHeader(length={self.length}, "
            f"is_session_control={self.is_session_control})"
        )