"""Padders that fill field values up to a fixed length and strip the fill again."""

from __future__ import annotations

from abc import ABC, abstractmethod


class Padder(ABC):
    """Pads data up to a length and removes that padding again."""

    @abstractmethod
    def pad(self, data: bytes, length: int) -> bytes:
        """Return ``data`` padded up to ``length`` pad units."""

    @abstractmethod
    def unpad(self, data: bytes) -> bytes:
        """Return ``data`` with the padding removed."""

    @abstractmethod
    def inspect(self) -> bytes:
        """Return the encoded padding character."""


def _encode_char(char: str) -> bytes:
    if not isinstance(char, str) or len(char) != 1:
        raise ValueError(f"padding character must be a single character, got {char!r}")
    return char.encode("utf-8")


class _CharPadder(Padder):
    __slots__ = ("_fill",)

    def __init__(self, char: str) -> None:
        self._fill = _encode_char(char)

    def inspect(self) -> bytes:
        return self._fill

    def __eq__(self, other: object) -> bool:
        if type(other) is not type(self):
            return NotImplemented
        return self._fill == other._fill

    def __hash__(self) -> int:
        return hash((type(self), self._fill))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._fill.decode('utf-8')!r})"


class LeftPadder(_CharPadder):
    """Pads on the left, for right-justified values."""

    __slots__ = ()

    def pad(self, data: bytes, length: int) -> bytes:
        data = bytes(data)
        missing = length - len(data)
        if missing <= 0:
            return data
        return self._fill * missing + data

    def unpad(self, data: bytes) -> bytes:
        data = bytes(data)
        start = 0
        while data.startswith(self._fill, start):
            start += len(self._fill)
        return data[start:]

    def inspect(self) -> bytes:
        """Return the encoded padding character."""
        return self._fill


class RightPadder(_CharPadder):
    """Pads on the right, for left-justified values."""

    __slots__ = ()

    def pad(self, data: bytes, length: int) -> bytes:
        data = bytes(data)
        missing = length - len(data)
        if missing <= 0:
            return data
        return data + self._fill * missing

    def unpad(self, data: bytes) -> bytes:
        data = bytes(data)
        end = len(data)
        while end > 0 and data.endswith(self._fill, 0, end):
            end -= len(self._fill)
        return data[:end]

    def inspect(self) -> bytes:
        """Return the encoded padding character."""
        return self._fill


class NonePadder(Padder):
    """Leaves data untouched."""

    __slots__ = ()

    def pad(self, data: bytes, length: int) -> bytes:
        return bytes(data)

    def unpad(self, data: bytes) -> bytes:
        return bytes(data)

    def inspect(self) -> bytes:
        return b""

    def __eq__(self, other: object) -> bool:
        return isinstance(other, NonePadder)

    def __hash__(self) -> int:
        return hash(NonePadder)

    def __repr__(self) -> str:
        return "NonePadder()"


NONE = NonePadder()