"""The length prefixer interface, prefixer sets and the no-op prefixer."""

from __future__ import annotations

from abc import ABC, abstractmethod
from dataclasses import dataclass


class PrefixError(ValueError):
    """Raised when a field length cannot be encoded or decoded."""


class Prefixer(ABC):
    """Encodes and decodes the length prefix of a field."""

    @abstractmethod
    def encode_length(self, max_len: int, data_len: int) -> bytes:
        """Return the length ``data_len`` encoded as prefix bytes."""

    @abstractmethod
    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        """Return the field length and the number of prefix bytes read."""

    @abstractmethod
    def inspect(self) -> str:
        """Return a readable name such as ``ASCII.LL`` or ``Hex.Fixed``."""


@dataclass(frozen=True)
class Prefixers:
    """A family of prefixers: fixed length and one to six length digits."""

    fixed: Prefixer
    l: Prefixer | None = None  # noqa: E741
    ll: Prefixer | None = None
    lll: Prefixer | None = None
    llll: Prefixer | None = None
    lllll: Prefixer | None = None
    llllll: Prefixer | None = None


@dataclass(frozen=True)
class NonePrefixer(Prefixer):
    """Writes no prefix and takes all remaining data as the field."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        return b""

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return len(data), 0

    def inspect(self) -> str:
        return "None.Fixed"


NONE = Prefixers(fixed=NonePrefixer())