"""Length prefixes written as ASCII decimal digits."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .core import PrefixError, Prefixer, Prefixers

_DECIMAL = re.compile(r"[+-]?[0-9]+")


def _parse_decimal(raw: bytes) -> int:
    text = raw.decode("latin-1")
    if not _DECIMAL.fullmatch(text):
        raise PrefixError(f'invalid length digits: "{text}"')
    return int(text)


@dataclass(frozen=True)
class AsciiVarPrefixer(Prefixer):
    """Variable length written as ``digits`` ASCII decimal digits."""

    digits: int

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if data_len > max_len:
            raise PrefixError(f"field length: {data_len} is larger than maximum: {max_len}")
        if len(str(data_len)) > self.digits:
            raise PrefixError(f"number of digits in length: {data_len} exceeds: {self.digits}")
        return f"{data_len:0{self.digits}d}".encode("ascii")

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        if len(data) < self.digits:
            raise PrefixError(
                f"not enough data length: {len(data)} to read: {self.digits} byte digits"
            )
        data_len = _parse_decimal(bytes(data[: self.digits]))
        if data_len < 0:
            raise PrefixError(f"invalid length: {data_len}")
        if data_len > max_len:
            raise PrefixError(f"data length: {data_len} is larger than maximum {max_len}")
        return data_len, self.digits

    def inspect(self) -> str:
        return "ASCII." + "L" * self.digits


@dataclass(frozen=True)
class AsciiFixedPrefixer(Prefixer):
    """Fixed length: nothing is written, the spec length is used."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if data_len != max_len:
            raise PrefixError(f"field length: {data_len} should be fixed: {max_len}")
        return b""

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return max_len, 0

    def inspect(self) -> str:
        return "ASCII.Fixed"


ASCII = Prefixers(
    fixed=AsciiFixedPrefixer(),
    l=AsciiVarPrefixer(1),
    ll=AsciiVarPrefixer(2),
    lll=AsciiVarPrefixer(3),
    llll=AsciiVarPrefixer(4),
    lllll=AsciiVarPrefixer(5),
    llllll=AsciiVarPrefixer(6),
)