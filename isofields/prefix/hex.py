"""Length prefixes written as ASCII hexadecimal digits."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .core import PrefixError, Prefixer, Prefixers

_HEXADECIMAL = re.compile(r"[+-]?[0-9A-Fa-f]+")


def _parse_hex(raw: bytes, bits: int) -> int:
    text = raw.decode("latin-1")
    if not _HEXADECIMAL.fullmatch(text):
        raise PrefixError(f'invalid hex length: "{text}"')
    value = int(text, 16)
    if not -(1 << (bits - 1)) <= value <= (1 << (bits - 1)) - 1:
        raise PrefixError(f'hex length "{text}" out of range for {bits} bits')
    return value


@dataclass(frozen=True)
class HexFixedPrefixer(Prefixer):
    """Fixed length of ``max_len`` bytes written as twice as many hex digits."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        # each byte takes two hex characters
        if data_len != max_len * 2:
            raise PrefixError(f"field length: {data_len} should be fixed: {max_len * 2}")
        return b""

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return max_len, 0

    def inspect(self) -> str:
        return "Hex.Fixed"


@dataclass(frozen=True)
class HexVarPrefixer(Prefixer):
    """Variable length of ``digits`` bytes written as ASCII hex."""

    digits: int

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if data_len > max_len:
            raise PrefixError(f"field length: {data_len} is larger than maximum: {max_len}")
        max_possible = (1 << (self.digits * 8)) - 1
        if data_len > max_possible:
            raise PrefixError(f"number of digits in length: {data_len} exceeds: {self.digits}")
        return format(data_len, "X").rjust(self.digits * 2, "0").encode("ascii")

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        length = self.digits * 2
        if len(data) < length:
            raise PrefixError(
                f"length mismatch: want to read {length} bytes, get only {len(data)}"
            )
        data_len = _parse_hex(bytes(data[:length]), self.digits * 8)
        if data_len > max_len:
            raise PrefixError(f"data length {data_len} is larger than maximum {max_len}")
        return data_len, length

    def inspect(self) -> str:
        return "Hex." + "L" * self.digits


HEX = Prefixers(
    fixed=HexFixedPrefixer(),
    l=HexVarPrefixer(1),
    ll=HexVarPrefixer(2),
    lll=HexVarPrefixer(3),
    llll=HexVarPrefixer(4),
    lllll=HexVarPrefixer(5),
    llllll=HexVarPrefixer(6),
)