"""Length prefix of BER-TLV encoded values.

Short form: one byte with the top bit clear holds lengths up to 127.
Long form: the first byte has the top bit set and its low seven bits give the
number of following bytes, which hold the length as a big-endian integer.
A ``max_len`` of 0 disables the maximum length check.
"""

from __future__ import annotations

from dataclasses import dataclass

from .core import PrefixError, Prefixer

_MSB = 0x80


def _to_int64(value: int) -> int:
    value &= (1 << 64) - 1
    return value - (1 << 64) if value >= 1 << 63 else value


@dataclass(frozen=True)
class BerTLVPrefixer(Prefixer):
    """Encodes and decodes BER-TLV lengths in short or long form."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if max_len != 0 and data_len > max_len:
            raise PrefixError(f"field length: {data_len} is larger than maximum: {max_len}")
        magnitude = abs(data_len)
        encoded = magnitude.to_bytes((magnitude.bit_length() + 7) // 8, "big")
        if data_len <= 127:
            return encoded
        return bytes([(_MSB | len(encoded)) & 0xFF]) + encoded

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        if not data:
            raise PrefixError("failed to decode TLV length: EOF")
        first = data[0]
        if not first & _MSB:
            if max_len != 0 and first > max_len:
                raise PrefixError(f"field length: {first} is larger than maximum: {max_len}")
            return first, 1

        count = first & ~_MSB & 0xFF
        length_bytes = bytes(data[1 : 1 + count])
        if len(length_bytes) < count:
            reason = "EOF" if not length_bytes else "unexpected EOF"
            raise PrefixError(f"failed to read long form TLV length: {reason}")
        read = 1 + count

        data_len = _to_int64(int.from_bytes(length_bytes, "big"))
        if max_len != 0 and data_len > max_len:
            raise PrefixError(f"field length: {data_len} is larger than maximum: {max_len}")
        return data_len, read

    def inspect(self) -> str:
        return "BerTLV"


BER_TLV = BerTLVPrefixer()