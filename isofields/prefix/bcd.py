"""Length prefixes written as packed BCD digits."""

from __future__ import annotations

from dataclasses import dataclass

from .core import PrefixError, Prefixer, Prefixers


def _encoded_len(digits: int) -> int:
    return (digits + 1) // 2


def bcd_encode(digits: bytes | str) -> bytes:
    """Pack ASCII decimal digits two per byte, left-padding odd input with a zero."""
    text = digits.decode("latin-1") if isinstance(digits, (bytes, bytearray)) else digits
    if any(ch not in "0123456789" for ch in text):
        raise PrefixError(f'invalid BCD input: "{text}"')
    if len(text) % 2:
        text = "0" + text
    return bytes(int(text[pos]) << 4 | int(text[pos + 1]) for pos in range(0, len(text), 2))


def bcd_decode(data: bytes, length: int) -> bytes:
    """Unpack ``length`` ASCII decimal digits from packed BCD ``data``."""
    needed = _encoded_len(length)
    if len(data) < needed:
        raise PrefixError(
            f"not enough data to decode. expected len {needed}, got {len(data)}"
        )
    nibbles = []
    for byte in bytes(data[:needed]):
        for nibble in (byte >> 4, byte & 0x0F):
            if nibble > 9:
                raise PrefixError(f"invalid BCD byte: 0x{byte:02X}")
            nibbles.append(nibble)
    if length % 2:
        nibbles = nibbles[1:]
    return "".join(map(str, nibbles)).encode("ascii")


@dataclass(frozen=True)
class BcdVarPrefixer(Prefixer):
    """Variable length written as ``digits`` packed BCD digits."""

    digits: int

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if data_len > max_len:
            raise PrefixError(f"field length: {data_len} is larger than maximum: {max_len}")
        if len(str(data_len)) > self.digits:
            raise PrefixError(f"number of digits in length: {data_len} exceeds: {self.digits}")
        return bcd_encode(f"{data_len:0{self.digits}d}")

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        length = _encoded_len(self.digits)
        if len(data) < length:
            raise PrefixError(
                f"length mismatch: want to read {length} bytes, get only {len(data)}"
            )
        data_len = int(bcd_decode(bytes(data[:length]), self.digits))
        if data_len > max_len:
            raise PrefixError(f"data length {data_len} is larger than maximum {max_len}")
        return data_len, length

    def inspect(self) -> str:
        return "BCD." + "L" * self.digits


@dataclass(frozen=True)
class BcdFixedPrefixer(Prefixer):
    """Fixed length: nothing is written, the spec length is used."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if data_len > max_len:
            raise PrefixError(f"field length: {data_len} should be fixed: {max_len}")
        return b""

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return max_len, 0

    def inspect(self) -> str:
        return "BCD.Fixed"


BCD = Prefixers(
    fixed=BcdFixedPrefixer(),
    l=BcdVarPrefixer(1),
    ll=BcdVarPrefixer(2),
    lll=BcdVarPrefixer(3),
    llll=BcdVarPrefixer(4),
    lllll=BcdVarPrefixer(5),
    llllll=BcdVarPrefixer(6),
)