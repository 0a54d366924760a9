"""Length prefixes written as EBCDIC decimal digits (code pages 037 and 1047)."""

from __future__ import annotations

import re
from dataclasses import dataclass

from .core import PrefixError, Prefixer, Prefixers

_DECIMAL = re.compile(r"[+-]?[0-9]+")

_CP1047_SWAPS = ((0x5F, 0xB0), (0xAD, 0xBA), (0xBB, 0xBD))


def _build_cp1047() -> tuple[str, dict[str, int]]:
    table = list(bytes(range(256)).decode("cp037"))
    for first, second in _CP1047_SWAPS:
        table[first], table[second] = table[second], table[first]
    decode_table = "".join(table)
    return decode_table, {char: code for code, char in enumerate(decode_table)}


_CP1047_DECODE, _CP1047_ENCODE = _build_cp1047()


def _encode_cp037(text: str) -> bytes:
    try:
        return text.encode("cp037")
    except UnicodeEncodeError as exc:
        raise PrefixError(f"cannot encode {text!r} as EBCDIC") from exc


def _decode_cp037(data: bytes) -> str:
    return bytes(data).decode("cp037")


def _encode_cp1047(text: str) -> bytes:
    try:
        return bytes(_CP1047_ENCODE[char] for char in text)
    except KeyError as exc:
        raise PrefixError(f"cannot encode {text!r} as EBCDIC 1047") from exc


def _decode_cp1047(data: bytes) -> str:
    return "".join(_CP1047_DECODE[byte] for byte in bytes(data))


@dataclass(frozen=True)
class EbcdicVarPrefixer(Prefixer):
    """Variable length written as ``digits`` EBCDIC (037) decimal digits."""

    digits: int

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if data_len > max_len:
            raise PrefixError(f"field length: {data_len} is larger than maximum: {max_len}")
        if len(str(data_len)) > self.digits:
            raise PrefixError(f"number of digits in length: {data_len} exceeds: {self.digits}")
        return _encode_cp037(f"{data_len:0{self.digits}d}")

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        length = self.digits
        if len(data) < length:
            raise PrefixError(
                f"length mismatch: want to read {length} bytes, get only {len(data)}"
            )
        text = _decode_cp037(data[:length])
        if not _DECIMAL.fullmatch(text):
            raise PrefixError(f'invalid length digits: "{text}"')
        data_len = int(text)
        if data_len > max_len:
            raise PrefixError(f"data length {data_len} is larger than maximum {max_len}")
        return data_len, length

    def inspect(self) -> str:
        return "EBCDIC." + "L" * self.digits


@dataclass(frozen=True)
class EbcdicFixedPrefixer(Prefixer):
    """Fixed length: nothing is written, the spec length is used."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if data_len > max_len:
            raise PrefixError(f"field length: {data_len} should be fixed: {max_len}")
        return b""

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return max_len, 0

    def inspect(self) -> str:
        return "EBCDIC.Fixed"


@dataclass(frozen=True)
class Ebcdic1047Prefixer(Prefixer):
    """Variable length written as ``digits`` EBCDIC (1047) decimal digits."""

    digits: int

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if data_len > max_len:
            raise PrefixError(f"field length [{data_len}] is larger than maximum [{max_len}]")
        if len(str(data_len)) > self.digits:
            raise PrefixError(
                f"number of digits in data [{data_len}] exceeds its maximum indicator "
                f"[{self.digits}]"
            )
        return _encode_cp1047(f"{data_len:0{self.digits}d}")

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        if len(data) < self.digits:
            raise PrefixError(
                f"not enough data length [{len(data)}] to read [{self.digits}] byte digits"
            )
        text = _decode_cp1047(data[: self.digits])
        if not _DECIMAL.fullmatch(text):
            raise PrefixError(f"length [{text}] is not a valid integer length field")
        data_len = int(text)
        if data_len > max_len:
            raise PrefixError(f"data length [{data_len}] is larger than maximum [{max_len}]")
        return data_len, self.digits

    def inspect(self) -> str:
        return "EBCDIC." + "L" * self.digits


@dataclass(frozen=True)
class Ebcdic1047FixedPrefixer(Prefixer):
    """Fixed length: nothing is written, the spec length is used."""

    def encode_length(self, max_len: int, data_len: int) -> bytes:
        if data_len != max_len:
            raise PrefixError(f"field length [{data_len}] should be fixed [{max_len}]")
        return b""

    def decode_length(self, max_len: int, data: bytes) -> tuple[int, int]:
        return max_len, 0

    def inspect(self) -> str:
        return "EBCDIC.Fixed"


EBCDIC = Prefixers(
    fixed=EbcdicFixedPrefixer(),
    l=EbcdicVarPrefixer(1),
    ll=EbcdicVarPrefixer(2),
    lll=EbcdicVarPrefixer(3),
    llll=EbcdicVarPrefixer(4),
    lllll=EbcdicVarPrefixer(5),
    llllll=EbcdicVarPrefixer(6),
)

EBCDIC1047 = Prefixers(
    fixed=Ebcdic1047FixedPrefixer(),
    l=Ebcdic1047Prefixer(1),
    ll=Ebcdic1047Prefixer(2),
    lll=Ebcdic1047Prefixer(3),
    llll=Ebcdic1047Prefixer(4),
    lllll=Ebcdic1047Prefixer(5),
    llllll=Ebcdic1047Prefixer(6),
)