"""Orderings for the subfield tags of composite fields."""

from __future__ import annotations

import re
from collections.abc import Callable, Iterable
from functools import cmp_to_key

_DECIMAL = re.compile(r"[+-]?[0-9]+")
_HEX = re.compile(r"(?:[0-9A-Fa-f]{2})*")


def _parse_int(text: str) -> int | None:
    return int(text) if _DECIMAL.fullmatch(text) else None


def _parse_hex(text: str) -> int | None:
    if not _HEX.fullmatch(text):
        return None
    value = int.from_bytes(bytes.fromhex(text), "big") & ((1 << 64) - 1)
    return value - (1 << 64) if value >= 1 << 63 else value


def _sort_by(values: Iterable[str], parse: Callable[[str], int | None]) -> list[str]:
    def less(left: str, right: str) -> bool:
        left_value = parse(left)
        right_value = parse(right)
        if left_value is None or right_value is None:
            return left < right
        return left_value < right_value

    def compare(left: str, right: str) -> int:
        if less(left, right):
            return -1
        if less(right, left):
            return 1
        return 0

    return sorted(values, key=cmp_to_key(compare))


def sort_strings(values: Iterable[str]) -> list[str]:
    """Return the strings in increasing lexical order."""
    return sorted(values)


def sort_strings_by_int(values: Iterable[str]) -> list[str]:
    """Return the strings ordered by integer value, lexically where one is not a number."""
    return _sort_by(values, _parse_int)


def sort_strings_by_hex(values: Iterable[str]) -> list[str]:
    """Return the strings ordered by big-endian hex value, lexically where one is not even-length hex."""
    return _sort_by(values, _parse_hex)