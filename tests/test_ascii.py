import re

import pytest

from isofields.prefix.ascii import ASCII, AsciiFixedPrefixer, AsciiVarPrefixer
from isofields.prefix.core import PrefixError


def test_encode_length_digits_validation():
    with pytest.raises(PrefixError, match=re.escape("number of digits in length: 123 exceeds: 2")):
        AsciiVarPrefixer(2).encode_length(999, 123)


def test_encode_length_max_length_validation():
    with pytest.raises(PrefixError, match=re.escape("field length: 22 is larger than maximum: 20")):
        AsciiVarPrefixer(2).encode_length(20, 22)


def test_decode_length_not_enough_data():
    with pytest.raises(
        PrefixError, match=re.escape("not enough data length: 2 to read: 3 byte digits")
    ):
        AsciiVarPrefixer(3).decode_length(20, b"22")


HELPER_CASES = [
    (1, 5, 3, b"3"),
    (2, 20, 2, b"02"),
    (2, 20, 12, b"12"),
    (3, 340, 2, b"002"),
    (3, 340, 200, b"200"),
    (4, 9999, 1234, b"1234"),
]


@pytest.mark.parametrize("digits,max_len,value,encoded", HELPER_CASES)
def test_l_helpers_encode(digits, max_len, value, encoded):
    assert AsciiVarPrefixer(digits).encode_length(max_len, value) == encoded


@pytest.mark.parametrize("digits,max_len,value,encoded", HELPER_CASES)
def test_l_helpers_decode(digits, max_len, value, encoded):
    assert AsciiVarPrefixer(digits).decode_length(max_len, encoded) == (value, digits)


def test_decode_rejects_larger_than_max():
    with pytest.raises(PrefixError, match="larger than maximum"):
        ASCII.ll.decode_length(20, b"22")


def test_decode_rejects_non_numeric():
    with pytest.raises(PrefixError):
        ASCII.ll.decode_length(20, b"a2")


def test_decode_rejects_negative():
    with pytest.raises(PrefixError, match=re.escape("invalid length: -2")):
        ASCII.ll.decode_length(20, b"-2")


def test_inspect():
    assert ASCII.ll.inspect() == "ASCII.LL"
    assert ASCII.fixed.inspect() == "ASCII.Fixed"


def test_fixed_prefixer():
    pref = AsciiFixedPrefixer()
    assert pref.encode_length(8, 8) == b""
    assert pref.decode_length(8, b"data") == (8, 0)


def test_fixed_prefixer_encode_length_validation():
    with pytest.raises(PrefixError, match=re.escape("field length: 12 should be fixed: 8")):
        AsciiFixedPrefixer().encode_length(8, 12)