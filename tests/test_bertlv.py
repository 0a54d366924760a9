import pytest

from isofields.prefix.bertlv import BER_TLV, BerTLVPrefixer
from isofields.prefix.core import PrefixError

CASES = [
    ("single byte prefix", 1, 126, bytes([0b01111110])),
    ("two byte prefix", 2, 131, bytes([0b10000001, 0b10000011])),
    ("three byte prefix", 3, 65039, bytes([0b10000010, 0b11111110, 0b00001111])),
]


@pytest.mark.parametrize("desc,num_bytes,length,data", CASES)
def test_encode_length(desc, num_bytes, length, data):
    assert BER_TLV.encode_length(0, length) == data


@pytest.mark.parametrize("desc,num_bytes,length,data", CASES)
def test_decode_length(desc, num_bytes, length, data):
    assert BER_TLV.decode_length(0, data) == (length, num_bytes)


def test_encode_respects_max_len():
    with pytest.raises(PrefixError) as excinfo:
        BER_TLV.encode_length(2, 3)
    assert str(excinfo.value) == "field length: 3 is larger than maximum: 2"


def test_decode_respects_max_len():
    with pytest.raises(PrefixError) as excinfo:
        BER_TLV.decode_length(2, bytes([0b10000010, 0b11111110, 0b00001111]))
    assert str(excinfo.value) == "field length: 65039 is larger than maximum: 2"


def test_decode_initial_byte_claims_more_bytes_than_present():
    with pytest.raises(PrefixError) as excinfo:
        BER_TLV.decode_length(0, bytes([0b10000011, 0b11111110, 0b00001111]))
    assert str(excinfo.value) == "failed to read long form TLV length: unexpected EOF"


def test_decode_empty_input():
    with pytest.raises(PrefixError) as excinfo:
        BER_TLV.decode_length(0, b"")
    assert str(excinfo.value) == "failed to decode TLV length: EOF"


@pytest.mark.parametrize("length", [1, 127, 128, 255, 256, 65535, 70000])
def test_round_trip(length):
    encoded = BerTLVPrefixer().encode_length(0, length)
    assert BER_TLV.decode_length(0, encoded + b"value") == (length, len(encoded))


def test_inspect():
    assert BER_TLV.inspect() == "BerTLV"