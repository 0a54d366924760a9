import io

import pytest

from isofields.network import (
    MAX_MESSAGE_LENGTH,
    Ascii4BytesHeader,
    Bcd2BytesHeader,
    Binary2BytesHeader,
    HeaderError,
    VmlHeader,
)


def _written(header):
    buf = io.BytesIO()
    count = header.write_to(buf)
    return count, buf.getvalue()


# ASCII 4 bytes


def test_ascii_write_encodes_length():
    header = Ascii4BytesHeader()
    header.length = 115
    count, data = _written(header)
    assert count == 4
    assert data == b"0115"


def test_ascii_read_decodes_length():
    header = Ascii4BytesHeader()
    read = header.read_from(io.BytesIO(b"0115"))
    assert header.length == 115
    assert read == 4


def test_ascii_read_short_data_raises():
    header = Ascii4BytesHeader()
    with pytest.raises(HeaderError, match="reading header"):
        header.read_from(io.BytesIO(b"011"))


def test_ascii_read_non_numeric_raises():
    with pytest.raises(HeaderError, match="converting header to int"):
        Ascii4BytesHeader().read_from(io.BytesIO(b"01A5"))


def test_ascii_round_trip_leaves_rest_of_stream():
    out = io.BytesIO()
    Ascii4BytesHeader(42).write_to(out)
    stream = io.BytesIO(out.getvalue() + b"payload")
    header = Ascii4BytesHeader()
    header.read_from(stream)
    assert header.length == 42
    assert stream.read() == b"payload"


# BCD 2 bytes


def test_bcd_write_encodes_length():
    header = Bcd2BytesHeader()
    header.length = 115
    count, data = _written(header)
    assert count == 2
    assert data == bytes([0x01, 0x15])


def test_bcd_read_decodes_length():
    header = Bcd2BytesHeader()
    read = header.read_from(io.BytesIO(bytes([0x01, 0x15])))
    assert header.length == 115
    assert read == 2


def test_bcd_read_short_data_raises():
    with pytest.raises(HeaderError):
        Bcd2BytesHeader().read_from(io.BytesIO(bytes([0x01])))


def test_bcd_read_invalid_nibble_raises():
    with pytest.raises(HeaderError):
        Bcd2BytesHeader().read_from(io.BytesIO(bytes([0x0A, 0x15])))


def test_bcd_write_negative_length_raises():
    with pytest.raises(HeaderError):
        Bcd2BytesHeader(-1).write_to(io.BytesIO())


# Binary 2 bytes


def test_binary_write_encodes_length():
    header = Binary2BytesHeader()
    header.length = 319
    count, data = _written(header)
    assert count == 2
    assert data == bytes([0x01, 0x3F])


def test_binary_read_decodes_length():
    header = Binary2BytesHeader()
    read = header.read_from(io.BytesIO(bytes([0x01, 0x3F])))
    assert header.length == 319
    assert read == 2


def test_binary_length_above_uint16_raises():
    header = Binary2BytesHeader()
    with pytest.raises(HeaderError, match="exceeds max length for 2 bytes header 65535"):
        header.length = 65536
    assert header.length == 0


def test_binary_read_short_data_raises():
    with pytest.raises(HeaderError, match="reading uint16 from reader"):
        Binary2BytesHeader().read_from(io.BytesIO(b"\x01"))


# VML header


def test_vml_write_encodes_length_and_reserved_bytes():
    header = VmlHeader()
    header.length = 15
    count, data = _written(header)
    assert count == 4
    assert data == bytes([0x00, 0x0F, 0x00, 0x00])


def test_vml_write_above_max_message_length_raises():
    header = VmlHeader()
    header.length = MAX_MESSAGE_LENGTH + 1
    buf = io.BytesIO()
    with pytest.raises(HeaderError, match="exceeds max length 2048"):
        header.write_to(buf)
    assert buf.getvalue() == b""


def test_vml_read_with_session_control():
    header = VmlHeader()
    read = header.read_from(io.BytesIO(bytes([0x00, 0x0F, 0x00, 0x20])))
    assert header.length == 15
    assert read == 4
    assert header.is_session_control is True


def test_vml_read_without_session_control():
    header = VmlHeader()
    header.read_from(io.BytesIO(bytes([0x00, 0x0F, 0x00, 0x10])))
    assert header.length == 15
    assert header.is_session_control is False


def test_vml_read_above_max_message_length_raises():
    with pytest.raises(HeaderError):
        VmlHeader().read_from(io.BytesIO(bytes([0xFF, 0xFF, 0x00, 0x20])))


def test_vml_read_short_data_raises():
    with pytest.raises(HeaderError, match="reading 4 bytes from reader"):
        VmlHeader().read_from(io.BytesIO(bytes([0x00, 0x0F])))


def test_vml_read_invalid_indicator_raises():
    with pytest.raises(HeaderError, match="decoding indicators"):
        VmlHeader().read_from(io.BytesIO(bytes([0x00, 0x0F, 0x00, 0xA0])))


@pytest.mark.parametrize(
    "header_type,length",
    [
        (Ascii4BytesHeader, 9999),
        (Bcd2BytesHeader, 1234),
        (Binary2BytesHeader, 65535),
        (VmlHeader, 2048),
    ],
)
def test_round_trip(header_type, length):
    out = io.BytesIO()
    written = header_type(length).write_to(out)
    header = header_type()
    read = header.read_from(io.BytesIO(out.getvalue()))
    assert header.length == length
    assert read == written == len(out.getvalue())