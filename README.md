# isofields

Building blocks for encoding and decoding the fields of ISO 8583 style
financial messages:

- **Padding**: fill a value up to a fixed width on the left or the right,
  and strip that fill again.
- **Length prefixes**: write and read the length that goes in front of a
  field. The encodings are ASCII digits, hex digits, big-endian binary, BCD,
  EBCDIC (code page 037), EBCDIC code page 1047 and BER-TLV. Each family
  also has a fixed-length prefixer that writes nothing.
- **Tag sorting**: order subfield tags as plain strings, by integer value or
  by hex value.
- **Network headers**: the length header that comes before each message on
  the wire: 4 ASCII digits, 2 BCD bytes, 2 binary bytes, or the 4-byte VML
  header with its session-control flag.

The package uses only the standard library.

## Installation

```
pip install isofields
```

To run the test suite:

```
pip install "isofields[test]"
pytest
```

## Modules

| Module | What it holds |
| --- | --- |
| `isofields.padding` | `Padder`, `LeftPadder`, `RightPadder`, `NonePadder`, `NONE` |
| `isofields.prefix.core` | `Prefixer`, `Prefixers`, `NonePrefixer`, `PrefixError`, `NONE` |
| `isofields.prefix.ascii` | `AsciiVarPrefixer`, `AsciiFixedPrefixer`, `ASCII` |
| `isofields.prefix.hex` | `HexVarPrefixer`, `HexFixedPrefixer`, `HEX` |
| `isofields.prefix.binary` | `BinaryVarPrefixer`, `BinaryFixedPrefixer`, `BINARY` |
| `isofields.prefix.bertlv` | `BerTLVPrefixer`, `BER_TLV` |
| `isofields.prefix.bcd` | `BcdVarPrefixer`, `BcdFixedPrefixer`, `bcd_encode`, `bcd_decode`, `BCD` |
| `isofields.prefix.ebcdic` | `EbcdicVarPrefixer`, `EbcdicFixedPrefixer`, `Ebcdic1047Prefixer`, `Ebcdic1047FixedPrefixer`, `EBCDIC`, `EBCDIC1047` |
| `isofields.sorting` | `sort_strings`, `sort_strings_by_int`, `sort_strings_by_hex` |
| `isofields.network` | `Header`, `Ascii4BytesHeader`, `Bcd2BytesHeader`, `Binary2BytesHeader`, `VmlHeader`, `HeaderError`, `MAX_MESSAGE_LENGTH` |

## Padding

`LeftPadder` and `RightPadder` take a single fill character, for example
`LeftPadder("0")`. Every padder has three methods:

- `pad(data, length)` returns `data` with the fill repeated until it reaches
  `length` characters. Data that is already long enough comes back unchanged.
- `unpad(data)` strips the fill from the padded side.
- `inspect()` returns the fill character encoded as UTF-8 bytes
  (`b""` for `NonePadder`).

With a fill of `"0"`, `LeftPadder` turns `b"12345"` into `b"0000012345"`
when padded to 10, and `RightPadder` turns it into `b"1234500000"`.
`NonePadder` (also available as `isofields.padding.NONE`) leaves data as it
is.

## Length prefixers

All prefixers share one interface:

- `encode_length(max_len, data_len)` returns the bytes to write in front of
  the field.
- `decode_length(max_len, data)` returns a pair: the field length and the
  number of prefix bytes read from the start of `data`.
- `inspect()` returns a short name such as `"ASCII.LL"`, `"BCD.LLL"` or
  `"Hex.Fixed"`.

Each encoding module offers a ready-made `Prefixers` set with the members
`fixed`, `l`, `ll`, `lll`, `llll`, `lllll` and `llllll` (one to six length
digits), for example `ASCII.ll` or `BCD.lll`.

What each encoding writes:

- ASCII `ll` writes a length of 2 as `b"02"`.
- BCD `lll` writes 200 as `b"\x02\x00"`.
- EBCDIC `ll` writes 12 as `b"\xf1\xf2"`; EBCDIC1047 writes digits the same way.
- Binary `ll` writes 256 as `b"\x01\x00"`.
- Hex `lll` writes 24 as `b"000018"`.
- `BER_TLV` uses the short form up to 127; 131 becomes `b"\x81\x83"`.
  Passing `max_len=0` turns off its maximum-length check.

Fixed prefixers write nothing and decode to `max_len`. On encoding they check
the length: ASCII, binary and EBCDIC1047 want it equal to `max_len`, BCD and
EBCDIC want it no larger, and hex wants exactly twice `max_len`. The `NONE`
set in `isofields.prefix.core` holds a prefixer that writes nothing and takes
all the remaining data as the field.

`bcd_encode` packs decimal digits two per byte, adding a leading zero to an
odd count; `bcd_decode(data, length)` unpacks `length` digits back to ASCII.

A prefixer raises `PrefixError` (a `ValueError`) when the length is larger
than allowed, needs more digits than the prefix has, does not match a fixed
length, when there is not enough data to read the prefix, or when the prefix
bytes are not valid digits.

## Sorting tags

Each function returns a new sorted list.

- `sort_strings` orders tags as plain strings, so `"11"` sorts before `"2"`.
- `sort_strings_by_int` orders by integer value: `"1"`, `"5"`, `"11"`.
- `sort_strings_by_hex` orders by big-endian hex value: `"10"`, `"B0"`,
  `"ABCD"`.

Where either tag of a pair cannot be parsed (for hex: not an even-length hex
string), the pair is compared as plain strings.

## Network headers

A header holds the length of the message that follows it on the wire, in its
`length` attribute.

- `write_to(stream)` writes the encoded length to a binary stream and
  returns the number of bytes written.
- `read_from(stream)` reads the header from a binary stream, stores the
  decoded length and returns the number of bytes read.

```python
import io
from isofields.network import Bcd2BytesHeader

header = Bcd2BytesHeader(115)
buf = io.BytesIO()
header.write_to(buf)          # buf now holds b"\x01\x15"

buf.seek(0)
incoming = Bcd2BytesHeader()
incoming.read_from(buf)
incoming.length               # 115
```

Each format writes the length differently:

- `Ascii4BytesHeader` writes 115 as `b"0115"`.
- `Bcd2BytesHeader` writes 115 as `b"\x01\x15"`.
- `Binary2BytesHeader` writes 319 as `b"\x01\x3f"`.
- `VmlHeader` writes the length in 2 big-endian bytes followed by 2 reserved
  zero bytes. On reading it sets `is_session_control` when the message format
  indicator is 2. It refuses lengths above `MAX_MESSAGE_LENGTH` (2048) when
  writing or reading.

`Binary2BytesHeader` and `VmlHeader` refuse a `length` above 65535. A header
raises `HeaderError` (a `ValueError`) when the stream ends before the header
is complete or when its contents are invalid.

## What the package does not do

It provides the pieces that field and message codecs are built from, not the
codecs themselves: there are no field types, message specifications, bitmaps
or whole-message packing and unpacking, no data encodings beyond what the
prefixers and headers need, and no command-line tool or network client.