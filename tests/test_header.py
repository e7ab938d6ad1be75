import pytest

from cr2info import Buf, FormatError, ReadError, decode_header


def test_header_fields_are_identical_in_both_byte_orders(builder):
    headers = []
    for order in ("little", "big"):
        b = builder(order)
        b.header(tiff_offset=0x10, raw_ifd_offset=0x1234, major=2, minor=0)
        buf = Buf(b.build())

        header = decode_header(buf)

        assert buf.order == order
        assert header.byte_order == order
        headers.append(header)

    le, be = headers
    for field in ("tiff_magic", "tiff_offset", "marker",
                  "major_version", "minor_version", "raw_ifd_offset"):
        assert getattr(le, field) == getattr(be, field)

    assert le.raw_byte_order == 0x4949
    assert be.raw_byte_order == 0x4d4d


def test_header_values(builder):
    b = builder("little")
    b.header(tiff_offset=0x10, raw_ifd_offset=0xabcd, major=2, minor=1)

    header = decode_header(Buf(b.build()))

    assert header.tiff_magic == 42
    assert header.tiff_offset == 0x10
    assert header.cr2_magic == 0x5243
    assert header.marker == "CR"
    assert header.major_version == 2
    assert header.minor_version == 1
    assert header.raw_ifd_offset == 0xabcd
    assert header.is_cr2


def test_header_is_read_from_start_of_stream(builder):
    buf = Buf(builder("big").build())
    buf.seek(12)

    assert decode_header(buf).byte_order == "big"
    assert buf.tell() == 16


def test_unrecognized_byte_order_marker(builder):
    b = builder("little")
    b.header(byte_order=b"IM")

    with pytest.raises(FormatError, match="byte order marker"):
        decode_header(Buf(b.build()))


def test_permissive_by_default(builder):
    b = builder("little")
    b.header(tiff_magic=43, marker=b"XY")

    header = decode_header(Buf(b.build()))

    assert header.tiff_magic == 43
    assert header.marker == "XY"
    assert not header.is_cr2


@pytest.mark.parametrize("kwargs", [{"tiff_magic": 43}, {"marker": b"XY"}])
def test_strict_mode_checks_magic_words(builder, kwargs):
    b = builder("big")
    b.header(**kwargs)

    with pytest.raises(FormatError):
        decode_header(Buf(b.build()), strict=True)


def test_strict_mode_accepts_cr2(builder):
    assert decode_header(Buf(builder("big").build()), strict=True).is_cr2


def test_truncated_header():
    with pytest.raises(ReadError):
        decode_header(Buf(b"II*\x00\x10\x00"))


def test_to_dict(builder):
    meta = decode_header(Buf(builder("little").build())).to_dict()

    assert meta == {
        "byte-order": "little",
        "tiff-magic": 42,
        "tiff-offset": 16,
        "cr2-magic": "0x5243",
        "marker": "CR",
        "version": "2.0",
        "raw-ifd-offset": 0,
    }
