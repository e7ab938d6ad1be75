import pytest

from cr2info import constants

LONG = 4
SHORT = 3
ASCII = 2
RATIONAL = 5
UNDEFINED = 7

MARKERS = {"little": b"II", "big": b"MM"}


class Cr2Builder(object):
    """Lays out a CR2-like byte stream: header first, everything else
    appended behind it in the order it is added."""

    def __init__(self, order="little"):
        self.order = order
        self.data = bytearray(constants.HEADER_SIZE)
        self.header()

    def tell(self):
        return len(self.data)

    def u16(self, value):
        return value.to_bytes(2, self.order)

    def u32(self, value):
        return value.to_bytes(4, self.order)

    def header(self,
               tiff_offset=constants.HEADER_SIZE,
               tiff_magic=42,
               marker=b"CR",
               major=2,
               minor=0,
               raw_ifd_offset=0,
               byte_order=None):
        self.data[0:16] = (
            (byte_order if byte_order is not None else MARKERS[self.order]) +
            self.u16(tiff_magic) + self.u32(tiff_offset) + marker +
            bytes([major, minor]) + self.u32(raw_ifd_offset))

    def blob(self, data):
        offset = self.tell()
        self.data += data
        if len(self.data) % 2:
            self.data += b"\x00"

        return offset

    def string(self, s):
        return self.blob(s.encode("utf-8") + b"\x00")

    def rational(self, numerator, denominator):
        return self.blob(self.u32(numerator) + self.u32(denominator))

    def shorts(self, *values):
        return self.blob(b"".join(self.u16(v) for v in values))

    def ifd(self, entries, next_offset=0):
        data = self.u16(len(entries))
        for tag, typ, count, value in entries:
            data += self.u16(tag) + self.u16(typ) + self.u32(count)
            if typ == SHORT and count == 1:
                data += self.u16(value) + b"\x00\x00"
            else:
                data += self.u32(value)

        data += self.u32(next_offset)
        return self.blob(data)

    def link(self, ifd_offset, next_offset):
        count = int.from_bytes(self.data[ifd_offset:ifd_offset + 2],
                               self.order)
        pos = ifd_offset + 2 + count * constants.ENTRY_SIZE
        self.data[pos:pos + 4] = self.u32(next_offset)

    def build(self):
        return bytes(self.data)


def build_sample(order="little"):
    b = Cr2Builder(order)

    owner = b.string("Jane Photographer")
    lens = b.string("EF24-70mm f/2.8L USM")
    color_space = b.shorts(1)
    focal = b.shorts(0, 50)
    makernote = b.ifd([
        (constants.TAG_OWNER_NAME, ASCII, 18, owner),
        (constants.TAG_FOCAL_LENGTH, SHORT, 2, focal),
        (constants.TAG_LENS_MODEL, ASCII, 21, lens),
        (constants.TAG_COLOR_SPACE, LONG, 1, color_space),
    ])

    exposure = b.rational(1, 200)
    f_number = b.rational(28, 10)
    exif = b.ifd([
        (constants.TAG_EXPOSURE_TIME, RATIONAL, 1, exposure),
        (constants.TAG_F_NUMBER, RATIONAL, 1, f_number),
        (constants.TAG_MAKERNOTE, UNDEFINED, 1024, makernote),
    ])

    model = b.string("Canon EOS 5D Mark II")
    date_time = b.string("2011:05:21 14:03:09")
    ifd3 = b.ifd([(0x0103, SHORT, 1, 6)])
    ifd2 = b.ifd([(0x0100, SHORT, 1, 362), (0x0101, SHORT, 1, 234)], ifd3)
    ifd1 = b.ifd([(0x0201, LONG, 1, 0), (0x0202, LONG, 1, 0)], ifd2)
    ifd0 = b.ifd([
        (constants.TAG_IMAGE_WIDTH, LONG, 1, 5616),
        (constants.TAG_IMAGE_HEIGHT, LONG, 1, 3744),
        (constants.TAG_COMPRESSION, SHORT, 1, 6),
        (constants.TAG_MODEL, ASCII, 21, model),
        (constants.TAG_DATE_TIME, ASCII, 20, date_time),
        (constants.TAG_EXIF, LONG, 1, exif),
    ], ifd1)

    b.header(tiff_offset=ifd0, raw_ifd_offset=ifd3)
    return b.build()


@pytest.fixture
def builder():
    return Cr2Builder


@pytest.fixture(params=["little", "big"])
def order(request):
    return request.param


@pytest.fixture
def sample(order):
    return build_sample(order)


@pytest.fixture
def sample_path(tmp_path):
    path = tmp_path / "IMG_0001.CR2"
    path.write_bytes(build_sample())
    return path
