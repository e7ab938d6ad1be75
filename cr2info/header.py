import logging
from dataclasses import dataclass

from . import utils
from .constants import BYTE_ORDERS, CR2_MARKER, TIFF_MAGIC
from .errors import FormatError

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Header:
    byte_order: str
    raw_byte_order: int
    tiff_magic: int
    tiff_offset: int
    cr2_magic: int
    major_version: int
    minor_version: int
    raw_ifd_offset: int

    @property
    def marker(self):
        return utils.decode(self.cr2_magic.to_bytes(2, self.byte_order),
                            "latin-1")

    @property
    def is_cr2(self):
        return self.tiff_magic == TIFF_MAGIC and self.marker == CR2_MARKER

    def to_dict(self):
        return {
            "byte-order": self.byte_order,
            "tiff-magic": self.tiff_magic,
            "tiff-offset": self.tiff_offset,
            "cr2-magic": utils.hexify(self.cr2_magic),
            "marker": self.marker,
            "version": f"{self.major_version}.{self.minor_version}",
            "raw-ifd-offset": self.raw_ifd_offset,
        }


def decode_header(buf, strict=False):
    buf.seek(0)

    # both markers are palindromes, so no byte order is needed to read them
    raw = int.from_bytes(buf.read(2), "big")
    if raw not in BYTE_ORDERS:
        raise FormatError(
            f"unrecognized byte order marker {utils.hexify(raw)}")

    buf.order = BYTE_ORDERS[raw]
    logger.debug("byte order is %s", buf.order)

    header = Header(byte_order=buf.order,
                    raw_byte_order=raw,
                    tiff_magic=buf.ru16(),
                    tiff_offset=buf.ru32(),
                    cr2_magic=buf.ru16(),
                    major_version=buf.ru8(),
                    minor_version=buf.ru8(),
                    raw_ifd_offset=buf.ru32())

    if strict:
        if header.tiff_magic != TIFF_MAGIC:
            raise FormatError(f"bad TIFF magic {header.tiff_magic}")
        if header.marker != CR2_MARKER:
            raise FormatError(f"bad CR2 marker {header.marker!r}")

    return header
