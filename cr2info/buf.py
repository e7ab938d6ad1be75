import io
import struct

from . import utils
from .constants import MAX_STRING_LENGTH
from .errors import FormatError, ReadError

STRUCT_ORDERS = {"little": "<", "big": ">"}


class Buf(object):

    def __init__(self, source, order=None):
        if isinstance(source, io.IOBase):
            self._file = source
        else:
            self._file = io.BytesIO(source)

        pos = self.tell()
        self.seek(0, 2)
        self._size = self.tell()
        self.seek(pos)

        self.order = order
        self._backup = []

    @classmethod
    def of(cls, source, order=None):
        if isinstance(source, cls):
            return source
        else:
            return cls(source, order)

    @property
    def order(self):
        return self._order

    @order.setter
    def order(self, order):
        if order is not None and order not in STRUCT_ORDERS:
            raise ValueError(f"unknown byte order {order!r}")

        self._order = order

    def _byteorder(self):
        if self._order is None:
            raise FormatError("byte order has not been established")

        return self._order

    def available(self):
        return max(self._size - self.tell(), 0)

    def isend(self):
        return self.available() <= 0

    def size(self):
        return self._size

    def peek(self, length):
        pos = self.tell()
        data = self._file.read(length)
        self.seek(pos)
        return data

    def tell(self):
        return self._file.tell()

    def seek(self, pos, whence=0):
        try:
            self._file.seek(pos, whence)
        except (OSError, ValueError) as e:
            raise ReadError(f"cannot seek to {pos}: {e}") from e

    def read(self, count):
        data = self._file.read(count)
        if len(data) != count:
            raise ReadError(
                f"wanted {count} byte{'s' if count != 1 else ''} at offset "
                f"{self.tell() - len(data)}, got {len(data)}")

        return data

    def ru8(self):
        return self.read(1)[0]

    def ru16(self):
        return int.from_bytes(self.read(2), self._byteorder())

    def ru32(self):
        return int.from_bytes(self.read(4), self._byteorder())

    def ri8(self):
        return int.from_bytes(self.read(1), "big", signed=True)

    def ri16(self):
        return int.from_bytes(self.read(2), self._byteorder(), signed=True)

    def ri32(self):
        return int.from_bytes(self.read(4), self._byteorder(), signed=True)

    def rf32(self):
        fmt = STRUCT_ORDERS[self._byteorder()] + "f"
        return struct.unpack(fmt, self.read(4))[0]

    def rf64(self):
        fmt = STRUCT_ORDERS[self._byteorder()] + "d"
        return struct.unpack(fmt, self.read(8))[0]

    def rrational(self):
        return self.ru32(), self.ru32()

    def rsrational(self):
        return self.ri32(), self.ri32()

    def rh(self, length):
        return self.read(length).hex()

    def rzs(self, limit=MAX_STRING_LENGTH, encoding="utf-8"):
        start = self.tell()

        s = b""
        while len(s) < limit:
            c = self.read(1)
            if c == b"\x00":
                return utils.decode(s, encoding)

            s += c

        raise FormatError(
            f"string at offset {start} is not terminated within {limit} bytes")

    def __getattr__(self, name):
        # Delegate everything else to the underlying file
        return getattr(self._file, name)

    def __enter__(self):
        self._backup.append(self.tell())
        return self

    def __exit__(self, *args):
        self.seek(self._backup.pop())
