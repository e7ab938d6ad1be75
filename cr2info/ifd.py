import logging
from dataclasses import dataclass, field

from . import utils
from .buf import Buf
from .constants import FIELD_SIZES, FIELD_TYPES, MAX_VALUES, SHORT, TAG_IDS
from .errors import FormatError

logger = logging.getLogger(__name__)


@dataclass
class DirectoryEntry:
    tag: int
    type: int
    count: int
    value: int
    offset: int = 0

    @property
    def tag_name(self):
        return TAG_IDS.get(self.tag, "Unknown")

    @property
    def type_name(self):
        return FIELD_TYPES.get(self.type, "Unknown")

    @property
    def size(self):
        if self.type not in FIELD_SIZES:
            return None

        return FIELD_SIZES[self.type] * self.count

    @property
    def is_inline(self):
        return self.size is not None and self.size <= 4

    def scalar(self, order):
        # a single short sits in the first half of the value field
        if self.type == SHORT and self.count == 1:
            return int.from_bytes(self.value.to_bytes(4, order)[:2], order)

        return self.value

    def read_values(self, buf, limit=MAX_VALUES):
        """Decode the payload of this entry according to its field type.

        Inline payloads are rebuilt from the value field in file byte order,
        out-of-line payloads are read at the value offset and the cursor of
        ``buf`` is left where it was. Returns None for unknown field types
        and for entries with more than ``limit`` values.
        """
        if self.size is None or self.count > limit:
            return None

        if self.is_inline:
            src = Buf(self.value.to_bytes(4, buf.order), buf.order)
            return _read_typed(src, self.type, self.count)

        with buf:
            buf.seek(self.value)
            return _read_typed(buf, self.type, self.count)

    def to_dict(self):
        return {
            "id": f"{self.tag_name} ({utils.hexify(self.tag)})",
            "type": f"{self.type_name} ({utils.hexify(self.type)})",
            "count": self.count,
            "offset-or-value": self.value,
        }


@dataclass
class IFD:
    offset: int
    entries: list = field(default_factory=list)
    next_offset: int = 0

    def __len__(self):
        return len(self.entries)

    def __iter__(self):
        return iter(self.entries)

    def to_dict(self):
        return {
            "offset": self.offset,
            "entry-count": len(self.entries),
            "entries": [entry.to_dict() for entry in self.entries],
            "next-ifd-offset": self.next_offset,
        }


def _read_typed(buf, field_type, count):
    match field_type:
        case 2:
            raw = buf.read(count)
            return utils.decode(raw.split(b"\x00", 1)[0], "latin-1")
        case 7:
            return buf.rh(count)

    values = []
    for i in range(0, count):
        match field_type:
            case 1:
                values.append(buf.ru8())
            case 3:
                values.append(buf.ru16())
            case 4:
                values.append(buf.ru32())
            case 5:
                numerator, denominator = buf.rrational()
                values.append({
                    "numerator": numerator,
                    "denominator": denominator,
                })
            case 6:
                values.append(buf.ri8())
            case 8:
                values.append(buf.ri16())
            case 9:
                values.append(buf.ri32())
            case 10:
                numerator, denominator = buf.rsrational()
                values.append({
                    "numerator": numerator,
                    "denominator": denominator,
                })
            case 11:
                values.append(buf.rf32())
            case 12:
                values.append(buf.rf64())

    return values


def decode_ifd(buf, offset):
    buf.seek(offset)

    entry_count = buf.ru16()
    if entry_count == 0:
        raise FormatError(
            f"empty or invalid directory at offset {utils.hexify(offset, 8)}")

    ifd = IFD(offset)
    for i in range(0, entry_count):
        entry_offset = buf.tell()
        ifd.entries.append(
            DirectoryEntry(tag=buf.ru16(),
                           type=buf.ru16(),
                           count=buf.ru32(),
                           value=buf.ru32(),
                           offset=entry_offset))

    ifd.next_offset = buf.ru32()

    logger.debug("IFD at %s has %d entries, next at %s",
                 utils.hexify(offset, 8), entry_count,
                 utils.hexify(ifd.next_offset, 8))

    return ifd


def decode_chain(buf, offset, limit=None):
    ifds = []
    seen = set()

    while offset != 0 and (limit is None or len(ifds) < limit):
        if offset in seen:
            raise FormatError(
                f"IFD chain loops back to offset {utils.hexify(offset, 8)}")

        seen.add(offset)
        ifd = decode_ifd(buf, offset)
        ifds.append(ifd)
        offset = ifd.next_offset

    return ifds
