import logging
from dataclasses import asdict, dataclass

from . import constants, utils
from .errors import FormatError
from .ifd import decode_ifd

logger = logging.getLogger(__name__)

SCALAR_TAGS = {
    constants.TAG_IMAGE_WIDTH: "image_width",
    constants.TAG_IMAGE_HEIGHT: "image_height",
    constants.TAG_COMPRESSION: "compression",
}

STRING_TAGS = {
    constants.TAG_OWNER_NAME: "owner_name",
    constants.TAG_LENS_MODEL: "lens_model",
    constants.TAG_MODEL: "model",
    constants.TAG_DATE_TIME: "date_time",
}

SUB_IFD_TAGS = (constants.TAG_EXIF, constants.TAG_MAKERNOTE)


@dataclass
class ImageInfo:
    model: str = None
    lens_model: str = None
    owner_name: str = None
    date_time: str = None
    image_width: int = None
    image_height: int = None
    compression: int = None
    color_space: str = None
    exposure_time: str = None
    f_number: str = None
    focal_length: int = None

    @property
    def compression_name(self):
        if self.compression is None:
            return None

        return constants.COMPRESSIONS.get(self.compression, "unknown")

    def to_dict(self):
        meta = {
            k.replace("_", "-"): v
            for k, v in asdict(self).items() if v is not None
        }

        if self.compression is not None:
            meta["compression"] = utils.unraw(self.compression,
                                              constants.COMPRESSIONS)

        return meta


def extract_metadata(buf, ifd, info=None, max_depth=constants.MAX_DEPTH):
    """Collect image attributes from ``ifd`` and the sub-IFDs it points to.

    All values land in one ImageInfo, so an entry visited later overwrites
    whatever an earlier entry (in this or any nested directory) stored for
    the same attribute. Descending more than ``max_depth`` levels below the
    root directory raises FormatError.
    """
    if info is None:
        info = ImageInfo()

    _extract(buf, ifd, info, 0, max_depth)

    return info


def _extract(buf, ifd, info, depth, max_depth):
    for entry in ifd.entries:
        tag = entry.tag

        if tag in SCALAR_TAGS:
            setattr(info, SCALAR_TAGS[tag], entry.scalar(buf.order))
            continue

        if tag in STRING_TAGS:
            buf.seek(entry.value)
            setattr(info, STRING_TAGS[tag], buf.rzs())
            continue

        if tag in SUB_IFD_TAGS:
            if depth >= max_depth:
                raise FormatError(
                    f"maximum nesting exceeded at offset "
                    f"{utils.hexify(entry.value, 8)} (limit {max_depth})")

            logger.debug("descending into %s at %s", entry.tag_name,
                         utils.hexify(entry.value, 8))

            sub_ifd = decode_ifd(buf, entry.value)
            _extract(buf, sub_ifd, info, depth + 1, max_depth)
            continue

        match tag:
            case constants.TAG_EXPOSURE_TIME:
                buf.seek(entry.value)
                info.exposure_time = utils.format_exposure(*buf.rrational())
            case constants.TAG_F_NUMBER:
                buf.seek(entry.value)
                info.f_number = utils.format_f_number(*buf.rrational())
            case constants.TAG_FOCAL_LENGTH:
                # second of two packed shorts
                buf.seek(entry.value + 2)
                info.focal_length = buf.ru16()
            case constants.TAG_COLOR_SPACE:
                buf.seek(entry.value)
                if buf.ru16() == constants.COLOR_SPACE_SRGB:
                    info.color_space = "sRGB"
                else:
                    info.color_space = "Adobe RGB"
