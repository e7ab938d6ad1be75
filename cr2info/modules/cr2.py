from .. import module
from ..constants import MAX_DEPTH
from ..errors import FormatError
from ..extract import extract_metadata
from ..header import decode_header
from ..ifd import decode_chain


@module.register
class Cr2Module(module.FormatModule):

    def identify(buf):
        # the header decoder rejects unknown byte order markers
        return True

    def chew(self):
        meta = {}

        header = decode_header(self.buf, self.options.get("strict", False))
        meta["type"] = "cr2" if header.is_cr2 else "tiff"
        meta["header"] = header.to_dict()

        ifds = decode_chain(self.buf, header.tiff_offset,
                            self.options.get("ifd-count"))
        if len(ifds) == 0:
            raise FormatError("file has no image file directory")

        meta["ifds"] = []
        for ifd in ifds:
            entry = ifd.to_dict()

            if self.options.get("values", False):
                for tag, raw in zip(entry["entries"], ifd.entries):
                    tag["values"] = raw.read_values(self.buf)

            meta["ifds"].append(entry)

        info = extract_metadata(self.buf,
                                ifds[0],
                                max_depth=self.options.get(
                                    "max-depth", MAX_DEPTH))
        meta["image-info"] = info.to_dict()

        return meta
