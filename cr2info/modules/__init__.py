from .. import module
from ..buf import Buf
from ..constants import DEFAULT_IFD_COUNT, MAX_DEPTH
from ..errors import Cr2Error, FormatError

import logging

logger = logging.getLogger(__name__)


class EntryModule(module.FormatModule):

    def __init__(self, raise_errors, *args, **kwargs):
        super().__init__(*args, **kwargs)

        self.raise_errors = raise_errors

    def find_module(self):
        for m in module.modules:
            with self.buf:
                self.buf.seek(0)
                if m.identify(self.buf):
                    return m

        return None

    def chew(self):
        meta = {}
        meta["length"] = self.buf.size()

        m = self.find_module()
        try:
            if m is None:
                raise FormatError("no format module accepts this data")

            rest = m(self.buf, self.options).chew()
        except Cr2Error as e:
            if self.raise_errors:
                raise

            logger.debug("decoding failed: %s", e)

            rest = {
                "type": "error",
                "module": m.__name__ if m is not None else None,
                "error-type": type(e).__name__,
                "error-message": str(e),
            }

        meta |= rest
        return meta


def chew(blob,
         ifd_count=DEFAULT_IFD_COUNT,
         max_depth=MAX_DEPTH,
         strict=False,
         values=False,
         raise_errors=False):
    options = {
        "ifd-count": ifd_count,
        "max-depth": max_depth,
        "strict": strict,
        "values": values,
    }

    return EntryModule(raise_errors, Buf.of(blob), options).chew()


from . import cr2  # noqa: F401,E402
