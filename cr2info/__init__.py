from .buf import Buf
from .errors import Cr2Error, FormatError, ReadError
from .extract import ImageInfo, extract_metadata
from .header import Header, decode_header
from .ifd import IFD, DirectoryEntry, decode_chain, decode_ifd

__version__ = "0.1.0"

__all__ = [
    "Buf",
    "Cr2Error",
    "FormatError",
    "ReadError",
    "Header",
    "decode_header",
    "DirectoryEntry",
    "IFD",
    "decode_ifd",
    "decode_chain",
    "ImageInfo",
    "extract_metadata",
]
