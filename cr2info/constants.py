HEADER_SIZE = 16
ENTRY_SIZE = 12

LITTLE_ENDIAN_MARKER = 0x4949
BIG_ENDIAN_MARKER = 0x4d4d

BYTE_ORDERS = {
    LITTLE_ENDIAN_MARKER: "little",
    BIG_ENDIAN_MARKER: "big",
}

TIFF_MAGIC = 42
CR2_MARKER = "CR"

DEFAULT_IFD_COUNT = 4
MAX_DEPTH = 16
MAX_STRING_LENGTH = 8192
MAX_VALUES = 64

TAG_FOCAL_LENGTH = 0x0002
TAG_OWNER_NAME = 0x0009
TAG_LENS_MODEL = 0x0095
TAG_COLOR_SPACE = 0x00b4
TAG_IMAGE_WIDTH = 0x0100
TAG_IMAGE_HEIGHT = 0x0101
TAG_COMPRESSION = 0x0103
TAG_MODEL = 0x0110
TAG_DATE_TIME = 0x0132
TAG_EXPOSURE_TIME = 0x829a
TAG_F_NUMBER = 0x829d
TAG_EXIF = 0x8769
TAG_MAKERNOTE = 0x927c

# MakerNote tag ids overlap with low TIFF ids, names follow the Canon meaning
TAG_IDS = {
    0x0001: "CanonCameraSettings",
    0x0002: "CanonFocalLength",
    0x0004: "CanonShotInfo",
    0x0006: "CanonImageType",
    0x0007: "CanonFirmwareVersion",
    0x0009: "OwnerName",
    0x000c: "SerialNumber",
    0x0010: "CanonModelID",
    0x0095: "LensModel",
    0x00b4: "ColorSpace",
    0x00fe: "NewSubfileType",
    0x0100: "ImageWidth",
    0x0101: "ImageLength",
    0x0102: "BitsPerSample",
    0x0103: "Compression",
    0x0106: "PhotometricInterpretation",
    0x010f: "Make",
    0x0110: "Model",
    0x0111: "StripOffsets",
    0x0112: "Orientation",
    0x0115: "SamplesPerPixel",
    0x0116: "RowsPerStrip",
    0x0117: "StripByteCounts",
    0x011a: "XResolution",
    0x011b: "YResolution",
    0x011c: "PlanarConfiguration",
    0x0128: "ResolutionUnit",
    0x0131: "Software",
    0x0132: "DateTime",
    0x013b: "Artist",
    0x0201: "JPEGInterchangeFormat",
    0x0202: "JPEGInterchangeFormatLength",
    0x8298: "Copyright",
    0x829a: "ExposureTime",
    0x829d: "FNumber",
    0x8769: "ExifIFDPointer",
    0x8822: "ExposureProgram",
    0x8825: "GPSInfoIFDPointer",
    0x8827: "ISOSpeedRatings",
    0x9000: "ExifVersion",
    0x9003: "DateTimeOriginal",
    0x9004: "DateTimeDigitized",
    0x9201: "ShutterSpeedValue",
    0x9202: "ApertureValue",
    0x9204: "ExposureBiasValue",
    0x9207: "MeteringMode",
    0x9209: "Flash",
    0x920a: "FocalLength",
    0x927c: "MakerNote",
    0x9286: "UserComment",
    0xa001: "ColorSpace",
    0xa002: "PixelXDimension",
    0xa003: "PixelYDimension",
    0xa005: "InteroperabilityIFDPointer",
    0xa434: "LensModel",
    0xc5d8: "CR2Unknown1",
    0xc5d9: "CR2Unknown2",
    0xc5e0: "CR2SensorKind",
    0xc640: "CR2Slice",
}

FIELD_TYPES = {
    1: "Byte",
    2: "ASCII",
    3: "Short",
    4: "Long",
    5: "Rational",
    6: "Signed byte",
    7: "Undefined",
    8: "Signed short",
    9: "Signed long",
    10: "Signed rational",
    11: "Float",
    12: "Double",
}

SHORT = 3

FIELD_SIZES = {
    1: 1,
    2: 1,
    3: 2,
    4: 4,
    5: 8,
    6: 1,
    7: 1,
    8: 2,
    9: 4,
    10: 8,
    11: 4,
    12: 8,
}

COMPRESSIONS = {
    6: "legacy JPEG",
}

COLOR_SPACE_SRGB = 1
