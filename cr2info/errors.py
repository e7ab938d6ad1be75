class Cr2Error(Exception):
    pass


class ReadError(Cr2Error):
    """The byte source ran out or could not be positioned."""


class FormatError(Cr2Error):
    """Bytes were read but do not form a valid structure."""
