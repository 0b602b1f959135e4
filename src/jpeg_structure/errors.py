class JpgError(Exception):
    """Base class for structural errors found while reading a JPEG buffer."""


class InvalidSOI(JpgError):
    """The buffer does not start with the Start Of Image marker (0xFFD8)."""

    def __init__(self, found: int):
        self.found = found
        super().__init__(f"Invalid SOI: expected 0xFFD8, found 0x{found:04X}")


class TruncatedReadError(JpgError):
    """A read needed bytes past the end of the buffer."""

    def __init__(self, position: int, width: int, length: int):
        self.position = position
        self.width = width
        self.length = length
        super().__init__(
            f"Truncated read: {width} byte(s) at offset {position}, buffer is {length} bytes"
        )
