from __future__ import annotations

import enum
from typing import Union

import numpy as np

from .errors import TruncatedReadError

Buffer = Union[bytes, bytearray, memoryview, np.ndarray]

# has_lookahead() stays true for this many leading bytes
LOOKAHEAD_MARGIN = 10


class TruncationPolicy(enum.Enum):
    """What a multi-byte read does when the buffer runs out."""

    RETURN_ZERO = "return-zero"
    FAIL = "fail"


def as_buffer(data: Buffer) -> np.ndarray:
    """Wrap ``data`` as a read-only 1-D uint8 array without copying."""
    if isinstance(data, np.ndarray):
        if data.dtype != np.uint8:
            raise TypeError(f"buffer must be a uint8 array, got {data.dtype}")
        arr = data.reshape(-1)
    else:
        arr = np.frombuffer(data, dtype=np.uint8)
    if arr.flags.writeable:
        # a view, so the caller's array keeps its flags
        arr = arr.view()
        arr.flags.writeable = False
    return arr


class Cursor:
    """
    Position-tracking view over an immutable byte buffer.

    Multi-byte values are read big-endian. A multi-byte peek only looks at
    the buffer when ``position + width < len(data)``; otherwise it returns 0.
    Note the strict bound: a value ending exactly on the last byte is also
    zero-filled.

    With ``TruncationPolicy.FAIL`` a multi-byte ``read`` raises
    ``TruncatedReadError`` instead when its bytes are not all there, and
    returns the real value when they fit exactly. ``peek`` is not affected.

    Single-byte access past the end always raises ``TruncatedReadError``.
    """

    def __init__(self, data: Buffer, policy: TruncationPolicy = TruncationPolicy.RETURN_ZERO):
        self.data = as_buffer(data)
        self.position = 0
        self.policy = policy

    def __len__(self) -> int:
        return len(self.data)

    def _unpack(self, width: int) -> int:
        return int.from_bytes(self.data[self.position:self.position + width].tobytes(), "big")

    def peek(self, width: int) -> int:
        if width < 1:
            raise ValueError(f"width must be at least 1, got {width}")
        if width == 1:
            if not 0 <= self.position < len(self.data):
                raise TruncatedReadError(self.position, 1, len(self.data))
            return int(self.data[self.position])
        if not self.position + width < len(self.data):
            return 0
        return self._unpack(width)

    def read(self, width: int) -> int:
        if self.policy is TruncationPolicy.FAIL and width > 1:
            if self.position + width > len(self.data):
                raise TruncatedReadError(self.position, width, len(self.data))
            value = self._unpack(width)
        else:
            value = self.peek(width)
        self.position += width
        return value

    def read_u8(self) -> int:
        return self.read(1)

    def read_u16(self) -> int:
        return self.read(2)

    def advance(self) -> None:
        self.position += 1

    skip = advance

    def has_next(self) -> bool:
        # position may sit one past the last byte
        return self.position <= len(self.data)

    def has_lookahead(self) -> bool:
        if self.position > LOOKAHEAD_MARGIN:
            return self.position - LOOKAHEAD_MARGIN < len(self.data)
        return True

    def remaining(self) -> int:
        return max(len(self.data) - self.position, 0)

    def __repr__(self) -> str:
        return f"Cursor(position={self.position}, length={len(self.data)}, policy={self.policy.name})"
