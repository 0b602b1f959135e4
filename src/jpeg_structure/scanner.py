from __future__ import annotations

import enum
import logging
from typing import Any, Callable, Dict, Iterator, List, Mapping, Optional, Tuple

import numpy as np

from .cursor import Buffer, Cursor, TruncationPolicy, as_buffer
from .errors import InvalidSOI
from .frame import decode_frame_header
from .marker import Marker, is_filler

logger = logging.getLogger(__name__)

Handler = Callable[[Cursor], Any]

DEFAULT_HANDLERS: Dict[int, Handler] = {
    Marker.SOF0: decode_frame_header,
    Marker.SOF3: decode_frame_header,
}


class ScanState(enum.Enum):
    SCANNING = "scanning"
    DECODING = "decoding"
    DONE = "done"


def validate_soi(cursor: Cursor) -> None:
    """Consume the first two bytes, raising InvalidSOI unless they are FF D8."""
    head = cursor.data[:2].tobytes()
    found = int.from_bytes(head, "big") if len(head) == 2 else 0
    if found != Marker.SOI:
        raise InvalidSOI(found)
    cursor.read(2)
    logger.debug("SOI found, %d bytes to scan", cursor.remaining())


class Scanner:
    """
    Walks a buffer two bytes at a time and hands registered markers to their
    handler. Anything else, markers included, is stepped over one byte at a
    time; segment lengths are never used to jump ahead.

    Usage:
        scanner = Scanner(data)
        headers = scanner.run()
    """

    def __init__(
        self,
        data: Buffer,
        policy: TruncationPolicy = TruncationPolicy.RETURN_ZERO,
        handlers: Optional[Mapping[int, Handler]] = None,
    ) -> None:
        self.cursor = Cursor(data, policy)
        self.handlers: Dict[int, Handler] = dict(DEFAULT_HANDLERS if handlers is None else handlers)
        self.state = ScanState.SCANNING
        self.iterations = 0

    def register(self, marker: int, handler: Handler) -> None:
        logger.debug("Handler for 0x%04X: %s", marker, getattr(handler, "__name__", handler))
        self.handlers[marker] = handler

    def step(self) -> Any:
        """Run one loop iteration. Returns the handler result, or None after a skip."""
        value = self.cursor.peek(2)
        self.iterations += 1
        if is_filler(value):
            self.cursor.advance()
            return None

        handler = self.handlers.get(value)
        if handler is None:
            self.cursor.advance()
            return None

        logger.debug("Marker 0x%04X at offset %d", value, self.cursor.position)
        self.state = ScanState.DECODING
        try:
            return handler(self.cursor)
        finally:
            self.state = ScanState.SCANNING

    def run(self) -> List[Any]:
        """Check SOI, then scan to the end. Returns handler results in file order."""
        validate_soi(self.cursor)
        self.state = ScanState.SCANNING
        results = []
        while self.cursor.has_next():
            result = self.step()
            if result is not None:
                results.append(result)
        self.state = ScanState.DONE
        logger.debug("Scan done after %d iteration(s)", self.iterations)
        return results


def scan(data: Buffer, policy: TruncationPolicy = TruncationPolicy.RETURN_ZERO) -> List[Any]:
    return Scanner(data, policy).run()


def list_markers(data: Buffer) -> Iterator[Tuple[int, Marker]]:
    """
    Yield (offset, marker) for every byte pair that spells a defined marker.

    Every offset is checked, including those inside frame headers the
    scanner would consume, and pairs ending on the last byte, so a trailing
    EOI is reported. The SOI check is left to the caller.
    """
    arr = as_buffer(data)
    if len(arr) < 2:
        return
    offsets = np.flatnonzero(arr[:-1] == 0xFF)
    values = (arr[offsets].astype(np.uint16) << 8) | arr[offsets + 1]
    for offset, value in zip(offsets.tolist(), values.tolist()):
        if is_filler(value):
            continue
        marker = Marker.lookup(value)
        if marker is not None:
            yield offset, marker
