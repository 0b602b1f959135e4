"""Cross-check decoded frame headers against OpenCV's decoder."""
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import List, Optional

import cv2
import numpy as np

from .primitives import FrameHeader

logger = logging.getLogger(__name__)


@dataclass
class Comparison:
    header: FrameHeader
    # (height, width, channels) of the OpenCV result, None if it could not decode
    reference_shape: Optional[tuple] = None

    @property
    def decoded(self) -> bool:
        return self.reference_shape is not None

    @property
    def mismatches(self) -> List[str]:
        if self.reference_shape is None:
            return ["OpenCV could not decode the file"]
        height, width, channels = self.reference_shape
        found = []
        if self.header.height != height:
            found.append(f"Y={self.header.height}, OpenCV height={height}")
        if self.header.width != width:
            found.append(f"X={self.header.width}, OpenCV width={width}")
        if self.header.component_count != channels:
            found.append(f"Nf={self.header.component_count}, OpenCV channels={channels}")
        return found

    @property
    def matches(self) -> bool:
        return not self.mismatches


def reference_shape(data: np.ndarray) -> Optional[tuple]:
    """Decode ``data`` with OpenCV, keeping the file's own channel count."""
    img = cv2.imdecode(np.array(data, dtype=np.uint8), cv2.IMREAD_UNCHANGED)
    if img is None:
        return None
    if img.ndim == 2:
        return img.shape[0], img.shape[1], 1
    return img.shape


def compare(header: FrameHeader, data: np.ndarray) -> Comparison:
    comparison = Comparison(header, reference_shape(data))
    for line in comparison.mismatches:
        logger.info("Frame header mismatch: %s", line)
    return comparison


def report(comparison: Comparison) -> None:
    print("-" * 30)
    if comparison.matches:
        print("Frame header matches OpenCV "
              f"({comparison.header.width}x{comparison.header.height}, "
              f"{comparison.header.component_count} component(s))")
    else:
        print("Frame header does not match OpenCV:")
        for line in comparison.mismatches:
            print(f"  {line}")
    print("-" * 30)
