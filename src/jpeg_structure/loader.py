from __future__ import annotations

import logging
from pathlib import Path

import numpy as np

logger = logging.getLogger(__name__)


def load_buffer(path: str | Path) -> np.ndarray:
    """Read the whole file into a read-only uint8 array."""
    path = Path(path)
    data = np.fromfile(path, dtype=np.uint8)
    data.flags.writeable = False
    logger.debug("Loaded %s, %d bytes", path, data.size)
    return data
