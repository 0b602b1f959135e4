from dataclasses import dataclass, field
from typing import List

from .marker import Marker

# Tqi only uses its low nibble (T.81 B.2.2)
QUANT_TABLE_MASK = 0x0F


@dataclass
class Component:
    # Ci, component identifier
    identifier: int = 0
    # Hi / Vi, upper and lower nibble of the same byte
    horizontal_sampling: int = 0
    vertical_sampling: int = 0
    # Tqi exactly as read, 8 bits
    quantization_selector: int = 0

    @property
    def quantization_table_id(self) -> int:
        return self.quantization_selector & QUANT_TABLE_MASK


@dataclass
class FrameHeader:
    marker: int = 0
    # offset of the marker in the buffer
    offset: int = 0
    # Lf, includes its own two bytes
    length: int = 0
    # P
    precision: int = 0
    # Y
    height: int = 0
    # X
    width: int = 0
    # Nf
    component_count: int = 0
    components: List[Component] = field(default_factory=list)

    @property
    def lossless(self) -> bool:
        return self.marker == Marker.SOF3
