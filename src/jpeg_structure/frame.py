"""
Frame header (SOFn) decoding, T.81 B.2.2.

    SOFn | Lf | P | Y | X | Nf | Ci Hi/Vi Tqi | ... (Nf times)
    u16    u16  u8  u16 u16 u8   u8  u8    u8

Every field is printed as soon as it is read. Nothing is checked against the
standard: out of range values are printed and returned as they are, and Lf is
never used to limit the reads.
"""
from __future__ import annotations

import logging

from .cursor import Cursor
from .marker import Marker
from .primitives import Component, FrameHeader

logger = logging.getLogger(__name__)

BANNER = "Frame Header, B.2.2, p.35"

# Hi in the upper nibble, Vi in the lower one
HORIZONTAL_SHIFT = 4
VERTICAL_MASK = 0x0F

_HEX_DIGITS = {"u16": 4, "u8": 2, "u4": 2}


def format_field(label: str, name: str, type_name: str, value: int, indent: int = 2) -> str:
    """One dump line: label, short name, declared type, hex and decimal value."""
    digits = _HEX_DIGITS.get(type_name, 4)
    hex_value = f"0x{value:0{digits}X}"
    return f"{' ' * indent}{label:<{34 - indent}}  {name:>4},  {type_name:>3},  {hex_value:>6},  {value:>5}"


def split_sampling(byte: int) -> tuple[int, int]:
    return byte >> HORIZONTAL_SHIFT, byte & VERTICAL_MASK


def decode_component(cursor: Cursor) -> Component:
    c_i = cursor.read_u8()
    print(format_field("Component identifier:", "Ci", "u8", c_i, indent=4))
    h_i, v_i = split_sampling(cursor.read_u8())
    print(format_field("Horizontal sample factor:", "Hi", "u4", h_i, indent=4))
    print(format_field("Vertical sample factor:", "Vi", "u4", v_i, indent=4))
    t_qi = cursor.read_u8()
    print(format_field("Quant table dest selector:", "Tqi", "u4", t_qi, indent=4))
    print("")
    return Component(
        identifier=c_i,
        horizontal_sampling=h_i,
        vertical_sampling=v_i,
        quantization_selector=t_qi,
    )


def decode_frame_header(cursor: Cursor) -> FrameHeader:
    """
    Decode the SOF segment the cursor is positioned on.

    Args:
        cursor: Cursor sitting on the two marker bytes.

    Returns:
        The decoded FrameHeader. The cursor has moved ``10 + 3 * Nf`` bytes.
    """
    header = FrameHeader(offset=cursor.position)
    print(BANNER)

    marker = cursor.read_u16()
    header.marker = marker
    if marker == Marker.SOF0:
        print(format_field("Marker:", "SOF0", "u16", marker))
        print("    Lossy Jpg encoding")
    elif marker == Marker.SOF3:
        print(format_field("Marker:", "SOF3", "u16", marker))
        print("    Lossless Jpg encoding")
    else:
        logger.warning("No frame header support for marker 0x%04X at offset %d", marker, header.offset)
        print("  Marker not implimented")

    header.length = cursor.read_u16()
    print(format_field("Frame header length:", "Lf", "u16", header.length))
    header.precision = cursor.read_u8()
    print(format_field("Sample precision:", "P", "u8", header.precision))
    header.height = cursor.read_u16()
    print(format_field("Number of lines:", "Y", "u16", header.height))
    header.width = cursor.read_u16()
    print(format_field("Numb of samples per line:", "X", "u16", header.width))
    header.component_count = cursor.read_u8()
    print(format_field("Numb of image comps in frame:", "Nf", "u8", header.component_count))
    print("")

    for _ in range(header.component_count):
        header.components.append(decode_component(cursor))

    logger.debug(
        "SOF at %d: %dx%d, %d component(s), precision %d",
        header.offset, header.width, header.height, header.component_count, header.precision,
    )
    return header
