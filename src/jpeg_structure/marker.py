# --------------------------------------------------------
# |segment name|marker value|has data|description        |
# --------------------------------------------------------
# |SOI         |0xFFD8      |No      | start of image    |
# |EOI         |0xFFD9      |No      | end of image      |
# |SOF0        |0xFFC0      |Yes     | baseline DCT      |
# |SOF3        |0xFFC3      |Yes     | lossless          |
# |DHT         |0xFFC4      |Yes     | huffman table     |
# |DQT         |0xFFDB      |Yes     | quantization table|
# |SOS         |0xFFDA      |Yes     | start of scan     |
# |APPn        |0xFFE0-EF   |Yes     | application data  |
# --------------------------------------------------------
# ITU T.81 Table B.1. Only SOI, SOF0 and SOF3 are acted on by the scanner.
from __future__ import annotations

from enum import IntEnum

# peeked values treated as plain data by the scanner
FILLER_MAX = 0xFF01
FILL_BYTES = 0xFFFF


class Marker(IntEnum):
    # Start Of Frame, non-differential, Huffman coding
    SOF0 = 0xFFC0
    SOF1 = 0xFFC1
    SOF2 = 0xFFC2
    SOF3 = 0xFFC3
    # Start Of Frame, differential, Huffman coding
    SOF5 = 0xFFC5
    SOF6 = 0xFFC6
    SOF7 = 0xFFC7
    # Start Of Frame, non-differential, arithmetic coding
    JPG = 0xFFC8
    SOF9 = 0xFFC9
    SOF10 = 0xFFCA
    SOF11 = 0xFFCB
    # Start Of Frame, differential, arithmetic coding
    SOF13 = 0xFFCD
    SOF14 = 0xFFCE
    SOF15 = 0xFFCF

    DHT = 0xFFC4
    DAC = 0xFFCC

    RST0 = 0xFFD0
    RST1 = 0xFFD1
    RST2 = 0xFFD2
    RST3 = 0xFFD3
    RST4 = 0xFFD4
    RST5 = 0xFFD5
    RST6 = 0xFFD6
    RST7 = 0xFFD7

    SOI = 0xFFD8
    EOI = 0xFFD9
    SOS = 0xFFDA
    DQT = 0xFFDB
    DNL = 0xFFDC
    DRI = 0xFFDD
    DHP = 0xFFDE
    EXP = 0xFFDF

    APP0 = 0xFFE0
    APP1 = 0xFFE1
    APP2 = 0xFFE2
    APP3 = 0xFFE3
    APP4 = 0xFFE4
    APP5 = 0xFFE5
    APP6 = 0xFFE6
    APP7 = 0xFFE7
    APP8 = 0xFFE8
    APP9 = 0xFFE9
    APP10 = 0xFFEA
    APP11 = 0xFFEB
    APP12 = 0xFFEC
    APP13 = 0xFFED
    APP14 = 0xFFEE
    APP15 = 0xFFEF

    JPG0 = 0xFFF0
    JPG1 = 0xFFF1
    JPG2 = 0xFFF2
    JPG3 = 0xFFF3
    JPG4 = 0xFFF4
    JPG5 = 0xFFF5
    JPG6 = 0xFFF6
    JPG7 = 0xFFF7
    JPG8 = 0xFFF8
    JPG9 = 0xFFF9
    JPG10 = 0xFFFA
    JPG11 = 0xFFFB
    JPG12 = 0xFFFC
    JPG13 = 0xFFFD
    COM = 0xFFFE

    TEM = 0xFF01

    @classmethod
    def lookup(cls, value: int) -> Marker | None:
        try:
            return cls(value)
        except ValueError:
            return None


_SOF_PROCESS = {
    0xC0: "Baseline DCT",
    0xC1: "Extended sequential DCT",
    0xC2: "Progressive DCT",
    0xC3: "Lossless (sequential)",
    0xC5: "Differential sequential DCT",
    0xC6: "Differential progressive DCT",
    0xC7: "Differential lossless (sequential)",
    0xC9: "Extended sequential DCT, arithmetic",
    0xCA: "Progressive DCT, arithmetic",
    0xCB: "Lossless (sequential), arithmetic",
    0xCD: "Differential sequential DCT, arithmetic",
    0xCE: "Differential progressive DCT, arithmetic",
    0xCF: "Differential lossless (sequential), arithmetic",
}


def marker_info(marker: int) -> str:

    marker_dict = {
        0xD8: "Start of Image (SOI)",
        0xD9: "End of Image (EOI)",
        0xDA: "Start of Scan (SOS)",
        0xDB: "Define Quantization Table (DQT)",
        0xC4: "Define Huffman Table (DHT)",
        0xC8: "Reserved for JPEG extensions (JPG)",
        0xCC: "Define Arithmetic Coding Conditioning (DAC)",
        0xDC: "Define Number of Lines (DNL)",
        0xDD: "Define Restart Interval (DRI)",
        0xDE: "Define Hierarchical Progression (DHP)",
        0xDF: "Expand Reference Components (EXP)",
        0xFE: "Comment (COM)",
        0x01: "Temporary private use (TEM)",
    }
    if marker >> 8 != 0xFF:
        return "Unknown Marker"

    low = marker & 0xFF
    if low in _SOF_PROCESS:
        return f"Start of Frame {low - 0xC0} (SOF{low - 0xC0}) - {_SOF_PROCESS[low]}"
    if 0xD0 <= low <= 0xD7:
        return f"Restart {low - 0xD0} (RST{low - 0xD0})"
    if 0xE0 <= low <= 0xEF:
        return f"Application Segment {low - 0xE0} (APP{low - 0xE0})"
    if 0xF0 <= low <= 0xFD:
        return f"Reserved for JPEG extensions (JPG{low - 0xF0})"

    return marker_dict.get(low, "Unknown Marker")


def is_filler(value: int) -> bool:
    """True for peeked values the scanner steps over one byte at a time."""
    return 0x0000 <= value <= FILLER_MAX or value == FILL_BYTES
