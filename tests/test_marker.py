"""Unit tests for the JPEG marker table."""
import pytest

from jpeg_structure.marker import Marker, is_filler, marker_info


class TestMarker:
    """Tests for the Marker enumeration."""

    def test_core_codes(self):
        assert Marker.SOI == 0xFFD8
        assert Marker.EOI == 0xFFD9
        assert Marker.SOF0 == 0xFFC0
        assert Marker.SOF3 == 0xFFC3

    def test_lookup_by_value(self):
        assert Marker.lookup(0xFFDB) is Marker.DQT
        assert Marker.lookup(0xFFC4) is Marker.DHT

    def test_lookup_unknown(self):
        assert Marker.lookup(0xFF02) is None
        assert Marker.lookup(0x1234) is None

    def test_all_codes_have_ff_prefix(self):
        for marker in Marker:
            assert marker.value >> 8 == 0xFF

    def test_ranges(self):
        assert [m.value for m in Marker if m.name.startswith("RST")] == list(range(0xFFD0, 0xFFD8))
        assert [m.value for m in Marker if m.name.startswith("APP")] == list(range(0xFFE0, 0xFFF0))

    def test_no_sof_for_table_codes(self):
        """0xFFC4, 0xFFC8 and 0xFFCC are DHT, JPG and DAC, not frames."""
        sof_values = {m.value for m in Marker if m.name.startswith("SOF")}
        assert sof_values.isdisjoint({0xFFC4, 0xFFC8, 0xFFCC})
        assert len(sof_values) == 13


class TestMarkerInfo:
    """Tests for marker_info."""

    @pytest.mark.parametrize("code, text", [
        (0xFFD8, "Start of Image (SOI)"),
        (0xFFD9, "End of Image (EOI)"),
        (0xFFDB, "Define Quantization Table (DQT)"),
        (0xFFC4, "Define Huffman Table (DHT)"),
        (0xFFDA, "Start of Scan (SOS)"),
        (0xFFFE, "Comment (COM)"),
    ])
    def test_named_markers(self, code, text):
        assert marker_info(code) == text

    def test_sof_descriptions(self):
        assert marker_info(0xFFC0) == "Start of Frame 0 (SOF0) - Baseline DCT"
        assert marker_info(0xFFC3) == "Start of Frame 3 (SOF3) - Lossless (sequential)"
        assert marker_info(0xFFC2).startswith("Start of Frame 2 (SOF2)")

    def test_numbered_families(self):
        assert marker_info(0xFFD3) == "Restart 3 (RST3)"
        assert marker_info(0xFFE1) == "Application Segment 1 (APP1)"
        assert marker_info(0xFFF4) == "Reserved for JPEG extensions (JPG4)"

    def test_unknown(self):
        assert marker_info(0xFF02) == "Unknown Marker"
        assert marker_info(0x00C0) == "Unknown Marker"

    def test_every_marker_is_described(self):
        for marker in Marker:
            assert marker_info(marker.value) != "Unknown Marker"


class TestIsFiller:
    """Tests for is_filler."""

    @pytest.mark.parametrize("value", [0x0000, 0x0001, 0x7FFF, 0xFF00, 0xFF01, 0xFFFF])
    def test_filler_values(self, value):
        assert is_filler(value)

    @pytest.mark.parametrize("value", [0xFF02, 0xFFC0, 0xFFC3, 0xFFD8, 0xFFD9, 0xFFFE])
    def test_marker_values(self, value):
        assert not is_filler(value)
