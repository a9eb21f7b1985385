"""
Unit tests for utils.descriptor_parser module.
"""
import pytest
from core.models import DescriptorError, ImageFormat, SizeFormatDescriptor
from utils.descriptor_parser import parse_descriptor, has_valid_delimiters


class TestHasValidDelimiters:
    """Tests for has_valid_delimiters function."""

    @pytest.mark.parametrize("raw", ["600", "400x600", "400x600.png", "400X600.PNG"])
    def test_accepts_single_delimiters(self, raw):
        """Test tokens with at most one 'x' and one '.'."""
        assert has_valid_delimiters(raw)

    @pytest.mark.parametrize("raw", ["1x2x3", "1X2x3", "400.png.jpg", "4 00", "400\t", "\n400"])
    def test_rejects_repeated_delimiters_and_whitespace(self, raw):
        """Test ambiguous tokens are rejected."""
        assert not has_valid_delimiters(raw)


class TestParseDescriptor:
    """Tests for parse_descriptor function."""

    def test_square_fallback(self):
        """Test a single side produces a square image."""
        result = parse_descriptor("600")

        assert result == SizeFormatDescriptor(600, 600, ImageFormat.JPEG)
        assert result == parse_descriptor("600x600")

    def test_width_and_height(self):
        """Test width comes before height."""
        result = parse_descriptor("400x600")

        assert result.width == 400
        assert result.height == 600
        assert result.format is ImageFormat.JPEG

    def test_with_extension(self):
        """Test extension selects the format."""
        result = parse_descriptor("400x600.png")

        assert result == SizeFormatDescriptor(400, 600, ImageFormat.PNG)

    def test_case_insensitive(self):
        """Test uppercase delimiters and extensions."""
        assert parse_descriptor("400X600.PNG") == parse_descriptor("400x600.png")

    def test_square_with_extension(self):
        """Test a single side with an extension."""
        result = parse_descriptor("300.gif")

        assert result == SizeFormatDescriptor(300, 300, ImageFormat.GIF)

    @pytest.mark.parametrize("extension", ["jpg", "jpeg", "bmp", "webp", ""])
    def test_other_extensions_fall_back_to_jpeg(self, extension):
        """Test jpg, jpeg and unrecognized extensions all give JPEG."""
        result = parse_descriptor(f"10x20.{extension}", default_format=ImageFormat.PNG)

        assert result.format is ImageFormat.JPEG

    def test_default_format_without_extension(self):
        """Test configured default format applies when no extension is given."""
        result = parse_descriptor("10x20", default_format=ImageFormat.GIF)

        assert result.format is ImageFormat.GIF

    def test_zero_parses(self):
        """Test zero sides parse; the minimum is enforced elsewhere."""
        result = parse_descriptor("0x600")

        assert result == SizeFormatDescriptor(0, 600, ImageFormat.JPEG)

    def test_extension_may_contain_x(self):
        """Test only the sides part is split on 'x'."""
        result = parse_descriptor("600.x")

        assert result == SizeFormatDescriptor(600, 600, ImageFormat.JPEG)

    @pytest.mark.parametrize("raw", ["64A", "64ax100", "100x-5", "1a.png", "١٢٣"])
    def test_non_numeric(self, raw):
        """Test sides with non-digit characters."""
        assert parse_descriptor(raw) is DescriptorError.NOT_NUMERIC

    @pytest.mark.parametrize("raw", ["1x2x3", "1.2.3", "400 x600", " 400", "600x", "x400", "", ".png", "x"])
    def test_format_invalid(self, raw):
        """Test structural failures, including empty sides."""
        assert parse_descriptor(raw) is DescriptorError.FORMAT_INVALID

    def test_repeated_delimiters_win_over_bad_digits(self):
        """Test delimiter check runs before numeric validation."""
        assert parse_descriptor("ax1x2") is DescriptorError.FORMAT_INVALID

    def test_overflow(self):
        """Test sides beyond the 32-bit range."""
        assert parse_descriptor("2147483648") is DescriptorError.TOO_LARGE
        assert parse_descriptor("10x99999999999999999999") is DescriptorError.TOO_LARGE
        assert parse_descriptor("9" * 10000) is DescriptorError.TOO_LARGE

    def test_largest_representable_side(self):
        """Test the 32-bit maximum itself still parses."""
        result = parse_descriptor("2147483647x1")

        assert result.width == 2147483647

    def test_leading_zeros(self):
        """Test leading zeros are ignored."""
        result = parse_descriptor("0000000000000000000040x050")

        assert result == SizeFormatDescriptor(40, 50, ImageFormat.JPEG)

    def test_long_zero_padding(self):
        """Test long zero padding does not count towards the size."""
        result = parse_descriptor("0" * 5000 + "7")

        assert result == SizeFormatDescriptor(7, 7, ImageFormat.JPEG)
