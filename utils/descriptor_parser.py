"""
Size/format descriptor parsing.

Turns tokens such as ``"640x480.png"``, ``"300"`` or ``"200x100"`` into a
SizeFormatDescriptor. Failures are returned as DescriptorError values.
"""
import logging
import re
from typing import Optional, Union

from core.constants import MAX_DIMENSION
from core.models import DescriptorError, ImageFormat, SizeFormatDescriptor

logger = logging.getLogger(__name__)

DESCRIPTOR_PATTERN = re.compile(
    r'^(?P<width>[^x.]*)(?:x(?P<height>[^x.]*))?(?:\.(?P<extension>.*))?$'
)
DIGITS_PATTERN = re.compile(r'[0-9]+')

ParseResult = Union[SizeFormatDescriptor, DescriptorError]


def has_valid_delimiters(raw: str) -> bool:
    """
    Structural check run before any numeric parsing.

    Args:
        raw: Raw descriptor token

    Returns:
        False if the token holds whitespace, or more than one 'x' or '.'
    """
    if any(ch.isspace() for ch in raw):
        return False

    token = raw.lower()
    return token.count('x') <= 1 and token.count('.') <= 1


def _to_dimension(digits: str) -> Optional[int]:
    """Convert an ASCII digit string, or None if it exceeds MAX_DIMENSION."""
    significant = digits.lstrip('0') or '0'
    max_digits = str(MAX_DIMENSION)
    if len(significant) > len(max_digits):
        return None
    value = int(significant)
    return value if value <= MAX_DIMENSION else None


def parse_descriptor(
    raw: str,
    default_format: ImageFormat = ImageFormat.JPEG
) -> ParseResult:
    """
    Parse a raw size/format token.

    A single side means a square image. Without an extension the
    ``default_format`` is used.

    Args:
        raw: Token such as "400x600.png"
        default_format: Format used when the token has no extension

    Returns:
        SizeFormatDescriptor on success, otherwise the DescriptorError
    """
    if not has_valid_delimiters(raw):
        return DescriptorError.FORMAT_INVALID

    match = DESCRIPTOR_PATTERN.match(raw.lower())
    if match is None:
        return DescriptorError.FORMAT_INVALID

    width_str = match.group('width')
    height_str = match.group('height')
    if height_str is None:
        height_str = width_str

    # An empty side can never be converted
    if not width_str or not height_str:
        return DescriptorError.FORMAT_INVALID

    if not DIGITS_PATTERN.fullmatch(width_str) or not DIGITS_PATTERN.fullmatch(height_str):
        return DescriptorError.NOT_NUMERIC

    width = _to_dimension(width_str)
    height = _to_dimension(height_str)
    if width is None or height is None:
        return DescriptorError.TOO_LARGE

    extension = match.group('extension')
    image_format = default_format if extension is None else ImageFormat.from_extension(extension)

    descriptor = SizeFormatDescriptor(width=width, height=height, format=image_format)
    logger.debug("Parsed descriptor %r as %s", raw, descriptor)
    return descriptor
