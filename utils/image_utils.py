"""
Image utilities for placeholder rendering.

Handles canvas creation, text overlay and encoding.
"""
from io import BytesIO
from typing import Tuple

from PIL import Image, ImageDraw, ImageFont

from core.constants import JPEG_QUALITY, OVERLAY_FONT_FILES, OVERLAY_FONT_SIZE
from core.models import ImageFormat, RenderRequest, RenderResult
from utils.color_utils import to_rgb


def load_overlay_font():
    """
    Load the fixed overlay font.

    Tries the TrueType fonts in OVERLAY_FONT_FILES and falls back to
    Pillow's bundled default font.
    """
    for font_file in OVERLAY_FONT_FILES:
        try:
            return ImageFont.truetype(font_file, OVERLAY_FONT_SIZE)
        except OSError:
            continue
    return ImageFont.load_default()


# Loaded once; every render draws with the same font
OVERLAY_FONT = load_overlay_font()


def create_canvas(width: int, height: int, background_color: str) -> Image.Image:
    """
    Create an RGB canvas filled with a single color.

    Args:
        width: Canvas width in pixels
        height: Canvas height in pixels
        background_color: Resolved color string

    Returns:
        PIL Image
    """
    return Image.new('RGB', (width, height), to_rgb(background_color))


def draw_overlay_text(image: Image.Image, text: str, text_color: str) -> Image.Image:
    """
    Draw text with its top-left corner at the canvas center.

    Args:
        image: PIL Image to draw on (modified in place)
        text: Overlay text
        text_color: Resolved color string

    Returns:
        The same image
    """
    position = (image.width // 2, image.height // 2)
    draw = ImageDraw.Draw(image)
    draw.text(position, text, fill=to_rgb(text_color), font=OVERLAY_FONT)
    return image


def encode_image(image: Image.Image, image_format: ImageFormat) -> bytes:
    """
    Encode an image without any metadata.

    Args:
        image: PIL Image
        image_format: Target encoding

    Returns:
        Encoded bytes
    """
    buf = BytesIO()
    if image_format is ImageFormat.JPEG:
        image.save(buf, format=image_format.encoder, quality=JPEG_QUALITY)
    else:
        image.save(buf, format=image_format.encoder)
    return buf.getvalue()


def render_placeholder(request: RenderRequest) -> RenderResult:
    """
    Render a placeholder image.

    Args:
        request: Validated render parameters

    Returns:
        RenderResult with encoded bytes and MIME type
    """
    image = create_canvas(request.width, request.height, request.background_color)
    draw_overlay_text(image, request.overlay_text, request.text_color)
    return RenderResult(
        image_bytes=encode_image(image, request.format),
        mime_type=request.format.mime_type
    )


def get_image_info(image_bytes: bytes) -> Tuple[int, int, str]:
    """
    Get dimensions and encoder name of encoded image bytes.

    Args:
        image_bytes: Encoded image

    Returns:
        Tuple of (width, height, format name)
    """
    with Image.open(BytesIO(image_bytes)) as img:
        return img.width, img.height, img.format
