"""Utilities package - Descriptor parsing, color resolution and rendering."""

from .descriptor_parser import (
    parse_descriptor,
    has_valid_delimiters
)

from .color_utils import (
    resolve_color,
    to_rgb
)

from .image_utils import (
    render_placeholder,
    create_canvas,
    draw_overlay_text,
    encode_image,
    get_image_info
)

__all__ = [
    # Descriptor parsing
    'parse_descriptor',
    'has_valid_delimiters',

    # Colors
    'resolve_color',
    'to_rgb',

    # Image utils
    'render_placeholder',
    'create_canvas',
    'draw_overlay_text',
    'encode_image',
    'get_image_info'
]
