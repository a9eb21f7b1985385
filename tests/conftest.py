"""
Pytest configuration and global fixtures.
"""
import sys
from io import BytesIO
from pathlib import Path

import pytest

# Add project root to path
sys.path.insert(0, str(Path(__file__).parent.parent))

from core.models import ImageFormat, ServiceConfiguration
from services.placeholder_service import PlaceholderImageService


@pytest.fixture
def service_config():
    """Configuration with the documented default limits."""
    return ServiceConfiguration(
        default_width=640,
        default_height=480,
        max_side_size=2000,
        max_text_length=50,
        default_format=ImageFormat.JPEG,
        default_background_color='#D3D3D3',
        default_text_color='#000000'
    )


@pytest.fixture
def placeholder_service(service_config):
    """Placeholder service built from the test configuration."""
    return PlaceholderImageService(service_config)


@pytest.fixture
def decode_image():
    """Decode encoded image bytes into a loaded PIL Image."""
    from PIL import Image

    def _decode(image_bytes):
        img = Image.open(BytesIO(image_bytes))
        img.load()
        return img

    return _decode
