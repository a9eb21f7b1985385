"""
Placeholder Image Service - Validates placeholder requests and renders them.

Runs the validation pipeline in a fixed order, stops at the first failure,
and hands valid requests to the renderer. All per-request values travel in
a RenderRequest; the service itself only holds read-only configuration.
"""
import logging
from typing import Optional

from core.constants import MESSAGES
from core.models import (
    DescriptorError,
    OperationOutcome,
    RenderRequest,
    ServiceConfiguration,
    SizeFormatDescriptor
)
from utils.color_utils import resolve_color
from utils.descriptor_parser import parse_descriptor
from utils.image_utils import render_placeholder

logger = logging.getLogger(__name__)


class PlaceholderImageService:
    """Service for generating placeholder images."""

    def __init__(self, config: ServiceConfiguration):
        """
        Initialize placeholder service.

        Args:
            config: Resolved service configuration (default colors already
                passed through the color resolver)
        """
        self.config = config

    def generate(self, size_format: str, text: Optional[str] = None) -> OperationOutcome:
        """
        Generate an image with the default colors.

        Args:
            size_format: Descriptor such as "640x480.png"
            text: Overlay text (defaults to "{width}x{height}")

        Returns:
            OperationOutcome
        """
        return self._generate(size_format, text)

    def generate_with_background(
        self,
        size_format: str,
        text: Optional[str],
        background_color: str
    ) -> OperationOutcome:
        """
        Generate an image with a custom background color.

        Args:
            size_format: Descriptor such as "640x480.png"
            text: Overlay text (defaults to "{width}x{height}")
            background_color: Color name or hex

        Returns:
            OperationOutcome
        """
        return self._generate(size_format, text, background_color=background_color)

    def generate_with_colors(
        self,
        size_format: str,
        text: Optional[str],
        background_color: str,
        text_color: str
    ) -> OperationOutcome:
        """
        Generate an image with custom background and text colors.

        Args:
            size_format: Descriptor such as "640x480.png"
            text: Overlay text (defaults to "{width}x{height}")
            background_color: Color name or hex
            text_color: Color name or hex

        Returns:
            OperationOutcome
        """
        return self._generate(
            size_format,
            text,
            background_color=background_color,
            text_color=text_color
        )

    def generate_default(self, text: Optional[str] = None) -> OperationOutcome:
        """Generate an image with the configured default size and format."""
        descriptor = SizeFormatDescriptor(
            width=self.config.default_width,
            height=self.config.default_height,
            format=self.config.default_format
        )
        return self._complete(descriptor, text, None, None)

    def _generate(
        self,
        size_format: str,
        text: Optional[str],
        background_color: Optional[str] = None,
        text_color: Optional[str] = None
    ) -> OperationOutcome:
        parsed = parse_descriptor(size_format, self.config.default_format)
        if isinstance(parsed, DescriptorError):
            return self._reject_descriptor(size_format, parsed)

        return self._complete(parsed, text, background_color, text_color)

    def _complete(
        self,
        descriptor: SizeFormatDescriptor,
        text: Optional[str],
        background_color: Optional[str],
        text_color: Optional[str]
    ) -> OperationOutcome:
        config = self.config

        if descriptor.width > config.max_side_size or descriptor.height > config.max_side_size:
            return self._reject(
                MESSAGES['exceeds_max_size'].format(max_side_size=config.max_side_size)
            )

        if descriptor.width <= 0 or descriptor.height <= 0:
            return self._reject(MESSAGES['below_min_size'])

        if text is None or not text.strip():
            text = descriptor.default_text

        if len(text) > config.max_text_length:
            return self._reject(
                MESSAGES['text_too_long'].format(max_text_length=config.max_text_length)
            )

        resolved_background = config.default_background_color
        if background_color is not None:
            resolved_background = resolve_color(background_color)
            if resolved_background is None:
                return self._reject(MESSAGES['invalid_background_color'])

        resolved_text_color = config.default_text_color
        if text_color is not None:
            resolved_text_color = resolve_color(text_color)
            if resolved_text_color is None:
                return self._reject(MESSAGES['invalid_text_color'])

        request = RenderRequest(
            width=descriptor.width,
            height=descriptor.height,
            format=descriptor.format,
            background_color=resolved_background,
            text_color=resolved_text_color,
            overlay_text=text
        )

        try:
            result = render_placeholder(request)
        except Exception:
            logger.exception("Failed to render placeholder %dx%d %s",
                             request.width, request.height, request.format.name)
            return OperationOutcome.internal_failure(MESSAGES['internal_error'])

        logger.info("Rendered %dx%d %s placeholder (%d bytes)",
                    request.width, request.height, request.format.name,
                    len(result.image_bytes))
        return OperationOutcome.success(result)

    def _reject_descriptor(self, size_format: str, error: DescriptorError) -> OperationOutcome:
        if error is DescriptorError.NOT_NUMERIC:
            message = MESSAGES['not_numeric']
        elif error is DescriptorError.TOO_LARGE:
            message = MESSAGES['exceeds_max_size'].format(max_side_size=self.config.max_side_size)
        else:
            message = MESSAGES['format_invalid']
        logger.debug("Rejected descriptor %r: %s", size_format, error.value)
        return OperationOutcome.validation_failure(message)

    @staticmethod
    def _reject(message: str) -> OperationOutcome:
        logger.debug("Rejected request: %s", message)
        return OperationOutcome.validation_failure(message)
