"""
Core domain models for placeholder image generation.

These are pure, request-scoped data structures without business logic.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Optional


class ImageFormat(Enum):
    """Output encodings. Value is (Pillow encoder name, MIME type)."""
    JPEG = ('JPEG', 'image/jpeg')
    PNG = ('PNG', 'image/png')
    GIF = ('GIF', 'image/gif')

    @property
    def encoder(self) -> str:
        return self.value[0]

    @property
    def mime_type(self) -> str:
        return self.value[1]

    @classmethod
    def from_extension(cls, extension: str) -> 'ImageFormat':
        """
        Map a file extension token to a format.

        Unrecognized extensions fall back to JPEG.
        """
        token = extension.lower()
        if token == 'png':
            return cls.PNG
        if token == 'gif':
            return cls.GIF
        return cls.JPEG


class DescriptorError(Enum):
    """Reasons a size/format descriptor can be rejected."""
    FORMAT_INVALID = 'format_invalid'
    NOT_NUMERIC = 'not_numeric'
    TOO_LARGE = 'too_large'


class OutcomeStatus(Enum):
    SUCCESS = 'success'
    VALIDATION_FAILURE = 'validation_failure'
    INTERNAL_FAILURE = 'internal_failure'


@dataclass(frozen=True)
class SizeFormatDescriptor:
    """Parsed (width, height, format) triple."""
    width: int
    height: int
    format: ImageFormat = ImageFormat.JPEG

    @property
    def default_text(self) -> str:
        """Overlay text used when the caller supplies none."""
        return f"{self.width}x{self.height}"


@dataclass(frozen=True)
class RenderRequest:
    """Everything the renderer needs for one image."""
    width: int
    height: int
    format: ImageFormat
    background_color: str
    text_color: str
    overlay_text: str


@dataclass(frozen=True)
class RenderResult:
    """Encoded image bytes and their MIME type."""
    image_bytes: bytes
    mime_type: str


@dataclass(frozen=True)
class OperationOutcome:
    """
    Result of a generation request.

    Exactly one of ``result`` and ``message`` is populated. Use the
    ``success``, ``validation_failure`` and ``internal_failure`` constructors.
    """
    status: OutcomeStatus
    result: Optional[RenderResult] = None
    message: str = ""

    def __post_init__(self):
        if self.status is OutcomeStatus.SUCCESS:
            if self.result is None or self.message:
                raise ValueError("A successful outcome carries a result and no message")
        elif self.result is not None or not self.message:
            raise ValueError("A failed outcome carries a message and no result")

    @classmethod
    def success(cls, result: RenderResult) -> 'OperationOutcome':
        return cls(status=OutcomeStatus.SUCCESS, result=result)

    @classmethod
    def validation_failure(cls, message: str) -> 'OperationOutcome':
        return cls(status=OutcomeStatus.VALIDATION_FAILURE, message=message)

    @classmethod
    def internal_failure(cls, message: str) -> 'OperationOutcome':
        return cls(status=OutcomeStatus.INTERNAL_FAILURE, message=message)

    @property
    def is_success(self) -> bool:
        return self.status is OutcomeStatus.SUCCESS

    @property
    def is_internal_failure(self) -> bool:
        return self.status is OutcomeStatus.INTERNAL_FAILURE


@dataclass(frozen=True)
class ServiceConfiguration:
    """Read-only service limits and defaults, resolved once at startup."""
    default_width: int
    default_height: int
    max_side_size: int
    max_text_length: int
    default_format: ImageFormat
    default_background_color: str
    default_text_color: str
