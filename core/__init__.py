"""Core package - Domain models, constants and exceptions."""

from .models import (
    ImageFormat,
    DescriptorError,
    OutcomeStatus,
    SizeFormatDescriptor,
    RenderRequest,
    RenderResult,
    OperationOutcome,
    ServiceConfiguration
)
from .constants import (
    MAX_DIMENSION,
    MESSAGES,
    NAMED_COLORS,
    SUPPORTED_IMAGE_TYPES
)
from .exceptions import PlaceholderError, ConfigurationError

__all__ = [
    'ImageFormat',
    'DescriptorError',
    'OutcomeStatus',
    'SizeFormatDescriptor',
    'RenderRequest',
    'RenderResult',
    'OperationOutcome',
    'ServiceConfiguration',
    'MAX_DIMENSION',
    'MESSAGES',
    'NAMED_COLORS',
    'SUPPORTED_IMAGE_TYPES',
    'PlaceholderError',
    'ConfigurationError'
]
