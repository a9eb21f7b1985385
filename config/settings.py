"""
Configuration management using Pydantic Settings.

Environment variables:
- DEFAULT_WIDTH / DEFAULT_HEIGHT: Size used by the default-image endpoint
- MAX_SIDE_SIZE: Largest accepted width or height
- MAX_TEXT_LENGTH: Longest accepted overlay text
- DEFAULT_IMAGE_TYPE: jpg, jpeg, png or gif
- DEFAULT_BACKGROUND_COLOR / DEFAULT_TEXT_COLOR: Color names or hex values
- API_HOST / API_PORT: Server bind address
- LOG_LEVEL: Logging level name

The image defaults below stand in for the values the service ships with
(640x480 jpg, max side 2000, max text 50, lightgray on black), so a bare
environment starts with the stock configuration. An invalid value is still
fatal: Settings() raises a ValidationError on import and
build_service_configuration() raises ConfigurationError at startup.
"""
from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from core.constants import SUPPORTED_IMAGE_TYPES
from core.exceptions import ConfigurationError
from core.models import ImageFormat, ServiceConfiguration
from utils.color_utils import resolve_color


class Settings(BaseSettings):
    """Application settings loaded from environment variables."""

    # Image Generation
    default_width: int = Field(default=640, gt=0)
    default_height: int = Field(default=480, gt=0)
    max_side_size: int = Field(default=2000, gt=0)
    max_text_length: int = Field(default=50, gt=0)
    default_image_type: str = Field(default="jpg")
    default_background_color: str = Field(default="lightgray")
    default_text_color: str = Field(default="black")

    # API Configuration
    api_host: str = Field(default="0.0.0.0")
    api_port: int = Field(default=8000)
    log_level: str = Field(default="INFO")

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("default_image_type")
    @classmethod
    def check_image_type(cls, value: str) -> str:
        token = value.strip().lower()
        if token not in SUPPORTED_IMAGE_TYPES:
            raise ValueError(
                f"Unsupported image type: '{value}'. "
                f"Supported types: {', '.join(SUPPORTED_IMAGE_TYPES)}"
            )
        return token

    @field_validator("log_level")
    @classmethod
    def check_log_level(cls, value: str) -> str:
        return value.strip().upper()

    def get_image_config(self) -> dict:
        """Get image generation settings as dictionary."""
        return {
            'default_width': self.default_width,
            'default_height': self.default_height,
            'max_side_size': self.max_side_size,
            'max_text_length': self.max_text_length,
            'default_image_type': self.default_image_type,
            'default_background_color': self.default_background_color,
            'default_text_color': self.default_text_color,
        }


def build_service_configuration(settings: Settings) -> ServiceConfiguration:
    """
    Resolve settings into the read-only service configuration.

    Args:
        settings: Loaded settings

    Returns:
        ServiceConfiguration with default colors resolved to hex

    Raises:
        ConfigurationError: If a default color is not a valid color
    """
    background = resolve_color(settings.default_background_color)
    if background is None:
        raise ConfigurationError(
            f"Invalid DEFAULT_BACKGROUND_COLOR: '{settings.default_background_color}'",
            details={'setting': 'default_background_color'}
        )

    text_color = resolve_color(settings.default_text_color)
    if text_color is None:
        raise ConfigurationError(
            f"Invalid DEFAULT_TEXT_COLOR: '{settings.default_text_color}'",
            details={'setting': 'default_text_color'}
        )

    return ServiceConfiguration(
        default_width=settings.default_width,
        default_height=settings.default_height,
        max_side_size=settings.max_side_size,
        max_text_length=settings.max_text_length,
        default_format=ImageFormat.from_extension(settings.default_image_type),
        default_background_color=background,
        default_text_color=text_color
    )


# Global settings instance
settings = Settings()
