"""
API Dependencies - Dependency injection for FastAPI.

Provides the shared, read-only placeholder service.
"""
from functools import lru_cache

from config.settings import settings, build_service_configuration
from core.models import ServiceConfiguration
from services.placeholder_service import PlaceholderImageService


@lru_cache(maxsize=1)
def get_service_configuration() -> ServiceConfiguration:
    """
    Dependency for the resolved service configuration.

    Built once per process from the global settings.

    Returns:
        ServiceConfiguration
    """
    return build_service_configuration(settings)


def get_placeholder_service() -> PlaceholderImageService:
    """
    Dependency for the placeholder service.

    Returns:
        PlaceholderImageService instance
    """
    return PlaceholderImageService(get_service_configuration())
