"""
Placeholder Image API.

Provides endpoints for:
- Default-size placeholder images
- Placeholder images from a size/format descriptor
- Custom background color, and custom background plus text color

Every image endpoint accepts an optional ``text`` query parameter.
"""
import logging
from typing import Optional

from fastapi import FastAPI, Depends, HTTPException, Query
from fastapi.middleware.gzip import GZipMiddleware
from fastapi.responses import Response

from api.dependencies import get_placeholder_service, get_service_configuration
from api.schemas import ErrorResponse, HealthResponse
from config.settings import settings
from core.models import OperationOutcome
from services.placeholder_service import PlaceholderImageService

logger = logging.getLogger(__name__)

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid descriptor, color or text"},
    500: {"model": ErrorResponse, "description": "Image generation failed"},
}
IMAGE_CONTENT = {
    200: {"content": {"image/jpeg": {}, "image/png": {}, "image/gif": {}}},
}


# Create FastAPI app
placeholder_app = FastAPI(
    title="Placeholder Image API",
    description="Generates solid-color placeholder images with a text overlay",
    version="1.0.0"
)
placeholder_app.add_middleware(GZipMiddleware, minimum_size=1000)


@placeholder_app.on_event("startup")
async def startup_event():
    """Resolve configuration on startup so invalid settings fail fast."""
    config = get_service_configuration()
    logger.info(
        "Placeholder API initialized (max side %d, max text %d, default %s)",
        config.max_side_size, config.max_text_length, config.default_format.name
    )


def to_response(outcome: OperationOutcome) -> Response:
    """
    Map an outcome to an HTTP response.

    Args:
        outcome: Result from the placeholder service

    Returns:
        Image response

    Raises:
        HTTPException: 400 for validation failures, 500 for internal failures
    """
    if outcome.is_success:
        return Response(
            content=outcome.result.image_bytes,
            media_type=outcome.result.mime_type
        )
    if outcome.is_internal_failure:
        raise HTTPException(status_code=500, detail=outcome.message)
    raise HTTPException(status_code=400, detail=outcome.message)


@placeholder_app.get("/health", response_model=HealthResponse)
def health():
    """Health check with the active limits."""
    config = get_service_configuration()
    return HealthResponse(
        max_side_size=config.max_side_size,
        max_text_length=config.max_text_length
    )


@placeholder_app.get("/api/info")
def info():
    """API info endpoint with the configured image settings."""
    return {
        "name": "Placeholder Image API",
        "version": "1.0.0",
        "endpoints": {
            "default_image": "GET /?text=",
            "image": "GET /{size_and_format}?text=",
            "image_with_background": "GET /{size_and_format}/{background_color}?text=",
            "image_with_colors": "GET /{size_and_format}/{background_color}/{text_color}?text="
        },
        "examples": ["/300", "/640x480.png", "/400x200/blue", "/400x200.gif/navy/white?text=Hello"],
        "image_config": settings.get_image_config()
    }


@placeholder_app.get("/", responses={**IMAGE_CONTENT, **ERROR_RESPONSES})
def get_default_image(
    text: Optional[str] = Query(None, description="Overlay text"),
    service: PlaceholderImageService = Depends(get_placeholder_service)
):
    """Placeholder image with the configured default size and format."""
    return to_response(service.generate_default(text))


@placeholder_app.get("/{size_and_format}", responses={**IMAGE_CONTENT, **ERROR_RESPONSES})
def get_image(
    size_and_format: str,
    text: Optional[str] = Query(None, description="Overlay text"),
    service: PlaceholderImageService = Depends(get_placeholder_service)
):
    """
    Placeholder image with the default colors.

    Args:
        size_and_format: Descriptor such as "600", "400x600" or "400x600.png"
        text: Optional overlay text
    """
    return to_response(service.generate(size_and_format, text))


@placeholder_app.get(
    "/{size_and_format}/{background_color}",
    responses={**IMAGE_CONTENT, **ERROR_RESPONSES}
)
def get_image_with_background(
    size_and_format: str,
    background_color: str,
    text: Optional[str] = Query(None, description="Overlay text"),
    service: PlaceholderImageService = Depends(get_placeholder_service)
):
    """Placeholder image with a custom background color."""
    return to_response(
        service.generate_with_background(size_and_format, text, background_color)
    )


@placeholder_app.get(
    "/{size_and_format}/{background_color}/{text_color}",
    responses={**IMAGE_CONTENT, **ERROR_RESPONSES}
)
def get_image_with_colors(
    size_and_format: str,
    background_color: str,
    text_color: str,
    text: Optional[str] = Query(None, description="Overlay text"),
    service: PlaceholderImageService = Depends(get_placeholder_service)
):
    """Placeholder image with custom background and text colors."""
    return to_response(
        service.generate_with_colors(size_and_format, text, background_color, text_color)
    )


# Export app for uvicorn
app = placeholder_app
