"""
Pydantic schemas for API responses.
"""
from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body returned for rejected or failed requests."""
    detail: str


class HealthResponse(BaseModel):
    """Response for the health check."""
    status: str = "ok"
    max_side_size: int
    max_text_length: int
