"""
Exception classes for startup-time faults.

Per-request validation problems are never raised; they are returned as
OperationOutcome values.
"""
from typing import Any, Dict, Optional


class PlaceholderError(Exception):
    """Base exception class for placeholder service errors"""
    def __init__(self, message: str, code: str = "UNKNOWN_ERROR", details: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.code = code
        self.details = details or {}

    def to_dict(self) -> Dict[str, Any]:
        """Convert exception to standard error format"""
        return {
            "code": self.code,
            "message": str(self),
            "details": self.details
        }


class ConfigurationError(PlaceholderError):
    """Raised when a configured default cannot be used"""
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        super().__init__(message, code="CONFIGURATION_ERROR", details=details)
