"""Error taxonomy shared by repositories, services and routes."""
from typing import Any, Dict, Optional

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Standard error response body."""
    code: str
    message: str
    details: Dict[str, Any] = {}


class CatalogError(Exception):
    """Base exception for the catalog service."""

    status_code = 500

    def __init__(self, code: str, message: str, details: Optional[Dict[str, Any]] = None):
        self.code = code
        self.message = message
        self.details = details or {}
        super().__init__(message)

    def to_response(self) -> ErrorResponse:
        """Convert to error response."""
        return ErrorResponse(code=self.code, message=self.message, details=self.details)


class InvalidArgumentError(CatalogError):
    """Identifier or argument rejected before touching the store."""

    status_code = 400

    def __init__(self, message: str = "invalid ID", details: Optional[Dict[str, Any]] = None):
        super().__init__("INVALID_ARGUMENT", message, details)


class ValidationFailedError(CatalogError):
    """Required fields missing or out of range."""

    status_code = 400

    def __init__(self, message: str = "Validation failed", details: Optional[Dict[str, Any]] = None):
        super().__init__("VALIDATION_FAILED", message, details)


class NotFoundError(CatalogError):
    """Requested entity does not exist."""

    status_code = 404

    def __init__(self, message: str = "Not found", details: Optional[Dict[str, Any]] = None):
        super().__init__("NOT_FOUND", message, details)


class StoreError(CatalogError):
    """Any storage engine failure not classified above."""

    def __init__(self, message: str = "Store error", details: Optional[Dict[str, Any]] = None):
        super().__init__("STORE_ERROR", message, details)


class CacheError(CatalogError):
    """Cache backend failure. Never crosses a service boundary."""

    def __init__(self, message: str = "Cache error", details: Optional[Dict[str, Any]] = None):
        super().__init__("CACHE_ERROR", message, details)


def require_positive_id(entity_id: int, entity: str = "") -> None:
    """Raise InvalidArgumentError for identifiers that can never exist."""
    if entity_id <= 0:
        raise InvalidArgumentError(
            "invalid ID",
            {"entity": entity, "id": entity_id} if entity else {"id": entity_id}
        )


def message_for_error(error: Dict[str, Any]) -> str:
    """Map a pydantic validation error entry to a short human message."""
    error_type = error.get("type", "")
    ctx = error.get("ctx") or {}

    if error_type == "missing":
        return "This field is required"
    if error_type == "greater_than":
        return f"Must be greater than {ctx.get('gt')}"
    if error_type == "greater_than_equal":
        return f"Must be greater than or equal to {ctx.get('ge')}"
    if error_type == "less_than_equal":
        return f"Must be less than or equal to {ctx.get('le')}"
    if error_type == "string_too_short":
        return f"Must be at least {ctx.get('min_length')} characters"
    if error_type == "string_too_long":
        return f"Must be at most {ctx.get('max_length')} characters"
    if error_type == "string_pattern_mismatch":
        return "Must be a valid value"
    if error_type.startswith("int_"):
        return "Must be an integer"
    if error_type.startswith("bool_"):
        return "Must be a boolean"
    return "Invalid value"
