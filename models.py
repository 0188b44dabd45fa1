"""Response models for the storefront proxy."""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Error body returned when the backend call fails."""

    error: str


def error_responses(*status_codes: int) -> dict:
    """OpenAPI `responses=` mapping documenting ErrorResponse for the given codes."""
    return {code: {"model": ErrorResponse} for code in status_codes}
