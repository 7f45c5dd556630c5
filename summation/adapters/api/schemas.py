# summation/adapters/api/schemas.py

from __future__ import annotations

from typing import Any, Dict, Mapping, Optional

from pydantic import BaseModel, ConfigDict, Field


# ---------------------------------------------------------------------------
# Error envelope
# ---------------------------------------------------------------------------


class ErrorDetail(BaseModel):
    """
    Machine- and human-readable error description.
    """

    model_config = ConfigDict(extra="forbid")

    code: str = Field(
        ...,
        description="Stable, machine-readable error code (e.g. 'validation_error').",
    )
    message: str = Field(
        ...,
        description="Human-readable explanation of the error.",
    )
    details: Optional[Mapping[str, Any]] = Field(
        default=None,
        description="Optional structured details (per-field problems, etc.).",
    )


class ErrorResponse(BaseModel):
    """
    Standard error envelope for all endpoints.
    """

    model_config = ConfigDict(extra="forbid")

    error: ErrorDetail


def error_payload(
    code: str,
    message: str,
    details: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    """Build a JSON-ready error envelope."""
    envelope = ErrorResponse(
        error=ErrorDetail(code=code, message=message, details=details)
    )
    return envelope.model_dump(mode="json", exclude_none=True)


__all__ = [
    "ErrorDetail",
    "ErrorResponse",
    "error_payload",
]
