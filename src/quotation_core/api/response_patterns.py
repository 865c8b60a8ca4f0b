# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Response envelopes for the quote endpoints.

Transport-agnostic: an ``ApiResponse`` carries a status code and a JSON-ready
body, and whatever serves it (function handler, CLI, web framework) decides
how to ship it.
"""

from typing import Any

from beartype import beartype
from pydantic import Field

from ..models.base import BaseModelConfig
from ..models.quote import Quote
from ..models.validation import ValidationResult


@beartype
class ErrorBody(BaseModelConfig):
    """Machine-readable error with tracing information."""

    code: str = Field(..., min_length=1, description="Machine-readable error code")
    message: str = Field(..., min_length=1, description="Human-readable message")
    details: dict[str, Any] | None = Field(
        default=None, description="Additional error context"
    )
    timestamp: str = Field(..., description="ISO timestamp of the error")
    request_id: str = Field(..., description="Request identifier for tracing")


@beartype
class ErrorEnvelope(BaseModelConfig):
    error: ErrorBody


@beartype
class SuccessEnvelope(BaseModelConfig):
    """Successful payload wrapper."""

    data: Quote
    timestamp: str = Field(..., description="ISO timestamp of the response")
    request_id: str = Field(..., description="Request identifier for tracing")


@beartype
class ApiResponse(BaseModelConfig):
    """Status code plus JSON-ready body."""

    status_code: int = Field(..., ge=100, le=599)
    headers: dict[str, str] = Field(
        default_factory=lambda: {"Content-Type": "application/json"}
    )
    body: dict[str, Any]

    @property
    def is_success(self) -> bool:
        return 200 <= self.status_code < 300


@beartype
def success_response(
    quote: Quote, timestamp: str, request_id: str, status_code: int = 201
) -> ApiResponse:
    """Wrap a quote in the success envelope."""
    envelope = SuccessEnvelope(data=quote, timestamp=timestamp, request_id=request_id)
    return ApiResponse(
        status_code=status_code,
        body=envelope.model_dump(mode="json", by_alias=True),
    )


@beartype
def error_response(
    code: str,
    message: str,
    status_code: int,
    timestamp: str,
    request_id: str,
    details: dict[str, Any] | None = None,
) -> ApiResponse:
    """Wrap an error in the error envelope."""
    envelope = ErrorEnvelope(
        error=ErrorBody(
            code=code,
            message=message,
            details=details,
            timestamp=timestamp,
            request_id=request_id,
        )
    )
    return ApiResponse(
        status_code=status_code,
        body=envelope.model_dump(mode="json", by_alias=True),
    )


@beartype
def validation_error_response(
    validation: ValidationResult, timestamp: str, request_id: str
) -> ApiResponse:
    """400 response listing every failed check."""
    return error_response(
        "VALIDATION_ERROR",
        "Request validation failed",
        400,
        timestamp,
        request_id,
        details={
            "validationErrors": [
                error.model_dump(mode="json", by_alias=True)
                for error in validation.errors
            ]
        },
    )
