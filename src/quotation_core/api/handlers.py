# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Create-quote request handler."""

import json
from collections.abc import Callable
from datetime import datetime

from beartype import beartype

from ..core.clock import utc_now
from ..core.logging_utils import get_logger
from ..core.result_types import Err
from ..services.quote_service import QuoteService
from .response_patterns import (
    ApiResponse,
    error_response,
    success_response,
    validation_error_response,
)

logger = get_logger(__name__)


@beartype
def handle_create_quote(
    raw_body: str | bytes | None,
    request_id: str | None = None,
    service: QuoteService | None = None,
    clock: Callable[[], datetime] = utc_now,
) -> ApiResponse:
    """Turn a raw JSON body into a quote response.

    Returns 201 with the quote, 400 for malformed JSON or failed validation,
    and 500 for anything unexpected.
    """
    rid = request_id or "unknown"
    service = service or QuoteService(clock=clock)
    timestamp = clock().isoformat()

    logger.info(f"[{rid}] Processing quote creation request")

    try:
        payload = json.loads(raw_body or "{}")
    except ValueError as e:
        logger.error(f"[{rid}] Invalid JSON in request body: {e}")
        return error_response(
            "INVALID_JSON", "Request body must be valid JSON", 400, timestamp, rid
        )

    try:
        result = service.create_quote(payload, request_id=rid)
    except Exception:
        logger.exception(f"[{rid}] Unexpected error in quote creation")
        return error_response(
            "INTERNAL_ERROR",
            "An unexpected error occurred while creating the quote",
            500,
            timestamp,
            rid,
        )

    if isinstance(result, Err):
        return validation_error_response(result.unwrap_err(), timestamp, rid)

    return success_response(result.unwrap(), timestamp, rid)
