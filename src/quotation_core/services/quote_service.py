# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Quote creation flow: validate, parse, price.

This is the calling layer around the pure validator and quote calculator;
it owns the clock and is the only place in the flow that logs.
"""

from collections.abc import Callable
from datetime import datetime
from typing import Any

from beartype import beartype

from ..core.clock import utc_now
from ..core.logging_utils import get_logger
from ..core.result_types import Err, Ok, Result
from ..models.quote import Quote, QuoteRequest
from ..models.validation import ValidationResult
from .quote_calculator import compute_quote
from .validation import validate

logger = get_logger(__name__)


class QuoteService:
    """Service turning raw request payloads into quotes."""

    def __init__(
        self,
        clock: Callable[[], datetime] = utc_now,
        max_insurable_age: int | None = None,
    ) -> None:
        """Initialize with an injectable clock for deterministic tests."""
        self._clock = clock
        self._max_insurable_age = max_insurable_age

    @beartype
    def create_quote(
        self, payload: Any, request_id: str | None = None
    ) -> Result[Quote, ValidationResult]:
        """Validate ``payload`` and, when it is valid, compute its quote.

        Args:
            payload: Parsed request body of unknown shape
            request_id: Identifier used to correlate log lines

        Returns:
            Ok with the quote, or Err with the complete validation report
        """
        rid = request_id or "unknown"
        now = self._clock()

        validation = validate(
            payload, today=now.date(), max_age=self._max_insurable_age
        )
        if not validation.is_valid:
            logger.warning(
                f"[{rid}] Quote request rejected: {', '.join(validation.fields())}"
            )
            return Err(validation)

        request = QuoteRequest.model_validate(payload)
        quote = compute_quote(request, now)

        logger.info(
            f"[{rid}] Quote created: id={quote.id} "
            f"reference={quote.reference_number} "
            f"total={quote.premium.total_premium}"
        )
        return Ok(quote)
