# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Insurance premium quotation engine.

Two pure operations form the core:

- ``validate(candidate)`` checks an untrusted request payload and returns a
  ``ValidationResult`` listing every problem found.
- ``compute_quote(request, now)`` prices a validated ``QuoteRequest`` and
  returns an immutable ``Quote``.
"""

from .models import (
    FieldError,
    InsuranceType,
    Quote,
    QuoteRequest,
    QuoteStatus,
    ValidationResult,
)
from .services import QuoteService, compute_quote, validate

__version__ = "0.1.0"

__all__ = [
    "FieldError",
    "InsuranceType",
    "Quote",
    "QuoteRequest",
    "QuoteService",
    "QuoteStatus",
    "ValidationResult",
    "__version__",
    "compute_quote",
    "validate",
]
