# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Domain models for quote requests, quotes and validation results."""

from .quote import (
    Address,
    CoverageDetails,
    InsuranceType,
    PersonalInfo,
    PremiumBreakdown,
    Quote,
    QuoteRequest,
    QuoteStatus,
)
from .validation import FieldError, ValidationResult

__all__ = [
    "Address",
    "CoverageDetails",
    "FieldError",
    "InsuranceType",
    "PersonalInfo",
    "PremiumBreakdown",
    "Quote",
    "QuoteRequest",
    "QuoteStatus",
    "ValidationResult",
]
