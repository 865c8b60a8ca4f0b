# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Validation, pricing and the quote creation flow."""

from .quote_calculator import compute_quote
from .quote_service import QuoteService
from .validation import validate

__all__ = ["QuoteService", "compute_quote", "validate"]
