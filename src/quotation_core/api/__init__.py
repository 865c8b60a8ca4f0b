# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Request handling and response envelopes."""

from .handlers import handle_create_quote
from .response_patterns import ApiResponse, ErrorEnvelope, SuccessEnvelope

__all__ = ["ApiResponse", "ErrorEnvelope", "SuccessEnvelope", "handle_create_quote"]
