# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Quote computation from a validated request.

``compute_quote`` assumes its input already passed ``validate``; it performs
no I/O and no logging and only draws entropy for the identifiers.
"""

from datetime import datetime

from beartype import beartype

from ..models.quote import Quote, QuoteRequest, QuoteStatus
from .identifiers import generate_quote_id, generate_reference_number
from .rating.calculators import PremiumCalculator
from .rating.rate_tables import QUOTE_VALIDITY


@beartype
def compute_quote(request: QuoteRequest, now: datetime) -> Quote:
    """Price ``request`` and build the complete quote issued at ``now``.

    Args:
        request: A request that satisfies every validation check
        now: Computation timestamp, used for age, identifiers and lifecycle fields;
            must not precede the Unix epoch

    Returns:
        ACTIVE quote expiring 30 calendar days after ``now``
    """
    age = PremiumCalculator.calculate_age(
        request.personal_info.date_of_birth, now.date()
    )
    premium = PremiumCalculator.calculate_premium(request.coverage_details, age)

    return Quote(
        id=generate_quote_id(now),
        reference_number=generate_reference_number(now),
        personal_info=request.personal_info,
        coverage_details=request.coverage_details,
        premium=premium,
        status=QuoteStatus.ACTIVE,
        expiration_date=now + QUOTE_VALIDITY,
        created_at=now,
        updated_at=now,
    )
