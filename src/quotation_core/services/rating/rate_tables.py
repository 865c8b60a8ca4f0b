# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Rate tables for premium calculation.

Age brackets are half-open integer intervals ``[lower, upper)``; brackets of
one insurance type never overlap and any age outside all of them rates at the
default factor.
"""

from datetime import timedelta
from decimal import Decimal
from typing import Final

from attrs import frozen
from beartype import beartype

from ...models.quote import InsuranceType

DEFAULT_RISK_FACTOR: Final = Decimal("1.0")
MIN_COVERAGE_FACTOR: Final = Decimal("0.5")
QUOTE_VALIDITY: Final = timedelta(days=30)


@frozen
class AgeBracket:
    """Risk multiplier applied to ages in ``[lower, upper)``; ``upper=None`` is open-ended."""

    lower: int
    upper: int | None
    factor: Decimal

    @beartype
    def contains(self, age: int) -> bool:
        if age < self.lower:
            return False
        return self.upper is None or age < self.upper


@frozen
class DeductibleTier:
    """Discount rate for deductibles at or above ``minimum``."""

    minimum: Decimal
    rate: Decimal


# Annual base premium per product, currency-agnostic units
BASE_RATES: Final[dict[InsuranceType, Decimal]] = {
    InsuranceType.AUTO: Decimal("1200"),
    InsuranceType.HOME: Decimal("800"),
    InsuranceType.LIFE: Decimal("300"),
    InsuranceType.HEALTH: Decimal("2400"),
}

AGE_BRACKETS: Final[dict[InsuranceType, tuple[AgeBracket, ...]]] = {
    InsuranceType.AUTO: (
        AgeBracket(lower=0, upper=25, factor=Decimal("1.5")),
        AgeBracket(lower=25, upper=35, factor=Decimal("1.2")),
        AgeBracket(lower=66, upper=None, factor=Decimal("1.3")),
    ),
    InsuranceType.LIFE: (
        AgeBracket(lower=40, upper=51, factor=Decimal("1.2")),
        AgeBracket(lower=51, upper=None, factor=Decimal("1.4")),
    ),
    InsuranceType.HEALTH: (
        AgeBracket(lower=45, upper=61, factor=Decimal("1.3")),
        AgeBracket(lower=61, upper=None, factor=Decimal("1.6")),
    ),
    # Home cover is age-independent
    InsuranceType.HOME: (),
}

# Coverage amount that rates at factor 1.0
COVERAGE_BASE_AMOUNTS: Final[dict[InsuranceType, Decimal]] = {
    InsuranceType.AUTO: Decimal("50000"),
    InsuranceType.HOME: Decimal("50000"),
    InsuranceType.LIFE: Decimal("100000"),
    InsuranceType.HEALTH: Decimal("50000"),
}

# Ordered from the highest minimum down; first match wins
DEDUCTIBLE_TIERS: Final[tuple[DeductibleTier, ...]] = (
    DeductibleTier(minimum=Decimal("2000"), rate=Decimal("0.15")),
    DeductibleTier(minimum=Decimal("1000"), rate=Decimal("0.10")),
    DeductibleTier(minimum=Decimal("500"), rate=Decimal("0.05")),
)
