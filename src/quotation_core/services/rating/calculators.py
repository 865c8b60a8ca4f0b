# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Premium calculation steps.

All arithmetic is Decimal. Amounts are rounded half-up to cents at the base
premium, the discount and the total.
"""

from datetime import date
from decimal import Decimal

from beartype import beartype

from ...core.clock import years_between
from ...models.quote import (
    CoverageDetails,
    InsuranceType,
    PremiumBreakdown,
    round_money,
)
from .rate_tables import (
    AGE_BRACKETS,
    BASE_RATES,
    COVERAGE_BASE_AMOUNTS,
    DEDUCTIBLE_TIERS,
    DEFAULT_RISK_FACTOR,
    MIN_COVERAGE_FACTOR,
)


class UnsupportedInsuranceTypeError(LookupError):
    """An insurance type reached pricing without an entry in the rate tables.

    Validation rejects unknown types, so this signals a programming error.
    """

    def __init__(self, insurance_type: object, table: str) -> None:
        super().__init__(f"No {table} entry for insurance type {insurance_type!r}")
        self.insurance_type = insurance_type
        self.table = table


def _lookup(table: dict, insurance_type: InsuranceType, name: str):
    try:
        return table[insurance_type]
    except KeyError:
        raise UnsupportedInsuranceTypeError(insurance_type, name) from None


class PremiumCalculator:
    """Deterministic premium calculation from fixed rate tables."""

    @beartype
    @staticmethod
    def calculate_age(date_of_birth: date, on: date) -> int:
        """Whole years between ``date_of_birth`` and ``on``.

        A birthday not yet reached in the current year does not count.
        """
        return years_between(date_of_birth, on)

    @beartype
    @staticmethod
    def base_rate(insurance_type: InsuranceType) -> Decimal:
        """Annual base premium for the product."""
        return _lookup(BASE_RATES, insurance_type, "base rate")

    @beartype
    @staticmethod
    def risk_factor(age: int, insurance_type: InsuranceType) -> Decimal:
        """Age-based multiplier; exactly one bracket or the default applies."""
        brackets = _lookup(AGE_BRACKETS, insurance_type, "age bracket")
        for bracket in brackets:
            if bracket.contains(age):
                return bracket.factor
        return DEFAULT_RISK_FACTOR

    @beartype
    @staticmethod
    def coverage_factor(coverage_amount: Decimal, insurance_type: InsuranceType) -> Decimal:
        """Coverage relative to the product's base amount, floored at 0.5.

        Non-decreasing in ``coverage_amount``.
        """
        base_amount = _lookup(COVERAGE_BASE_AMOUNTS, insurance_type, "coverage base")
        return max(MIN_COVERAGE_FACTOR, coverage_amount / base_amount)

    @beartype
    @staticmethod
    def deductible_discount_rate(deductible: Decimal) -> Decimal:
        """Discount rate of the highest tier whose minimum the deductible reaches."""
        for tier in DEDUCTIBLE_TIERS:
            if deductible >= tier.minimum:
                return tier.rate
        return Decimal("0")

    @beartype
    @staticmethod
    def calculate_premium(coverage: CoverageDetails, age: int) -> PremiumBreakdown:
        """Price a coverage request for an insured party of ``age``.

        Args:
            coverage: Validated coverage details
            age: Age of the insured party in whole years

        Returns:
            PremiumBreakdown with base, discounts, surcharges and total
        """
        insurance_type = coverage.insurance_type

        adjusted = (
            PremiumCalculator.base_rate(insurance_type)
            * PremiumCalculator.risk_factor(age, insurance_type)
            * PremiumCalculator.coverage_factor(coverage.coverage_amount, insurance_type)
        )
        base_premium = round_money(adjusted)

        discount_rate = PremiumCalculator.deductible_discount_rate(coverage.deductible)
        discounts = round_money(base_premium * discount_rate)

        # No surcharge rules yet
        surcharges = round_money(Decimal("0"))

        return PremiumBreakdown(
            base_premium=base_premium,
            discounts=discounts,
            surcharges=surcharges,
            total_premium=round_money(base_premium - discounts + surcharges),
        )
