# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Quote domain models.

Requests are shaped the way clients send them; a ``Quote`` is an immutable
value built once by the quote calculator and never mutated afterwards.
"""

from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Annotated

from beartype import beartype
from pydantic import Field, PlainSerializer, model_validator

from .base import BaseModelConfig, RequestModelConfig

CENTS = Decimal("0.01")

# Money stays Decimal in Python and is emitted as a JSON number.
Money = Annotated[
    Decimal, PlainSerializer(float, return_type=float, when_used="json")
]

ZIP_CODE_PATTERN = r"^\d{5}(-\d{4})?$"

# Largest coverage amount or deductible accepted; premiums stay within Decimal precision
MAX_REQUEST_AMOUNT = Decimal("1000000000000")


@beartype
def round_money(amount: Decimal) -> Decimal:
    """Round to cents, half-up."""
    return amount.quantize(CENTS, rounding=ROUND_HALF_UP)


class InsuranceType(str, Enum):
    """Insurance products that can be quoted."""

    AUTO = "auto"
    HOME = "home"
    LIFE = "life"
    HEALTH = "health"


class QuoteStatus(str, Enum):
    """Quote lifecycle statuses.

    Freshly computed quotes are always ACTIVE; the remaining states belong to
    whichever system persists quotes and manages them over time.
    """

    DRAFT = "draft"
    ACTIVE = "active"
    EXPIRED = "expired"
    CONVERTED = "converted"


@beartype
class Address(RequestModelConfig):
    """Postal address of the insured party."""

    street: str = Field(..., min_length=1, description="Street address")
    city: str = Field(..., min_length=1, description="City")
    state: str = Field(..., min_length=1, description="State or region")
    zip_code: str = Field(
        ..., pattern=ZIP_CODE_PATTERN, description="US ZIP or ZIP+4 code"
    )


@beartype
class PersonalInfo(RequestModelConfig):
    """Personal details of the customer requesting a quote."""

    first_name: str = Field(..., min_length=1, description="First name")
    last_name: str = Field(..., min_length=1, description="Last name")
    email: str = Field(..., min_length=3, description="Contact email")
    phone: str = Field(..., min_length=10, description="US phone number")
    date_of_birth: date = Field(..., description="Date of birth (YYYY-MM-DD)")
    address: Address = Field(..., description="Postal address")


@beartype
class CoverageDetails(RequestModelConfig):
    """Requested coverage."""

    insurance_type: InsuranceType = Field(..., description="Product being quoted")
    coverage_amount: Money = Field(
        ..., gt=0, le=MAX_REQUEST_AMOUNT, description="Amount of coverage"
    )
    deductible: Money = Field(
        ..., ge=0, le=MAX_REQUEST_AMOUNT, description="Out-of-pocket deductible"
    )
    additional_options: tuple[str, ...] = Field(
        default=(), description="Identifiers of optional add-ons"
    )


@beartype
class QuoteRequest(RequestModelConfig):
    """A request that already passed validation and can be priced."""

    personal_info: PersonalInfo
    coverage_details: CoverageDetails


@beartype
class PremiumBreakdown(BaseModelConfig):
    """Premium decomposed into its components."""

    base_premium: Money = Field(
        ..., ge=0, decimal_places=2, description="Risk and coverage adjusted premium"
    )
    discounts: Money = Field(
        ..., ge=0, decimal_places=2, description="Total discount amount"
    )
    surcharges: Money = Field(
        ..., ge=0, decimal_places=2, description="Total surcharge amount"
    )
    total_premium: Money = Field(
        ..., decimal_places=2, description="base - discounts + surcharges"
    )

    @model_validator(mode="after")
    def validate_total(self) -> "PremiumBreakdown":
        """Total must be the rounded sum of its components."""
        expected = round_money(self.base_premium - self.discounts + self.surcharges)
        if self.total_premium != expected:
            raise ValueError(
                f"Total premium {self.total_premium} does not match components ({expected})"
            )
        return self


@beartype
class Quote(BaseModelConfig):
    """Computed price offer for a specific coverage request."""

    id: str = Field(..., min_length=1, description="Process-unique quote identifier")
    reference_number: str = Field(
        ...,
        pattern=r"^QT-[0-9A-Z]+-[0-9A-Z]{6}$",
        description="Customer-facing reference, e.g. QT-MF3K2ZQ1-7KD9PA",
    )
    personal_info: PersonalInfo
    coverage_details: CoverageDetails
    premium: PremiumBreakdown
    status: QuoteStatus = Field(..., description="Lifecycle status")
    expiration_date: datetime = Field(..., description="When the offer lapses")
    created_at: datetime = Field(..., description="Computation timestamp")
    updated_at: datetime = Field(..., description="Last change timestamp")

    @model_validator(mode="after")
    def validate_timestamps(self) -> "Quote":
        """Expiration follows creation; updates never precede it."""
        if self.expiration_date <= self.created_at:
            raise ValueError("Expiration date must be after creation time")
        if self.updated_at < self.created_at:
            raise ValueError("Update time cannot precede creation time")
        return self

    def is_expired_at(self, now: datetime) -> bool:
        """Whether the offer has lapsed at ``now``.

        The quote itself keeps its status; this is a query for the systems that
        manage quotes after they are issued.
        """
        return now >= self.expiration_date
