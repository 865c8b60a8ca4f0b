# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Structural and semantic validation of incoming quote requests.

``validate`` accepts anything (typically parsed JSON of unknown provenance),
never raises on malformed input and reports every violation it finds in one
pass. Checks run in a fixed order so error output is reproducible:

1. presence of ``personalInfo`` and ``coverageDetails`` as objects
2. first and last name
3. email
4. phone
5. date of birth
6. address (street, city, state, ZIP code)
7. insurance type
8. coverage amount
9. deductible
10. additional options
"""

import math
import re
from collections.abc import Mapping
from datetime import date
from decimal import Decimal
from typing import Any

from beartype import beartype

from ..core.clock import utc_today, years_between
from ..core.config import get_settings
from ..models.quote import MAX_REQUEST_AMOUNT, ZIP_CODE_PATTERN, InsuranceType
from ..models.validation import FieldError, ValidationResult

_EMAIL_RE = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
_PHONE_RE = re.compile(r"^(\+?1[-.\s]?)?(\(\d{3}\)\s?|\d{3}[-.\s]?)\d{3}[-.\s]?\d{4}$")
_ZIP_RE = re.compile(ZIP_CODE_PATTERN)
_ISO_DATE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}$")

_INSURANCE_TYPES = tuple(t.value for t in InsuranceType)


@beartype
def is_valid_email(email: str) -> bool:
    """local@domain.tld with no whitespace."""
    return bool(_EMAIL_RE.match(email))


@beartype
def is_valid_phone(phone: str) -> bool:
    """US phone: ``###-###-####``, 10 contiguous digits and common variants."""
    return bool(_PHONE_RE.match(phone))


@beartype
def is_valid_zip_code(zip_code: str) -> bool:
    """Five digits or ZIP+4."""
    return bool(_ZIP_RE.match(zip_code))


@beartype
def parse_iso_date(value: str) -> date | None:
    """Parse a strict ``YYYY-MM-DD`` calendar date, or return None."""
    if not _ISO_DATE_RE.match(value):
        return None
    try:
        return date.fromisoformat(value)
    except ValueError:
        return None


def _text(value: Any) -> str | None:
    """Stripped string content, or None when missing, blank or not a string."""
    if not isinstance(value, str):
        return None
    stripped = value.strip()
    return stripped or None


def _number(value: Any) -> Decimal | None:
    """Finite numeric value as Decimal; booleans and non-numbers give None."""
    if isinstance(value, bool) or not isinstance(value, (int, float, Decimal)):
        return None
    if isinstance(value, float) and not math.isfinite(value):
        return None
    if isinstance(value, Decimal) and not value.is_finite():
        return None
    return Decimal(str(value)) if isinstance(value, float) else Decimal(value)


class _ErrorCollector:
    """Ordered accumulator of failed checks."""

    def __init__(self) -> None:
        self.errors: list[FieldError] = []

    def add(self, field: str, message: str) -> None:
        self.errors.append(FieldError(field=field, message=message))

    def result(self) -> ValidationResult:
        return ValidationResult.from_errors(self.errors)


def _check_required_text(
    errors: _ErrorCollector, section: Mapping[str, Any], key: str, field: str, label: str
) -> str | None:
    value = _text(section.get(key))
    if value is None:
        errors.add(field, f"{label} is required")
    return value


def _check_personal_info(
    errors: _ErrorCollector, info: Mapping[str, Any], today: date, max_age: int
) -> None:
    _check_required_text(
        errors, info, "firstName", "personalInfo.firstName", "First name"
    )
    _check_required_text(errors, info, "lastName", "personalInfo.lastName", "Last name")

    email = _check_required_text(errors, info, "email", "personalInfo.email", "Email")
    if email is not None and not is_valid_email(email):
        errors.add("personalInfo.email", "Invalid email format")

    phone = _check_required_text(
        errors, info, "phone", "personalInfo.phone", "Phone number"
    )
    if phone is not None and not is_valid_phone(phone):
        errors.add("personalInfo.phone", "Invalid phone number format")

    raw_dob = _check_required_text(
        errors, info, "dateOfBirth", "personalInfo.dateOfBirth", "Date of birth"
    )
    if raw_dob is not None:
        dob = parse_iso_date(raw_dob)
        if dob is None:
            errors.add(
                "personalInfo.dateOfBirth", "Invalid date format (use YYYY-MM-DD)"
            )
        elif dob > today:
            errors.add("personalInfo.dateOfBirth", "Date of birth cannot be in the future")
        elif years_between(dob, today) > max_age:
            errors.add(
                "personalInfo.dateOfBirth",
                f"Age exceeds the maximum insurable age of {max_age}",
            )

    address = info.get("address")
    if not isinstance(address, Mapping):
        errors.add("personalInfo.address", "Address is required")
        return

    _check_required_text(
        errors, address, "street", "personalInfo.address.street", "Street address"
    )
    _check_required_text(errors, address, "city", "personalInfo.address.city", "City")
    _check_required_text(errors, address, "state", "personalInfo.address.state", "State")
    zip_code = _check_required_text(
        errors, address, "zipCode", "personalInfo.address.zipCode", "ZIP code"
    )
    if zip_code is not None and not is_valid_zip_code(zip_code):
        errors.add("personalInfo.address.zipCode", "Invalid ZIP code format")


def _check_coverage_details(errors: _ErrorCollector, details: Mapping[str, Any]) -> None:
    insurance_type = details.get("insuranceType")
    if insurance_type is None or insurance_type == "":
        errors.add("coverageDetails.insuranceType", "Insurance type is required")
    elif insurance_type not in _INSURANCE_TYPES:
        errors.add(
            "coverageDetails.insuranceType",
            f"Invalid insurance type. Must be one of: {', '.join(_INSURANCE_TYPES)}",
        )

    amount = _number(details.get("coverageAmount"))
    if amount is None or amount <= 0:
        errors.add(
            "coverageDetails.coverageAmount", "Coverage amount must be a positive number"
        )
    elif amount > MAX_REQUEST_AMOUNT:
        errors.add(
            "coverageDetails.coverageAmount",
            f"Coverage amount cannot exceed {MAX_REQUEST_AMOUNT:,}",
        )

    deductible = _number(details.get("deductible"))
    if deductible is None or deductible < 0:
        errors.add(
            "coverageDetails.deductible", "Deductible must be a non-negative number"
        )
    elif deductible > MAX_REQUEST_AMOUNT:
        errors.add(
            "coverageDetails.deductible",
            f"Deductible cannot exceed {MAX_REQUEST_AMOUNT:,}",
        )

    options = details.get("additionalOptions")
    if options is not None and (
        not isinstance(options, list) or any(_text(o) is None for o in options)
    ):
        errors.add(
            "coverageDetails.additionalOptions",
            "Additional options must be a list of option identifiers",
        )


@beartype
def validate(
    candidate: Any, *, today: date | None = None, max_age: int | None = None
) -> ValidationResult:
    """Check whether ``candidate`` is well-formed enough to price.

    Args:
        candidate: Parsed request payload of unknown shape
        today: Reference date for the date of birth checks (defaults to UTC today)
        max_age: Oldest accepted age (defaults to ``Settings.max_insurable_age``)

    Returns:
        ValidationResult listing every failed check in evaluation order
    """
    if candidate is None:
        return ValidationResult.from_errors(
            [FieldError(field="body", message="Request body is required")]
        )
    if not isinstance(candidate, Mapping):
        return ValidationResult.from_errors(
            [FieldError(field="body", message="Request body must be an object")]
        )

    if today is None:
        today = utc_today()
    if max_age is None:
        max_age = get_settings().max_insurable_age

    errors = _ErrorCollector()

    personal_info = candidate.get("personalInfo")
    if personal_info is None:
        errors.add("personalInfo", "Personal information is required")
    elif not isinstance(personal_info, Mapping):
        errors.add("personalInfo", "Personal information must be an object")

    coverage_details = candidate.get("coverageDetails")
    if coverage_details is None:
        errors.add("coverageDetails", "Coverage details are required")
    elif not isinstance(coverage_details, Mapping):
        errors.add("coverageDetails", "Coverage details must be an object")

    if isinstance(personal_info, Mapping):
        _check_personal_info(errors, personal_info, today, max_age)
    if isinstance(coverage_details, Mapping):
        _check_coverage_details(errors, coverage_details)

    return errors.result()
