"""Tests for quote request validation.

Covers:
- Every check and its error message
- Deterministic ordering of reported errors
- Totality: malformed input of any shape yields a result, never an exception
"""

import copy
from decimal import Decimal
from typing import Any

import pytest

from quotation_core.models.validation import ValidationResult
from quotation_core.services.validation import (
    is_valid_email,
    is_valid_phone,
    is_valid_zip_code,
    parse_iso_date,
    validate,
)
from tests.fixtures.quote_data import FIXED_TODAY, make_payload


def check(payload: Any, **kwargs: Any) -> ValidationResult:
    return validate(payload, today=FIXED_TODAY, **kwargs)


class TestValidRequests:
    """Requests that should pass."""

    def test_valid_payload_passes(self, valid_payload: dict[str, Any]) -> None:
        result = check(valid_payload)

        assert result.is_valid
        assert result.errors == ()

    def test_validation_is_idempotent(self, valid_payload: dict[str, Any]) -> None:
        """Validating the same valid payload twice gives the same clean result."""
        first = check(valid_payload)
        second = check(valid_payload)

        assert first.is_valid and second.is_valid
        assert first == second

    def test_input_is_not_mutated(self, valid_payload: dict[str, Any]) -> None:
        snapshot = copy.deepcopy(valid_payload)
        check(valid_payload)
        assert valid_payload == snapshot

    @pytest.mark.parametrize("insurance_type", ["auto", "home", "life", "health"])
    def test_all_insurance_types_accepted(self, insurance_type: str) -> None:
        assert check(make_payload(insurance_type=insurance_type)).is_valid

    def test_extra_fields_tolerated(self, valid_payload: dict[str, Any]) -> None:
        valid_payload["campaign"] = "spring"
        valid_payload["personalInfo"]["nickname"] = "JD"
        valid_payload["coverageDetails"]["notes"] = "n/a"

        assert check(valid_payload).is_valid

    def test_zero_deductible_accepted(self) -> None:
        assert check(make_payload(deductible=0)).is_valid

    def test_decimal_and_float_amounts_accepted(self) -> None:
        assert check(
            make_payload(coverage_amount=Decimal("75000.50"), deductible=999.99)
        ).is_valid

    def test_additional_options_accepted(self) -> None:
        payload = make_payload(additional_options=["roadside", "rental"])
        assert check(payload).is_valid

    def test_birthday_today_is_accepted(self) -> None:
        payload = make_payload(date_of_birth=FIXED_TODAY.isoformat())
        assert check(payload).is_valid


class TestPersonalInfoChecks:
    """Field checks on personalInfo."""

    def test_missing_email(self, valid_payload: dict[str, Any]) -> None:
        del valid_payload["personalInfo"]["email"]

        result = check(valid_payload)

        assert not result.is_valid
        assert result.fields() == ["personalInfo.email"]
        assert result.errors[0].message == "Email is required"

    @pytest.mark.parametrize("name_field", ["firstName", "lastName"])
    @pytest.mark.parametrize("value", ["", "   ", None, 42])
    def test_names_must_be_non_blank(self, name_field: str, value: Any) -> None:
        payload = make_payload(**{name_field: value})

        result = check(payload)

        assert result.fields() == [f"personalInfo.{name_field}"]

    @pytest.mark.parametrize(
        "email", ["plainaddress", "user@domain", "user @example.com", "@example.com"]
    )
    def test_malformed_email(self, email: str) -> None:
        result = check(make_payload(email=email))

        assert result.fields() == ["personalInfo.email"]
        assert result.errors[0].message == "Invalid email format"

    @pytest.mark.parametrize("phone", ["12345", "555-1234", "phone-number", "555-123-45678"])
    def test_malformed_phone(self, phone: str) -> None:
        result = check(make_payload(phone=phone))

        assert result.fields() == ["personalInfo.phone"]
        assert result.errors[0].message == "Invalid phone number format"

    @pytest.mark.parametrize(
        "dob", ["1990-02-30", "15/06/1990", "1990-6-15", "not-a-date", "1990-13-01"]
    )
    def test_unparsable_date_of_birth(self, dob: str) -> None:
        result = check(make_payload(date_of_birth=dob))

        assert result.fields() == ["personalInfo.dateOfBirth"]
        assert result.errors[0].message == "Invalid date format (use YYYY-MM-DD)"

    def test_future_date_of_birth(self) -> None:
        result = check(make_payload(date_of_birth="2025-06-16"))

        assert result.fields() == ["personalInfo.dateOfBirth"]
        assert "future" in result.errors[0].message

    def test_absurd_age_rejected(self) -> None:
        result = check(make_payload(date_of_birth="1890-01-01"))

        assert result.fields() == ["personalInfo.dateOfBirth"]
        assert "maximum insurable age" in result.errors[0].message

    def test_max_age_boundary(self) -> None:
        """Exactly max_age passes, one year more fails."""
        assert check(make_payload(date_of_birth="1905-06-15"), max_age=120).is_valid
        assert not check(make_payload(date_of_birth="1904-06-15"), max_age=120).is_valid

    def test_max_age_from_settings(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv("QUOTATION_MAX_INSURABLE_AGE", "80")

        result = check(make_payload(date_of_birth="1940-01-01"))

        assert result.fields() == ["personalInfo.dateOfBirth"]

    @pytest.mark.parametrize("zip_code", ["1234", "123456", "12345-678", "ABCDE", "12345 6789"])
    def test_malformed_zip_code(self, zip_code: str) -> None:
        payload = make_payload()
        payload["personalInfo"]["address"]["zipCode"] = zip_code

        result = check(payload)

        assert result.fields() == ["personalInfo.address.zipCode"]
        assert result.errors[0].message == "Invalid ZIP code format"

    def test_missing_address(self, valid_payload: dict[str, Any]) -> None:
        del valid_payload["personalInfo"]["address"]

        result = check(valid_payload)

        assert result.fields() == ["personalInfo.address"]

    def test_blank_address_parts(self, valid_payload: dict[str, Any]) -> None:
        valid_payload["personalInfo"]["address"] = {
            "street": " ",
            "city": "",
            "state": None,
            "zipCode": "",
        }

        result = check(valid_payload)

        assert result.fields() == [
            "personalInfo.address.street",
            "personalInfo.address.city",
            "personalInfo.address.state",
            "personalInfo.address.zipCode",
        ]


class TestCoverageDetailsChecks:
    """Field checks on coverageDetails."""

    def test_negative_coverage_amount(self) -> None:
        result = check(make_payload(coverage_amount=-5))

        assert not result.is_valid
        assert result.fields() == ["coverageDetails.coverageAmount"]
        assert result.errors[0].message == "Coverage amount must be a positive number"

    @pytest.mark.parametrize(
        "amount", [0, "50000", None, True, float("nan"), float("inf"), [50000]]
    )
    def test_coverage_amount_must_be_positive_finite_number(self, amount: Any) -> None:
        result = check(make_payload(coverage_amount=amount))

        assert result.fields() == ["coverageDetails.coverageAmount"]

    @pytest.mark.parametrize("deductible", [-1, -0.01, "500", None, False, float("-inf")])
    def test_deductible_must_be_non_negative_number(self, deductible: Any) -> None:
        result = check(make_payload(deductible=deductible))

        assert result.fields() == ["coverageDetails.deductible"]
        assert result.errors[0].message == "Deductible must be a non-negative number"

    @pytest.mark.parametrize(
        "amount", [1e28, 10**30, Decimal("1000000000000.01"), float("1e308")]
    )
    def test_coverage_amount_above_maximum(self, amount: Any) -> None:
        result = check(make_payload(coverage_amount=amount))

        assert result.fields() == ["coverageDetails.coverageAmount"]
        assert (
            result.errors[0].message
            == "Coverage amount cannot exceed 1,000,000,000,000"
        )

    @pytest.mark.parametrize("deductible", [1e28, Decimal("1000000000000.01")])
    def test_deductible_above_maximum(self, deductible: Any) -> None:
        result = check(make_payload(deductible=deductible))

        assert result.fields() == ["coverageDetails.deductible"]
        assert result.errors[0].message == "Deductible cannot exceed 1,000,000,000,000"

    def test_maximum_amounts_accepted(self) -> None:
        result = check(
            make_payload(coverage_amount=10**12, deductible=Decimal("1000000000000"))
        )

        assert result.is_valid

    @pytest.mark.parametrize("insurance_type", ["AUTO", "Auto", "business", "boat", 1])
    def test_unknown_insurance_type(self, insurance_type: Any) -> None:
        result = check(make_payload(insurance_type=insurance_type))

        assert result.fields() == ["coverageDetails.insuranceType"]
        assert "Must be one of: auto, home, life, health" in result.errors[0].message

    def test_missing_insurance_type(self, valid_payload: dict[str, Any]) -> None:
        del valid_payload["coverageDetails"]["insuranceType"]

        result = check(valid_payload)

        assert result.fields() == ["coverageDetails.insuranceType"]
        assert result.errors[0].message == "Insurance type is required"

    @pytest.mark.parametrize("options", ["roadside", [1, 2], ["ok", ""], {"a": 1}])
    def test_malformed_additional_options(self, options: Any) -> None:
        payload = make_payload()
        payload["coverageDetails"]["additionalOptions"] = options

        result = check(payload)

        assert result.fields() == ["coverageDetails.additionalOptions"]


class TestErrorOrdering:
    """All violations are reported in one pass, in a fixed order."""

    def test_empty_object_reports_both_sections(self) -> None:
        result = check({})

        assert result.fields() == ["personalInfo", "coverageDetails"]

    def test_sections_must_be_objects(self) -> None:
        result = check({"personalInfo": "Jane", "coverageDetails": [1, 2]})

        assert result.fields() == ["personalInfo", "coverageDetails"]
        assert result.errors[0].message == "Personal information must be an object"
        assert result.errors[1].message == "Coverage details must be an object"

    def test_section_presence_reported_before_field_errors(self) -> None:
        payload = make_payload(email="bad")
        del payload["coverageDetails"]

        result = check(payload)

        assert result.fields() == ["coverageDetails", "personalInfo.email"]

    def test_every_violation_reported_in_check_order(self) -> None:
        payload = make_payload(
            firstName=" ",
            lastName="",
            email="nope",
            phone="123",
            date_of_birth="2030-01-01",
            insurance_type="boat",
            coverage_amount=0,
            deductible=-10,
        )
        payload["personalInfo"]["address"]["zipCode"] = "ABC"

        result = check(payload)

        assert result.fields() == [
            "personalInfo.firstName",
            "personalInfo.lastName",
            "personalInfo.email",
            "personalInfo.phone",
            "personalInfo.dateOfBirth",
            "personalInfo.address.zipCode",
            "coverageDetails.insuranceType",
            "coverageDetails.coverageAmount",
            "coverageDetails.deductible",
        ]

    def test_ordering_is_reproducible(self) -> None:
        payload = make_payload(email="x", phone="y", coverage_amount=-1)
        assert check(payload) == check(payload)


class TestTotality:
    """Malformed input of any shape is reported, never raised."""

    @pytest.mark.parametrize("body", [None, [], "quote", 42, 3.5, True, ["personalInfo"]])
    def test_non_object_bodies(self, body: Any) -> None:
        result = check(body)

        assert not result.is_valid
        assert result.fields() == ["body"]

    @pytest.mark.parametrize(
        "mutate",
        [
            lambda p: p["personalInfo"].clear(),
            lambda p: p["coverageDetails"].clear(),
            lambda p: p["personalInfo"].update(address="123 Main St"),
            lambda p: p["personalInfo"].update(dateOfBirth=19900615),
            lambda p: p["personalInfo"].update(email=["a@b.co"]),
            lambda p: p["personalInfo"]["address"].update(zipCode=62701),
            lambda p: p["coverageDetails"].update(insuranceType={"type": "auto"}),
            lambda p: p["coverageDetails"].update(insuranceType=["auto"]),
            lambda p: p["coverageDetails"].update(coverageAmount={"value": 1}),
            lambda p: p["coverageDetails"].update(deductible=Decimal("NaN")),
            lambda p: p.update(personalInfo=None),
            lambda p: p.update(coverageDetails=0),
        ],
    )
    def test_malformed_permutations(self, mutate: Any) -> None:
        payload = make_payload()
        mutate(payload)

        result = check(payload)

        assert not result.is_valid
        assert len(result.errors) >= 1


class TestPredicates:
    """Format helpers used by the validator."""

    @pytest.mark.parametrize(
        "phone",
        ["555-123-4567", "5551234567", "(555) 123-4567", "555.123.4567", "+1 555 123 4567"],
    )
    def test_accepted_phone_shapes(self, phone: str) -> None:
        assert is_valid_phone(phone)

    def test_email_shapes(self) -> None:
        assert is_valid_email("a@b.co")
        assert is_valid_email("first.last+tag@sub.example.org")
        assert not is_valid_email("a@b")

    def test_zip_shapes(self) -> None:
        assert is_valid_zip_code("12345")
        assert is_valid_zip_code("12345-6789")
        assert not is_valid_zip_code("12345-")

    def test_parse_iso_date(self) -> None:
        assert parse_iso_date("2000-02-29") is not None
        assert parse_iso_date("2001-02-29") is None
        assert parse_iso_date("20000229") is None
