# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Validation outcome models.

An invalid request is a normal outcome represented as data, never as an
exception, so callers can report every problem in a single response.
"""

from collections.abc import Iterable

from beartype import beartype
from pydantic import Field, model_validator

from .base import BaseModelConfig


@beartype
class FieldError(BaseModelConfig):
    """A single failed check, addressed by dotted field path."""

    field: str = Field(..., min_length=1, description="Dotted path of the field")
    message: str = Field(..., min_length=1, description="Human-readable message")


@beartype
class ValidationResult(BaseModelConfig):
    """Outcome of validating a quote request.

    ``errors`` keeps the order in which checks ran so error output is
    reproducible.
    """

    is_valid: bool = Field(..., description="True when no check failed")
    errors: tuple[FieldError, ...] = Field(
        default=(), description="Failed checks in evaluation order"
    )

    @model_validator(mode="after")
    def validate_consistency(self) -> "ValidationResult":
        """A result is valid exactly when it carries no errors."""
        if self.is_valid and self.errors:
            raise ValueError("A valid result cannot carry errors")
        if not self.is_valid and not self.errors:
            raise ValueError("An invalid result must carry at least one error")
        return self

    @classmethod
    def from_errors(cls, errors: Iterable[FieldError]) -> "ValidationResult":
        """Build a result from the ordered list of failed checks."""
        collected = tuple(errors)
        return cls(is_valid=not collected, errors=collected)

    @classmethod
    def valid(cls) -> "ValidationResult":
        return cls(is_valid=True)

    def fields(self) -> list[str]:
        """Field paths of all errors, in order."""
        return [error.field for error in self.errors]
