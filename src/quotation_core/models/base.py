# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Base Pydantic model configuration for all domain models.

Python code uses snake_case attributes while the wire shape stays camelCase
(``personalInfo``, ``zipCode`` ...). Both spellings are accepted on input.
"""

from beartype import beartype
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


@beartype
class BaseModelConfig(BaseModel):
    """Base model with strict configuration for all domain entities.

    Enforces:
    - Immutability (frozen=True)
    - No extra fields allowed (extra="forbid")
    - Validation on assignment
    - Automatic whitespace stripping
    - camelCase aliases for serialization
    """

    model_config = ConfigDict(
        frozen=True,
        extra="forbid",
        validate_assignment=True,
        str_strip_whitespace=True,
        validate_default=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


@beartype
class RequestModelConfig(BaseModelConfig):
    """Base for inbound request shapes, which tolerate unknown fields."""

    model_config = ConfigDict(extra="ignore")
