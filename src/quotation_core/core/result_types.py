# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Ok/Err values for outcomes a caller is expected to handle.

``QuoteService.create_quote`` returns ``Ok(quote)`` or ``Err(validation_result)``;
the request handler branches on the variant instead of catching exceptions.
"""

from typing import Generic, NoReturn, TypeVar, Union

from attrs import frozen
from beartype import beartype

T = TypeVar("T")
E = TypeVar("E")


@frozen
class Ok(Generic[T]):
    """Successful outcome carrying ``value``."""

    value: T

    @beartype
    def is_ok(self) -> bool:
        return True

    @beartype
    def is_err(self) -> bool:
        return False

    @beartype
    def unwrap(self) -> T:
        return self.value

    @beartype
    def unwrap_err(self) -> NoReturn:
        """Raise ValueError; an Ok carries no error."""
        raise ValueError(f"Expected Err, got Ok({self.value!r})")


@frozen
class Err(Generic[E]):
    """Failed outcome carrying ``error``."""

    error: E

    @beartype
    def is_ok(self) -> bool:
        return False

    @beartype
    def is_err(self) -> bool:
        return True

    @beartype
    def unwrap(self) -> NoReturn:
        """Raise ValueError; an Err carries no value."""
        raise ValueError(f"Expected Ok, got Err({self.error!r})")

    @beartype
    def unwrap_err(self) -> E:
        return self.error


Result = Union[Ok[T], Err[E]]

__all__ = ["Err", "Ok", "Result"]
