# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Clock helpers; the pricing core only ever sees the values these return."""

from datetime import date, datetime, timezone

from beartype import beartype


@beartype
def utc_now() -> datetime:
    """Current time as a timezone-aware UTC datetime."""
    return datetime.now(timezone.utc)


@beartype
def utc_today() -> date:
    return utc_now().date()


@beartype
def years_between(start: date, end: date) -> int:
    """Whole years from ``start`` to ``end``.

    An anniversary not yet reached in ``end``'s year does not count.
    """
    years = end.year - start.year
    if (end.month, end.day) < (start.month, start.day):
        years -= 1
    return years
