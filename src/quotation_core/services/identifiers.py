# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Quote identifier generation.

Identifiers combine the computation timestamp with randomness from
``secrets``; there is no central sequence, so independent processes can
issue quotes without coordination. Timestamps before the Unix epoch are
rejected with ValueError.
"""

import secrets
import string
from datetime import datetime
from typing import Final

from beartype import beartype

_BASE36_LOWER: Final = string.digits + string.ascii_lowercase
_BASE36_UPPER: Final = string.digits + string.ascii_uppercase

QUOTE_ID_PREFIX: Final = "quote"
REFERENCE_PREFIX: Final = "QT"
QUOTE_ID_RANDOM_LENGTH: Final = 10
REFERENCE_RANDOM_LENGTH: Final = 6


@beartype
def epoch_millis(moment: datetime) -> int:
    """Milliseconds since the Unix epoch; ``moment`` must not precede it."""
    millis = int(moment.timestamp() * 1000)
    if millis < 0:
        raise ValueError(
            f"Identifiers need a timestamp at or after the Unix epoch: {moment}"
        )
    return millis


@beartype
def to_base36(number: int) -> str:
    """Encode a non-negative integer in uppercase base 36."""
    if number < 0:
        raise ValueError("Only non-negative integers can be encoded")
    if number == 0:
        return "0"
    digits = []
    while number:
        number, remainder = divmod(number, 36)
        digits.append(_BASE36_UPPER[remainder])
    return "".join(reversed(digits))


def _random_chars(alphabet: str, length: int) -> str:
    return "".join(secrets.choice(alphabet) for _ in range(length))


@beartype
def generate_quote_id(now: datetime) -> str:
    """Internal id, e.g. ``quote_1760745600000_k3j9x0q2mz``."""
    suffix = _random_chars(_BASE36_LOWER, QUOTE_ID_RANDOM_LENGTH)
    return f"{QUOTE_ID_PREFIX}_{epoch_millis(now)}_{suffix}"


@beartype
def generate_reference_number(now: datetime) -> str:
    """Customer-facing reference, e.g. ``QT-MGV0TQ00-7KD9PA``."""
    stamp = to_base36(epoch_millis(now))
    suffix = _random_chars(_BASE36_UPPER, REFERENCE_RANDOM_LENGTH)
    return f"{REFERENCE_PREFIX}-{stamp}-{suffix}"
