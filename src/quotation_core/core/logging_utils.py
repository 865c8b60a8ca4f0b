# QuotationCore - Insurance Premium Quotation Engine
# Copyright (C) 2025 Luiz Frias <luizf35@gmail.com>
# Form F[x] Labs
#
# This software is dual-licensed under AGPL-3.0 and Commercial License.
# For commercial licensing, contact: luizf35@gmail.com
# See LICENSE file for full terms.

"""Central logging utilities for the quotation engine.

Pricing and validation never log; only the calling layers (quote service,
request handler, CLI) do, always through a logger obtained from here.
"""

from __future__ import annotations

import logging
from typing import Final

from beartype import beartype

__all__: Final = [
    "configure_logging",
    "get_logger",
]

_DEFAULT_LOG_FORMAT: Final = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
_ROOT_LOGGER_NAME: Final = "quotation_core"
_is_configured: bool = False


@beartype
def configure_logging(
    *, level: int | str | None = None, fmt: str = _DEFAULT_LOG_FORMAT
) -> None:
    """Configure the root logger exactly once.

    When ``level`` is omitted the level comes from ``Settings.log_level``.
    Calling this function multiple times is safe; configuration is only
    applied on the first invocation.
    """
    global _is_configured
    if _is_configured:
        return

    if level is None:
        from .config import get_settings

        level = get_settings().log_level

    logging.basicConfig(level=level, format=fmt)
    _is_configured = True


@beartype
def get_logger(name: str | None = None, *, level: int | None = None) -> logging.Logger:
    """Return a module-scoped logger that is guaranteed to be configured."""
    configure_logging()
    logger = logging.getLogger(name or _ROOT_LOGGER_NAME)
    if level is not None:
        logger.setLevel(level)
    return logger
