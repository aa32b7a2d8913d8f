"""Runtime configuration read from environment variables."""

from __future__ import annotations

import logging
import os
from decimal import Decimal, InvalidOperation

from lunchtray.domain.exceptions import ValidationError
from lunchtray.domain.model.order import DEFAULT_TAX_RATE

TAX_RATE_ENV = "LUNCHTRAY_TAX_RATE"
LOG_LEVEL_ENV = "LUNCHTRAY_LOG_LEVEL"


def get_tax_rate() -> Decimal:
    """
    Get the sales tax rate applied to every order.

    Returns:
        Rate from LUNCHTRAY_TAX_RATE, defaults to 0.08

    Raises:
        ValidationError: if the variable is not a non-negative number
    """
    raw = os.getenv(TAX_RATE_ENV)
    if raw is None or not raw.strip():
        return DEFAULT_TAX_RATE
    return parse_tax_rate(raw)


def parse_tax_rate(raw: str) -> Decimal:
    try:
        rate = Decimal(raw.strip())
    except InvalidOperation as exc:
        raise ValidationError(f"Invalid tax rate: {raw!r}") from exc
    if not rate.is_finite() or rate < 0:
        raise ValidationError(f"Invalid tax rate: {raw!r}")
    return rate


def get_log_level() -> int:
    """
    Get the logging level name from LUNCHTRAY_LOG_LEVEL.

    Unknown names fall back to WARNING.
    """
    name = os.getenv(LOG_LEVEL_ENV, "WARNING").strip().upper()
    level = logging.getLevelName(name)
    return level if isinstance(level, int) else logging.WARNING
