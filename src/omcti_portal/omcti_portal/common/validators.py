from __future__ import annotations

from datetime import date
from decimal import Decimal, InvalidOperation

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date


def require_text(value, field_name: str) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValidationError(f"{field_name} must be text")
    return value


def require_non_empty(value: str, field_name: str) -> str:
    value = require_text(value, field_name)
    if not value.strip():
        raise ValidationError(f"{field_name} is required")
    return value.strip()


def require_min_length(value: str, field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_amount(value, field_name: str, *, allow_zero: bool = False) -> Decimal:
    """Parse a money amount, stripping thousands separators and the rupee sign."""
    text = str(value if value is not None else "").replace(",", "").replace("₹", "").strip()
    try:
        amount = Decimal(text)
    except InvalidOperation:
        raise ValidationError(f"{field_name} is not a valid amount")

    if not amount.is_finite() or amount < 0 or (amount == 0 and not allow_zero):
        raise ValidationError(f"{field_name} must be greater than zero" if not allow_zero else f"{field_name} cannot be negative")
    return amount


def require_iso_date(value: str, field_name: str) -> date:
    text = require_non_empty(value, field_name)
    try:
        return parse_iso_date(text)
    except ValueError:
        raise ValidationError(f"{field_name} must be a YYYY-MM-DD date")
