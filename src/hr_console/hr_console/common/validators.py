from __future__ import annotations

import math
import re
from datetime import date
from decimal import ROUND_HALF_UP, Decimal
from enum import Enum
from typing import Any, Callable, Optional, Type, TypeVar

from ..core.exceptions import ValidationError
from .datetime_utils import parse_iso_date

E = TypeVar("E", bound=Enum)
T = TypeVar("T")

_EMAIL_RE = re.compile(r"^[^@\s]+@[^@\s]+\.[^@\s]+$")


def _blank(value: Any) -> bool:
    return value is None or (isinstance(value, str) and not value.strip())


def require_non_empty(value: Optional[str], field_name: str) -> str:
    if value is None or not str(value).strip():
        raise ValidationError(f"{field_name} is required")
    return str(value).strip()


def require_min_length(value: Optional[str], field_name: str, min_len: int) -> str:
    if value is None or len(value) < min_len:
        raise ValidationError(f"{field_name} must be at least {min_len} characters")
    return value


def require_email(value: Optional[str], field_name: str = "Email") -> str:
    v = (value or "").strip()
    if not _EMAIL_RE.match(v):
        raise ValidationError("Invalid email address")
    return v.lower()


def parse_number(value: Any, field_name: str, places: Optional[int] = None) -> Optional[float]:
    """Parse a form/JSON value into a finite float. Blank means "not provided".

    With `places` the value is rounded half up to that many decimals, which is
    what a DECIMAL(p, places) column stores.
    """
    if _blank(value):
        return None
    if isinstance(value, bool):
        raise ValidationError(f"{field_name} must be a number")
    try:
        result = float(value)
    except (TypeError, ValueError):
        raise ValidationError(f"{field_name} must be a number")
    if not math.isfinite(result):
        raise ValidationError(f"{field_name} must be a number")
    if places is not None:
        result = float(Decimal(repr(result)).quantize(Decimal(1).scaleb(-places), rounding=ROUND_HALF_UP))
    return result


def parse_int(value: Any, field_name: str) -> Optional[int]:
    if _blank(value):
        return None
    if isinstance(value, int) and not isinstance(value, bool):
        return value
    try:
        return int(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a whole number")


def parse_date(value: Any, field_name: str) -> Optional[date]:
    if _blank(value):
        return None
    if isinstance(value, date):
        return value
    try:
        return parse_iso_date(str(value).strip())
    except ValueError:
        raise ValidationError(f"{field_name} must be a date (YYYY-MM-DD)")


def parse_enum(enum_cls: Type[E], value: Any, field_name: str) -> Optional[E]:
    if _blank(value):
        return None
    if isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip())
    except ValueError:
        allowed = ", ".join(m.value for m in enum_cls)
        raise ValidationError(f"{field_name} must be one of: {allowed}")


def require_range(value: Optional[float], field_name: str, *, low: float, high: Optional[float] = None) -> Optional[float]:
    if value is None:
        return None
    # written as negations so NaN fails the check
    if not value >= low or (high is not None and not value <= high):
        if high is None:
            raise ValidationError(f"{field_name} must be at least {low:g}")
        raise ValidationError(f"{field_name} must be between {low:g} and {high:g}")
    return value


def require_date_order(start: Optional[date], end: Optional[date], field_name: str = "End Date") -> None:
    if start and end and end < start:
        raise ValidationError(f"{field_name} must be on or after the start date")


class FieldErrors:
    """Collects per-field validation messages so a form reports all of them at once."""

    def __init__(self) -> None:
        self.errors: dict[str, str] = {}

    def check(self, field: str, fn: Callable[..., T], *args: Any, **kwargs: Any) -> Optional[T]:
        try:
            return fn(*args, **kwargs)
        except ValidationError as e:
            self.errors.setdefault(field, str(e))
            return None

    def add(self, field: str, message: str) -> None:
        self.errors.setdefault(field, message)

    def raise_if_any(self, message: str = "Please correct the highlighted fields") -> None:
        if self.errors:
            if len(self.errors) == 1:
                message = next(iter(self.errors.values()))
            raise ValidationError(message, self.errors)
