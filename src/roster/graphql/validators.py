"""Argument validation rules shared by the resolvers.

Each ``require_*`` helper returns the normalised value or raises
:class:`~roster.errors.InvalidArgument` naming the offending field. Callers
invoke them in a fixed order so the first failing rule wins.
"""

from __future__ import annotations

import re
from datetime import date, datetime
from typing import Any

import strawberry

from ..errors import InvalidArgument

# Deliberately loose: local@domain.tld, no whitespace, exactly one "@"
EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
MIN_PASSWORD_LENGTH = 6
MIN_SALARY = 1000.0


def is_absent(value: Any) -> bool:
    """True for UNSET, None, and strings that are empty after stripping."""
    if value is strawberry.UNSET or value is None:
        return True
    return isinstance(value, str) and not value.strip()


def require_non_empty(value: Any, field: str) -> str:
    """Return ``value`` with surrounding whitespace removed."""
    if is_absent(value):
        raise InvalidArgument(f"{field} is required and cannot be empty", [field])
    if not isinstance(value, str):
        raise InvalidArgument(f"{field} must be a string", [field])
    return value.strip()


def require_email(value: Any, field: str = "email") -> str:
    email = require_non_empty(value, field)
    if not EMAIL_PATTERN.match(email):
        raise InvalidArgument(f"{field} must be a valid email address", [field])
    return email


def require_password(value: Any, field: str = "password") -> str:
    if not isinstance(value, str) or len(value) < MIN_PASSWORD_LENGTH:
        raise InvalidArgument(
            f"{field} must be at least {MIN_PASSWORD_LENGTH} characters long", [field]
        )
    return value


def require_salary(value: Any, field: str = "salary") -> float:
    if is_absent(value):
        raise InvalidArgument(f"{field} is required", [field])
    if isinstance(value, bool) or not isinstance(value, int | float):
        raise InvalidArgument(f"{field} must be a number", [field])
    if not value >= MIN_SALARY:
        raise InvalidArgument(f"{field} must be at least {MIN_SALARY:g}", [field])
    return float(value)


def require_date(value: Any, field: str) -> date:
    if is_absent(value):
        raise InvalidArgument(f"{field} is required", [field])
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if isinstance(value, str):
        try:
            return date.fromisoformat(value.strip())
        except ValueError:
            pass
    raise InvalidArgument(f"{field} must be a date in YYYY-MM-DD format", [field])
