"""Validation predicates and the ordered field validators built on them.

The predicates are pure: one primitive in, a plain bool out. Rejection is
the caller's decision; ``validate_employee_fields`` is the caller used by
the service layer and raises on the first failing field.
"""

from __future__ import annotations

import re
from decimal import Decimal, InvalidOperation

from orgdir.domain.errors import ValidationFailure

MIN_NAME_LENGTH = 2
MAX_AGE = 150
MAX_SALARY = Decimal("1000000")

EMPLOYEE_ID_PATTERN = re.compile(r"^EMP\d{4}$")

# Letters and whitespace only (``[^\W\d_]`` is "word char minus digits and underscore").
_NAME_PATTERN = re.compile(r"^(?:[^\W\d_]|\s)+$")


def is_valid_name(name: str | None) -> bool:
    """Non-blank, at least two characters, letters and whitespace only."""
    if not isinstance(name, str) or not name.strip():
        return False
    if len(name) < MIN_NAME_LENGTH:
        return False
    return _NAME_PATTERN.match(name) is not None


def is_valid_age(age: int) -> bool:
    """Whole number of years in ``0..MAX_AGE``; bools and fractions are rejected."""
    if isinstance(age, bool):
        return False
    if isinstance(age, float) and age.is_integer():
        age = int(age)
    if not isinstance(age, int):
        return False
    return 0 <= age <= MAX_AGE


def is_valid_employee_id(employee_id: str | None) -> bool:
    """``EMP`` followed by exactly four decimal digits, e.g. ``EMP0001``."""
    if not isinstance(employee_id, str):
        return False
    return EMPLOYEE_ID_PATTERN.fullmatch(employee_id) is not None


def is_valid_salary(salary: Decimal | float | int) -> bool:
    if isinstance(salary, bool):
        return False
    try:
        value = Decimal(str(salary))
    except InvalidOperation:
        return False
    if not value.is_finite():
        return False
    return 0 <= value <= MAX_SALARY


def validate_person_fields(name: str, age: int) -> None:
    """Check name then age, raising :class:`ValidationFailure` on the first failure."""
    if not is_valid_name(name):
        raise ValidationFailure(
            "name",
            name,
            f"must be at least {MIN_NAME_LENGTH} characters of letters and spaces",
        )
    if not is_valid_age(age):
        raise ValidationFailure("age", age, f"must be a whole number between 0 and {MAX_AGE}")


def validate_employee_fields(
    name: str,
    age: int,
    employee_id: str,
    salary: Decimal | float | int,
) -> None:
    """Check name → age → employee_id → salary, stopping at the first failure."""
    validate_person_fields(name, age)
    if not is_valid_employee_id(employee_id):
        raise ValidationFailure("employee_id", employee_id, "must match EMP followed by 4 digits")
    if not is_valid_salary(salary):
        raise ValidationFailure("salary", salary, f"must be between 0 and {MAX_SALARY}")


def validate_percentage(percentage: Decimal | float | int) -> Decimal:
    """Return *percentage* as a Decimal, raising :class:`ValidationFailure` unless finite.

    Any finite value is accepted, including negatives and values past 100.
    """
    if isinstance(percentage, bool):
        raise ValidationFailure("percentage", percentage, "must be a number")
    try:
        value = Decimal(str(percentage))
    except InvalidOperation:
        raise ValidationFailure("percentage", percentage, "must be a number") from None
    if not value.is_finite():
        raise ValidationFailure("percentage", percentage, "must be a finite number")
    return value
