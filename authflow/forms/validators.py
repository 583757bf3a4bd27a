"""
Single-field validation rules.

Each rule is a pure callable ``(value) -> Violation | None``. Rules never
raise on bad input and never trim: ``" "`` is a present value.
"""
from __future__ import annotations

import re
from typing import Callable, Optional, Union

from authflow.forms.violations import Violation

FieldRaw = Union[str, bool, None]
Validator = Callable[[FieldRaw], Optional[Violation]]

# local@domain, same shape browsers and most web form libraries accept
EMAIL_RE = re.compile(
    r"(?=.{1,254}\Z)(?=.{1,64}@)"
    r"[a-zA-Z0-9!#$%&'*+/=?^_`{|}~-]+(?:\.[a-zA-Z0-9!#$%&'*+/=?^_`{|}~-]+)*"
    r"@[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?"
    r"(?:\.[a-zA-Z0-9](?:[a-zA-Z0-9-]{0,61}[a-zA-Z0-9])?)*"
)

STRONG_PASSWORD_RE = re.compile(
    r"(?=.*[a-z])(?=.*[A-Z])(?=.*\d)(?=.*[@$!%*?&])[A-Za-z\d@$!%*?&]{8,}",
    re.ASCII,
)


def required(value: FieldRaw) -> Violation | None:
    if value is None or value == "":
        return Violation.REQUIRED
    return None


def email_format(value: FieldRaw) -> Violation | None:
    if not isinstance(value, str) or EMAIL_RE.fullmatch(value) is None:
        return Violation.EMAIL_FORMAT
    return None


def boolean(value: FieldRaw) -> Violation | None:
    # checkboxes carry True/False only
    if not isinstance(value, bool):
        return Violation.BOOLEAN
    return None


def min_length(n: int) -> Validator:
    def validate(value: FieldRaw) -> Violation | None:
        # length rules only make sense for text
        if isinstance(value, str) and len(value) < n:
            return Violation.MIN_LENGTH
        return None

    validate.min_length = n  # type: ignore[attr-defined]
    validate.__name__ = f"min_length_{n}"
    return validate


def pattern(regex: str | re.Pattern[str]) -> Validator:
    compiled = re.compile(regex) if isinstance(regex, str) else regex

    def validate(value: FieldRaw) -> Violation | None:
        if not isinstance(value, str) or compiled.fullmatch(value) is None:
            return Violation.PATTERN
        return None

    validate.__name__ = "pattern"
    return validate


strong_password = pattern(STRONG_PASSWORD_RE)


def run_validators(validators: tuple[Validator, ...], value: FieldRaw) -> list[Violation]:
    """Evaluate every rule in order, keeping all failures."""
    violations: list[Violation] = []
    for validate in validators:
        violation = validate(value)
        if violation is not None:
            violations.append(violation)
    return violations
