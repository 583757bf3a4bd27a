from __future__ import annotations
from enum import Enum


class ErrorKind(str, Enum):
    MISSING_VALUE = "MissingValue"
    INVALID_FORMAT = "InvalidFormat"
    TOO_SHORT = "TooShort"
    MISMATCH = "Mismatch"
    TOKEN_MISSING = "TokenMissing"


class Violation(str, Enum):
    REQUIRED = "required"
    EMAIL_FORMAT = "email-format"
    MIN_LENGTH = "min-length"
    PATTERN = "pattern"
    PASSWORD_MISMATCH = "password-mismatch"
    BOOLEAN = "boolean"

    @property
    def kind(self) -> ErrorKind:
        return _KINDS[self]


_KINDS = {
    Violation.REQUIRED: ErrorKind.MISSING_VALUE,
    Violation.EMAIL_FORMAT: ErrorKind.INVALID_FORMAT,
    Violation.MIN_LENGTH: ErrorKind.TOO_SHORT,
    Violation.PATTERN: ErrorKind.INVALID_FORMAT,
    Violation.PASSWORD_MISMATCH: ErrorKind.MISMATCH,
    Violation.BOOLEAN: ErrorKind.INVALID_FORMAT,
}

_MESSAGES = {
    Violation.REQUIRED: "{label} is required",
    Violation.EMAIL_FORMAT: "Please enter a valid email address",
    Violation.MIN_LENGTH: "{label} must be at least {min_length} characters",
    Violation.PATTERN: (
        "{label} must contain uppercase, lowercase, number and special character (@$!%*?&)"
    ),
    Violation.PASSWORD_MISMATCH: "Passwords do not match",
    Violation.BOOLEAN: "{label} must be checked or unchecked",
}


def describe(violation: Violation, label: str, *, min_length: int | None = None) -> str:
    return _MESSAGES[violation].format(label=label, min_length=min_length)
