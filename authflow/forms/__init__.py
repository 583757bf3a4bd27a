from .model import FieldSpec, FieldValue, FormModel, FormState
from .violations import ErrorKind, Violation
from . import validators
from .cross_field import FieldsMatch, passwords_match

__all__ = [
    "FieldSpec",
    "FieldValue",
    "FormModel",
    "FormState",
    "ErrorKind",
    "Violation",
    "validators",
    "FieldsMatch",
    "passwords_match",
]
