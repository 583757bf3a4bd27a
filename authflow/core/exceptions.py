"""
Exceptions for misuse of the form/flow API.

Validation failures are never raised; they live on the form as violations.
"""


class UnknownFieldError(KeyError):
    """A field name the form does not define."""


class FormDefinitionError(ValueError):
    """The form was declared inconsistently (duplicate or dangling field names)."""


class FlowClosedError(RuntimeError):
    """The flow instance was already torn down."""
