from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, Mapping, Optional, Protocol

from authflow.forms.violations import Violation

if TYPE_CHECKING:
    from authflow.forms.model import FieldValue


class CrossFieldValidator(Protocol):
    fields: tuple[str, ...]

    def __call__(self, values: Mapping[str, "FieldValue"]) -> Optional[Violation]:
        ...


@dataclass(frozen=True)
class FieldsMatch:
    """Two fields must hold the same value."""

    fields: tuple[str, str]
    violation: Violation = Violation.PASSWORD_MISMATCH

    def __call__(self, values: Mapping[str, "FieldValue"]) -> Optional[Violation]:
        first = values.get(self.fields[0])
        second = values.get(self.fields[1])
        # a half-built form is not judged
        if first is None or second is None:
            return None
        return None if first.value == second.value else self.violation


passwords_match = FieldsMatch(("password", "password_confirm"))
