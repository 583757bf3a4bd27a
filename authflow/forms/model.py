"""
Form model: named fields with values, violations and touched flags.

Validity is recomputed eagerly on every write, so readers (templates, flow
controllers) always see the current verdict without triggering work.
"""
from __future__ import annotations

from dataclasses import dataclass, field, replace
from types import MappingProxyType
from typing import Any, Iterable, Mapping

from authflow.core.exceptions import FormDefinitionError, UnknownFieldError
from authflow.forms.cross_field import CrossFieldValidator
from authflow.forms.validators import FieldRaw, Validator, run_validators
from authflow.forms.violations import Violation, describe


@dataclass
class FieldValue:
    name: str
    value: FieldRaw
    violations: list[Violation] = field(default_factory=list)
    touched: bool = False

    @property
    def valid(self) -> bool:
        return not self.violations


@dataclass(frozen=True)
class FieldSpec:
    name: str
    initial: FieldRaw = ""
    validators: tuple[Validator, ...] = ()
    label: str | None = None
    # where form-level violations naming this field are displayed
    shows: tuple[Violation, ...] = ()

    @property
    def display_label(self) -> str:
        return self.label or self.name.replace("_", " ").capitalize()


@dataclass(frozen=True)
class FormState:
    fields: Mapping[str, FieldValue]
    violations: tuple[Violation, ...] = ()

    @property
    def valid(self) -> bool:
        return not self.violations and all(f.valid for f in self.fields.values())


class FormModel:
    def __init__(
        self,
        fields: Iterable[FieldSpec],
        cross_field: Iterable[CrossFieldValidator] = (),
    ):
        self._specs: dict[str, FieldSpec] = {}
        for spec in fields:
            if spec.name in self._specs:
                raise FormDefinitionError(f"duplicate field {spec.name!r}")
            self._specs[spec.name] = spec

        self._cross_field = tuple(cross_field)
        for rule in self._cross_field:
            missing = [name for name in rule.fields if name not in self._specs]
            if missing:
                raise FormDefinitionError(
                    f"cross-field rule {rule!r} refers to undefined fields {missing}"
                )

        self._fields: dict[str, FieldValue] = {
            name: FieldValue(name=name, value=spec.initial)
            for name, spec in self._specs.items()
        }
        self._form_violations: list[Violation] = []
        for name in self._fields:
            self._validate_field(name)
        self._validate_form()

    # --- reads ---

    @property
    def fields(self) -> Mapping[str, FieldValue]:
        return MappingProxyType(self._fields)

    @property
    def form_violations(self) -> tuple[Violation, ...]:
        return tuple(self._form_violations)

    def field(self, name: str) -> FieldValue:
        try:
            return self._fields[name]
        except KeyError:
            raise UnknownFieldError(name) from None

    def is_valid(self) -> bool:
        return not self._form_violations and all(f.valid for f in self._fields.values())

    def errors(self) -> dict[str, list[str]]:
        """Violation ids of every invalid field; form-level ones under ``"__form__"``."""
        out = {
            name: [v.value for v in f.violations]
            for name, f in self._fields.items()
            if f.violations
        }
        if self._form_violations:
            out["__form__"] = [v.value for v in self._form_violations]
        return out

    def state(self) -> FormState:
        copied = {
            name: replace(f, violations=list(f.violations))
            for name, f in self._fields.items()
        }
        return FormState(
            fields=MappingProxyType(copied),
            violations=tuple(self._form_violations),
        )

    def snapshot(self) -> dict[str, Any]:
        # every field, touched or not (defaults such as remember_me included)
        return {name: f.value for name, f in self._fields.items()}

    def visible_violations(self, name: str) -> list[Violation]:
        f = self.field(name)
        if not f.touched:
            return []
        shown = list(f.violations)
        shown += [v for v in self._form_violations if v in self._specs[name].shows]
        return shown

    def messages(self, name: str) -> list[str]:
        spec = self._specs.get(name)
        if spec is None:
            raise UnknownFieldError(name)
        min_len = next(
            (v.min_length for v in spec.validators if hasattr(v, "min_length")),
            None,
        )
        return [
            describe(v, spec.display_label, min_length=min_len)
            for v in self.visible_violations(name)
        ]

    # --- writes ---

    def set_value(self, name: str, value: FieldRaw, *, touch: bool = True) -> FieldValue:
        f = self.field(name)
        f.value = value
        if touch:
            f.touched = True
        self._validate_field(name)
        # any edit may flip a cross-field rule
        self._validate_form()
        return f

    def mark_touched(self, name: str) -> None:
        self.field(name).touched = True

    def mark_all_touched(self) -> None:
        for f in self._fields.values():
            f.touched = True

    # --- internals ---

    def _validate_field(self, name: str) -> None:
        f = self._fields[name]
        f.violations = run_validators(self._specs[name].validators, f.value)

    def _validate_form(self) -> None:
        violations: list[Violation] = []
        for rule in self._cross_field:
            violation = rule(self._fields)
            if violation is not None:
                violations.append(violation)
        self._form_violations = violations
