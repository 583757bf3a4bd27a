from __future__ import annotations

from typing import Any

from authflow.core.config import settings
from authflow.flows.base import FlowController
from authflow.forms.model import FieldSpec, FormModel
from authflow.forms.validators import boolean, email_format, min_length, required
from authflow.schemas import LoginCredentials


class LoginFlow(FlowController):
    name = "login"

    def build_form(self) -> FormModel:
        return FormModel([
            FieldSpec("email", "", (required, email_format), label="Email"),
            FieldSpec(
                "password",
                "",
                (required, min_length(settings.PASSWORD_MIN_LENGTH)),
                label="Password",
            ),
            FieldSpec("remember_me", False, (boolean,), label="Remember me"),
        ])

    def build_request(self, values: dict[str, Any]) -> LoginCredentials:
        return LoginCredentials.model_validate(values)

    def dispatch(self, request: LoginCredentials) -> None:
        # the reply belongs to whoever wired the backend; nothing here reads it
        self.backend.login(request)
