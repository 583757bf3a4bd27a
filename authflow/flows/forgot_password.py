from __future__ import annotations

from typing import Any

from authflow.flows.base import FlowController, FlowState
from authflow.forms.model import FieldSpec, FormModel
from authflow.forms.validators import email_format, required
from authflow.schemas import ForgotPasswordRequest


class ForgotPasswordFlow(FlowController):
    name = "forgot_password"

    def build_form(self) -> FormModel:
        return FormModel([
            FieldSpec("email", "", (required, email_format), label="Email"),
        ])

    def build_request(self, values: dict[str, Any]) -> ForgotPasswordRequest:
        return ForgotPasswordRequest.model_validate(values)

    def dispatch(self, request: ForgotPasswordRequest) -> None:
        self.backend.forgot_password(request)

    @property
    def submitted(self) -> bool:
        """True once the reset email request has been handed off."""
        return self.state is FlowState.COMPLETED
