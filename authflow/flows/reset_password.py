"""
Reset-password flow.

The one-time token comes from the link the user followed; without it the
flow sits in ``TOKEN_MISSING`` and refuses to submit. After a successful
submit the user is sent back to the login page once, after a short delay,
unless the flow is closed first.
"""
from __future__ import annotations

import logging
from typing import Any

from authflow.core.config import settings
from authflow.flows.base import FlowController, FlowState
from authflow.forms.cross_field import passwords_match
from authflow.forms.model import FieldSpec, FormModel
from authflow.forms.validators import min_length, required, strong_password
from authflow.forms.violations import Violation
from authflow.schemas import ResetPasswordRequest
from authflow.services.auth_backend import AuthBackend
from authflow.services.navigation import DevNavigator, Navigator
from authflow.services.scheduler import Cancellable, Scheduler, default_scheduler
from authflow.utils import reset_token_from_url

log = logging.getLogger("authflow")


class ResetPasswordFlow(FlowController):
    name = "reset_password"

    def __init__(
        self,
        token: str | None,
        backend: AuthBackend | None = None,
        *,
        navigator: Navigator | None = None,
        scheduler: Scheduler | None = None,
        redirect_delay_ms: int | None = None,
    ):
        # read once at entry, never changes afterwards
        self._token = token or None
        self.navigator: Navigator = navigator or DevNavigator()
        self.scheduler: Scheduler = scheduler or default_scheduler()
        self.redirect_delay_ms = (
            settings.RESET_REDIRECT_DELAY_MS if redirect_delay_ms is None else redirect_delay_ms
        )
        self._redirect: Cancellable | None = None
        super().__init__(backend)

    @classmethod
    def from_url(cls, url: str, **kwargs) -> "ResetPasswordFlow":
        return cls(reset_token_from_url(url), **kwargs)

    @property
    def token(self) -> str | None:
        return self._token

    @property
    def token_invalid(self) -> bool:
        return self._token is None

    @property
    def reset_complete(self) -> bool:
        return self.state is FlowState.COMPLETED

    @property
    def redirect_pending(self) -> bool:
        return self._redirect is not None

    def initial_state(self) -> FlowState:
        if self._token is None:
            log.info("flow_token_missing", extra=self.context.log_extra())
            return FlowState.TOKEN_MISSING
        return FlowState.IDLE

    def build_form(self) -> FormModel:
        return FormModel(
            [
                FieldSpec(
                    "password",
                    "",
                    (required, min_length(settings.PASSWORD_MIN_LENGTH), strong_password),
                    label="Password",
                ),
                FieldSpec(
                    "password_confirm",
                    "",
                    (required,),
                    label="Confirm password",
                    shows=(Violation.PASSWORD_MISMATCH,),
                ),
            ],
            cross_field=[passwords_match],
        )

    def build_request(self, values: dict[str, Any]) -> ResetPasswordRequest:
        return ResetPasswordRequest.model_validate({**values, "token": self._token})

    def dispatch(self, request: ResetPasswordRequest) -> None:
        self.backend.reset_password(request)

    def on_completed(self) -> None:
        self._redirect = self.scheduler.call_later(
            self.redirect_delay_ms / 1000, self._redirect_to_login
        )
        log.info(
            "flow_redirect_scheduled",
            extra=self.context.log_extra(delay_ms=self.redirect_delay_ms),
        )

    def close(self) -> None:
        if self._redirect is not None:
            self._redirect.cancel()
            self._redirect = None
            log.info("flow_redirect_cancelled", extra=self.context.log_extra())
        super().close()

    def _redirect_to_login(self) -> None:
        self._redirect = None
        if self.closed:
            return
        log.info("flow_redirect_fired", extra=self.context.log_extra(path=settings.LOGIN_ROUTE))
        self.navigator.navigate(settings.LOGIN_ROUTE)
