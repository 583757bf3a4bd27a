import logging
from typing import Protocol

from authflow.schemas import (
    AuthResponse,
    ForgotPasswordRequest,
    LoginCredentials,
    ResetPasswordRequest,
)

log = logging.getLogger("authflow")

class AuthBackend(Protocol):
    def login(self, credentials: LoginCredentials) -> AuthResponse | None:
        ...

    def forgot_password(self, request: ForgotPasswordRequest) -> None:
        ...

    def reset_password(self, request: ResetPasswordRequest) -> None:
        ...

# Until a real backend is wired in, log the hand-off (never the secrets)
class DevAuthBackend:
    def login(self, credentials: LoginCredentials) -> AuthResponse | None:
        log.info(
            "auth_login_requested",
            extra={"email": credentials.email, "remember_me": credentials.remember_me},
        )
        return None

    def forgot_password(self, request: ForgotPasswordRequest) -> None:
        log.info("auth_forgot_password_requested", extra={"email": request.email})

    def reset_password(self, request: ResetPasswordRequest) -> None:
        log.info("auth_reset_password_requested")
