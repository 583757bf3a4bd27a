from .base import FlowController, FlowState
from .login import LoginFlow
from .forgot_password import ForgotPasswordFlow
from .reset_password import ResetPasswordFlow

__all__ = [
    "FlowController",
    "FlowState",
    "LoginFlow",
    "ForgotPasswordFlow",
    "ResetPasswordFlow",
]
