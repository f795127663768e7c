"""
Authentication Use Cases

Credential lifecycle: signup, confirmation, login, password reset and
session validation.
"""

from .authenticate_session_use_case import AuthenticateSessionUseCase
from .confirm_account_use_case import ConfirmAccountUseCase
from .confirm_password_reset_use_case import ConfirmPasswordResetUseCase
from .dtos import (
    ConfirmAccountCommand,
    CurrentAccount,
    LoginCommand,
    ResetPasswordCommand,
    SentResponse,
    SignupCommand,
    TokenResponse,
)
from .login_use_case import LoginUseCase
from .request_password_reset_use_case import RequestPasswordResetUseCase
from .resend_confirmation_use_case import ResendConfirmationUseCase
from .signup_use_case import SignupUseCase

__all__ = [
    # Use Cases
    "SignupUseCase",
    "ConfirmAccountUseCase",
    "ResendConfirmationUseCase",
    "LoginUseCase",
    "RequestPasswordResetUseCase",
    "ConfirmPasswordResetUseCase",
    "AuthenticateSessionUseCase",
    # DTOs - Commands
    "SignupCommand",
    "LoginCommand",
    "ConfirmAccountCommand",
    "ResetPasswordCommand",
    # DTOs - Responses
    "SentResponse",
    "TokenResponse",
    "CurrentAccount",
]
