"""
Authentication Use Case DTOs (Data Transfer Objects)

All Command and Response classes for auth domain.
Provides type safety and clear contracts between layers.
"""

from typing import Optional
from uuid import UUID

from pydantic import BaseModel


# ============================================================================
# Command DTOs
# ============================================================================


class SignupCommand(BaseModel):
    """
    Signup command - represents validated signup intent

    Created by API layer after request validation passes.
    role is a role number; None means the configured default.
    """

    email: str
    password: str
    password_confirm: str
    role: Optional[int] = None


class LoginCommand(BaseModel):
    email: str
    password: str
    remember: bool = False


class ConfirmAccountCommand(BaseModel):
    email: str
    code: int
    token: str


class ResetPasswordCommand(BaseModel):
    reset_token: str
    email: str
    password: str
    password_confirm: str


# ============================================================================
# Response DTOs
# ============================================================================


class SentResponse(BaseModel):
    """Response for use cases that end by mailing a challenge"""

    sent: bool = True


class TokenResponse(BaseModel):
    """Response for use cases that end by minting a session"""

    token: str


class CurrentAccount(BaseModel):
    """Account resolved from a valid session credential"""

    id: UUID
    email: str
    role: int
    role_id: UUID
