"""
Lifecycle Policy

Explicit configuration handed to every authentication use case instead of
reading process-wide settings.
"""

from datetime import timedelta
from typing import Dict

from pydantic import BaseModel, ConfigDict, Field

from src.domain.entities import RoleNumber


class LifecyclePolicy(BaseModel):
    """
    Durations, role table and mail settings for the credential lifecycle.

    Attributes:
        challenge_ttl: Lifetime of confirmation and reset challenges
        resend_throttle: Minimum gap between two confirmation issuances
        roles: Role number -> role name table seeded on startup
        default_signup_role: Role number used when signup omits one
        mail_from: Sender address of lifecycle mails
        api_base_url: Base URL quoted in mails so users know where to post
    """

    model_config = ConfigDict(frozen=True)

    challenge_ttl: timedelta = timedelta(minutes=10)
    resend_throttle: timedelta = timedelta(minutes=3)
    roles: Dict[int, str] = Field(
        default_factory=lambda: {role.value: role.name for role in RoleNumber}
    )
    default_signup_role: int = RoleNumber.USER.value
    mail_from: str = "no-reply@cto.local"
    api_base_url: str = "http://localhost:8000/api"

    @classmethod
    def from_config(cls, config) -> "LifecyclePolicy":
        return cls(
            challenge_ttl=timedelta(minutes=config.CHALLENGE_EXPIRES_MINUTES),
            resend_throttle=timedelta(minutes=config.RESEND_THROTTLE_MINUTES),
            default_signup_role=config.SIGNUP_DEFAULT_ROLE,
            mail_from=config.MAIL_FROM,
            api_base_url=config.API_BASE_URL,
        )
