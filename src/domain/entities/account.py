"""
Account Entity

Represents a registered identity able to sign in.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field

from src.domain.base import AuditedModel, UTCDateTime


class Account(AuditedModel, table=True):
    """
    Account entity - a registered user identity.

    Business Rules:
    - Email is unique among non-deleted accounts
    - Password stored as bcrypt hash, never in clear form
    - Unconfirmed until a confirmation challenge is redeemed
    - password_changed_at invalidates every session issued before it
    """

    __tablename__ = "accounts"

    id: UUID = Field(default_factory=uuid4, primary_key=True)
    email: str = Field(index=True, max_length=255)
    password_hash: str = Field(max_length=60)  # Bcrypt output is 60 chars
    role_id: UUID = Field(foreign_key="roles.id", index=True)

    account_confirmed: bool = Field(default=False)
    password_changed_at: Optional[datetime] = Field(default=None, sa_type=UTCDateTime)

    def password_changed_after(self, issued_at: datetime) -> bool:
        """True when the password changed after a session was issued at issued_at"""
        if self.password_changed_at is None:
            return False

        return self.password_changed_at > issued_at
