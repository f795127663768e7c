"""
ResetChallenge Entity

Password reset tokens with a snapshot of the password they replace.
"""

from datetime import datetime
from typing import Optional
from uuid import UUID, uuid4

from sqlmodel import Field, Index

from src.domain.base import AuditedModel, UTCDateTime


class ResetChallenge(AuditedModel, table=True):
    """
    ResetChallenge entity - single-use password reset token.

    Business Rules:
    - Expires 10 minutes after issuance by default
    - old_password_hash snapshots the hash at issuance
    - new_password_hash is filled when the challenge is redeemed
    - Several may be active at once; redemption picks one by token
    """

    __tablename__ = "reset_challenges"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    account_id: UUID = Field(foreign_key="accounts.id", index=True)
    token: str = Field(max_length=64)

    is_used: bool = Field(default=False)
    expires_at: datetime = Field(sa_type=UTCDateTime)

    old_password_hash: str = Field(max_length=60)
    new_password_hash: Optional[str] = Field(default=None, max_length=60)

    __table_args__ = (Index("idx_reset_account_token", "account_id", "token"),)
