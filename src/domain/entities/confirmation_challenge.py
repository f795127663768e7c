"""
ConfirmationChallenge Entity

Code/token pair mailed on signup and resend.
"""

from datetime import datetime
from uuid import UUID, uuid4

from sqlmodel import Field, Index

from src.domain.base import AuditedModel, UTCDateTime


class ConfirmationChallenge(AuditedModel, table=True):
    """
    ConfirmationChallenge entity - proves ownership of the account inbox.

    Business Rules:
    - Code (6 digits) and token (256-bit hex) must be supplied together
    - Expires 10 minutes after issuance by default
    - Issuing a new one deactivates every other active one of the account
    - Used or expired challenges are never accepted
    """

    __tablename__ = "confirmation_challenges"

    id: UUID = Field(default_factory=uuid4, primary_key=True)

    account_id: UUID = Field(foreign_key="accounts.id", index=True)
    code: int
    token: str = Field(max_length=64)

    is_used: bool = Field(default=False)
    expires_at: datetime = Field(sa_type=UTCDateTime)

    __table_args__ = (Index("idx_confirmation_account_token", "account_id", "token"),)

    def is_redeemable(self, now: datetime) -> bool:
        return self.is_active and not self.is_used and self.expires_at >= now
