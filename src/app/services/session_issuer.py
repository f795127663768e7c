from abc import ABC, abstractmethod
from datetime import datetime

from pydantic import BaseModel

from src.libs.result import Result


class SessionClaims(BaseModel):
    """Claims embedded in a session credential"""

    id: str
    email: str
    role: int
    remember: bool = False


class DecodedSession(SessionClaims):
    """Claims read back from a verified credential"""

    issued_at: datetime
    expires_at: datetime


class ISessionIssuer(ABC):
    """Mints and verifies signed session credentials"""

    @abstractmethod
    def mint(self, claims: SessionClaims) -> Result[str]:
        """Sign claims into a credential; lifetime depends on claims.remember"""
        pass

    @abstractmethod
    def decode(self, token: str) -> Result[DecodedSession]:
        """Verify signature and expiry, returning the embedded claims"""
        pass
