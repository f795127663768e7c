from abc import ABC, abstractmethod

from pydantic import BaseModel

from src.libs.result import Result


class MailMessage(BaseModel):
    from_address: str
    to: str
    subject: str
    html: str


class IMailer(ABC):
    """Outbound notification transport"""

    @abstractmethod
    async def send(self, message: MailMessage) -> Result[None]:
        """Deliver a message; failures come back as Err, never raised"""
        pass
