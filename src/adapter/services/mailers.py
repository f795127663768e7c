import asyncio
import logging
import smtplib
from email.message import EmailMessage

from src.app.services.mailer import IMailer, MailMessage
from src.libs.result import Error, ErrorKind, Result, Return

logger = logging.getLogger(__name__)


class SmtpMailer(IMailer):
    """Sends mail through an SMTP relay, off the event loop"""

    def __init__(
        self,
        host: str,
        port: int,
        user: str = "",
        password: str = "",
        use_tls: bool = True,
        timeout: float = 10.0,
    ):
        self.host = host
        self.port = port
        self.user = user
        self.password = password
        self.use_tls = use_tls
        self.timeout = timeout

    def _deliver(self, message: MailMessage) -> None:
        email = EmailMessage()
        email["From"] = message.from_address
        email["To"] = message.to
        email["Subject"] = message.subject
        email.set_content(message.html, subtype="html")

        with smtplib.SMTP(self.host, self.port, timeout=self.timeout) as smtp:
            if self.use_tls:
                smtp.starttls()
            if self.user:
                smtp.login(self.user, self.password)
            smtp.send_message(email)

    async def send(self, message: MailMessage) -> Result[None]:
        try:
            await asyncio.to_thread(self._deliver, message)
        except (smtplib.SMTPException, OSError) as exc:
            logger.warning(f"Failed to send mail to {message.to}: {exc}")
            return Return.err(Error("MAIL_FAILED", "Failed to send mail!", ErrorKind.internal))
        return Return.ok(None)


class LogMailer(IMailer):
    """Development transport: writes the message to the log instead of sending it"""

    async def send(self, message: MailMessage) -> Result[None]:
        logger.info(
            f"Mail to={message.to} subject={message.subject!r} body={message.html!r}"
        )
        return Return.ok(None)


def build_mailer(config) -> IMailer:
    if config.MAIL_BACKEND == "smtp":
        return SmtpMailer(
            host=config.SMTP_HOST,
            port=config.SMTP_PORT,
            user=config.SMTP_USER,
            password=config.SMTP_PASSWORD,
            use_tls=config.SMTP_USE_TLS,
        )
    return LogMailer()
