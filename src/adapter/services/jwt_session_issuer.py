import logging
from datetime import UTC, datetime, timedelta

from jose import JWTError, jwt

from src.app.services.session_issuer import DecodedSession, ISessionIssuer, SessionClaims
from src.libs.result import Error, ErrorKind, Result, Return

logger = logging.getLogger(__name__)

EPOCH = datetime(1970, 1, 1, tzinfo=UTC)
_MICROSECOND = timedelta(microseconds=1)


class JwtSessionIssuer(ISessionIssuer):
    """Session credentials as HS256 JWTs"""

    def __init__(
        self,
        secret: str,
        algorithm: str = "HS256",
        expires_in: timedelta = timedelta(days=1),
        remember_expires_in: timedelta = timedelta(days=30),
    ):
        self.secret = secret
        self.algorithm = algorithm
        self.expires_in = expires_in
        self.remember_expires_in = remember_expires_in

    def mint(self, claims: SessionClaims) -> Result[str]:
        """
        Sign claims into a JWT.

        Args:
            claims: Account id, email, role number and remember flag

        Returns:
            Result with the encoded token, or Error(SESSION_SIGNING_FAILED)
        """
        now = datetime.now(UTC)
        lifetime = self.remember_expires_in if claims.remember else self.expires_in
        payload = {
            **claims.model_dump(),
            "iat": now,
            # iat only keeps whole seconds; password changes need finer ordering
            "iat_us": (now - EPOCH) // _MICROSECOND,
            "exp": now + lifetime,
        }
        try:
            return Return.ok(jwt.encode(payload, self.secret, algorithm=self.algorithm))
        except JWTError as exc:
            logger.error(f"Failed to sign session: {exc}")
            return Return.err(
                Error("SESSION_SIGNING_FAILED", "Failed to sign session", ErrorKind.internal)
            )

    def decode(self, token: str) -> Result[DecodedSession]:
        """
        Verify and decode a JWT.

        Returns:
            Result with DecodedSession, or Error(INVALID_SESSION) when the
            signature, expiry or claims are invalid
        """
        try:
            payload = jwt.decode(token, self.secret, algorithms=[self.algorithm])
            return Return.ok(
                DecodedSession(
                    id=payload["id"],
                    email=payload["email"],
                    role=payload["role"],
                    remember=payload.get("remember", False),
                    issued_at=self._issued_at(payload),
                    expires_at=datetime.fromtimestamp(payload["exp"], UTC),
                )
            )
        except (JWTError, KeyError, TypeError, ValueError):
            return Return.err(
                Error("INVALID_SESSION", "Invalid or expired token", ErrorKind.unauthorized)
            )

    @staticmethod
    def _issued_at(payload: dict) -> datetime:
        if "iat_us" in payload:
            return EPOCH + timedelta(microseconds=int(payload["iat_us"]))
        return datetime.fromtimestamp(payload["iat"], UTC)
