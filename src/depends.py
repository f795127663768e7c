from datetime import timedelta
from typing import Optional

from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel.ext.asyncio.session import AsyncSession
from config import ApplicationConfig
from src.adapter.services.jwt_session_issuer import JwtSessionIssuer
from src.adapter.services.local_file_storage import LocalFileStorage
from src.adapter.services.mailers import build_mailer
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.api.error import ApiError
from src.app.services.file_storage import IFileStorage
from src.app.services.lifecycle_policy import LifecyclePolicy
from src.app.services.mailer import IMailer
from src.app.services.session_issuer import ISessionIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import AuthenticateSessionUseCase, CurrentAccount
from src.domain.entities import RoleNumber
from src.libs.result import Error, ErrorKind

engine = create_async_engine(ApplicationConfig.DB_URI, echo=False, future=True)

AsyncSessionLocal = sessionmaker(
    engine, class_=AsyncSession, expire_on_commit=False, autoflush=False
)

# Missing credentials are reported through ApiError, not FastAPI's 403
security = HTTPBearer(auto_error=False)


async def get_unit_of_work():
    async with AsyncSessionLocal() as session:
        yield SqlAlchemyUnitOfWork(session)


def get_policy() -> LifecyclePolicy:
    return LifecyclePolicy.from_config(ApplicationConfig)


def get_mailer() -> IMailer:
    return build_mailer(ApplicationConfig)


def get_session_issuer() -> ISessionIssuer:
    return JwtSessionIssuer(
        secret=ApplicationConfig.JWT_SECRET,
        algorithm=ApplicationConfig.JWT_ALGORITHM,
        expires_in=timedelta(minutes=ApplicationConfig.JWT_EXPIRES_MINUTES),
        remember_expires_in=timedelta(days=ApplicationConfig.JWT_REMEMBER_EXPIRES_DAYS),
    )


def get_file_storage() -> IFileStorage:
    return LocalFileStorage(ApplicationConfig.PUBLIC_DIR, ApplicationConfig.PUBLIC_URL)


async def get_current_account(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(security),
    uow: UnitOfWork = Depends(get_unit_of_work),
    sessions: ISessionIssuer = Depends(get_session_issuer),
) -> CurrentAccount:
    """
    Dependency resolving the Bearer token into the signed-in account.

    Raises:
        ApiError: 401 when the token is missing, invalid, expired, issued
            before the last password change, or its account is gone
    """
    if credentials is None:
        raise ApiError(
            Error(
                "NOT_AUTHENTICATED",
                "Not authorized to access this route!",
                ErrorKind.unauthorized,
            )
        )

    result = await AuthenticateSessionUseCase(uow, sessions).execute(credentials.credentials)
    if result.is_err():
        raise ApiError(result.error)

    return result.value


def require_roles(*roles: RoleNumber):
    """Dependency factory: 403 unless the signed-in account holds one of roles"""
    allowed = {int(role) for role in roles}

    async def checker(account: CurrentAccount = Depends(get_current_account)) -> CurrentAccount:
        if account.role not in allowed:
            raise ApiError(
                Error(
                    "FORBIDDEN",
                    "Not allowed to access this route!",
                    ErrorKind.forbidden,
                )
            )
        return account

    return checker
