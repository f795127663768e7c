from typing import Annotated, Optional

from fastapi import APIRouter, Depends, Path, status
from pydantic import AfterValidator, BaseModel, EmailStr, Field

from src.api.error import ApiError
from src.api.utils.response import SuccessResponse, success
from src.app.services.lifecycle_policy import LifecyclePolicy
from src.app.services.mailer import IMailer
from src.app.services.passwords import PASSWORD_MAX_BYTES, fits_bcrypt
from src.app.services.session_issuer import ISessionIssuer
from src.app.services.unit_of_work import UnitOfWork
from src.app.use_cases.auth import (
    ConfirmAccountCommand,
    ConfirmAccountUseCase,
    ConfirmPasswordResetUseCase,
    LoginCommand,
    LoginUseCase,
    RequestPasswordResetUseCase,
    ResendConfirmationUseCase,
    ResetPasswordCommand,
    SentResponse,
    SignupCommand,
    SignupUseCase,
    TokenResponse,
)
from src.depends import get_mailer, get_policy, get_session_issuer, get_unit_of_work

router = APIRouter(prefix="/authentication", tags=["Authentication"])

PASSWORD_MIN_LENGTH = 7


def check_password_bytes(value: str) -> str:
    if not fits_bcrypt(value):
        raise ValueError(f"must be at most {PASSWORD_MAX_BYTES} bytes")
    return value


Password = Annotated[
    str, Field(min_length=PASSWORD_MIN_LENGTH), AfterValidator(check_password_bytes)
]


class SignupRequest(BaseModel):
    """
    Signup HTTP request payload

    Validates incoming HTTP request before converting to SignupCommand.
    """

    email: EmailStr = Field(..., description="Account email address")
    password: Password
    password_confirm: Password
    role: Optional[int] = Field(default=None, description="Role number, defaults to USER")


class EmailRequest(BaseModel):
    email: EmailStr


class LoginRequest(BaseModel):
    email: EmailStr
    password: str = Field(..., min_length=1)
    remember: bool = False


class ConfirmRequest(BaseModel):
    email: EmailStr
    code: int = Field(..., ge=100000, le=999999)
    token: str = Field(..., min_length=1)


class ResetRequest(BaseModel):
    email: EmailStr
    password: Password
    password_confirm: Password


@router.post(
    "/signup",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessResponse[SentResponse],
)
async def signup(
    request: SignupRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: IMailer = Depends(get_mailer),
    policy: LifecyclePolicy = Depends(get_policy),
):
    """
    Sign up

    Creates an unconfirmed account and mails a confirmation code and token.

    Raises:
        - 400: Passwords differ or email already used
        - 404: Unknown role
        - 500: Mail could not be sent
    """
    command = SignupCommand(
        email=request.email,
        password=request.password,
        password_confirm=request.password_confirm,
        role=request.role,
    )
    result = await SignupUseCase(uow, mailer, policy).execute(command)
    if result.is_err():
        raise ApiError(result.error)

    return success(result.value)


@router.post(
    "/login",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessResponse[TokenResponse],
)
async def login(
    request: LoginRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    sessions: ISessionIssuer = Depends(get_session_issuer),
):
    """
    Log in

    Raises:
        - 401: Wrong credentials or account not confirmed
    """
    command = LoginCommand(
        email=request.email, password=request.password, remember=request.remember
    )
    result = await LoginUseCase(uow, sessions).execute(command)
    if result.is_err():
        raise ApiError(result.error)

    return success(result.value)


@router.post(
    "/confirm",
    status_code=status.HTTP_200_OK,
    response_model=SuccessResponse[TokenResponse],
)
async def confirm(
    request: ConfirmRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    sessions: ISessionIssuer = Depends(get_session_issuer),
):
    """
    Confirm account

    Redeems the mailed code/token pair and returns a session token.

    Raises:
        - 400: Account already confirmed
        - 401: Wrong, used or expired code
        - 404: Account not found
    """
    command = ConfirmAccountCommand(email=request.email, code=request.code, token=request.token)
    result = await ConfirmAccountUseCase(uow, sessions).execute(command)
    if result.is_err():
        raise ApiError(result.error)

    return success(result.value)


@router.post(
    "/resend",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessResponse[SentResponse],
)
async def resend(
    request: EmailRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: IMailer = Depends(get_mailer),
    policy: LifecyclePolicy = Depends(get_policy),
):
    """
    Resend confirmation

    Raises:
        - 400: Account already confirmed or asked again too soon
        - 404: Account not found
        - 500: Mail could not be sent
    """
    result = await ResendConfirmationUseCase(uow, mailer, policy).execute(request.email)
    if result.is_err():
        raise ApiError(result.error)

    return success(result.value)


@router.post(
    "/forgot",
    status_code=status.HTTP_200_OK,
    response_model=SuccessResponse[SentResponse],
)
async def forgot(
    request: EmailRequest,
    uow: UnitOfWork = Depends(get_unit_of_work),
    mailer: IMailer = Depends(get_mailer),
    policy: LifecyclePolicy = Depends(get_policy),
):
    """
    Forgot password

    Mails a reset link to a confirmed account.

    Raises:
        - 401: Account not confirmed
        - 404: Account not found
        - 500: Mail could not be sent
    """
    result = await RequestPasswordResetUseCase(uow, mailer, policy).execute(request.email)
    if result.is_err():
        raise ApiError(result.error)

    return success(result.value)


@router.post(
    "/reset/{reset_token}",
    status_code=status.HTTP_201_CREATED,
    response_model=SuccessResponse[TokenResponse],
)
async def reset(
    request: ResetRequest,
    reset_token: str = Path(..., min_length=1),
    uow: UnitOfWork = Depends(get_unit_of_work),
    sessions: ISessionIssuer = Depends(get_session_issuer),
):
    """
    Reset password

    Replaces the password and returns a fresh session token. Sessions
    issued before the reset stop working.

    Raises:
        - 400: Passwords differ, unchanged or already used
        - 401: Account not confirmed
        - 404: Account not found or token expired
    """
    command = ResetPasswordCommand(
        reset_token=reset_token,
        email=request.email,
        password=request.password,
        password_confirm=request.password_confirm,
    )
    result = await ConfirmPasswordResetUseCase(uow, sessions).execute(command)
    if result.is_err():
        raise ApiError(result.error)

    return success(result.value)
