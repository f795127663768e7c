import pytest

from src.app.services.session_issuer import SessionClaims
from src.app.use_cases.auth import LoginCommand, LoginUseCase
from src.libs.result import ErrorKind


@pytest.mark.asyncio
async def test_successful_login(mock_uow, sessions, make_account, user_role, current_password):
    account = make_account()
    mock_uow.accounts.get_by_email.return_value = account
    mock_uow.roles.get_by_id.return_value = user_role

    result = await LoginUseCase(mock_uow, sessions).execute(
        LoginCommand(email=account.email, password=current_password, remember=True)
    )

    assert result.is_ok()
    assert result.value.token == "signed.jwt.token"
    sessions.mint.assert_called_once_with(
        SessionClaims(id=str(account.id), email=account.email, role=2, remember=True)
    )


@pytest.mark.asyncio
async def test_login_wrong_password(mock_uow, sessions, make_account):
    mock_uow.accounts.get_by_email.return_value = make_account()

    result = await LoginUseCase(mock_uow, sessions).execute(
        LoginCommand(email="user@example.com", password="WrongPass1")
    )

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    assert result.error.kind == ErrorKind.unauthorized
    sessions.mint.assert_not_called()


@pytest.mark.asyncio
async def test_login_unknown_email(mock_uow, sessions):
    result = await LoginUseCase(mock_uow, sessions).execute(
        LoginCommand(email="nobody@example.com", password="whatever1")
    )

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"


@pytest.mark.asyncio
async def test_login_unconfirmed_account_looks_like_bad_credentials(
    mock_uow, sessions, make_account, current_password
):
    mock_uow.accounts.get_by_email.return_value = make_account(account_confirmed=False)

    result = await LoginUseCase(mock_uow, sessions).execute(
        LoginCommand(email="user@example.com", password=current_password)
    )

    assert result.is_err()
    assert result.error.code == "INVALID_CREDENTIALS"
    sessions.mint.assert_not_called()
