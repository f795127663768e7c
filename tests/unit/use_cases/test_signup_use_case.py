import pytest

from src.app.services.passwords import verify_password
from src.app.use_cases.auth import SignupCommand, SignupUseCase
from src.libs.result import Error, ErrorKind, Return


def signup_command(**overrides):
    values = dict(email="new@example.com", password="Secret123", password_confirm="Secret123")
    values.update(overrides)
    return SignupCommand(**values)


@pytest.mark.asyncio
async def test_signup_creates_unconfirmed_account_and_mails_challenge(
    mock_uow, mailer, policy, user_role
):
    mock_uow.roles.get_by_number.return_value = user_role

    result = await SignupUseCase(mock_uow, mailer, policy).execute(signup_command())

    assert result.is_ok()
    assert result.value.sent is True

    account = mock_uow.accounts.create.call_args.args[0]
    assert account.email == "new@example.com"
    assert account.account_confirmed is False
    assert account.role_id == user_role.id
    assert account.password_hash != "Secret123"
    assert verify_password("Secret123", account.password_hash)

    challenge = mock_uow.confirmation_challenges.create.call_args.args[0]
    assert challenge.account_id == account.id
    assert 100000 <= challenge.code <= 999999
    assert len(challenge.token) == 64
    mock_uow.confirmation_challenges.deactivate_others.assert_awaited_once_with(
        account.id, challenge.id
    )
    mock_uow.commit.assert_awaited_once()

    message = mailer.send.call_args.args[0]
    assert message.to == "new@example.com"
    assert message.from_address == "no-reply@test.com"
    assert challenge.token in message.html
    assert str(challenge.code) in message.html
    assert "http://test/api/authentication/confirm" in message.html


@pytest.mark.asyncio
async def test_signup_defaults_to_user_role(mock_uow, mailer, policy, user_role):
    mock_uow.roles.get_by_number.return_value = user_role

    await SignupUseCase(mock_uow, mailer, policy).execute(signup_command())

    mock_uow.roles.get_by_number.assert_awaited_once_with(2)


@pytest.mark.asyncio
async def test_signup_uses_requested_role(mock_uow, mailer, policy, admin_role):
    mock_uow.roles.get_by_number.return_value = admin_role

    result = await SignupUseCase(mock_uow, mailer, policy).execute(signup_command(role=1))

    assert result.is_ok()
    mock_uow.roles.get_by_number.assert_awaited_once_with(1)
    assert mock_uow.accounts.create.call_args.args[0].role_id == admin_role.id


@pytest.mark.asyncio
async def test_signup_password_mismatch_creates_nothing(mock_uow, mailer, policy):
    result = await SignupUseCase(mock_uow, mailer, policy).execute(
        signup_command(password_confirm="Different1")
    )

    assert result.is_err()
    assert result.error.code == "PASSWORD_MISMATCH"
    assert result.error.kind == ErrorKind.validation
    mock_uow.accounts.create.assert_not_called()
    mailer.send.assert_not_called()


@pytest.mark.asyncio
async def test_signup_unknown_role(mock_uow, mailer, policy):
    mock_uow.roles.get_by_number.return_value = None

    result = await SignupUseCase(mock_uow, mailer, policy).execute(signup_command(role=7))

    assert result.is_err()
    assert result.error.kind == ErrorKind.not_found
    mock_uow.accounts.create.assert_not_called()


@pytest.mark.asyncio
async def test_signup_existing_email_conflicts(mock_uow, mailer, policy, user_role):
    mock_uow.roles.get_by_number.return_value = user_role
    mock_uow.accounts.exists_by_email.return_value = True

    result = await SignupUseCase(mock_uow, mailer, policy).execute(signup_command())

    assert result.is_err()
    assert result.error.code == "ACCOUNT_ALREADY_EXISTS"
    assert result.error.kind == ErrorKind.conflict
    mock_uow.accounts.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_signup_mail_failure_deactivates_challenge(mock_uow, mailer, policy, user_role):
    mock_uow.roles.get_by_number.return_value = user_role
    mailer.send.return_value = Return.err(
        Error("MAIL_FAILED", "Failed to send mail!", ErrorKind.internal)
    )

    result = await SignupUseCase(mock_uow, mailer, policy).execute(signup_command())

    assert result.is_err()
    assert result.error.code == "MAIL_FAILED"
    assert result.error.kind == ErrorKind.internal
    challenge = mock_uow.confirmation_challenges.create.call_args.args[0]
    mock_uow.confirmation_challenges.deactivate.assert_awaited_once_with(challenge.id)
    assert mock_uow.commit.await_count == 2
