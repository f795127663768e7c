import pytest

from src.app.use_cases.startup import AdminSeed, SeedAdminsUseCase, SeedRolesUseCase
from src.libs.result import ErrorKind


@pytest.mark.asyncio
async def test_seed_roles_creates_missing_roles(mock_uow, policy):
    result = await SeedRolesUseCase(mock_uow, policy).execute()

    assert result.is_ok()
    assert result.value == 2
    numbers = sorted(call.args[0].number for call in mock_uow.roles.create.call_args_list)
    assert numbers == [1, 2]
    mock_uow.commit.assert_awaited_once()


@pytest.mark.asyncio
async def test_seed_roles_is_idempotent(mock_uow, policy, user_role):
    mock_uow.roles.get_by_number.return_value = user_role

    result = await SeedRolesUseCase(mock_uow, policy).execute()

    assert result.value == 0
    mock_uow.roles.create.assert_not_called()
    mock_uow.commit.assert_not_called()


@pytest.mark.asyncio
async def test_seed_admins_creates_confirmed_admins(mock_uow, admin_role):
    mock_uow.roles.get_by_number.return_value = admin_role

    result = await SeedAdminsUseCase(mock_uow).execute(
        [AdminSeed(email="admin@example.com", password="Admin123!")]
    )

    assert result.value == 1
    account = mock_uow.accounts.create.call_args.args[0]
    assert account.account_confirmed is True
    assert account.role_id == admin_role.id
    assert account.password_hash != "Admin123!"


@pytest.mark.asyncio
async def test_seed_admins_skips_existing_emails(mock_uow, admin_role):
    mock_uow.roles.get_by_number.return_value = admin_role
    mock_uow.accounts.exists_by_email.return_value = True

    result = await SeedAdminsUseCase(mock_uow).execute(
        [AdminSeed(email="admin@example.com", password="Admin123!")]
    )

    assert result.value == 0
    mock_uow.accounts.create.assert_not_called()


@pytest.mark.asyncio
async def test_seed_admins_requires_admin_role(mock_uow):
    result = await SeedAdminsUseCase(mock_uow).execute(
        [AdminSeed(email="admin@example.com", password="Admin123!")]
    )

    assert result.is_err()
    assert result.error.kind == ErrorKind.not_found
