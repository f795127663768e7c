from datetime import timedelta
from unittest.mock import AsyncMock, MagicMock
from uuid import uuid4

import pytest

from src.app.services.lifecycle_policy import LifecyclePolicy
from src.app.services.passwords import hash_password
from src.domain.base import utc_now
from src.domain.entities import Account, ConfirmationChallenge, ResetChallenge, Role
from src.libs.result import Return


def _returns_argument(value):
    return value


@pytest.fixture
def mock_uow():
    """Mock UnitOfWork with all repositories"""
    uow = MagicMock()
    uow.__aenter__ = AsyncMock(return_value=uow)
    uow.__aexit__ = AsyncMock(return_value=False)  # Must return False to not suppress exceptions
    uow.commit = AsyncMock()
    uow.rollback = AsyncMock()

    uow.accounts = MagicMock()
    uow.accounts.get_by_email = AsyncMock(return_value=None)
    uow.accounts.get_by_id = AsyncMock(return_value=None)
    uow.accounts.exists_by_email = AsyncMock(return_value=False)
    uow.accounts.create = AsyncMock(side_effect=_returns_argument)
    uow.accounts.update = AsyncMock(side_effect=_returns_argument)

    uow.roles = MagicMock()
    uow.roles.get_by_number = AsyncMock(return_value=None)
    uow.roles.get_by_id = AsyncMock(return_value=None)
    uow.roles.create = AsyncMock(side_effect=_returns_argument)

    uow.confirmation_challenges = MagicMock()
    uow.confirmation_challenges.create = AsyncMock(side_effect=_returns_argument)
    uow.confirmation_challenges.get_redeemable = AsyncMock(return_value=None)
    uow.confirmation_challenges.get_latest_active = AsyncMock(return_value=None)
    uow.confirmation_challenges.deactivate = AsyncMock()
    uow.confirmation_challenges.deactivate_others = AsyncMock(return_value=0)
    uow.confirmation_challenges.mark_used = AsyncMock()

    uow.reset_challenges = MagicMock()
    uow.reset_challenges.create = AsyncMock(side_effect=_returns_argument)
    uow.reset_challenges.get_redeemable = AsyncMock(return_value=None)
    uow.reset_challenges.list_used = AsyncMock(return_value=[])
    uow.reset_challenges.deactivate = AsyncMock()
    uow.reset_challenges.mark_used = AsyncMock()

    for name in ("manufacturers", "tools", "techniques", "products"):
        repository = MagicMock()
        repository.get_by_id = AsyncMock(return_value=None)
        repository.get_by_ids = AsyncMock(return_value=[])
        repository.exists_by_name = AsyncMock(return_value=False)
        repository.create = AsyncMock(side_effect=_returns_argument)
        repository.update = AsyncMock(side_effect=_returns_argument)
        repository.paginate = AsyncMock()
        setattr(uow, name, repository)
    uow.manufacturers.get_tool_ids = AsyncMock(return_value=[])
    uow.manufacturers.replace_tools = AsyncMock()

    return uow


@pytest.fixture
def policy():
    return LifecyclePolicy(mail_from="no-reply@test.com", api_base_url="http://test/api")


@pytest.fixture
def mailer():
    mailer = MagicMock()
    mailer.send = AsyncMock(return_value=Return.ok(None))
    return mailer


@pytest.fixture
def sessions():
    sessions = MagicMock()
    sessions.mint = MagicMock(return_value=Return.ok("signed.jwt.token"))
    sessions.decode = MagicMock()
    return sessions


@pytest.fixture
def user_role():
    return Role(id=uuid4(), name="USER", description="User role", number=2)


@pytest.fixture
def admin_role():
    return Role(id=uuid4(), name="ADMIN", description="Admin role", number=1)


@pytest.fixture(scope="session")
def current_password():
    return "OldPass123!"


@pytest.fixture(scope="session")
def current_password_hash(current_password):
    # Hashed once: bcrypt at cost 12 is slow
    return hash_password(current_password)


@pytest.fixture
def make_account(user_role, current_password_hash):
    def _make(**overrides):
        values = dict(
            id=uuid4(),
            email="user@example.com",
            password_hash=current_password_hash,
            role_id=user_role.id,
            account_confirmed=True,
        )
        values.update(overrides)
        return Account(**values)

    return _make


@pytest.fixture
def make_confirmation():
    def _make(account_id, **overrides):
        values = dict(
            id=uuid4(),
            account_id=account_id,
            code=123456,
            token="A" * 64,
            expires_at=utc_now() + timedelta(minutes=10),
        )
        values.update(overrides)
        return ConfirmationChallenge(**values)

    return _make


@pytest.fixture
def make_reset():
    def _make(account_id, old_password_hash, **overrides):
        values = dict(
            id=uuid4(),
            account_id=account_id,
            token="B" * 64,
            expires_at=utc_now() + timedelta(minutes=10),
            old_password_hash=old_password_hash,
        )
        values.update(overrides)
        return ResetChallenge(**values)

    return _make
