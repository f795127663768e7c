from typing import List

import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import PayloadFixtures
from src.adapter.services.jwt_session_issuer import JwtSessionIssuer
from src.adapter.services.local_file_storage import LocalFileStorage
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork
from src.app.services.lifecycle_policy import LifecyclePolicy
from src.app.services.mailer import IMailer, MailMessage
from src.app.use_cases.startup import AdminSeed, SeedAdminsUseCase, SeedRolesUseCase
from src.depends import (
    get_file_storage,
    get_mailer,
    get_policy,
    get_session_issuer,
    get_unit_of_work,
)
from src.libs.result import Return

JWT_SECRET = "integration-secret"


class OutboxMailer(IMailer):
    """Keeps sent mail in memory"""

    def __init__(self):
        self.outbox: List[MailMessage] = []

    async def send(self, message: MailMessage):
        self.outbox.append(message)
        return Return.ok(None)


@pytest_asyncio.fixture
def test_data():
    return PayloadFixtures()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
        await conn.run_sync(SQLModel.metadata.create_all)
    yield engine
    async with engine.begin() as conn:
        await conn.run_sync(SQLModel.metadata.drop_all)
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(engine):
    Session = sessionmaker(engine, class_=AsyncSession, expire_on_commit=False)
    async with Session() as session:
        yield session


@pytest_asyncio.fixture
def policy():
    return LifecyclePolicy(mail_from="no-reply@test.com", api_base_url="http://test/api")


@pytest_asyncio.fixture
async def seeded_roles(db_session, policy):
    await SeedRolesUseCase(SqlAlchemyUnitOfWork(db_session), policy).execute()


@pytest_asyncio.fixture
def mailer():
    return OutboxMailer()


@pytest_asyncio.fixture
def session_issuer():
    return JwtSessionIssuer(JWT_SECRET)


@pytest_asyncio.fixture
def storage(tmp_path):
    storage = LocalFileStorage(str(tmp_path / "public"), "http://test/public")
    storage.ensure_folders()
    return storage


@pytest_asyncio.fixture
async def client(db_session, seeded_roles, policy, mailer, session_issuer, storage):
    from src.api.app import create_app
    from config import ApplicationConfig

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work
    app.dependency_overrides[get_policy] = lambda: policy
    app.dependency_overrides[get_mailer] = lambda: mailer
    app.dependency_overrides[get_session_issuer] = lambda: session_issuer
    app.dependency_overrides[get_file_storage] = lambda: storage

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest_asyncio.fixture
async def admin_token(client, db_session, test_data):
    admin = test_data.get_copy("admin")
    await SeedAdminsUseCase(SqlAlchemyUnitOfWork(db_session)).execute([AdminSeed(**admin)])

    response = await client.post("/api/authentication/login", json=admin)
    assert response.status_code == 201
    return response.json()["data"]["token"]


@pytest_asyncio.fixture
def admin_headers(admin_token):
    return {"Authorization": f"Bearer {admin_token}"}
