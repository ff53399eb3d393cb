from uuid import uuid4

import pytest
import pytest_asyncio
from httpx import AsyncClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.orm import sessionmaker
from sqlmodel import SQLModel
from sqlmodel.ext.asyncio.session import AsyncSession
from tests.fixtures.json_loader import TestDataLoader
from config import ApplicationConfig
from src.api.utils.jwt import generate_jwt
from src.depends import get_unit_of_work
from src.adapter.services.unit_of_work import SqlAlchemyUnitOfWork


@pytest_asyncio.fixture
def test_data():
    return TestDataLoader()


@pytest_asyncio.fixture
async def engine():
    engine = create_async_engine("sqlite+aiosqlite:///./test.db")
    async with engine.begin() as conn:
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
async def client(db_session):
    from httpx import ASGITransport
    from src.api.app import create_app

    app = create_app(ApplicationConfig)

    async def override_get_unit_of_work():
        yield SqlAlchemyUnitOfWork(db_session)

    app.dependency_overrides[get_unit_of_work] = override_get_unit_of_work

    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as ac:
        yield ac


@pytest.fixture
def admin_headers():
    return {"X-Admin-API-Key": ApplicationConfig.ADMIN_API_KEY}


@pytest.fixture
def user_id():
    return uuid4()


@pytest.fixture
def tenant_headers(user_id):
    """Build headers addressing a tenant by ID with a Bearer token"""

    def build(tenant_id, acting_user=None, **extra):
        token = generate_jwt(acting_user or user_id, role="accountant")
        return {
            "Authorization": f"Bearer {token}",
            "X-Tenant-ID": str(tenant_id),
            **extra,
        }

    return build


@pytest_asyncio.fixture
async def tenant(client: AsyncClient, admin_headers, test_data):
    response = await client.post(
        "/admin/tenants", json=test_data.get_copy("tenant_acme"), headers=admin_headers
    )
    assert response.status_code == 201
    return response.json()


@pytest_asyncio.fixture
async def ledger(client: AsyncClient, tenant, tenant_headers, test_data):
    """Organization with a small chart of accounts inside the default tenant"""
    headers = tenant_headers(tenant["id"])

    response = await client.post(
        "/organizations", json=test_data.get_copy("organization"), headers=headers
    )
    assert response.status_code == 201
    organization = response.json()

    accounts = {}
    for payload in test_data.get_copy("accounts"):
        payload["organization_id"] = organization["id"]
        response = await client.post("/accounts", json=payload, headers=headers)
        assert response.status_code == 201
        accounts[payload["code"]] = response.json()

    return {"tenant": tenant, "organization": organization, "accounts": accounts}


@pytest_asyncio.fixture
async def catalog(client: AsyncClient, ledger, tenant_headers, test_data):
    """Ledger organization plus a stocked product and a service, keyed by code"""
    headers = tenant_headers(ledger["tenant"]["id"])

    products = {}
    for payload in test_data.get_copy("products"):
        payload["organization_id"] = ledger["organization"]["id"]
        response = await client.post("/products", json=payload, headers=headers)
        assert response.status_code == 201
        products[payload["code"]] = response.json()

    return {**ledger, "products": products}


@pytest_asyncio.fixture
async def customer(client: AsyncClient, catalog, tenant_headers, test_data):
    payload = test_data.get_copy("customer")
    payload["organization_id"] = catalog["organization"]["id"]
    response = await client.post(
        "/customers", json=payload, headers=tenant_headers(catalog["tenant"]["id"])
    )
    assert response.status_code == 201
    return response.json()
