from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy.pool import StaticPool

from shop.data.database import build_engine
from shop.data.models.product import ProductModel
from shop.main import create_app
from shop.services.token_service import TokenService
from shop.utils.settings import Settings

TEST_SECRET = "test-secret-key"


@pytest.fixture
def settings() -> Settings:
    return Settings(secret_key=TEST_SECRET, database_url="sqlite://", seed_products=False)


@pytest.fixture
def engine():
    # jedna wspolna baza w pamieci dla wszystkich watkow TestClient
    engine = build_engine("sqlite://", poolclass=StaticPool)
    yield engine
    engine.dispose()


@pytest.fixture
def test_client(settings, engine):
    app = create_app(settings, engine=engine)
    with TestClient(app) as client:
        yield client


@pytest.fixture
def db_session(test_client):
    db = test_client.app.state.session_factory()
    try:
        yield db
    finally:
        db.close()


@pytest.fixture
def token_service() -> TokenService:
    return TokenService(secret_key=TEST_SECRET)


@pytest.fixture
def products(db_session):
    """Trzy produkty - po jednym w kazdym progu podatkowym."""
    items = [
        ProductModel(name="Mouse", price=Decimal("100.00")),
        ProductModel(name="Monitor", price=Decimal("1000.01")),
        ProductModel(name="Laptop", price=Decimal("6000.00")),
    ]
    db_session.add_all(items)
    db_session.commit()
    for p in items:
        db_session.refresh(p)
    return {p.name: p.id for p in items}


def signup_and_login(client: TestClient, username: str = "alice", password: str = "s3cret") -> dict:
    resp = client.post("/signup", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text

    resp = client.post("/login", json={"username": username, "password": password})
    assert resp.status_code == 200, resp.text
    return {"Authorization": f"Bearer {resp.json()['token']}"}


@pytest.fixture
def auth_headers(test_client) -> dict:
    return signup_and_login(test_client)
