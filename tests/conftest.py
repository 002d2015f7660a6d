import pytest
from fastapi.testclient import TestClient
from sqlmodel import Session

from chama.database import create_db_and_tables, create_store_engine
from chama.main import create_app
from chama.utils.seed import seed_store


@pytest.fixture
def client():
    app = create_app(database_url="sqlite://", seed=True)
    with TestClient(app) as c:
        yield c


@pytest.fixture
def session():
    engine = create_store_engine("sqlite://")
    create_db_and_tables(engine)
    with Session(engine) as s:
        seed_store(s)
        yield s
    engine.dispose()


def deposit(client, member_id="m_01", amount=500, **extra):
    body = {"memberId": member_id, "type": "deposit", "amount": amount, "note": "", "createdBy": "admin_01"}
    body.update(extra)
    return client.post("/api/transactions", json=body)
