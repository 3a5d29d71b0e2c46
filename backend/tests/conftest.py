import os
import tempfile

# Settings are read at import time, so point them at a scratch database first.
_TMP_DIR = tempfile.mkdtemp(prefix="croptracker-tests-")
DB_PATH = os.path.join(_TMP_DIR, "test.db")

os.environ["DATABASE_URL"] = f"sqlite+aiosqlite:///{DB_PATH}"
os.environ["SECRET_KEY"] = "test-secret"
os.environ["LOG_DIR"] = ""

import pytest
from fastapi.testclient import TestClient

from croptracker.main import app

PASSWORD = "s3cret-pass"


@pytest.fixture
def client():
    if os.path.exists(DB_PATH):
        os.remove(DB_PATH)

    # startup creates the tables, shutdown disposes the engine
    with TestClient(app, raise_server_exceptions=False) as c:
        yield c


def register(client, email, password=PASSWORD, name="Ravi"):
    return client.post(
        "/api/user/register",
        json={"name": name, "email": email, "password": password},
    )


def login(client, email, password=PASSWORD):
    return client.post("/api/user/login", json={"email": email, "password": password})


def auth_headers(client, email="ravi@example.com"):
    register(client, email)
    token = login(client, email).json()["token"]
    return {"SessionAuth": f"Bearer {token}"}


def add_crop(client, headers, name, date="2025-01-10", acres=5):
    resp = client.post(
        "/api/crops",
        json={"name": name, "acres": acres, "date": date},
        headers=headers,
    )
    assert resp.status_code == 201

    listing = client.get(
        "/api/crops",
        params={"fromDate": date, "toDate": date},
        headers=headers,
    ).json()
    return next(c["id"] for c in listing["data"] if c["name"] == name)


def add_expense(client, headers, crop_id, amount, date="2025-01-15", type_="fertilizer", notes=None):
    body = {"cropId": crop_id, "type": type_, "date": date, "amount": amount}
    if notes is not None:
        body["notes"] = notes
    return client.post("/api/expenses", json=body, headers=headers)


def add_income(client, headers, crop_id, quantity, amount, date="2025-03-01", notes=None):
    body = {"cropId": crop_id, "quantity": quantity, "amount": amount, "date": date}
    if notes is not None:
        body["notes"] = notes
    return client.post("/api/incomes", json=body, headers=headers)


@pytest.fixture
def headers(client):
    return auth_headers(client)


def run_db(client, fn, *args):
    """Run an async ``fn(session, *args)`` on the app's event loop."""
    from croptracker.core.database import AsyncSessionLocal

    async def _call():
        async with AsyncSessionLocal() as session:
            return await fn(session, *args)

    return client.portal.call(_call)
