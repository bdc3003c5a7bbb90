"""
Shared fixtures: the FastAPI app wired to an in-memory MongoDB (mongomock)
with the production indexes applied.
"""
import mongomock
import pytest
from fastapi.testclient import TestClient

from jobboard.core.config import get_settings
from jobboard.db.mongodb import get_mongo_db, init_mongo_indexes
from jobboard.main import app
from jobboard.services.account_service import create_admin

API = "/api/v1"

STUDENT = {
    "studentName": "Alice",
    "email": "a@x.com",
    "password": "pass1",
    "qualification": "BSc",
    "cgpa": 3.5
}

COMPANY = {
    "companyName": "Acme",
    "email": "jobs@acme.com",
    "password": "secret1",
    "description": "Widgets and more",
    "website": "https://acme.com",
    "contactNo": 5551234
}

ADMIN_PASSWORD = "admin-pass"


@pytest.fixture
def db():
    database = mongomock.MongoClient()["jobboard_test"]
    init_mongo_indexes(database)
    return database


@pytest.fixture
def client(db):
    app.dependency_overrides[get_mongo_db] = lambda: db
    yield TestClient(app)
    app.dependency_overrides.clear()


def auth(token: str) -> dict:
    return {get_settings().auth_header_name: token}


@pytest.fixture
def student_token(client):
    response = client.post(f"{API}/student/register", json=STUDENT)
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def company_token(client):
    response = client.post(f"{API}/company/register", json=COMPANY)
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def admin(db):
    return create_admin(db, "root", "admin@x.com", ADMIN_PASSWORD)


@pytest.fixture
def admin_token(client, admin):
    response = client.post(f"{API}/admin/login", json={"email": "admin@x.com", "password": ADMIN_PASSWORD})
    assert response.status_code == 200
    return response.json()["token"]


@pytest.fixture
def job(client, company_token):
    response = client.post(
        f"{API}/job/create-job",
        json={"jobTitle": "Backend Intern", "description": "Build APIs"},
        headers=auth(company_token)
    )
    assert response.status_code == 200
    return response.json()["job"]
