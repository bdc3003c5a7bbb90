"""
Company and generic user registration, login and profile.
"""
from jobboard.core.auth import decode_token

from conftest import API, COMPANY, auth


def test_company_register_and_profile(client, db):
    response = client.post(f"{API}/company/register", json=COMPANY)

    assert response.status_code == 200
    body = response.json()
    assert body["company"]["companyName"] == "Acme"
    assert body["company"]["contactNo"] == 5551234
    assert "password" not in body["company"]
    assert db["companies"].find_one({"email": "jobs@acme.com"})["password"] != COMPANY["password"]

    profile = client.get(f"{API}/company/get-profile", headers=auth(body["token"]))
    assert profile.status_code == 200
    assert profile.json()["company"]["_id"] == body["company"]["_id"]
    assert "password" not in profile.text


def test_company_contact_must_be_numeric(client):
    response = client.post(f"{API}/company/register", json={**COMPANY, "contactNo": "call me"})

    assert response.status_code == 400
    assert "contactNo" in response.json()["message"]


def test_company_duplicate_email(client, company_token):
    response = client.post(f"{API}/company/register", json=COMPANY)

    assert response.status_code == 400
    assert response.json()["message"] == "Email already exists!"


def test_same_email_may_exist_for_another_kind(client, company_token):
    response = client.post(f"{API}/user/register", json={"email": COMPANY["email"], "password": "pass1", "type": "Company"})

    assert response.status_code == 200


def test_company_login(client, company_token):
    response = client.post(f"{API}/company/login", json={"email": "JOBS@acme.com", "password": "secret1"})

    assert response.status_code == 200
    assert decode_token(response.json()["token"])["company"]["id"] == response.json()["id"]

    bad = client.post(f"{API}/company/login", json={"email": "jobs@acme.com", "password": "wrong"})
    assert bad.status_code == 400
    assert bad.json()["message"] == "Invalid email or password"


def test_user_register_login_profile(client, db):
    register = client.post(f"{API}/user/register", json={"email": "u@x.com", "password": "pass1", "type": "Student"})
    assert register.status_code == 200
    assert set(register.json()) == {"success", "message", "token"}

    login = client.post(f"{API}/user/login", json={"email": "u@x.com", "password": "pass1", "type": "Student"})
    assert login.status_code == 200
    assert login.json()["id"] == str(db["users"].find_one({})["_id"])

    profile = client.get(f"{API}/user/get-profile", headers=auth(login.json()["token"]))
    assert profile.status_code == 200
    assert profile.json()["user"]["type"] == "Student"
    assert "password" not in profile.text


def test_user_register_requires_type(client):
    response = client.post(f"{API}/user/register", json={"email": "u@x.com", "password": "pass1"})

    assert response.status_code == 400
    assert response.json()["success"] is False
