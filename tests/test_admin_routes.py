"""
Admin login, overview and deletions.
"""
from bson import ObjectId

from conftest import API, ADMIN_PASSWORD, COMPANY, STUDENT, auth


def test_admin_login(client, admin):
    response = client.post(f"{API}/admin/login", json={"email": "admin@x.com", "password": ADMIN_PASSWORD})

    assert response.status_code == 200
    assert response.json()["id"] == admin["_id"]

    bad = client.post(f"{API}/admin/login", json={"email": "admin@x.com", "password": "wrong"})
    assert bad.status_code == 400
    assert bad.json()["message"] == "Invalid email or password"


def test_admin_auth_profile(client, admin_token):
    response = client.get(f"{API}/admin/auth", headers=auth(admin_token))

    assert response.status_code == 200
    assert response.json()["admin"]["username"] == "root"
    assert "password" not in response.text


def test_admin_routes_reject_other_kinds(client, company_token):
    response = client.get(f"{API}/admin/get-data", headers=auth(company_token))

    assert response.status_code == 401


def test_get_data_returns_everything_without_passwords(client, admin_token, student_token, job):
    response = client.get(f"{API}/admin/get-data", headers=auth(admin_token))

    assert response.status_code == 200
    body = response.json()
    assert [s["email"] for s in body["students"]] == [STUDENT["email"]]
    assert [c["email"] for c in body["companies"]] == [COMPANY["email"]]
    assert [j["_id"] for j in body["jobs"]] == [job["_id"]]
    assert "password" not in response.text


def test_delete_company_cascades_to_its_jobs_only(client, db, admin_token, company_token, job):
    rival_token = client.post(
        f"{API}/company/register", json={**COMPANY, "email": "hr@rival.com", "companyName": "Rival"}
    ).json()["token"]
    rival_job = client.post(
        f"{API}/job/create-job", json={"jobTitle": "Ops", "description": "Keep it up"}, headers=auth(rival_token)
    ).json()["job"]
    company_id = job["companyId"]["_id"]

    response = client.delete(f"{API}/admin/delete-company/{company_id}", headers=auth(admin_token))

    assert response.status_code == 200
    assert response.json() == {
        "success": True, "message": "Company and jobs deleted successfully!", "deletedJobs": 1
    }
    assert db["companies"].find_one({"_id": ObjectId(company_id)}) is None
    assert db["jobs"].count_documents({"company_id": ObjectId(company_id)}) == 0
    assert [str(j["_id"]) for j in db["jobs"].find({})] == [rival_job["_id"]]


def test_deleted_company_token_stops_working(client, admin_token, company_token, job):
    client.delete(f"{API}/admin/delete-company/{job['companyId']['_id']}", headers=auth(admin_token))

    response = client.get(f"{API}/company/get-profile", headers=auth(company_token))

    assert response.status_code == 401
    assert response.json()["message"] == "Invalid token!"


def test_delete_company_leaves_applications(client, db, admin_token, student_token, job):
    client.post(
        f"{API}/job/apply/{job['_id']}", json={"experience": "1 year", "skills": "sql"}, headers=auth(student_token)
    )

    client.delete(f"{API}/admin/delete-company/{job['companyId']['_id']}", headers=auth(admin_token))

    assert db["appliedjobs"].count_documents({}) == 1


def test_delete_company_bad_ids(client, admin_token):
    malformed = client.delete(f"{API}/admin/delete-company/123", headers=auth(admin_token))
    missing = client.delete(f"{API}/admin/delete-company/{ObjectId()}", headers=auth(admin_token))

    assert malformed.status_code == 400
    assert malformed.json()["message"] == "Invalid Object ID"
    assert missing.status_code == 400
    assert missing.json()["message"] == "Company not found"


def test_delete_student(client, db, admin_token, student_token):
    student_id = str(db["students"].find_one({})["_id"])

    response = client.delete(f"{API}/admin/delete-student/{student_id}", headers=auth(admin_token))

    assert response.status_code == 200
    assert db["students"].count_documents({}) == 0

    again = client.delete(f"{API}/admin/delete-student/{student_id}", headers=auth(admin_token))
    assert again.status_code == 400
    assert again.json()["message"] == "Student not found"
