"""
Store-level guarantees that hold even when the route pre-checks are raced.
"""
import pytest
from bson import ObjectId

from jobboard.core.errors import AlreadyApplied, DuplicateEmail, ValidationError
from jobboard.core.principals import STUDENT
from jobboard.services.mongo_service import AppliedJobService, PrincipalService, to_object_id


def test_unique_email_index_rejects_second_insert(db):
    students = PrincipalService(db, STUDENT)
    students.create({"email": "a@x.com", "student_name": "Alice"}, "hash")

    with pytest.raises(DuplicateEmail):
        students.create({"email": "a@x.com", "student_name": "Twin"}, "hash")

    assert db["students"].count_documents({}) == 1


def test_unique_application_index_rejects_second_insert(db):
    job = {"_id": str(ObjectId()), "company_id": str(ObjectId())}
    student_id = str(ObjectId())
    applications = AppliedJobService(db)
    applications.create(job, student_id, "1 year", "python")

    with pytest.raises(AlreadyApplied):
        applications.create(job, student_id, "2 years", "go")

    assert db["appliedjobs"].count_documents({}) == 1


def test_same_student_may_apply_to_different_jobs(db):
    student_id = str(ObjectId())
    company_id = str(ObjectId())
    applications = AppliedJobService(db)

    for _ in range(2):
        applications.create({"_id": str(ObjectId()), "company_id": company_id}, student_id, "1 year", "sql")

    assert len(applications.list_by_student(student_id)) == 2


def test_malformed_object_id_is_rejected():
    with pytest.raises(ValidationError):
        to_object_id("123")
