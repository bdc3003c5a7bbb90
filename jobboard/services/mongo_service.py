"""
MongoDB Service - CRUD operations for the job board collections.

Collections in this database:
1. users, students, companies, admins - principals (one service, any kind)
2. jobs        - postings owned by a company (company_id reference)
3. appliedjobs - one application: job_id, company_id, student_id

References are stored as ObjectId and "expanded" on read by replacing the
id with the referenced record, the way a populate/join would.
"""

import logging
from datetime import datetime
from typing import Optional, List
from bson import ObjectId
from pymongo.collection import Collection
from pymongo.database import Database
from pymongo.errors import DuplicateKeyError

from jobboard.core.errors import AlreadyApplied, DuplicateEmail, ValidationError
from jobboard.core.principals import PrincipalKind, COMPANY, STUDENT
from jobboard.db.mongodb import get_collection, COLLECTIONS

logger = logging.getLogger(__name__)


# ============================================================
# HELPERS
# ============================================================

def serialize_doc(doc: dict) -> dict:
    """Convert MongoDB document to JSON-serializable dict."""
    if doc is None:
        return None
    for key, value in doc.items():
        if isinstance(value, ObjectId):
            doc[key] = str(value)
    return doc


def serialize_docs(docs: list) -> list:
    """Convert list of MongoDB documents to JSON-serializable list."""
    return [serialize_doc(doc) for doc in docs]


def to_object_id(value) -> ObjectId:
    """Parse an id from a path or token, rejecting malformed ones."""
    if isinstance(value, ObjectId):
        return value
    if not ObjectId.is_valid(value):
        raise ValidationError("Invalid Object ID")
    return ObjectId(value)


def _timestamps() -> dict:
    now = datetime.utcnow()
    return {"created_at": now, "updated_at": now}


# ============================================================
# PRINCIPALS
# ============================================================

class PrincipalService:
    """
    Credential store for one principal kind.

    Documents returned here still carry the password hash; routes pass
    them through the kind's public projection before responding.
    """

    def __init__(self, db: Database, kind: PrincipalKind):
        self.kind = kind
        self.collection: Collection = get_collection(kind.collection, db)

    def get_by_email(self, email: str) -> Optional[dict]:
        return serialize_doc(self.collection.find_one({"email": email}))

    def get_by_id(self, principal_id) -> Optional[dict]:
        """Fetch by id; malformed ids simply do not match."""
        if not ObjectId.is_valid(principal_id):
            return None
        return serialize_doc(self.collection.find_one({"_id": ObjectId(principal_id)}))

    def list_all(self) -> List[dict]:
        return serialize_docs(list(self.collection.find({})))

    def create(self, fields: dict, password_hash: str) -> dict:
        """
        Insert a new principal.

        Raises DuplicateEmail if the unique email index rejects it
        (two registrations racing past the lookup).
        """
        doc = {**fields, "password": password_hash, **_timestamps()}
        try:
            result = self.collection.insert_one(doc)
        except DuplicateKeyError:
            raise DuplicateEmail("Email already exists!")
        doc["_id"] = result.inserted_id
        logger.info(f"Created {self.kind.name} {result.inserted_id}")
        return serialize_doc(doc)

    def delete(self, principal_id) -> Optional[dict]:
        doc = self.collection.find_one_and_delete({"_id": to_object_id(principal_id)})
        return serialize_doc(doc)


# ============================================================
# JOBS
# ============================================================

class JobService:

    def __init__(self, db: Database):
        self.db = db
        self.collection: Collection = get_collection(COLLECTIONS["jobs"], db)

    def create(self, company_id: str, job_title: str, description: str) -> dict:
        doc = {
            "job_title": job_title,
            "description": description,
            "company_id": to_object_id(company_id),
            **_timestamps()
        }
        result = self.collection.insert_one(doc)
        doc["_id"] = result.inserted_id
        return serialize_doc(doc)

    def get_by_id(self, job_id) -> Optional[dict]:
        return serialize_doc(self.collection.find_one({"_id": to_object_id(job_id)}))

    def find_by_company_and_title(self, company_id: str, job_title: str) -> Optional[dict]:
        return self.collection.find_one({
            "company_id": to_object_id(company_id),
            "job_title": job_title
        })

    def list_all(self) -> List[dict]:
        return serialize_docs(list(self.collection.find({}).sort("created_at", -1)))

    def delete(self, job_id, company_id: str = None) -> Optional[dict]:
        """Delete a job; with company_id, only if that company owns it."""
        query = {"_id": to_object_id(job_id)}
        if company_id is not None:
            query["company_id"] = to_object_id(company_id)
        return serialize_doc(self.collection.find_one_and_delete(query))

    def delete_by_company(self, company_id) -> int:
        """Remove every job referencing the company. Applications are left in place."""
        result = self.collection.delete_many({"company_id": to_object_id(company_id)})
        return result.deleted_count

    def expand(self, job: dict) -> dict:
        """Replace company_id with the company record, if it still exists."""
        company = PrincipalService(self.db, COMPANY).get_by_id(job["company_id"])
        if company is not None:
            job["company_id"] = company
        return job


# ============================================================
# APPLIED JOBS
# ============================================================

class AppliedJobService:

    def __init__(self, db: Database):
        self.db = db
        self.collection: Collection = get_collection(COLLECTIONS["applied_jobs"], db)

    def exists(self, student_id: str, job_id: str) -> bool:
        """Has this student already applied to this very job?"""
        return self.collection.find_one({
            "student_id": to_object_id(student_id),
            "job_id": to_object_id(job_id)
        }) is not None

    def create(self, job: dict, student_id: str, experience: str, skills: str) -> dict:
        doc = {
            "experience": experience,
            "skills": skills,
            "job_id": to_object_id(job["_id"]),
            "company_id": to_object_id(job["company_id"]),
            "student_id": to_object_id(student_id),
            **_timestamps()
        }
        try:
            result = self.collection.insert_one(doc)
        except DuplicateKeyError:
            raise AlreadyApplied("You have already applied for this job")
        doc["_id"] = result.inserted_id
        return serialize_doc(doc)

    def list_by_student(self, student_id: str) -> List[dict]:
        cursor = self.collection.find({"student_id": to_object_id(student_id)}).sort("created_at", -1)
        return serialize_docs(list(cursor))

    def expand(self, application: dict) -> dict:
        """Replace job, company and student references with their records."""
        job = JobService(self.db).get_by_id(application["job_id"])
        if job is not None:
            application["job_id"] = job
        company = PrincipalService(self.db, COMPANY).get_by_id(application["company_id"])
        if company is not None:
            application["company_id"] = company
        student = PrincipalService(self.db, STUDENT).get_by_id(application["student_id"])
        if student is not None:
            application["student_id"] = student
        return application
