"""
MongoDB Connection Utility

MongoDB stores every record of the job board:
- users, students, companies, admins (principals with password hashes)
- jobs posted by companies
- appliedjobs linking a student, a job and the job's company

The client is created lazily and shared by the whole process
(connection pooling handled internally by pymongo).
"""
import logging

from pymongo import ASCENDING, MongoClient
from pymongo.database import Database
from pymongo.collection import Collection
from jobboard.core.config import get_settings

logger = logging.getLogger(__name__)

settings = get_settings()

# Global client
_client: MongoClient = None
_db: Database = None


def get_mongo_client() -> MongoClient:
    """Get or create MongoDB client (singleton pattern)"""
    global _client
    if _client is None:
        _client = MongoClient(settings.mongodb_uri)
    return _client


def get_mongo_db() -> Database:
    """
    Get the job board database.

    Also the FastAPI dependency every route and the auth gate use,
    so tests can swap it with app.dependency_overrides.
    """
    global _db
    if _db is None:
        client = get_mongo_client()
        _db = client[settings.mongodb_db]
    return _db


def get_collection(name: str, db: Database = None) -> Collection:
    db = db if db is not None else get_mongo_db()
    return db[name]


def test_mongo_connection() -> bool:
    """
    Test if MongoDB is reachable.
    Returns True if connection successful, False otherwise.
    """
    try:
        client = get_mongo_client()
        # ping command checks connection
        client.admin.command('ping')
        return True
    except Exception as e:
        logger.warning(f"MongoDB connection failed: {e}")
        return False


# Collection name constants (avoid typos)
COLLECTIONS = {
    "users": "users",
    "students": "students",
    "companies": "companies",
    "admins": "admins",
    "jobs": "jobs",
    "applied_jobs": "appliedjobs"
}

PRINCIPAL_COLLECTIONS = ("users", "students", "companies", "admins")


def init_mongo_indexes(db: Database = None):
    """
    Create indexes backing the uniqueness rules.
    Call this once during app startup.
    """
    db = db if db is not None else get_mongo_db()

    # One account per email, per principal kind
    for key in PRINCIPAL_COLLECTIONS:
        db[COLLECTIONS[key]].create_index("email", unique=True)

    # Cascade delete and listing by company
    db[COLLECTIONS["jobs"]].create_index("company_id")

    # One application per student per job
    db[COLLECTIONS["applied_jobs"]].create_index([
        ("student_id", ASCENDING),
        ("job_id", ASCENDING)
    ], unique=True)

    logger.info("MongoDB indexes created successfully")
