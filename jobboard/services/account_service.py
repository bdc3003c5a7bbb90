"""
Account Service - registration and login for every principal kind.

One implementation, parameterized by PrincipalKind:
    token, student = register(db, STUDENT, StudentRegister(...))
    token, admin = login(db, ADMIN, email, password)
"""

import logging
from typing import Tuple
from pymongo.database import Database

from jobboard.core.auth import create_access_token, hash_password, verify_password
from jobboard.core.errors import DuplicateEmail, InvalidCredentials
from jobboard.core.principals import PrincipalKind, ADMIN
from jobboard.schemas.schemas import RegisterRequest, AdminCreate
from jobboard.services.mongo_service import PrincipalService

logger = logging.getLogger(__name__)

# Same answer for unknown email and wrong password
INVALID_CREDENTIALS = "Invalid email or password"


def create_principal(db: Database, kind: PrincipalKind, data: RegisterRequest) -> dict:
    """Persist a new principal with a salted hash in place of the password."""
    service = PrincipalService(db, kind)
    if service.get_by_email(data.email):
        raise DuplicateEmail("Email already exists!")

    fields = data.model_dump(exclude={"password"})
    return service.create(fields, hash_password(data.password))


def register(db: Database, kind: PrincipalKind, data: RegisterRequest) -> Tuple[str, dict]:
    """Create the account and return (token, record)."""
    record = create_principal(db, kind, data)
    token = create_access_token(kind, record["_id"], record["email"])
    logger.info(f"Registered {kind.name} {record['_id']}")
    return token, record


def login(db: Database, kind: PrincipalKind, email: str, password: str) -> Tuple[str, dict]:
    """Check credentials and return a fresh (token, record)."""
    record = PrincipalService(db, kind).get_by_email(email)
    if record is None or not verify_password(password, record["password"]):
        logger.info(f"Failed {kind.name} login")
        raise InvalidCredentials(INVALID_CREDENTIALS)

    token = create_access_token(kind, record["_id"], record["email"])
    logger.info(f"{kind.name} {record['_id']} logged in")
    return token, record


def create_admin(db: Database, username: str, email: str, password: str) -> dict:
    """Admins have no public sign-up; scripts/create_admin.py calls this."""
    data = AdminCreate(username=username, email=email, password=password)
    return create_principal(db, ADMIN, data)
