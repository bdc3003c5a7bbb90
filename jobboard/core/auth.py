"""
Authentication Utility - JWT and Password handling.

Provides:
- Password hashing with bcrypt
- JWT token creation/verification
- FastAPI dependencies for protected routes (one gate, any principal kind)
"""

import logging
from dataclasses import dataclass
from datetime import datetime, timedelta, timezone
from typing import Optional
from jose import JWTError, jwt
from passlib.context import CryptContext
from fastapi import Depends, Request
from fastapi.security import APIKeyHeader
from pymongo.database import Database

from jobboard.core.config import get_settings
from jobboard.core.errors import AuthError, Unauthenticated
from jobboard.core.principals import PrincipalKind, USER, STUDENT, COMPANY, ADMIN
from jobboard.db.mongodb import get_mongo_db
from jobboard.services.mongo_service import PrincipalService

logger = logging.getLogger(__name__)

settings = get_settings()

# Password hashing
pwd_context = CryptContext(schemes=["bcrypt"], deprecated="auto")

# Session token extractor (custom header, no "Bearer" prefix)
token_header = APIKeyHeader(name=settings.auth_header_name, auto_error=False)


def hash_password(password: str) -> str:
    """Hash password with bcrypt."""
    return pwd_context.hash(password)


def verify_password(plain_password: str, hashed_password: str) -> bool:
    """Verify password against hash."""
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(
    kind: PrincipalKind,
    principal_id: str,
    email: str,
    expires_delta: Optional[timedelta] = None
) -> str:
    """Create JWT access token binding a principal kind to one record."""
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(days=settings.jwt_expire_days))
    to_encode = {
        kind.name: {"email": email, "id": principal_id},
        "iat": now,
        "exp": expire
    }
    return jwt.encode(to_encode, settings.jwt_secret_key, algorithm=settings.jwt_algorithm)


def decode_token(token: str) -> dict:
    """Decode and verify JWT token. Raises AuthError if it cannot be trusted."""
    try:
        return jwt.decode(token, settings.jwt_secret_key, algorithms=[settings.jwt_algorithm])
    except JWTError as e:
        raise AuthError(str(e)) from e


@dataclass(frozen=True)
class CurrentPrincipal:
    kind: PrincipalKind
    id: str
    email: str


def require_principal(*kinds: PrincipalKind):
    """
    Build a FastAPI dependency admitting tokens issued to any of `kinds`.

    Usage:
        @router.get("/protected")
        def route(student: CurrentPrincipal = Depends(require_principal(STUDENT))):
            ...
    """
    def gate(
        request: Request,
        token: Optional[str] = Depends(token_header),
        db: Database = Depends(get_mongo_db)
    ) -> CurrentPrincipal:
        if not token:
            raise Unauthenticated("No token, authorization denied")

        try:
            payload = decode_token(token)
        except AuthError as e:
            logger.warning(f"Rejected token on {request.url.path}: {e}")
            raise Unauthenticated("Token is not valid")

        kind = next((k for k in kinds if isinstance(payload.get(k.name), dict)), None)
        identity = payload.get(kind.name) if kind else None
        if not identity or not identity.get("id"):
            logger.warning(f"Token for another principal kind on {request.url.path}")
            raise Unauthenticated("Token is not valid")

        # Stale tokens stop here: the principal must still exist
        if PrincipalService(db, kind).get_by_id(identity["id"]) is None:
            logger.warning(f"Token references missing {kind.name} {identity['id']}")
            raise Unauthenticated("Invalid token!")

        principal = CurrentPrincipal(kind=kind, id=identity["id"], email=identity.get("email"))
        request.state.principal = principal
        return principal

    return gate


get_current_user = require_principal(USER)
get_current_student = require_principal(STUDENT)
get_current_company = require_principal(COMPANY)
get_current_admin = require_principal(ADMIN)
get_any_principal = require_principal(USER, STUDENT, COMPANY, ADMIN)
