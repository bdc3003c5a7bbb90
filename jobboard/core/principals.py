"""
Principal kinds - one descriptor per actor that can hold a session.

The gate, registration and login are written once and take a PrincipalKind
to decide which collection to query and which public projection to return.
"""

from dataclasses import dataclass
from typing import Type

from jobboard.db.mongodb import COLLECTIONS
from jobboard.schemas.schemas import (
    RecordModel, UserPublic, StudentPublic, CompanyPublic, AdminPublic
)


@dataclass(frozen=True)
class PrincipalKind:
    name: str                          # key inside the token payload
    collection: str
    public_model: Type[RecordModel]

    def to_public(self, doc: dict) -> RecordModel:
        return self.public_model.model_validate(doc)


USER = PrincipalKind("user", COLLECTIONS["users"], UserPublic)
STUDENT = PrincipalKind("student", COLLECTIONS["students"], StudentPublic)
COMPANY = PrincipalKind("company", COLLECTIONS["companies"], CompanyPublic)
ADMIN = PrincipalKind("admin", COLLECTIONS["admins"], AdminPublic)
