"""
Pydantic Schemas - Request/Response Validation

All API request and response schemas in one file for simplicity.
Fields are snake_case in Python and MongoDB, camelCase on the wire.
"""

from pydantic import AfterValidator, BaseModel, BeforeValidator, ConfigDict, EmailStr, Field
from pydantic.alias_generators import to_camel
from typing import Annotated, Optional, List, Union
from datetime import datetime


class APIModel(BaseModel):
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)


def _normalize_email(value: str) -> str:
    return value.strip().lower()


def _strip(value):
    return value.strip() if isinstance(value, str) else value


Email = Annotated[EmailStr, BeforeValidator(_strip), AfterValidator(_normalize_email)]
Text = Annotated[str, BeforeValidator(_strip), Field(min_length=1)]


# ============================================================
# PUBLIC PROJECTIONS
# No projection declares a password field, so hashes never leave the API.
# ============================================================

class RecordModel(APIModel):
    id: str = Field(..., alias="_id")
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None


class UserPublic(RecordModel):
    email: str
    type: str


class StudentPublic(RecordModel):
    student_name: str
    email: str
    qualification: str
    cgpa: float


class CompanyPublic(RecordModel):
    company_name: str
    email: str
    description: str
    website: str
    contact_no: int


class AdminPublic(RecordModel):
    username: str
    email: str


class JobPublic(RecordModel):
    job_title: str
    description: str
    company_id: Union[CompanyPublic, str]


class AppliedJobPublic(RecordModel):
    experience: str
    skills: str
    job_id: Union[JobPublic, str]
    company_id: Union[CompanyPublic, str]
    student_id: Union[StudentPublic, str]


# ============================================================
# AUTH SCHEMAS
# ============================================================

class LoginRequest(APIModel):
    email: Annotated[Text, AfterValidator(_normalize_email)]
    password: str = Field(..., min_length=1)


class RegisterRequest(APIModel):
    """Fields shared by every registration body."""
    email: Email
    password: str = Field(..., min_length=4)


class UserRegister(RegisterRequest):
    type: Text


class UserLogin(LoginRequest):
    type: Optional[str] = None


class StudentRegister(RegisterRequest):
    student_name: Text
    qualification: Text
    cgpa: float = Field(..., ge=0)


class CompanyRegister(RegisterRequest):
    company_name: Text
    description: Text
    website: Text
    contact_no: int


class AdminCreate(RegisterRequest):
    username: Text


class MessageResponse(APIModel):
    success: bool = True
    message: str


class TokenResponse(MessageResponse):
    token: str


class LoginResponse(TokenResponse):
    email: str
    id: str


# ============================================================
# PROFILE SCHEMAS
# ============================================================

class UserProfileResponse(APIModel):
    success: bool = True
    user: UserPublic


class StudentRegisterResponse(TokenResponse):
    student: StudentPublic


class StudentProfileResponse(APIModel):
    success: bool = True
    student: StudentPublic


class CompanyRegisterResponse(TokenResponse):
    company: CompanyPublic


class CompanyProfileResponse(APIModel):
    success: bool = True
    company: CompanyPublic


class AdminProfileResponse(APIModel):
    success: bool = True
    admin: AdminPublic


# ============================================================
# JOB SCHEMAS
# ============================================================

class JobCreate(APIModel):
    job_title: Text
    description: Text


class JobResponse(MessageResponse):
    job: JobPublic


class JobListResponse(APIModel):
    success: bool = True
    jobs: List[JobPublic]


class ApplicationCreate(APIModel):
    experience: Text
    skills: Text


class ApplicationResponse(MessageResponse):
    applied_job: AppliedJobPublic


class StudentDataResponse(MessageResponse):
    all_jobs: List[JobPublic]
    applied_jobs: List[AppliedJobPublic]
    companies: List[CompanyPublic]


# ============================================================
# ADMIN SCHEMAS
# ============================================================

class AdminDataResponse(MessageResponse):
    students: List[StudentPublic]
    companies: List[CompanyPublic]
    jobs: List[JobPublic]


class DeleteCompanyResponse(MessageResponse):
    deleted_jobs: int
