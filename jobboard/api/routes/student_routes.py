"""
Student Routes

POST /student/register - Register student
POST /student/login - Login and get token
GET /student/get-profile - Get own profile
GET /student/get-data - All jobs, my applications, all companies
"""

from fastapi import APIRouter, Depends
from pymongo.database import Database

from jobboard.core.auth import CurrentPrincipal, get_current_student
from jobboard.core.principals import STUDENT, COMPANY
from jobboard.db.mongodb import get_mongo_db
from jobboard.schemas.schemas import (
    StudentRegister, LoginRequest, LoginResponse,
    StudentRegisterResponse, StudentProfileResponse, StudentDataResponse
)
from jobboard.services import account_service
from jobboard.services.mongo_service import PrincipalService, JobService, AppliedJobService

router = APIRouter(prefix="/student", tags=["Students"])


@router.post("/register", response_model=StudentRegisterResponse)
def register(data: StudentRegister, db: Database = Depends(get_mongo_db)):
    """Register a student and receive a session token."""
    token, student = account_service.register(db, STUDENT, data)
    return StudentRegisterResponse(
        message="Student registered successfully",
        token=token,
        student=STUDENT.to_public(student)
    )


@router.post("/login", response_model=LoginResponse)
def login(data: LoginRequest, db: Database = Depends(get_mongo_db)):
    token, student = account_service.login(db, STUDENT, data.email, data.password)
    return LoginResponse(
        message="Logged-in successfully!", token=token, email=student["email"], id=student["_id"]
    )


@router.get("/get-profile", response_model=StudentProfileResponse)
def get_profile(
    principal: CurrentPrincipal = Depends(get_current_student),
    db: Database = Depends(get_mongo_db)
):
    student = PrincipalService(db, STUDENT).get_by_id(principal.id)
    return StudentProfileResponse(student=STUDENT.to_public(student))


@router.get("/get-data", response_model=StudentDataResponse)
def get_data(
    principal: CurrentPrincipal = Depends(get_current_student),
    db: Database = Depends(get_mongo_db)
):
    """Everything the student dashboard needs in one call."""
    applications = AppliedJobService(db)
    applied_jobs = [applications.expand(a) for a in applications.list_by_student(principal.id)]

    return StudentDataResponse(
        message="Jobs and companies record",
        all_jobs=JobService(db).list_all(),
        applied_jobs=applied_jobs,
        companies=[COMPANY.to_public(c) for c in PrincipalService(db, COMPANY).list_all()]
    )
