"""
Admin Routes

POST /admin/login - Login and get token
GET /admin/auth - Get own profile
GET /admin/get-data - All students, companies and jobs
DELETE /admin/delete-company/{company_id} - Delete company and its jobs
DELETE /admin/delete-student/{student_id} - Delete student
"""

import logging
from fastapi import APIRouter, Depends
from pymongo.database import Database

from jobboard.core.auth import CurrentPrincipal, get_current_admin
from jobboard.core.errors import NotFound
from jobboard.core.principals import ADMIN, COMPANY, STUDENT
from jobboard.db.mongodb import get_mongo_db
from jobboard.schemas.schemas import (
    LoginRequest, LoginResponse, AdminProfileResponse, AdminDataResponse,
    DeleteCompanyResponse, MessageResponse
)
from jobboard.services import account_service
from jobboard.services.mongo_service import PrincipalService, JobService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/admin", tags=["Admin"])


@router.post("/login", response_model=LoginResponse)
def login(data: LoginRequest, db: Database = Depends(get_mongo_db)):
    token, admin = account_service.login(db, ADMIN, data.email, data.password)
    return LoginResponse(
        message="Logged-in successfully!", token=token, email=admin["email"], id=admin["_id"]
    )


@router.get("/auth", response_model=AdminProfileResponse)
def get_profile(
    principal: CurrentPrincipal = Depends(get_current_admin),
    db: Database = Depends(get_mongo_db)
):
    admin = PrincipalService(db, ADMIN).get_by_id(principal.id)
    return AdminProfileResponse(admin=ADMIN.to_public(admin))


@router.get("/get-data", response_model=AdminDataResponse)
def get_data(
    admin: CurrentPrincipal = Depends(get_current_admin),
    db: Database = Depends(get_mongo_db)
):
    """Every student, company and job. No pagination."""
    jobs = JobService(db)
    return AdminDataResponse(
        message="Students, jobs and companies record",
        students=[STUDENT.to_public(s) for s in PrincipalService(db, STUDENT).list_all()],
        companies=[COMPANY.to_public(c) for c in PrincipalService(db, COMPANY).list_all()],
        jobs=[jobs.expand(job) for job in jobs.list_all()]
    )


@router.delete("/delete-company/{company_id}", response_model=DeleteCompanyResponse)
def delete_company(
    company_id: str,
    admin: CurrentPrincipal = Depends(get_current_admin),
    db: Database = Depends(get_mongo_db)
):
    """
    Delete a company, then every job it posted.

    Two separate writes, not a transaction: a failure in between leaves
    the jobs behind. Applications to those jobs are not touched.
    """
    if PrincipalService(db, COMPANY).delete(company_id) is None:
        raise NotFound("Company not found")

    deleted_jobs = JobService(db).delete_by_company(company_id)
    logger.info(f"Admin {admin.id} deleted company {company_id} and {deleted_jobs} jobs")
    return DeleteCompanyResponse(
        message="Company and jobs deleted successfully!", deleted_jobs=deleted_jobs
    )


@router.delete("/delete-student/{student_id}", response_model=MessageResponse)
def delete_student(
    student_id: str,
    admin: CurrentPrincipal = Depends(get_current_admin),
    db: Database = Depends(get_mongo_db)
):
    if PrincipalService(db, STUDENT).delete(student_id) is None:
        raise NotFound("Student not found")

    logger.info(f"Admin {admin.id} deleted student {student_id}")
    return MessageResponse(message="Student deleted successfully!")
