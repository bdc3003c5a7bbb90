"""
Job Routes

GET /job/get-jobs - List all jobs (any signed-in principal)
POST /job/create-job - Create job posting (company only)
POST /job/apply/{job_id} - Apply to job (student only)
DELETE /job/delete-job/{job_id} - Delete own job posting (company only)
"""

import logging
from fastapi import APIRouter, Depends
from pymongo.database import Database

from jobboard.core.auth import (
    CurrentPrincipal, get_any_principal, get_current_company, get_current_student
)
from jobboard.core.errors import AlreadyApplied, DuplicateJob, NotFound
from jobboard.db.mongodb import get_mongo_db
from jobboard.schemas.schemas import (
    JobCreate, JobResponse, JobListResponse,
    ApplicationCreate, ApplicationResponse, MessageResponse
)
from jobboard.services.mongo_service import JobService, AppliedJobService

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/job", tags=["Jobs"])


@router.get("/get-jobs", response_model=JobListResponse)
def list_jobs(
    principal: CurrentPrincipal = Depends(get_any_principal),
    db: Database = Depends(get_mongo_db)
):
    jobs = JobService(db)
    return JobListResponse(jobs=[jobs.expand(job) for job in jobs.list_all()])


@router.post("/create-job", response_model=JobResponse)
def create_job(
    data: JobCreate,
    company: CurrentPrincipal = Depends(get_current_company),
    db: Database = Depends(get_mongo_db)
):
    """Create a new job posting. Only companies can create jobs."""
    jobs = JobService(db)
    if jobs.find_by_company_and_title(company.id, data.job_title):
        raise DuplicateJob("Job already exists")

    job = jobs.create(company.id, data.job_title, data.description)
    logger.info(f"Company {company.id} posted job {job['_id']}")
    return JobResponse(message="Job created successfully", job=jobs.expand(job))


@router.post("/apply/{job_id}", response_model=ApplicationResponse)
def apply_to_job(
    job_id: str,
    data: ApplicationCreate,
    student: CurrentPrincipal = Depends(get_current_student),
    db: Database = Depends(get_mongo_db)
):
    """Apply to a job. Students only. Cannot apply twice to same job."""
    job = JobService(db).get_by_id(job_id)
    if job is None:
        raise NotFound("Job not found")

    applications = AppliedJobService(db)
    if applications.exists(student.id, job_id):
        raise AlreadyApplied("You have already applied for this job")

    application = applications.create(job, student.id, data.experience, data.skills)
    logger.info(f"Student {student.id} applied to job {job_id}")
    return ApplicationResponse(
        message="Applied to job successfully",
        applied_job=applications.expand(application)
    )


@router.delete("/delete-job/{job_id}", response_model=MessageResponse)
def delete_job(
    job_id: str,
    company: CurrentPrincipal = Depends(get_current_company),
    db: Database = Depends(get_mongo_db)
):
    """Delete a job posting. Only the owning company can delete it."""
    if JobService(db).delete(job_id, company_id=company.id) is None:
        raise NotFound("Job not found")

    logger.info(f"Company {company.id} deleted job {job_id}")
    return MessageResponse(message="Job deleted successfully!")
