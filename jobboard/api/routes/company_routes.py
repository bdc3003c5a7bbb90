"""
Company Routes

POST /company/register - Register company
POST /company/login - Login and get token
GET /company/get-profile - Get own profile
"""

from fastapi import APIRouter, Depends
from pymongo.database import Database

from jobboard.core.auth import CurrentPrincipal, get_current_company
from jobboard.core.principals import COMPANY
from jobboard.db.mongodb import get_mongo_db
from jobboard.schemas.schemas import (
    CompanyRegister, LoginRequest, LoginResponse,
    CompanyRegisterResponse, CompanyProfileResponse
)
from jobboard.services import account_service
from jobboard.services.mongo_service import PrincipalService

router = APIRouter(prefix="/company", tags=["Companies"])


@router.post("/register", response_model=CompanyRegisterResponse)
def register(data: CompanyRegister, db: Database = Depends(get_mongo_db)):
    """Register a company and receive a session token."""
    token, company = account_service.register(db, COMPANY, data)
    return CompanyRegisterResponse(
        message="Company registered successfully",
        token=token,
        company=COMPANY.to_public(company)
    )


@router.post("/login", response_model=LoginResponse)
def login(data: LoginRequest, db: Database = Depends(get_mongo_db)):
    token, company = account_service.login(db, COMPANY, data.email, data.password)
    return LoginResponse(
        message="Logged-in successfully!", token=token, email=company["email"], id=company["_id"]
    )


@router.get("/get-profile", response_model=CompanyProfileResponse)
def get_profile(
    principal: CurrentPrincipal = Depends(get_current_company),
    db: Database = Depends(get_mongo_db)
):
    """Get the authenticated company's profile."""
    company = PrincipalService(db, COMPANY).get_by_id(principal.id)
    return CompanyProfileResponse(company=COMPANY.to_public(company))
