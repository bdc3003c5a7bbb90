"""
User Routes

POST /user/register - Register generic user
POST /user/login - Login and get token
GET /user/get-profile - Get own profile
"""

from fastapi import APIRouter, Depends
from pymongo.database import Database

from jobboard.core.auth import CurrentPrincipal, get_current_user
from jobboard.core.principals import USER
from jobboard.db.mongodb import get_mongo_db
from jobboard.schemas.schemas import (
    UserRegister, UserLogin, TokenResponse, LoginResponse, UserProfileResponse
)
from jobboard.services import account_service
from jobboard.services.mongo_service import PrincipalService

router = APIRouter(prefix="/user", tags=["Users"])


@router.post("/register", response_model=TokenResponse)
def register(data: UserRegister, db: Database = Depends(get_mongo_db)):
    """Register a user account and receive a session token."""
    token, _ = account_service.register(db, USER, data)
    return TokenResponse(message="User registered successfully", token=token)


@router.post("/login", response_model=LoginResponse)
def login(data: UserLogin, db: Database = Depends(get_mongo_db)):
    """
    Login and receive a session token.

    Send it back in the x-auth-token header.
    """
    token, user = account_service.login(db, USER, data.email, data.password)
    return LoginResponse(
        message="Logged-in successfully!", token=token, email=user["email"], id=user["_id"]
    )


@router.get("/get-profile", response_model=UserProfileResponse)
def get_profile(
    principal: CurrentPrincipal = Depends(get_current_user),
    db: Database = Depends(get_mongo_db)
):
    user = PrincipalService(db, USER).get_by_id(principal.id)
    return UserProfileResponse(user=USER.to_public(user))
