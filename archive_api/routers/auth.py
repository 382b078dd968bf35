# archive_api/routers/auth.py
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from archive_api.core.database import get_db
from archive_api.schemas.auth import LoginRequest, LoginResponse, SignupRequest, SignupResponse, UserOut
from archive_api.services import auth as auth_service

router = APIRouter()

@router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    """
    Checks the email/password pair and returns id, email and role.
    No session or token is issued.
    """
    user = auth_service.login(db, payload.email, payload.password)
    return LoginResponse(user=UserOut.model_validate(user))

@router.post("/signup", response_model=SignupResponse)
def signup(payload: SignupRequest, db: Session = Depends(get_db)):
    user_id = auth_service.signup(db, payload.email, payload.password, payload.role)
    return SignupResponse(message="User registered successfully", userId=user_id)
