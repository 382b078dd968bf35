# archive_api/schemas/auth.py
from pydantic import BaseModel, ConfigDict
from typing import Optional

class LoginRequest(BaseModel):
    email: str
    password: str

class SignupRequest(BaseModel):
    email: Optional[str] = None
    password: Optional[str] = None
    role: Optional[str] = None

class UserOut(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    email: str
    role: Optional[str] = None

class LoginResponse(BaseModel):
    user: UserOut

class SignupResponse(BaseModel):
    message: str
    userId: int
