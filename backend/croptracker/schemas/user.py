# backend/croptracker/schemas/user.py

from pydantic import BaseModel, EmailStr


class RegisterRequest(BaseModel):
    name: str
    email: EmailStr
    password: str


class LoginRequest(BaseModel):
    # any string; an unknown address is a 400 from the lookup
    email: str
    password: str


class TokenResponse(BaseModel):
    token: str
