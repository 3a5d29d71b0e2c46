# backend/croptracker/api/users.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.auth import create_access_token, verify_password
from ..core.database import get_db
from ..core.logger import logger
from ..crud import users as crud_users
from ..schemas.common import Message
from ..schemas.user import LoginRequest, RegisterRequest, TokenResponse

router = APIRouter(prefix="/api/user", tags=["Users"])


@router.post(
    "/register",
    response_model=Message,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
)
async def register_user(payload: RegisterRequest, db: AsyncSession = Depends(get_db)):
    existing = await crud_users.get_user_by_email(payload.email, db)
    if existing:
        raise HTTPException(status_code=400, detail="user already exists.")

    try:
        user = await crud_users.create_user(payload, db)
    except IntegrityError:
        # lost a race with a concurrent registration for the same email
        await db.rollback()
        raise HTTPException(status_code=400, detail="user already exists.")

    logger.info("User registered", extra={"user_id": user.id})
    return {"message": "user registered successfully."}


@router.post("/login", response_model=TokenResponse, summary="Log in and obtain a session token")
async def login_user(payload: LoginRequest, db: AsyncSession = Depends(get_db)):
    user = await crud_users.get_user_by_email(payload.email, db)
    if not user:
        logger.warning("Login for unknown email")
        raise HTTPException(status_code=400, detail="Email id not exist, please register")

    if not verify_password(payload.password, user.password):
        logger.warning("Login with invalid password", extra={"user_id": user.id})
        raise HTTPException(status_code=400, detail="Invalid password")

    token = create_access_token({"id": user.id, "email": user.email})

    logger.info("User logged in", extra={"user_id": user.id})
    return {"token": token}
