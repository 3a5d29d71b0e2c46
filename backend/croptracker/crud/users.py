# backend/croptracker/crud/users.py

from typing import Optional

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from ..core.auth import hash_password
from ..models.user import User
from ..schemas.user import RegisterRequest


async def get_user_by_email(email: str, db: AsyncSession) -> Optional[User]:
    return await db.scalar(select(User).where(User.email == email))


async def create_user(payload: RegisterRequest, db: AsyncSession) -> User:
    user = User(
        name=payload.name,
        email=payload.email,
        password=hash_password(payload.password),
    )
    db.add(user)
    await db.commit()
    await db.refresh(user)
    return user
