# backend/croptracker/models/user.py

from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship

from ..core.database import Base
from .base import gen_uuid, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(String(36), primary_key=True, default=gen_uuid)
    name = Column(String, nullable=False)
    email = Column(String, nullable=False, unique=True, index=True)
    password = Column(String, nullable=False)  # werkzeug hash, never plain text
    created_at = Column(DateTime, default=utcnow)

    crops = relationship("Crop", back_populates="user", cascade="all, delete-orphan")
