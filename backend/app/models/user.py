from sqlalchemy import Column, String, DateTime
from sqlalchemy.orm import relationship
import uuid
from app.db.database import Base
from app.db.types import GUID, utcnow


class User(Base):
    __tablename__ = "users"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    email = Column(String, unique=True, nullable=False, index=True)
    name = Column(String, nullable=False)
    password_hash = Column(String, nullable=False)
    created_at = Column(DateTime(timezone=True), default=utcnow, nullable=False)

    workout_plans = relationship(
        "WorkoutPlan", back_populates="user", cascade="all, delete-orphan"
    )
