from sqlalchemy import Column, String, DateTime, Text
from sqlalchemy.sql import func
import uuid
from app.db.database import Base
from app.db.types import GUID


class Exercise(Base):
    __tablename__ = "exercises"

    id = Column(GUID(), primary_key=True, default=uuid.uuid4)
    name = Column(String, nullable=False, unique=True, index=True)
    description = Column(Text, nullable=False, default="")
    category = Column(String, nullable=False, index=True)  # Strength, Cardio, Flexibility
    muscle_group = Column(String, nullable=True, index=True)  # Chest, Back, Legs, ...
    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
