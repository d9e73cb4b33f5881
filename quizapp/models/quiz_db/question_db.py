import uuid
from sqlalchemy import Column, String, Integer, DateTime, JSON, Uuid
from sqlalchemy.dialects.postgresql import JSONB
from quizapp.core.database import Base
from datetime import datetime


class Question(Base):
    __tablename__ = "question"

    id = Column(
        Uuid,
        primary_key=True,
        default=uuid.uuid4,
        unique=True,
        index=True
    )

    text = Column(String, nullable=False)
    options = Column(JSON().with_variant(JSONB, "postgresql"), nullable=False)  # ["...", "..."]
    correct_index = Column(Integer, nullable=False)
    order = Column(Integer, nullable=False)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    updated_at = Column(DateTime, nullable=False, default=datetime.utcnow, onupdate=datetime.utcnow)
