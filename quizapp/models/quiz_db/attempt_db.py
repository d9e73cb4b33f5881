import uuid
from sqlalchemy import Column, ForeignKey, Integer, DateTime, Uuid
from quizapp.core.database import Base
from datetime import datetime


class QuizAttempt(Base):
    __tablename__ = "quiz_attempt"

    id = Column(Uuid, primary_key=True, default=uuid.uuid4, index=True)
    # one attempt per user; the constraint is what rejects racing inserts
    user_id = Column(Uuid, ForeignKey("users.id", ondelete="CASCADE"), unique=True, nullable=False)
    score = Column(Integer, nullable=False)
    total_questions = Column(Integer, nullable=False)
    completed_at = Column(DateTime, nullable=False, default=datetime.utcnow)
    created_at = Column(DateTime, nullable=False, default=datetime.utcnow)
