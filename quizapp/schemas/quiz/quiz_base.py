from uuid import UUID

from pydantic import BaseModel
from typing import Any, List, Optional


class QuestionOut(BaseModel):
    id: UUID
    text: str
    options: List[str]
    order: int

    class Config:
        from_attributes = True


class QuestionsResponse(BaseModel):
    questions: List[QuestionOut]


class QuizSubmission(BaseModel):
    # left untyped so a non-list maps to "Invalid answers format" instead of a 422
    answers: Any = None


class QuizResult(BaseModel):
    score: int
    total: int


class AttemptStatus(BaseModel):
    taken: bool
    score: Optional[int] = None
    total: Optional[int] = None
