from typing import Optional

from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session
from quizapp.core.database import get_db
from quizapp.core.errors import AlreadyAttempted
from quizapp.core.security import get_current_user
from quizapp.models.quiz_db.quiz_crud import get_attempt_by_user, get_attempt_status, list_questions, submit_attempt
from quizapp.models.user_db.user_db import User
from quizapp.schemas.quiz.quiz_base import AttemptStatus, QuestionsResponse, QuizResult, QuizSubmission

quiz_router = APIRouter(prefix="/api/quiz", tags=["Quiz"])


@quiz_router.get("/questions", response_model=QuestionsResponse)
def get_questions(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    if get_attempt_by_user(db, current_user.id):
        raise AlreadyAttempted()
    return {"questions": list_questions(db)}


@quiz_router.post("/submit", response_model=QuizResult)
def submit_quiz(
    submission: Optional[QuizSubmission] = None,
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    answers = submission.answers if submission else None
    return submit_attempt(db, current_user.id, answers)


@quiz_router.get("/status", response_model=AttemptStatus, response_model_exclude_none=True)
def get_status(
    db: Session = Depends(get_db),
    current_user: User = Depends(get_current_user)
):
    return get_attempt_status(db, current_user.id)
