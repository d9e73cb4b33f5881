import logging
import uuid
from typing import Any, List, Sequence
from uuid import UUID

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from quizapp.core.errors import AlreadyAttempted, AnswerCountMismatch, MalformedInput, StorageConflict
from quizapp.models.quiz_db.attempt_db import QuizAttempt
from quizapp.models.quiz_db.question_db import Question

logger = logging.getLogger(__name__)


def list_questions(db: Session) -> List[Question]:
    return db.query(Question).order_by(Question.order.asc(), Question.id.asc()).all()


def get_attempt_by_user(db: Session, user_id: UUID):
    return db.query(QuizAttempt).filter(QuizAttempt.user_id == user_id).first()


def get_attempt_status(db: Session, user_id: UUID) -> dict:
    attempt = get_attempt_by_user(db, user_id)
    if attempt:
        return {"taken": True, "score": attempt.score, "total": attempt.total_questions}
    return {"taken": False}


def _matches(answer: Any, correct_index: int) -> bool:
    # bool is an int subclass, but true/false are not option indexes
    if isinstance(answer, bool) or not isinstance(answer, (int, float)):
        return False
    return answer == correct_index


def score_answers(questions: Sequence[Question], answers: Sequence[Any]) -> int:
    """Count answers equal to the correct index of the question at the same position."""
    return sum(1 for q, a in zip(questions, answers) if _matches(a, q.correct_index))


def submit_attempt(db: Session, user_id: UUID, answers: Any) -> dict:
    """
    Score ``answers`` against the catalog and record the user's only attempt.

    The existence check up front only saves scoring work; the unique
    constraint on ``quiz_attempt.user_id`` decides which of two racing
    submissions is kept.
    """
    if get_attempt_by_user(db, user_id):
        logger.info("Rejected submission from user %s: quiz already taken", user_id)
        raise AlreadyAttempted()

    if not isinstance(answers, list):
        raise MalformedInput()

    questions = list_questions(db)
    if len(answers) != len(questions):
        raise AnswerCountMismatch()

    score = score_answers(questions, answers)
    total = len(questions)

    attempt = QuizAttempt(
        id=uuid.uuid4(),
        user_id=user_id,
        score=score,
        total_questions=total,
    )
    db.add(attempt)
    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        # only a row already holding user_id is a lost race; anything else (e.g. user deleted) propagates
        winner = db.query(QuizAttempt.id).filter(QuizAttempt.user_id == user_id).first()
        if winner is None:
            raise
        logger.warning("Duplicate attempt for user %s rejected by the database", user_id)
        raise StorageConflict()

    logger.info("User %s scored %d/%d", user_id, score, total)
    return {"score": score, "total": total}
