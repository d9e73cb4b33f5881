import logging

from sqlalchemy.orm import Session
from quizapp.core.database import SessionLocal
from quizapp.models.quiz_db.question_db import Question

logger = logging.getLogger(__name__)


quiz_data = [
    {
        "order": 1,
        "text": "Which keyword defines a function in Python?",
        "options": ["func", "def", "lambda", "fn"],
        "correct_index": 1,
    },
    {
        "order": 2,
        "text": "What does HTTP status 403 mean?",
        "options": ["Forbidden", "Not Found", "Unauthorized", "Bad Request"],
        "correct_index": 0,
    },
    {
        "order": 3,
        "text": "Which SQL constraint prevents duplicate values in a column?",
        "options": ["CHECK", "FOREIGN KEY", "UNIQUE", "DEFAULT"],
        "correct_index": 2,
    },
    {
        "order": 4,
        "text": "What is the result of len([1, [2, 3], 4])?",
        "options": ["4", "2", "1", "3"],
        "correct_index": 3,
    },
    {
        "order": 5,
        "text": "Which HTTP method is idempotent?",
        "options": ["POST", "PUT", "PATCH", "CONNECT"],
        "correct_index": 1,
    },
]


def seed_quiz_questions(db: Session = None) -> int:
    own_session = db is None
    if own_session:
        db = SessionLocal()

    created = 0
    try:
        for data in quiz_data:
            exists = db.query(Question).filter(Question.text == data["text"]).first()
            if not exists:
                db.add(Question(**data))
                created += 1
        db.commit()
    finally:
        if own_session:
            db.close()

    logger.info("Seeded %d quiz questions", created)
    return created


if __name__ == "__main__":
    logging.basicConfig(level=logging.INFO)
    seed_quiz_questions()
