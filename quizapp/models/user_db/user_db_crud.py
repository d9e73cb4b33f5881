from sqlalchemy.orm import Session
from quizapp.models.user_db.user_db import User
from quizapp.schemas.users.user_base import UserCreate
from quizapp.core.security import hash_password


def create_user(db: Session, user: UserCreate):
    db_user = User(
        email=user.email,
        name=user.name,
        hashed_password=hash_password(user.password),
    )
    db.add(db_user)
    db.commit()
    db.refresh(db_user)
    return db_user


def get_user_by_email(db: Session, email: str):
    return db.query(User).filter(User.email == email).first()
