from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session
from quizapp.core.database import get_db
from quizapp.models.user_db.user_db_crud import create_user, get_user_by_email
from quizapp.schemas.users.user_base import UserCreate, UserOut


user_router = APIRouter(prefix="/api/users", tags=["Users"])


@user_router.post("/register", response_model=UserOut, status_code=201)
def register_user(user: UserCreate, db: Session = Depends(get_db)):
    if get_user_by_email(db, user.email):
        raise HTTPException(status_code=400, detail="Email already registered")
    return create_user(db, user)
