from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy.orm import Session

from quizapp.core.database import get_db
from quizapp.core.security import (
    verify_password,
    create_access_token,
    get_current_user
)
from quizapp.models.user_db.user_db import User
from quizapp.models.user_db.user_db_crud import get_user_by_email
from quizapp.schemas.login.login_base import LoginRequest, LoginResponse
from quizapp.schemas.users.user_base import UserOut

auth_router = APIRouter(prefix="/api/auth", tags=["Auth"])


@auth_router.post("/login", response_model=LoginResponse)
def login(payload: LoginRequest, db: Session = Depends(get_db)):
    user = get_user_by_email(db, payload.email)
    if not user or not verify_password(payload.password, user.hashed_password):
        raise HTTPException(status_code=401, detail="Invalid credentials")

    token = create_access_token({"sub": user.email})
    return {"user": user, "token": token}


@auth_router.get("/me", response_model=UserOut)
def get_me(current_user: User = Depends(get_current_user)):
    return current_user
