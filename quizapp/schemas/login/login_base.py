from pydantic import BaseModel

from quizapp.schemas.users.user_base import UserOut


class LoginRequest(BaseModel):
    email: str
    password: str


class LoginResponse(BaseModel):
    user: UserOut
    token: str
