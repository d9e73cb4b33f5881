from fastapi import Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException


class QuizError(Exception):
    status_code = 400
    message = "Bad request"

    def __init__(self, message: str = None):
        self.message = message or self.message
        super().__init__(self.message)


class Unauthenticated(QuizError):
    status_code = 401
    message = "Unauthorized"


class AlreadyAttempted(QuizError):
    status_code = 403
    message = "Quiz already taken"


class StorageConflict(AlreadyAttempted):
    """Raised when the unique constraint on quiz_attempt.user_id rejects an insert."""


class MalformedInput(QuizError):
    status_code = 400
    message = "Invalid answers format"


class AnswerCountMismatch(QuizError):
    status_code = 400
    message = "Answer count mismatch"


async def quiz_error_handler(request: Request, exc: QuizError):
    return JSONResponse(status_code=exc.status_code, content={"error": exc.message})


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"error": exc.detail},
        headers=getattr(exc, "headers", None),
    )


# bodies the submit route cannot read as {"answers": ...} count as malformed answers
MALFORMED_ANSWER_PATHS = {"/api/quiz/submit"}


async def validation_error_handler(request: Request, exc: RequestValidationError):
    if request.url.path in MALFORMED_ANSWER_PATHS:
        return await quiz_error_handler(request, MalformedInput())
    return JSONResponse(status_code=422, content={"error": "Invalid request body"})
