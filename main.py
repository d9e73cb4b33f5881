import logging

from fastapi import FastAPI
from fastapi.responses import HTMLResponse
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from starlette.exceptions import HTTPException as StarletteHTTPException
from quizapp.core.config import settings
from quizapp.core.errors import QuizError, quiz_error_handler, http_error_handler, validation_error_handler
from quizapp.routes.auth.auth_routers import auth_router
from quizapp.routes.user.user_routers import user_router
from quizapp.routes.quiz.quiz_routers import quiz_router

logging.basicConfig(level=settings.LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(title="Quiz API")

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.add_exception_handler(QuizError, quiz_error_handler)
app.add_exception_handler(StarletteHTTPException, http_error_handler)
app.add_exception_handler(RequestValidationError, validation_error_handler)

app.include_router(auth_router)
app.include_router(user_router)
app.include_router(quiz_router)


@app.get("/", response_class=HTMLResponse)
async def read_root():
    return """
    <html>
        <head>
            <title>Quiz</title>
        </head>
        <body>
            <h1>Quiz API</h1>
            <p>One attempt per account. See the API documentation <a href="/docs">here</a>.</p>
        </body>
    </html>
    """
