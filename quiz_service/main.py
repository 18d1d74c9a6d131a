"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.middleware.trustedhost import TrustedHostMiddleware
from fastapi.responses import JSONResponse

from quiz_service.api import attempts_router, health_router, quiz_router, users_router
from quiz_service.config import settings
from quiz_service.core.exceptions import QuizServiceError
from quiz_service.db.session import create_tables
from quiz_service.schemas.common import ErrorResponse

logging.basicConfig(
    level=logging.DEBUG if settings.DEBUG else logging.INFO,
    format="%(asctime)s  %(name)-25s  %(levelname)-8s  %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("🚀 Quiz service starting…")
    if settings.AUTO_CREATE_TABLES:
        create_tables()
        logger.info("Database tables ensured")
    yield
    logger.info("✅ Quiz service shut down")


app = FastAPI(
    title="Quiz Service API",
    description="Quizzes, scored attempts and per-user statistics",
    version="0.1.0",
    lifespan=lifespan,
)

# ── Middleware ─────────────────────────────────────────────────────────────────

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)
app.add_middleware(TrustedHostMiddleware, allowed_hosts=settings.ALLOWED_HOSTS)

# ── Errors ─────────────────────────────────────────────────────────────────────


@app.exception_handler(QuizServiceError)
async def quiz_service_error_handler(request: Request, exc: QuizServiceError):
    logger.warning(
        "%s %s → %d %s: %s",
        request.method, request.url.path, exc.status_code, exc.error_code, exc.message,
    )
    body = ErrorResponse(
        error_code=exc.error_code,
        message=exc.message,
        details=exc.details or None,
    )
    return JSONResponse(status_code=exc.status_code, content=body.model_dump())


# ── Routers ───────────────────────────────────────────────────────────────────

app.include_router(health_router, tags=["Health"])
app.include_router(users_router, prefix="/api/users", tags=["Users"])
app.include_router(quiz_router, prefix="/api/quizzes", tags=["Quizzes"])
app.include_router(attempts_router, prefix="/api/attempts", tags=["Attempts"])


@app.get("/")
async def root():
    return {
        "name": "Quiz Service API",
        "version": "0.1.0",
        "docs": "/docs",
        "health": "/health",
    }
