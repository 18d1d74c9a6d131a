"""API route package — imports all routers for main.py."""

from quiz_service.api.health import router as health_router  # noqa: F401
from quiz_service.api.users import router as users_router  # noqa: F401
from quiz_service.api.quiz import router as quiz_router  # noqa: F401
from quiz_service.api.attempts import router as attempts_router  # noqa: F401
