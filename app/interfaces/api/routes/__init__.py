from fastapi import FastAPI

from .attachments import router as attachments_router
from .auth import router as auth_router
from .comments import router as comments_router
from .notifications import router as notifications_router
from .profiles import router as profiles_router
from .requests import router as requests_router
from .roles import router as roles_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(auth_router)
    app.include_router(profiles_router)
    app.include_router(roles_router)
    app.include_router(requests_router)
    app.include_router(comments_router)
    app.include_router(notifications_router)
    app.include_router(attachments_router)
