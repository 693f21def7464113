from fastapi import FastAPI

from .business import router as business_router
from .diagnostics import router as diagnostics_router
from .notifications import router as notifications_router
from .uploads import router as uploads_router
from .user_settings import router as user_settings_router


def register_routes(app: FastAPI) -> None:
    """Register every API router on the FastAPI application."""

    app.include_router(notifications_router)
    app.include_router(business_router)
    app.include_router(user_settings_router)
    app.include_router(uploads_router)
    app.include_router(diagnostics_router)
