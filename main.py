import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Response, status
from fastapi.middleware.cors import CORSMiddleware
from starlette.types import ASGIApp, Receive, Scope, Send

from app.config import get_settings
from app.infrastructure.database import engine, initialize_database
from app.interfaces.api.errors import register_exception_handlers
from app.interfaces.api.routes import register_routes

CORS_ALLOW_ORIGINS = ["*"]
CORS_ALLOW_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_ALLOW_HEADERS = ["authorization", "x-client-info", "apikey", "content-type"]


def configure_logging(level: str) -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Create the tables on startup and release pooled connections on shutdown."""

    initialize_database()
    yield
    engine.dispose()


class PreflightMiddleware:
    """Answer every ``OPTIONS`` request with 200 and the fixed CORS headers.

    Preflights naming a method or header outside the allow-list still get 200;
    the browser enforces the advertised lists.
    """

    def __init__(
        self,
        app: ASGIApp,
        *,
        allow_origin: str,
        allow_methods: list[str],
        allow_headers: list[str],
    ) -> None:
        self.app = app
        self.headers = {
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Methods": ", ".join(allow_methods),
            "Access-Control-Allow-Headers": ", ".join(allow_headers),
        }

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http" or scope["method"] != "OPTIONS":
            await self.app(scope, receive, send)
            return
        response = Response(status_code=status.HTTP_200_OK, headers=self.headers)
        await response(scope, receive, send)


def create_app() -> FastAPI:
    """Build and configure the marketplace FastAPI application."""

    settings = get_settings()
    configure_logging(settings.log_level)

    app = FastAPI(title="Marketplace API", lifespan=lifespan)

    # Middleware added last runs first: preflight, then CORS, then the
    # unexpected-error envelope installed by register_exception_handlers.
    register_exception_handlers(app)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ALLOW_ORIGINS,
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )
    app.add_middleware(
        PreflightMiddleware,
        allow_origin=CORS_ALLOW_ORIGINS[0],
        allow_methods=CORS_ALLOW_METHODS,
        allow_headers=CORS_ALLOW_HEADERS,
    )

    register_routes(app)
    return app


app = create_app()
