import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import Settings, get_settings
from app.db import build_engine, build_session_factory, init_db
from app.routers import health, users


logger = logging.getLogger(__name__)

INVALID_PAYLOAD_DETAIL = "Invalid request payload"


async def invalid_payload_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    """Report undecodable request bodies as a plain 400."""

    logger.debug("Rejected request to %s: %s", request.url.path, exc.errors())
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": INVALID_PAYLOAD_DETAIL},
    )


def create_app(settings: Settings | None = None) -> FastAPI:
    """Build the application together with its own engine and session factory."""

    active_settings = settings or get_settings()
    logging.basicConfig(level=active_settings.log_level.upper())

    engine = build_engine(active_settings)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if active_settings.auto_create_schema:
            init_db(engine)
        yield
        engine.dispose()

    app = FastAPI(
        title=active_settings.app_name,
        version=active_settings.app_version,
        lifespan=lifespan,
    )
    app.state.settings = active_settings
    app.state.engine = engine
    app.state.session_factory = build_session_factory(engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=active_settings.resolved_cors_allowed_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.add_exception_handler(RequestValidationError, invalid_payload_handler)

    app.include_router(users.router)
    app.include_router(health.router)

    return app


app = create_app()
