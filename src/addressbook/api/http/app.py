"""FastAPI application factory and setup."""

import time
import uuid
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from loguru import logger

from src.addressbook import __version__
from src.addressbook.api.http.app_data import ApplicationDependencies, build_dependencies
from src.addressbook.api.http.errors import register_exception_handlers
from src.addressbook.api.http.routers import addresses, contacts, health, users
from src.addressbook.api.utils.app_startup import configure_logging
from src.addressbook.runtime.config.config_data import ConfigData
from src.addressbook.runtime.config.config_template import load_config

REQUEST_ID_HEADER = "X-Request-ID"


def _client_ip(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else "unknown"


def _elapsed_ms(started: float) -> float:
    return round((time.perf_counter() - started) * 1000, 1)


async def log_requests(request: Request, call_next):
    """Log one start and one end line per request, tagged with a request id.

    The id is taken from ``X-Request-ID`` when the caller sends one and is
    echoed back on the response.
    """
    request_id = request.headers.get(REQUEST_ID_HEADER) or str(uuid.uuid4())
    started = time.perf_counter()

    with logger.contextualize(
        request_id=request_id,
        method=request.method,
        path=request.url.path,
        client_ip=_client_ip(request),
    ):
        logger.info("request.start")
        try:
            response = await call_next(request)
        except Exception as exc:
            logger.bind(
                status_code=500,
                duration_ms=_elapsed_ms(started),
                error_type=type(exc).__name__,
            ).exception("request.error")
            raise

        logger.bind(
            status_code=response.status_code, duration_ms=_elapsed_ms(started)
        ).info("request.end")

    response.headers.setdefault(REQUEST_ID_HEADER, request_id)
    return response


def create_app(
    config: ConfigData, dependencies: ApplicationDependencies | None = None
) -> FastAPI:
    """Build the application around an explicit configuration.

    Args:
        config: Configuration loaded once at startup.
        dependencies: Pre-built collaborators; built from ``config`` when omitted.
    """
    configure_logging(config)
    deps = dependencies or build_dependencies(config)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Starting up application in {} environment", config.app.environment)
        if config.database.create_tables:
            deps.database_service.create_all()
        try:
            yield
        finally:
            logger.info("Shutting down application")
            deps.database_service.dispose()

    is_production = config.app.environment == "production"
    app = FastAPI(
        title="Address Book API",
        description="RESTful API for managing users, contacts, and addresses.",
        version=__version__,
        lifespan=lifespan,
        docs_url=None if is_production else "/docs",
        redoc_url=None if is_production else "/redoc",
    )
    app.state.app_dependencies = deps

    if is_production and "*" in config.app.cors.origins:
        raise RuntimeError(
            "CORS misconfigured: cannot use '*' with allow_credentials=True in production"
        )

    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.app.cors.origins,
        allow_credentials=config.app.cors.allow_credentials,
        allow_methods=config.app.cors.allow_methods,
        allow_headers=config.app.cors.allow_headers,
    )
    app.middleware("http")(log_requests)

    register_exception_handlers(app)

    prefix = config.app.api_prefix.rstrip("/")
    app.include_router(users.router, prefix=prefix)
    app.include_router(contacts.router, prefix=prefix)
    app.include_router(addresses.router, prefix=prefix)
    app.include_router(health.router)

    return app


def build_app() -> FastAPI:
    """Factory for ASGI servers: loads the configuration from the environment."""
    return create_app(load_config())
