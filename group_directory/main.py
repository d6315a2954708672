import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.exc import SQLAlchemyError

from group_directory.api import api_router
from group_directory.config import Settings, settings
from group_directory.database import dispose_engine, get_session_factory, init_db
from group_directory.logging_config import setup_logging
from group_directory.repositories import (
    GroupStore,
    InMemoryGroupStore,
    InMemoryUserStore,
    SqlAlchemyGroupStore,
    SqlAlchemyUserStore,
    UserStore,
)
from group_directory.seed import seed_sample_groups

log = logging.getLogger("group_directory.main")


async def build_stores(config: Settings) -> tuple[GroupStore, UserStore]:
    if config.storage_backend == "database":
        await init_db()
        log.info("Using database stores")
        session_factory = get_session_factory()
        return (
            SqlAlchemyGroupStore(session_factory),
            SqlAlchemyUserStore(session_factory),
        )
    log.info("Using in-memory stores")
    return InMemoryGroupStore(), InMemoryUserStore()


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Lifespan context manager for startup and shutdown events."""
    # Startup
    setup_logging(settings.log_level)
    group_store, user_store = await build_stores(settings)
    if settings.seed_sample_data:
        await seed_sample_groups(group_store)
    app.state.group_store = group_store
    app.state.user_store = user_store
    yield
    # Shutdown
    await dispose_engine()


async def validation_exception_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={
            "detail": "Invalid request data",
            "errors": jsonable_encoder(exc.errors()),
        },
    )


async def storage_exception_handler(
    request: Request, exc: SQLAlchemyError
) -> JSONResponse:
    log.exception("Storage failure on %s %s", request.method, request.url.path)
    return JSONResponse(
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        content={"detail": "Storage failure"},
    )


def create_app() -> FastAPI:
    app = FastAPI(title=settings.app_name, lifespan=lifespan)
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["Content-Type"],
    )
    app.add_exception_handler(RequestValidationError, validation_exception_handler)
    app.add_exception_handler(SQLAlchemyError, storage_exception_handler)
    app.include_router(api_router)

    @app.get("/health", tags=["system"])
    async def healthcheck() -> dict[str, str]:
        return {"status": "ok", "app": settings.app_name}

    return app


app = create_app()


def run() -> None:
    import uvicorn

    uvicorn.run("group_directory.main:app", host="0.0.0.0", port=8000)
