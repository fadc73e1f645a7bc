import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy.engine import Engine
from starlette.exceptions import HTTPException as StarletteHTTPException

from .auth.security import get_password_hash
from .config import (
    CORS_ORIGINS,
    DEFAULT_ADMIN_EMAIL,
    DEFAULT_ADMIN_PASSWORD,
    DEFAULT_ADMIN_USERNAME,
)
from .database import Base, create_db_engine, create_session_factory
from .errors import ConstraintViolation
from .models import auth as auth_models  # noqa: F401
from .models import core as core_models  # noqa: F401
from .models import records as records_models  # noqa: F401
from .models.enums import UserRole
from .routes import academics as academics_routes
from .routes import announcements as announcement_routes
from .routes import auth as auth_routes
from .routes import dashboard as dashboard_routes
from .routes import people as people_routes
from .routes import records as records_routes
from .routes import timetable as timetable_routes
from .services.storage import UserRepository
from .utils.logging_config import configure_from_env

logger = logging.getLogger(__name__)


def ensure_default_admin_user(app: FastAPI) -> None:
    """Make sure there is an admin account for the first login."""
    db = app.state.session_factory()
    try:
        users = UserRepository(db)
        if users.get_by_username(DEFAULT_ADMIN_USERNAME):
            return
        users.create(
            {
                "username": DEFAULT_ADMIN_USERNAME,
                "email": DEFAULT_ADMIN_EMAIL,
                "full_name": "Administrator",
                "role": UserRole.ADMIN,
                "password": get_password_hash(DEFAULT_ADMIN_PASSWORD),
                "is_active": True,
            }
        )
        logger.info("Created default admin user %s", DEFAULT_ADMIN_USERNAME)
    finally:
        db.close()


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(app.state.engine)
    ensure_default_admin_user(app)
    yield


def _field_errors(exc: RequestValidationError) -> list:
    errors = []
    for error in exc.errors():
        location, *path = error.get("loc", ()) or ("body",)
        errors.append(
            {
                "location": str(location),
                "field": ".".join(str(part) for part in path),
                "message": error.get("msg", "Invalid value"),
            }
        )
    return errors


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(StarletteHTTPException)
    async def http_exception_handler(request: Request, exc: StarletteHTTPException):
        return JSONResponse(
            status_code=exc.status_code,
            content={"message": exc.detail},
            headers=getattr(exc, "headers", None),
        )

    @app.exception_handler(RequestValidationError)
    async def validation_exception_handler(request: Request, exc: RequestValidationError):
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content=jsonable_encoder({"message": "Validation failed", "errors": _field_errors(exc)}),
        )

    @app.exception_handler(ConstraintViolation)
    async def constraint_exception_handler(request: Request, exc: ConstraintViolation):
        return JSONResponse(status_code=status.HTTP_409_CONFLICT, content={"message": exc.message})

    @app.exception_handler(Exception)
    async def unexpected_exception_handler(request: Request, exc: Exception):
        logger.exception("Unhandled error on %s %s", request.method, request.url.path)
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"message": "Internal server error"},
        )


def create_app(engine: Optional[Engine] = None) -> FastAPI:
    """Build the API. Serve with ``uvicorn school_backend.main:create_app --factory``."""
    configure_from_env()

    app = FastAPI(title="School Management System", lifespan=lifespan)
    app.state.engine = engine if engine is not None else create_db_engine()
    app.state.session_factory = create_session_factory(app.state.engine)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=CORS_ORIGINS,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def log_requests(request: Request, call_next):
        started = time.perf_counter()
        response = await call_next(request)
        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "%s %s -> %s (%.1f ms)",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
        )
        return response

    register_exception_handlers(app)

    @app.get("/api/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(auth_routes.router, prefix="/api", tags=["auth"])
    app.include_router(academics_routes.router, prefix="/api", tags=["academics"])
    app.include_router(people_routes.router, prefix="/api", tags=["people"])
    app.include_router(records_routes.router, prefix="/api", tags=["records"])
    app.include_router(timetable_routes.router, prefix="/api", tags=["timetable"])
    app.include_router(announcement_routes.router, prefix="/api", tags=["announcements"])
    app.include_router(dashboard_routes.router, prefix="/api", tags=["dashboard"])

    return app
