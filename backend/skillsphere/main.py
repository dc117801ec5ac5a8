"""
Application entry point for the Skill Sphere backend.

``create_app`` builds the FastAPI application with its own engine, session
factory, password hasher and token issuer, all derived from the settings it
is given.
"""

import logging
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from sqlalchemy.exc import SQLAlchemyError

from skillsphere.core.config import Settings, get_settings
from skillsphere.core.database import (
    check_database_connection,
    create_db_engine,
    create_session_factory,
    init_db
)
from skillsphere.core.exceptions import AppError
from skillsphere.core.logger import setup_logging
from skillsphere.core.security import build_password_hasher, build_token_issuer
from skillsphere.routers import api_router


logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    engine = app.state.engine
    logger.info("Application startup...")

    if check_database_connection(engine):
        init_db(engine)
        logger.info("Database connected")
    else:
        logger.error("Database connection error; requests needing it will fail")

    yield

    engine.dispose()
    logger.info("Shutdown complete.")


def register_exception_handlers(app: FastAPI) -> None:
    @app.exception_handler(AppError)
    async def app_error_handler(request: Request, exc: AppError):
        if exc.status_code >= 500:
            logger.error(f"{request.method} {request.url.path} failed: {exc.message} ({exc.details})")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(RequestValidationError)
    async def request_validation_handler(request: Request, exc: RequestValidationError):
        details = [
            {"loc": list(err.get("loc", ())), "msg": err.get("msg")}
            for err in exc.errors()
        ]
        return JSONResponse(
            status_code=status.HTTP_400_BAD_REQUEST,
            content={"error": "Invalid request body", "details": details},
        )

    @app.exception_handler(SQLAlchemyError)
    async def database_error_handler(request: Request, exc: SQLAlchemyError):
        logger.error(f"Database error on {request.method} {request.url.path}: {exc}")
        return JSONResponse(
            status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
            content={"error": "Database error", "details": str(exc)},
        )


def create_app(settings: Optional[Settings] = None) -> FastAPI:
    settings = settings or get_settings()
    setup_logging(settings.LOG_LEVEL)

    app = FastAPI(
        title=settings.PROJECT_NAME,
        version=settings.VERSION,
        description=settings.DESCRIPTION,
        lifespan=lifespan,
    )

    app.state.settings = settings
    app.state.engine = create_db_engine(settings)
    app.state.session_factory = create_session_factory(app.state.engine)
    app.state.password_hasher = build_password_hasher(settings)
    app.state.token_issuer = build_token_issuer(settings)

    register_exception_handlers(app)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.BACKEND_CORS_ORIGINS,
        allow_credentials=settings.CORS_ALLOW_CREDENTIALS,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    app.include_router(api_router, prefix=settings.API_PREFIX)

    @app.get(f"{settings.API_PREFIX}/test")
    async def test_route():
        return {"message": "Hello from backend!"}

    @app.get("/", response_class=PlainTextResponse)
    async def root():
        return f"{settings.PROJECT_NAME} Backend is running"

    return app


def main():
    settings = get_settings()
    app = create_app(settings)
    logger.info(f"Server is running on port {settings.PORT}")
    uvicorn.run(app, host=settings.HOST, port=settings.PORT)


if __name__ == "__main__":
    main()
