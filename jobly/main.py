# main.py
import logging
from pathlib import Path

from dotenv import load_dotenv

# Ensure repo-root .env is loaded for the running server process.
load_dotenv(dotenv_path=Path(__file__).resolve().parents[1] / ".env")

from fastapi import FastAPI, Request, status
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from jobly.config import settings
from jobly.config import build_sqlalchemy_db_url
from jobly.database import create_tables
from jobly.models import Company, Job, User  # noqa: F401  # register tables on Base.metadata
from jobly.api.routes.health import router as health_router
from jobly.routers import auth, companies, jobs, users

logger = logging.getLogger(__name__)


async def _validation_error_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    # Payload contract violations are a client error (400), not 422.
    logger.info("request.invalid path=%s errors=%d", request.url.path, len(exc.errors()))
    return JSONResponse(
        status_code=status.HTTP_400_BAD_REQUEST,
        content={"detail": jsonable_encoder(exc.errors())},
    )


def create_app() -> FastAPI:
    logging.basicConfig(
        level=getattr(logging, settings.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)-8s %(name)s - %(message)s",
    )

    application = FastAPI(
        title=settings.app_name,
        version=settings.version,
        debug=settings.debug,
    )
    application.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    application.add_exception_handler(RequestValidationError, _validation_error_handler)

    application.include_router(health_router)
    application.include_router(auth.router, prefix="/users", tags=["auth"])
    application.include_router(users.router, prefix="/users", tags=["users"])
    application.include_router(companies.router)
    application.include_router(jobs.router)

    # Shared MySQL schemas are managed explicitly (scripts/create_orm_tables.py).
    # For local/test sqlite usage, auto-create ORM tables is still convenient.
    db_url = build_sqlalchemy_db_url(settings)
    if db_url.startswith("sqlite"):
        create_tables()
    return application


app = create_app()
