import logging
import os

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from dotenv import load_dotenv
from starlette.exceptions import HTTPException

# Load env from leaderjournal/.env
package_dir = os.path.dirname(os.path.abspath(__file__))
if "PYTEST_CURRENT_TEST" not in os.environ:
    load_dotenv(dotenv_path=os.path.join(package_dir, ".env"))

from leaderjournal.core.config import settings, validate_config
from leaderjournal.core.logging import LOGGER_NAME, configure_logging
from leaderjournal.core.middleware.request_id import RequestIdMiddleware
from leaderjournal.core.errors import (
    AppError,
    app_error_handler,
    http_error_handler,
    request_validation_handler,
    unhandled_exception_handler,
)
from leaderjournal.api import health, streaks

configure_logging(settings.ENV)
validate_config(strict=getattr(settings, "CONFIG_STRICT", False))

from contextlib import asynccontextmanager


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger = logging.getLogger(LOGGER_NAME)
    logger.info("Starting leader journal backend...")
    try:
        yield
    finally:
        logging.getLogger(LOGGER_NAME).info("Stopping leader journal backend...")


app = FastAPI(title="Leader Journal - Backend", lifespan=lifespan)

app.add_middleware(RequestIdMiddleware)

app.add_exception_handler(AppError, app_error_handler)
app.add_exception_handler(RequestValidationError, request_validation_handler)
app.add_exception_handler(HTTPException, http_error_handler)
app.add_exception_handler(Exception, unhandled_exception_handler)

# CORS (adjust origins in production)
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.FRONTEND_ORIGIN],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(streaks.router)
app.include_router(health.root_router)


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("leaderjournal.main:app", host="0.0.0.0", port=int(os.getenv("PORT", "8000")), reload=settings.ENV == "development")
