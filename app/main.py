import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request, status
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from app.core.config import settings
from app.core.errors import DriveEmailInUse, NotFoundOrForbidden, UsernameTaken
from app.core.logging_config import configure_logging
from app.db.store import DataStore
from app.api.v1.api import api_router
from app.services.backup_service import InvalidSnapshot

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    configure_logging()
    # One store for the life of the process; nothing survives a restart
    app.state.store = DataStore()
    logger.info("%s started (%s)", settings.PROJECT_NAME, settings.ENVIRONMENT)
    yield
    logger.info("%s stopped", settings.PROJECT_NAME)


app = FastAPI(
    title=settings.PROJECT_NAME,
    version=settings.PROJECT_VERSION,
    description=settings.DESCRIPTION,
    lifespan=lifespan
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


def _error(status_code: int, exc: Exception) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"detail": str(exc)})


@app.exception_handler(NotFoundOrForbidden)
async def not_found_handler(request: Request, exc: NotFoundOrForbidden):
    return _error(status.HTTP_404_NOT_FOUND, exc)


@app.exception_handler(DriveEmailInUse)
async def drive_email_in_use_handler(request: Request, exc: DriveEmailInUse):
    return _error(status.HTTP_409_CONFLICT, exc)


@app.exception_handler(UsernameTaken)
async def username_taken_handler(request: Request, exc: UsernameTaken):
    return _error(status.HTTP_400_BAD_REQUEST, exc)


@app.exception_handler(InvalidSnapshot)
async def invalid_snapshot_handler(request: Request, exc: InvalidSnapshot):
    return _error(status.HTTP_400_BAD_REQUEST, exc)


@app.get("/")
async def root():
    return {"message": f"Welcome to {settings.PROJECT_NAME}"}

app.include_router(api_router, prefix=settings.API_V1_STR)
