from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import ORJSONResponse

from .config import server
from .core.events import shutdown_event, startup_event
from .errors import (ClientError, DuplicateError, EmptyCategoryError,
                     NotFoundError, StorageError, ValidationError)
from .logger import get_logger
from .routes import health, leaderboard, score, words
from .storage import StorageManager

logger = get_logger(__name__)

CLIENT_ERROR_STATUS = {
    ValidationError: 400,
    DuplicateError: 409,
    NotFoundError: 404,
    EmptyCategoryError: 404,
}


async def client_error_handler(request: Request, exc: ClientError):
    status_code = next(
        (code for kind, code in CLIENT_ERROR_STATUS.items() if isinstance(exc, kind)),
        400,
    )
    logger.warning(f"{request.method} {request.url.path} -> {status_code}: {exc}")
    return ORJSONResponse(status_code=status_code, content={"error": str(exc)})


async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"{request.method} {request.url.path} failed: {exc}")
    return ORJSONResponse(status_code=500, content={"error": "Storage error, please try again later"})


def create_app(manager: Optional[StorageManager] = None) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await startup_event(app)
        yield
        await shutdown_event(app)

    app = FastAPI(
        default_response_class=ORJSONResponse,
        title="Word Game Service",
        description="Word guessing game backed by flat record files",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.storage = manager or StorageManager.from_config()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=server.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ClientError, client_error_handler)
    app.add_exception_handler(StorageError, storage_error_handler)

    app.include_router(health.router)
    app.include_router(words.router)
    app.include_router(score.router)
    app.include_router(leaderboard.router)
    return app


app = create_app()

if __name__ == "__main__":
    import uvicorn

    # Stores are guarded by in-process locks: a single worker only
    uvicorn.run(
        "wordgame.main:app",
        host=server.host,
        port=server.port,
        workers=1,
        log_level=server.log_level.lower(),
    )
