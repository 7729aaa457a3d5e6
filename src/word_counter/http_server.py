"""
FastAPI HTTP server for Word Counter.

Exposes an upload endpoint that counts the frequency of each unique word in
a plain-text file, plus a health check.
"""

import asyncio
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, File, HTTPException, Request, UploadFile
from fastapi.middleware.cors import CORSMiddleware

from .config import WordCounterSettings, settings as default_settings
from .logging import configure_logging, get_logger
from .models import WordCountResult
from .services.upload import UploadValidationError, read_upload
from .services.word_count import word_counter
from .utils.correlation import (
    CORRELATION_HEADER,
    get_correlation_id,
    reset_correlation_id,
    resolve_correlation_id,
    set_correlation_id,
)
from .utils.time import current_utc
from .version import __version__

SERVER_NAME = "word-counter"

logger = get_logger("http_server")


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Log application startup and shutdown."""
    logger.info(
        "Starting HTTP server",
        server=SERVER_NAME,
        version=__version__,
        environment=app.state.settings.environment,
    )
    yield
    logger.info("Shutting down HTTP server", server=SERVER_NAME)


async def correlation_middleware(request: Request, call_next):
    """Bind a correlation ID to every request and echo it in the response."""
    correlation_id = resolve_correlation_id(request.headers.get(CORRELATION_HEADER))
    token = set_correlation_id(correlation_id)
    try:
        response = await call_next(request)
    finally:
        reset_correlation_id(token)
    response.headers[CORRELATION_HEADER] = correlation_id
    return response


async def health_check(request: Request):
    """Health check endpoint."""
    return {
        "status": "healthy",
        "server": SERVER_NAME,
        "version": __version__,
        "timestamp": current_utc(),
        "correlation_id": get_correlation_id(),
    }


async def upload_file(request: Request, file: UploadFile = File(...)):
    """
    Upload a text file and get the frequency of each unique word in it.

    The file must be a non-empty, UTF-8 encoded `.txt` file no larger than
    the configured size limit (5 MB by default). Words are lower-cased runs
    of Unicode letters; results are returned in no particular order.
    """
    settings: WordCounterSettings = request.app.state.settings
    start_time = time.perf_counter()

    try:
        content = await read_upload(file, settings)
    except UploadValidationError as e:
        logger.error(
            "File validation failed in file endpoint",
            filename=file.filename,
            reason=str(e),
        )
        raise HTTPException(status_code=400, detail=str(e)) from e
    finally:
        await file.close()

    # CPU bound: a 5 MB upload takes about a second
    results = await asyncio.to_thread(word_counter.count_words, content)

    logger.info(
        "Words counted",
        filename=file.filename,
        characters=len(content),
        unique_words=len(results),
        total_words=sum(result.count for result in results),
        elapsed_ms=round((time.perf_counter() - start_time) * 1000, 2),
    )
    return results


def create_app(settings: WordCounterSettings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""
    settings = settings or default_settings
    configure_logging(settings)
    docs_enabled = settings.environment == "development"

    app = FastAPI(
        title="Word Counter",
        description="Counts the frequency of each unique word in uploaded text files",
        version=__version__,
        lifespan=lifespan,
        docs_url="/docs" if docs_enabled else None,
        redoc_url="/redoc" if docs_enabled else None,
        openapi_url="/openapi.json" if docs_enabled else None,
    )
    app.state.settings = settings

    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["GET", "POST"],
        allow_headers=["*"],
        expose_headers=[CORRELATION_HEADER],
    )
    app.middleware("http")(correlation_middleware)

    app.add_api_route("/health", health_check, methods=["GET"])
    app.add_api_route(
        "/wordcount/file",
        upload_file,
        methods=["POST"],
        response_model=list[WordCountResult],
        responses={400: {"description": "The uploaded file was rejected"}},
    )

    logger.debug("Routes registered", docs_enabled=docs_enabled)
    return app


app = create_app()
