"""Main FastAPI application factory."""

from contextlib import asynccontextmanager
from pathlib import Path
from typing import Optional
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles

from .config import APIConfig, get_api_config, load_config
from .core.errors import TranscriptError
from .core.fetcher import TranscriptFetcher
from .exceptions import APIError, InvalidRequestError, api_error_from_transcript_error
from .middleware import setup_middleware
from .utils.logging import get_logger

STATIC_DIR = Path(__file__).resolve().parent / "static"


@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Application lifespan manager.

    Args:
        app: FastAPI application instance
    """
    logger = app.state.logger
    config = app.state.config
    logger.info(f"Starting {config.title} ({config.variant} variant) on port {config.port}...")
    logger.info(f"Environment: {config.environment}")
    logger.info(f"Debug mode: {config.debug}")

    yield

    logger.info(f"Shutting down {config.title}...")


def register_exception_handlers(app: FastAPI) -> None:
    """Render every handled failure as ``{"error": message}``."""

    @app.exception_handler(InvalidRequestError)
    async def invalid_request_handler(request: Request, exc: InvalidRequestError):
        request.app.state.logger.info(f"Rejected request to {request.url.path}: {exc.message}")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(APIError)
    async def api_error_handler(request: Request, exc: APIError):
        request.app.state.logger.error(f"API Error: {exc.message} (Code: {exc.error_code})")
        return JSONResponse(status_code=exc.status_code, content=exc.to_dict())

    @app.exception_handler(TranscriptError)
    async def transcript_error_handler(request: Request, exc: TranscriptError):
        request.app.state.logger.error(f"Error fetching transcript: {exc.message}")
        error = api_error_from_transcript_error(exc)
        return JSONResponse(status_code=error.status_code, content=error.to_dict())


def create_app(
    config: Optional[APIConfig] = None,
    fetcher: Optional[TranscriptFetcher] = None
) -> FastAPI:
    """
    Create and configure FastAPI application.

    Args:
        config: Explicit configuration; read from the environment when omitted
        fetcher: Transcript fetcher to share across requests

    Returns:
        Configured FastAPI application instance
    """
    config = load_config(config) if config is not None else get_api_config()
    logger = get_logger(config.logger_name, config.log_level)

    app = FastAPI(
        title=config.title,
        description=config.description,
        version=config.version,
        debug=config.debug,
        lifespan=lifespan,
        docs_url="/docs" if config.debug else None,
        redoc_url="/redoc" if config.debug else None
    )
    app.state.config = config
    app.state.logger = logger
    app.state.fetcher = fetcher or TranscriptFetcher()

    setup_middleware(app, config, logger)
    register_exception_handlers(app)

    from .api.routers import health
    app.include_router(health.router, tags=["Health"])

    if config.is_full:
        from .api.routers import pages, transcript
        app.mount("/static", StaticFiles(directory=str(STATIC_DIR)), name="static")
        app.include_router(pages.router, tags=["Pages"])
        app.include_router(transcript.router, tags=["Transcript"])
    else:
        from .api.routers import minimal
        app.include_router(minimal.router, tags=["Transcript"])

    logger.info(f"FastAPI application created ({config.variant} variant)")
    return app


def main() -> None:
    """Run the server with uvicorn."""
    import uvicorn

    config = get_api_config()
    uvicorn.run(
        "transcript_server.app:create_app",
        factory=True,
        host=config.host,
        port=config.port,
        reload=config.debug,
        log_level=config.log_level.lower()
    )


if __name__ == "__main__":
    main()
