"""Middleware for the FastAPI application."""

import time
import uuid
import logging
from fastapi import Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint

from .config import APIConfig
from .exceptions import APIError, InternalServerError


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware for logging HTTP requests and responses."""

    def __init__(self, app, logger: logging.Logger):
        super().__init__(app)
        self.logger = logger

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint
    ) -> Response:
        """
        Process request and log details.

        Args:
            request: FastAPI request object
            call_next: Next middleware/endpoint

        Returns:
            Response object
        """
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id

        start_time = time.time()
        client_ip = request.client.host if request.client else "unknown"

        self.logger.info(
            f"Request started - ID: {request_id}, "
            f"Method: {request.method}, "
            f"URL: {request.url}, "
            f"Client IP: {client_ip}"
        )

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.time() - start_time
            self.logger.error(
                f"Request failed - ID: {request_id}, "
                f"Error: {str(e)}, "
                f"Duration: {process_time:.3f}s"
            )
            raise

        process_time = time.time() - start_time
        self.logger.info(
            f"Request completed - ID: {request_id}, "
            f"Status: {response.status_code}, "
            f"Duration: {process_time:.3f}s"
        )

        response.headers["X-Request-ID"] = request_id
        return response


class ErrorHandlingMiddleware(BaseHTTPMiddleware):
    """Turns anything the exception handlers did not catch into a JSON error."""

    def __init__(self, app, logger: logging.Logger):
        super().__init__(app)
        self.logger = logger

    async def dispatch(
        self,
        request: Request,
        call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)

        except APIError as e:
            self.logger.warning(f"API Error: {e.message} (Code: {e.error_code})")
            return JSONResponse(status_code=e.status_code, content=e.to_dict())

        except Exception as e:
            request_id = getattr(request.state, "request_id", "unknown")
            self.logger.error(f"Unexpected error in request {request_id}: {str(e)}")
            error = InternalServerError(str(e))
            return JSONResponse(status_code=error.status_code, content=error.to_dict())


def setup_cors_middleware(app, config: APIConfig) -> None:
    """
    Setup CORS middleware for the application.

    Args:
        app: FastAPI application instance
        config: API configuration
    """
    app.add_middleware(
        CORSMiddleware,
        allow_origins=config.cors_origins,
        allow_credentials="*" not in config.cors_origins,
        allow_methods=["GET", "POST", "OPTIONS"],
        allow_headers=["*"],
        expose_headers=["X-Request-ID"]
    )


def setup_middleware(app, config: APIConfig, logger: logging.Logger) -> None:
    """
    Setup all middleware for the application.

    Args:
        app: FastAPI application instance
        config: API configuration
        logger: Process-wide application logger
    """
    # Last added = first executed

    # Error handling (innermost, closest to routes)
    app.add_middleware(ErrorHandlingMiddleware, logger=logger)

    # Request logging
    app.add_middleware(RequestLoggingMiddleware, logger=logger)

    # CORS (outermost)
    setup_cors_middleware(app, config)

    logger.info("Middleware setup completed")
