"""FastAPI dependencies for service injection."""

import logging
from fastapi import Depends, Request

from .config import APIConfig
from .core.fetcher import TranscriptFetcher
from .core.resolver import LanguageFallbackResolver


def get_config(request: Request) -> APIConfig:
    """Configuration the running application was created with."""
    return request.app.state.config


def get_app_logger(request: Request) -> logging.Logger:
    """Process-scoped logger created by the application factory."""
    return request.app.state.logger


def get_transcript_fetcher(request: Request) -> TranscriptFetcher:
    """
    Get the shared transcript fetcher.

    Args:
        request: Incoming request

    Returns:
        TranscriptFetcher instance
    """
    return request.app.state.fetcher


def get_resolver(
    fetcher: TranscriptFetcher = Depends(get_transcript_fetcher),
    logger: logging.Logger = Depends(get_app_logger),
    config: APIConfig = Depends(get_config)
) -> LanguageFallbackResolver:
    """
    Build a language fallback resolver for the current request.

    Args:
        fetcher: Transcript fetcher
        logger: Application logger
        config: API configuration

    Returns:
        LanguageFallbackResolver instance
    """
    return LanguageFallbackResolver(
        fetcher=fetcher,
        logger=logger,
        default_language=config.default_language,
        secondary_language=config.secondary_language
    )
