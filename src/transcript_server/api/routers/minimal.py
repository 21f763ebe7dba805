"""Transcript router for the minimal variant: one GET endpoint, plain text only."""

import logging
from fastapi import APIRouter, Depends, Request

from ...api.models.transcript import TranscriptRequest, TextTranscriptResponse
from ...core.formatting import normalize_text
from ...core.resolver import LanguageFallbackResolver
from ...dependencies import get_app_logger, get_resolver
from .transcript import ERROR_RESPONSES, resolve_request

router = APIRouter()


@router.get("/api/transcript", response_model=TextTranscriptResponse, responses=ERROR_RESPONSES)
async def get_transcript_text(
    request: Request,
    resolver: LanguageFallbackResolver = Depends(get_resolver),
    logger: logging.Logger = Depends(get_app_logger)
):
    """Return the whole transcript as one decoded string."""
    params = TranscriptRequest.from_mapping(request.query_params)
    resolved = await resolve_request(params, resolver)

    logger.info(f"Transcript for {params.video_id} resolved in {resolved.language}")
    return TextTranscriptResponse(
        video_id=params.video_id,
        language=resolved.language,
        transcript=normalize_text(resolved.segments)
    )
