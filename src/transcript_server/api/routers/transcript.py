"""Transcript router for the full variant."""

import json
import logging
from typing import Any, Dict
from fastapi import APIRouter, Depends, Request

from ...api.models.transcript import (
    TranscriptFormat,
    TranscriptRequest,
    TimestampedTranscriptResponse,
    TranscriptResponse
)
from ...api.models.base import ErrorResponse
from ...core.formatting import format_timestamped, normalize_text, to_raw
from ...core.models import ResolvedTranscript
from ...core.resolver import LanguageFallbackResolver
from ...dependencies import get_app_logger, get_resolver
from ...exceptions import InvalidRequestError, JSON_REQUIRED_MESSAGE

router = APIRouter()

ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Missing video ID or malformed body"},
    403: {"model": ErrorResponse, "description": "Transcripts are disabled"},
    404: {"model": ErrorResponse, "description": "Video unavailable or no transcript"},
    500: {"model": ErrorResponse, "description": "Unexpected caption service failure"},
}


def is_json_request(request: Request) -> bool:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";")[0].strip().lower() == "application/json"


def is_form_request(request: Request) -> bool:
    content_type = request.headers.get("content-type", "")
    return content_type.split(";")[0].strip().lower() in (
        "application/x-www-form-urlencoded",
        "multipart/form-data",
    )


async def read_json_body(request: Request) -> Dict[str, Any]:
    """
    Read a JSON object body.

    Raises:
        InvalidRequestError: Wrong content type, unparsable JSON or not an object
    """
    if not is_json_request(request):
        raise InvalidRequestError(JSON_REQUIRED_MESSAGE)
    try:
        data = await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise InvalidRequestError(JSON_REQUIRED_MESSAGE)
    if not isinstance(data, dict):
        raise InvalidRequestError(JSON_REQUIRED_MESSAGE)
    return data


async def read_submitted_fields(request: Request) -> Dict[str, Any]:
    """Read either a JSON object or form fields; anything else yields no fields."""
    if is_json_request(request):
        return await read_json_body(request)
    if is_form_request(request):
        form = await request.form()
        return dict(form)
    return {}


async def resolve_request(
    params: TranscriptRequest,
    resolver: LanguageFallbackResolver
) -> ResolvedTranscript:
    """
    Validate the parameters and run the language fallback.

    Raises:
        InvalidRequestError: ``video_id`` is empty; nothing is fetched
        TranscriptError: Resolution failed
    """
    if not params.video_id:
        raise InvalidRequestError()
    return await resolver.resolve(params.video_id, params.language or None)


@router.post(
    "/get_transcript",
    response_model=TimestampedTranscriptResponse,
    responses=ERROR_RESPONSES
)
async def get_transcript(
    request: Request,
    resolver: LanguageFallbackResolver = Depends(get_resolver),
    logger: logging.Logger = Depends(get_app_logger)
):
    """
    Form endpoint used by the demo page.

    Accepts ``video_id`` and ``language`` as JSON or form fields and returns
    the transcript three ways: timestamped text, full text and raw segments.
    """
    params = TranscriptRequest.from_mapping(await read_submitted_fields(request))
    resolved = await resolve_request(params, resolver)

    logger.info(f"Transcript for {params.video_id} resolved in {resolved.language} ({len(resolved)} segments)")
    return TimestampedTranscriptResponse(
        language=resolved.language,
        transcript=format_timestamped(resolved.segments),
        full_text=normalize_text(resolved.segments),
        raw_transcript=to_raw(resolved.segments)
    )


@router.api_route(
    "/api/transcript",
    methods=["GET", "POST"],
    response_model=TranscriptResponse,
    responses=ERROR_RESPONSES
)
async def api_transcript(
    request: Request,
    resolver: LanguageFallbackResolver = Depends(get_resolver),
    logger: logging.Logger = Depends(get_app_logger)
):
    """
    JSON endpoint returning a video's transcript.

    - GET: ``?video_id=ID&format=raw|full_text&language=CODE``
    - POST: JSON body ``{"video_id": ..., "format": ..., "language": ...}``

    ``format`` defaults to ``raw`` (segments with millisecond ``offset`` and
    ``duration``); ``full_text`` returns one string. ``language`` defaults
    to English, and a missing English transcript falls back to Polish before
    any available track is used.
    """
    if request.method == "POST":
        params = TranscriptRequest.from_mapping(await read_json_body(request))
    else:
        params = TranscriptRequest.from_mapping(request.query_params)

    resolved = await resolve_request(params, resolver)
    output_format = params.output_format

    if output_format is TranscriptFormat.FULL_TEXT:
        transcript = normalize_text(resolved.segments)
    else:
        transcript = to_raw(resolved.segments)

    logger.info(f"Transcript for {params.video_id} served as {output_format.value} in {resolved.language}")
    return TranscriptResponse(
        video_id=params.video_id,
        format=output_format,
        language=resolved.language,
        transcript=transcript
    )
