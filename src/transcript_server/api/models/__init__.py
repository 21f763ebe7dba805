"""API models package."""

from .base import BaseResponse, ErrorResponse, HealthResponse
from .transcript import (
    TranscriptFormat,
    TranscriptRequest,
    TranscriptSegment,
    TextTranscriptResponse,
    TimestampedTranscriptResponse,
    TranscriptResponse
)

__all__ = [
    # Base models
    "BaseResponse",
    "ErrorResponse",
    "HealthResponse",

    # Transcript models
    "TranscriptFormat",
    "TranscriptRequest",
    "TranscriptSegment",
    "TextTranscriptResponse",
    "TimestampedTranscriptResponse",
    "TranscriptResponse"
]
