"""Transcript resolution core: fetching, language fallback and formatting."""

from .errors import (
    TranscriptError,
    TranscriptErrorKind,
    VideoUnavailable,
    TranscriptsDisabled,
    NoTranscriptAvailable
)
from .models import CaptionSegment, ResolvedTranscript
from .fetcher import TranscriptFetcher
from .resolver import (
    LanguageFallbackResolver,
    DEFAULT_LANGUAGE,
    SECONDARY_FALLBACK_LANGUAGE,
    AUTO_DETECTED_LANGUAGE
)
from .formatting import normalize_text, format_timestamp, format_timestamped, to_raw

__all__ = [
    "TranscriptError",
    "TranscriptErrorKind",
    "VideoUnavailable",
    "TranscriptsDisabled",
    "NoTranscriptAvailable",
    "CaptionSegment",
    "ResolvedTranscript",
    "TranscriptFetcher",
    "LanguageFallbackResolver",
    "DEFAULT_LANGUAGE",
    "SECONDARY_FALLBACK_LANGUAGE",
    "AUTO_DETECTED_LANGUAGE",
    "normalize_text",
    "format_timestamp",
    "format_timestamped",
    "to_raw"
]
