"""Classified failures raised while fetching and resolving transcripts."""

from enum import Enum
from typing import Optional


class TranscriptErrorKind(Enum):
    """Distinguishable reasons a transcript could not be returned."""
    VIDEO_UNAVAILABLE = "video_unavailable"
    NO_TRANSCRIPT = "no_transcript"
    TRANSCRIPTS_DISABLED = "transcripts_disabled"
    UNKNOWN = "unknown"


# Kinds that describe the video itself; another language cannot help.
VIDEO_LEVEL_KINDS = frozenset({
    TranscriptErrorKind.VIDEO_UNAVAILABLE,
    TranscriptErrorKind.TRANSCRIPTS_DISABLED,
})


class TranscriptError(Exception):
    """Base class for transcript-related errors."""

    kind = TranscriptErrorKind.UNKNOWN

    def __init__(self, message: str, kind: Optional[TranscriptErrorKind] = None):
        super().__init__(message)
        self.message = message
        if kind is not None:
            self.kind = kind

    @property
    def is_video_level(self) -> bool:
        return self.kind in VIDEO_LEVEL_KINDS


class VideoUnavailable(TranscriptError):
    """The video cannot be accessed at all."""
    kind = TranscriptErrorKind.VIDEO_UNAVAILABLE


class TranscriptsDisabled(TranscriptError):
    """The owner turned captions off for this video."""
    kind = TranscriptErrorKind.TRANSCRIPTS_DISABLED


class NoTranscriptAvailable(TranscriptError):
    """No caption track could be found in any attempted language."""
    kind = TranscriptErrorKind.NO_TRANSCRIPT

    def __init__(self, message: str = "No transcript found for this video"):
        super().__init__(message)
