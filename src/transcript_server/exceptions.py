"""Custom exceptions for the HTTP surface."""

import json

from .core.errors import TranscriptError, TranscriptErrorKind

MISSING_VIDEO_ID_MESSAGE = "Please provide a valid YouTube video ID"
JSON_REQUIRED_MESSAGE = "Request must be JSON"


class APIError(Exception):
    """Base API exception class."""

    def __init__(
        self,
        detail: str,
        status_code: int = 500,
        error_code: str = "API_ERROR"
    ):
        self.detail = detail
        self.message = detail  # Alias for compatibility
        self.status_code = status_code
        self.error_code = error_code
        super().__init__(detail)

    def to_dict(self) -> dict:
        return {"error": self.message}

    def to_json(self) -> str:
        """Convert error to JSON string."""
        return json.dumps(self.to_dict())


class InvalidRequestError(APIError):
    """Malformed or incomplete request."""

    def __init__(self, detail: str = MISSING_VIDEO_ID_MESSAGE):
        super().__init__(
            detail=detail,
            status_code=400,
            error_code="INVALID_REQUEST"
        )


class NotFoundError(APIError):
    """Resource not found exception."""

    def __init__(self, detail: str = "Resource not found"):
        super().__init__(
            detail=detail,
            status_code=404,
            error_code="NOT_FOUND"
        )


class VideoUnavailableError(NotFoundError):
    """The video cannot be accessed."""

    def __init__(self, detail: str = "The video is unavailable"):
        super().__init__(detail)
        self.error_code = "VIDEO_UNAVAILABLE"


class TranscriptNotFoundError(NotFoundError):
    """Transcript not found exception."""

    def __init__(self, detail: str = "No transcript found for this video"):
        super().__init__(detail)
        self.error_code = "TRANSCRIPT_NOT_FOUND"


class TranscriptsDisabledError(APIError):
    """Captions turned off by the video owner."""

    def __init__(self, detail: str = "Transcripts are disabled for this video"):
        super().__init__(
            detail=detail,
            status_code=403,
            error_code="TRANSCRIPTS_DISABLED"
        )


class InternalServerError(APIError):
    """Internal server error exception."""

    def __init__(self, detail: str = "Internal server error"):
        super().__init__(
            detail=f"An error occurred: {detail}",
            status_code=500,
            error_code="INTERNAL_ERROR"
        )


_ERRORS_BY_KIND = {
    TranscriptErrorKind.VIDEO_UNAVAILABLE: VideoUnavailableError,
    TranscriptErrorKind.NO_TRANSCRIPT: TranscriptNotFoundError,
    TranscriptErrorKind.TRANSCRIPTS_DISABLED: TranscriptsDisabledError,
}


def api_error_from_transcript_error(error: TranscriptError) -> APIError:
    """
    Map a classified transcript failure onto its HTTP error.

    Args:
        error: Failure raised by the fetcher or resolver

    Returns:
        APIError carrying the status code and public message
    """
    error_class = _ERRORS_BY_KIND.get(error.kind)
    if error_class is None:
        return InternalServerError(error.message)
    return error_class()
