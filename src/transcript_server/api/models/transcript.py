"""Transcript request and response models for the API."""

from enum import Enum
from typing import Any, Dict, List, Optional, Union
from pydantic import BaseModel, Field

from .base import BaseResponse


class TranscriptFormat(str, Enum):
    """Output shape of ``/api/transcript``."""
    RAW = "raw"
    FULL_TEXT = "full_text"

    @classmethod
    def parse(cls, value: Optional[str]) -> "TranscriptFormat":
        """Anything other than ``full_text`` means raw segments."""
        if value == cls.FULL_TEXT.value:
            return cls.FULL_TEXT
        return cls.RAW


class TranscriptRequest(BaseModel):
    """Parameters shared by every transcript endpoint."""

    video_id: str = Field(default="", description="YouTube video ID")
    language: str = Field(default="", description="Preferred transcript language")
    format: str = Field(default=TranscriptFormat.RAW.value, description="raw or full_text")

    @classmethod
    def from_mapping(cls, data: Dict[str, Any]) -> "TranscriptRequest":
        """
        Build a request from query parameters, form fields or a JSON object.

        Missing, null and empty values fall back to the field defaults.
        """
        values = {}
        for name in ("video_id", "language", "format"):
            value = data.get(name)
            if value:
                values[name] = str(value)
        return cls(**values)

    @property
    def output_format(self) -> TranscriptFormat:
        return TranscriptFormat.parse(self.format)


class TranscriptSegment(BaseModel):
    """Transcript segment model; times are in milliseconds."""

    text: str
    offset: int = Field(..., description="Start offset in milliseconds")
    duration: int = Field(..., description="Duration in milliseconds")


class TextTranscriptResponse(BaseResponse):
    """Full plain-text transcript (minimal variant)."""

    video_id: str
    language: str
    transcript: str


class TimestampedTranscriptResponse(BaseResponse):
    """Response of the form-posting endpoint."""

    language: str
    transcript: str = Field(..., description="One [MM:SS]-prefixed line per segment")
    full_text: str
    raw_transcript: List[TranscriptSegment] = Field(default_factory=list)


class TranscriptResponse(BaseResponse):
    """Response of the JSON transcript endpoint."""

    video_id: str
    format: TranscriptFormat
    language: str
    transcript: Union[List[TranscriptSegment], str]
