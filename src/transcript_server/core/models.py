"""Transcript data structures shared by the fetcher, resolver and formatters."""

from dataclasses import dataclass, field
from typing import Any, Dict, List


@dataclass(frozen=True)
class CaptionSegment:
    """One timed unit of caption text. Offsets and durations are in milliseconds."""
    text: str
    offset_ms: int
    duration_ms: int

    @classmethod
    def from_seconds(cls, text: str, start: float, duration: float) -> "CaptionSegment":
        """Build a segment from the second-based floats the caption client returns."""
        return cls(
            text=text,
            offset_ms=int(round(start * 1000)),
            duration_ms=int(round(duration * 1000))
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "text": self.text,
            "offset": self.offset_ms,
            "duration": self.duration_ms
        }


@dataclass
class ResolvedTranscript:
    """A transcript together with the language it was actually found in."""
    language: str
    segments: List[CaptionSegment] = field(default_factory=list)

    def __len__(self) -> int:
        return len(self.segments)
