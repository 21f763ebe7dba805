"""Response shaping for resolved transcripts."""

import html
from typing import Any, Dict, Iterable, List

from .models import CaptionSegment


def normalize_text(segments: Iterable[CaptionSegment]) -> str:
    """
    Join segment text with single spaces and decode HTML entities twice.

    Caption text is frequently entity-encoded twice upstream, so
    ``&amp;amp;`` needs two passes to become ``&``.
    """
    joined = " ".join(segment.text for segment in segments)
    return html.unescape(html.unescape(joined))


def format_timestamp(offset_ms: int) -> str:
    """Render an offset as the ``[MM:SS] `` prefix used in timestamped output."""
    minutes = offset_ms // 60000
    seconds = (offset_ms % 60000) // 1000
    return f"[{minutes:02d}:{seconds:02d}] "


def format_timestamped(segments: Iterable[CaptionSegment]) -> str:
    # Text is left as returned by the fetcher; only full text is decoded.
    return "".join(
        f"{format_timestamp(segment.offset_ms)}{segment.text}\n"
        for segment in segments
    )


def to_raw(segments: Iterable[CaptionSegment]) -> List[Dict[str, Any]]:
    return [segment.to_dict() for segment in segments]
