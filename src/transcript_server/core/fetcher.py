"""
Caption retrieval through youtube-transcript-api.

The client is synchronous, so every call is pushed onto a worker thread with
``asyncio.to_thread``. Client exceptions are translated into the classified
errors from :mod:`transcript_server.core.errors` so callers never need to
look at message text.
"""

import asyncio
from typing import Iterable, List, Optional

from youtube_transcript_api import (
    YouTubeTranscriptApi,
    InvalidVideoId,
    NoTranscriptFound,
    TranscriptsDisabled,
    VideoUnavailable,
)

from . import errors
from .models import CaptionSegment


class TranscriptFetcher:
    """Fetches one caption track for a video, optionally constrained to a language."""

    def __init__(self, client: Optional[YouTubeTranscriptApi] = None):
        self._client = client or YouTubeTranscriptApi()

    async def fetch(self, video_id: str, language: Optional[str] = None) -> List[CaptionSegment]:
        """
        Fetch the caption segments for a video.

        Args:
            video_id: YouTube video identifier, forwarded as-is
            language: Language code to request; ``None`` lets the client pick
                the first track it lists

        Returns:
            Caption segments in the order the client returned them

        Raises:
            TranscriptError: Classified failure from the caption client
        """
        return await asyncio.to_thread(self.fetch_sync, video_id, language)

    def fetch_sync(self, video_id: str, language: Optional[str] = None) -> List[CaptionSegment]:
        try:
            if language:
                snippets = self._client.fetch(video_id, languages=[language])
            else:
                snippets = self._fetch_first_available(video_id)
        except (VideoUnavailable, InvalidVideoId) as e:
            raise errors.VideoUnavailable(f"Video {video_id} is unavailable: {e}") from e
        except TranscriptsDisabled as e:
            raise errors.TranscriptsDisabled(f"Transcripts are disabled for video {video_id}") from e
        except NoTranscriptFound as e:
            raise errors.TranscriptError(
                f"No transcript found for video {video_id} in language {language!r}",
                kind=errors.TranscriptErrorKind.NO_TRANSCRIPT
            ) from e
        except errors.TranscriptError:
            raise
        except Exception as e:
            raise errors.TranscriptError(str(e)) from e

        return to_segments(snippets)

    def _fetch_first_available(self, video_id: str):
        transcript_list = self._client.list(video_id)
        # Manually created tracks are listed before generated ones.
        transcript = next(iter(transcript_list), None)
        if transcript is None:
            raise errors.TranscriptError(
                f"No transcript tracks listed for video {video_id}",
                kind=errors.TranscriptErrorKind.NO_TRANSCRIPT
            )
        return transcript.fetch()


def to_segments(snippets: Iterable) -> List[CaptionSegment]:
    """Convert client snippets (``text``, ``start``, ``duration`` in seconds) to segments."""
    return [
        CaptionSegment.from_seconds(snippet.text, snippet.start, snippet.duration)
        for snippet in snippets
    ]
