"""Language fallback over the transcript fetcher."""

import logging
from typing import List, Optional, Tuple

from .errors import NoTranscriptAvailable, TranscriptError
from .fetcher import TranscriptFetcher
from .models import ResolvedTranscript

DEFAULT_LANGUAGE = "en"

# Tried after English when an English transcript is missing.
SECONDARY_FALLBACK_LANGUAGE = "pl"

AUTO_DETECTED_LANGUAGE = "auto-detected"

LANGUAGE_NAMES = {
    "en": "English",
    "pl": "Polish",
}


class LanguageFallbackResolver:
    """
    Resolves a transcript by trying, in order: the requested language, the
    secondary fallback language (only when the requested language is the
    default one), and finally whatever track the fetcher picks on its own.
    """

    def __init__(
        self,
        fetcher: TranscriptFetcher,
        logger: logging.Logger,
        default_language: str = DEFAULT_LANGUAGE,
        secondary_language: str = SECONDARY_FALLBACK_LANGUAGE
    ):
        self.fetcher = fetcher
        self.logger = logger
        self.default_language = default_language
        self.secondary_language = secondary_language

    def plan_attempts(self, requested_language: str) -> List[Tuple[Optional[str], str]]:
        """
        Build the ordered (language hint, reported language) attempts.

        Args:
            requested_language: Language the caller asked for

        Returns:
            List of attempts; a ``None`` hint means no language constraint
        """
        attempts = [(requested_language, requested_language)]
        if requested_language == self.default_language:
            attempts.append((self.secondary_language, self.secondary_language))
        attempts.append((None, AUTO_DETECTED_LANGUAGE))
        return attempts

    async def resolve(self, video_id: str, requested_language: Optional[str] = None) -> ResolvedTranscript:
        """
        Fetch a transcript, falling back through the attempt plan.

        Args:
            video_id: YouTube video identifier
            requested_language: Preferred language code, defaults to English

        Returns:
            The first transcript found and the language it is reported in

        Raises:
            TranscriptError: Video-level failures (unavailable, captions disabled)
            NoTranscriptAvailable: Every attempt failed
        """
        requested_language = requested_language or self.default_language
        attempts = self.plan_attempts(requested_language)

        for index, (hint, reported_language) in enumerate(attempts):
            try:
                segments = await self.fetcher.fetch(video_id, hint)
            except Exception as e:
                if isinstance(e, TranscriptError) and e.is_video_level:
                    raise
                self.logger.debug(f"Attempt {index + 1} for {video_id} failed: {e}")
                if index + 1 < len(attempts):
                    self.logger.info(self._fallback_message(video_id, hint, attempts[index + 1][0]))
                continue

            return ResolvedTranscript(language=reported_language, segments=segments)

        raise NoTranscriptAvailable()

    def _fallback_message(self, video_id: str, failed: Optional[str], following: Optional[str]) -> str:
        failed_name = LANGUAGE_NAMES.get(failed, failed)
        if following is None:
            return f"{failed_name} transcript not found for {video_id}, trying any available language..."
        return f"{failed_name} transcript not found for {video_id}, trying {LANGUAGE_NAMES.get(following, following)}..."
