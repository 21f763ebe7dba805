"""Unit tests for the language fallback resolver."""

import pytest

from transcript_server.core.errors import (
    NoTranscriptAvailable,
    TranscriptError,
    TranscriptErrorKind,
    TranscriptsDisabled,
    VideoUnavailable
)
from transcript_server.core.models import CaptionSegment
from transcript_server.core.resolver import (
    AUTO_DETECTED_LANGUAGE,
    SECONDARY_FALLBACK_LANGUAGE,
    LanguageFallbackResolver
)

pytestmark = pytest.mark.unit

VIDEO_ID = "dQw4w9WgXcQ"


@pytest.fixture
def resolver(fake_fetcher, mock_logger):
    return LanguageFallbackResolver(fetcher=fake_fetcher, logger=mock_logger)


def test_secondary_fallback_language_is_polish():
    assert SECONDARY_FALLBACK_LANGUAGE == "pl"


class TestPlanAttempts:

    def test_english_tries_polish_before_auto(self, resolver):
        assert resolver.plan_attempts("en") == [
            ("en", "en"),
            ("pl", "pl"),
            (None, AUTO_DETECTED_LANGUAGE),
        ]

    def test_other_language_goes_straight_to_auto(self, resolver):
        assert resolver.plan_attempts("fr") == [
            ("fr", "fr"),
            (None, AUTO_DETECTED_LANGUAGE),
        ]

    def test_configured_secondary_language(self, fake_fetcher, mock_logger):
        resolver = LanguageFallbackResolver(fake_fetcher, mock_logger, secondary_language="de")
        assert [hint for hint, _ in resolver.plan_attempts("en")] == ["en", "de", None]


class TestResolve:
    """Tests for LanguageFallbackResolver.resolve."""

    @pytest.mark.asyncio
    async def test_requested_language_found(self, resolver, fake_fetcher, sample_segments):
        fake_fetcher.set("en", sample_segments)

        result = await resolver.resolve(VIDEO_ID, "en")

        assert result.language == "en"
        assert result.segments == sample_segments
        assert fake_fetcher.calls == [(VIDEO_ID, "en")]

    @pytest.mark.asyncio
    async def test_language_defaults_to_english(self, resolver, fake_fetcher, sample_segments):
        fake_fetcher.set("en", sample_segments)

        result = await resolver.resolve(VIDEO_ID)

        assert result.language == "en"
        assert fake_fetcher.languages_tried == ["en"]

    @pytest.mark.asyncio
    async def test_english_missing_falls_back_to_polish(self, resolver, fake_fetcher, polish_segments):
        fake_fetcher.set("pl", polish_segments)

        result = await resolver.resolve(VIDEO_ID, "en")

        assert result.language == "pl"
        assert result.segments == polish_segments
        assert fake_fetcher.languages_tried == ["en", "pl"]

    @pytest.mark.asyncio
    async def test_english_and_polish_missing_falls_back_to_auto(self, resolver, fake_fetcher, sample_segments):
        fake_fetcher.set(None, sample_segments)

        result = await resolver.resolve(VIDEO_ID, "en")

        assert result.language == AUTO_DETECTED_LANGUAGE
        assert result.segments == sample_segments
        assert fake_fetcher.languages_tried == ["en", "pl", None]

    @pytest.mark.asyncio
    async def test_non_english_never_tries_polish(self, resolver, fake_fetcher, sample_segments, polish_segments):
        fake_fetcher.set("pl", polish_segments)
        fake_fetcher.set(None, sample_segments)

        result = await resolver.resolve(VIDEO_ID, "fr")

        assert result.language == AUTO_DETECTED_LANGUAGE
        assert fake_fetcher.languages_tried == ["fr", None]
        assert "pl" not in fake_fetcher.languages_tried

    @pytest.mark.asyncio
    async def test_polish_request_is_not_special(self, resolver, fake_fetcher):
        with pytest.raises(NoTranscriptAvailable):
            await resolver.resolve(VIDEO_ID, "pl")

        assert fake_fetcher.languages_tried == ["pl", None]

    @pytest.mark.asyncio
    async def test_every_attempt_fails(self, resolver, fake_fetcher):
        with pytest.raises(NoTranscriptAvailable) as exc_info:
            await resolver.resolve(VIDEO_ID, "en")

        assert exc_info.value.kind is TranscriptErrorKind.NO_TRANSCRIPT
        assert str(exc_info.value) == "No transcript found for this video"
        assert fake_fetcher.call_count == 3

    @pytest.mark.asyncio
    async def test_unexpected_failures_fall_through(self, resolver, fake_fetcher, sample_segments):
        fake_fetcher.set("en", RuntimeError("connection reset"))
        fake_fetcher.set("pl", TranscriptError("blocked"))
        fake_fetcher.set(None, sample_segments)

        result = await resolver.resolve(VIDEO_ID, "en")

        assert result.language == AUTO_DETECTED_LANGUAGE

    @pytest.mark.asyncio
    async def test_video_unavailable_stops_the_chain(self, resolver, fake_fetcher, sample_segments):
        fake_fetcher.set("en", VideoUnavailable("gone"))
        fake_fetcher.set("pl", sample_segments)

        with pytest.raises(VideoUnavailable):
            await resolver.resolve(VIDEO_ID, "en")

        assert fake_fetcher.languages_tried == ["en"]

    @pytest.mark.asyncio
    async def test_transcripts_disabled_propagates(self, resolver, fake_fetcher):
        fake_fetcher.set(None, TranscriptsDisabled("off"))

        with pytest.raises(TranscriptsDisabled):
            await resolver.resolve(VIDEO_ID, "en")

        assert fake_fetcher.languages_tried == ["en", "pl", None]

    @pytest.mark.asyncio
    async def test_empty_auto_transcript_is_auto_detected(self, resolver, fake_fetcher):
        fake_fetcher.set(None, [])

        result = await resolver.resolve(VIDEO_ID, "en")

        assert result.language == AUTO_DETECTED_LANGUAGE
        assert result.segments == []

    @pytest.mark.asyncio
    async def test_segment_order_is_preserved(self, resolver, fake_fetcher):
        unordered = [
            CaptionSegment(text="second", offset_ms=5000, duration_ms=100),
            CaptionSegment(text="first", offset_ms=0, duration_ms=100),
        ]
        fake_fetcher.set("en", unordered)

        result = await resolver.resolve(VIDEO_ID, "en")

        assert [segment.text for segment in result.segments] == ["second", "first"]

    @pytest.mark.asyncio
    async def test_fallbacks_are_logged_at_info(self, resolver, fake_fetcher, mock_logger, sample_segments):
        fake_fetcher.set(None, sample_segments)

        await resolver.resolve(VIDEO_ID, "en")

        messages = [call.args[0] for call in mock_logger.info.call_args_list]
        assert messages == [
            f"English transcript not found for {VIDEO_ID}, trying Polish...",
            f"Polish transcript not found for {VIDEO_ID}, trying any available language...",
        ]
        mock_logger.error.assert_not_called()
