"""
End-to-end pipeline: YouTube video id -> transcript -> slide content -> .pptx
"""

from dataclasses import dataclass
from typing import List, Optional

from tubedeck.config import Config
from tubedeck.downloader import TranscriptDownloader, build_transcript
from tubedeck.errors import NoSubtitlesError, SubtitleParseError
from tubedeck.models import (
    GeneratedFile,
    SlideContent,
    TitleDescription,
    VideoMetadata,
)
from tubedeck.renderer import DeckRenderer
from tubedeck.summarizer import DeckSummarizer
from tubedeck.utils.logger import get_logger

logger = get_logger(__name__)


@dataclass
class DeckResult:
    video_id: str
    metadata: VideoMetadata
    transcript: str
    title_description: TitleDescription
    slides: List[SlideContent]
    output: GeneratedFile


class DeckPipeline:
    def __init__(self, config: Config, dry_run: bool = False):
        self.config = config
        self.dry_run = dry_run
        self.downloader = TranscriptDownloader(config)
        self.summarizer = None if dry_run else DeckSummarizer(config)
        self.renderer = DeckRenderer(config)

    def run(
        self,
        video_id: str,
        user_id: Optional[str] = None,
        slide_count: Optional[int] = None,
        language: Optional[str] = None,
    ) -> DeckResult:
        if user_id is None:
            user_id = self.config.DEFAULT_USER_ID
        if slide_count is None:
            slide_count = self.config.SLIDE_COUNT
        if slide_count < 1:
            raise ValueError("Slide count must be at least 1")

        logger.info("Step 1: Fetching video metadata...")
        metadata = self.downloader.get_video_metadata(video_id, language)
        if not metadata.subtitles_url:
            raise NoSubtitlesError(
                f"No {language or self.config.DEFAULT_LANGUAGE} subtitles available for video {video_id}"
            )

        logger.info("Step 2: Downloading and parsing subtitles...")
        fragments = self.downloader.parse_subtitles(metadata.subtitles_url)
        transcript = build_transcript(fragments)
        if not transcript:
            raise SubtitleParseError("Subtitle track contains no text")
        logger.info(
            f"Transcript assembled from {len(fragments)} fragments "
            f"({len(transcript.split())} words)"
        )

        if self.summarizer is None:
            logger.info("Steps 3-4: Skipping AI generation (dry run)")
            title_description, slides = DeckSummarizer.dry_run(slide_count)
        else:
            logger.info("Step 3: Generating title and description...")
            title_description = self.summarizer.create_title_and_description(
                transcript
            )

            logger.info(f"Step 4: Converting transcript into {slide_count} slides...")
            slides = self.summarizer.convert_to_slides(transcript, slide_count)

        logger.info("Step 5: Rendering presentation...")
        output = self.renderer.create_presentation(
            title_description, slides, user_id
        )

        return DeckResult(
            video_id=video_id,
            metadata=metadata,
            transcript=transcript,
            title_description=title_description,
            slides=slides,
            output=output,
        )
