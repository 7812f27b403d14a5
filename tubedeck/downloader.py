import html
import re
import xml.etree.ElementTree as ET
from typing import List, Optional

import requests

from tubedeck.config import Config
from tubedeck.errors import MetadataFetchError, SubtitleParseError
from tubedeck.models import SubtitleFragment, VideoInfoResponse, VideoMetadata
from tubedeck.utils.logger import get_logger

logger = get_logger(__name__)


class TranscriptDownloader:
    def __init__(self, config: Config):
        self.config = config

    def get_video_metadata(
        self, video_id: str, language: Optional[str] = None
    ) -> VideoMetadata:
        language = language or self.config.DEFAULT_LANGUAGE

        try:
            response = requests.get(
                self.config.video_info_url,
                params={"id": video_id},
                headers={
                    "x-rapidapi-key": self.config.RAPID_API_KEY,
                    "x-rapidapi-host": self.config.RAPID_API_HOST,
                },
                timeout=self.config.REQUEST_TIMEOUT,
            )
            response.raise_for_status()

            info = VideoInfoResponse.model_validate(response.json())

        except Exception as e:
            logger.error(f"Error fetching video info for {video_id}: {e}")
            raise MetadataFetchError(
                "Failed to get video length and subtitles"
            ) from e

        metadata = VideoMetadata(
            length=info.lengthSeconds,
            subtitles_url=info.find_subtitles_url(language),
        )

        if metadata.subtitles_url is None:
            logger.debug(f"No '{language}' subtitle track listed for {video_id}")

        logger.info(
            f"Fetched metadata for {video_id}: length={metadata.length}s, "
            f"subtitles={'yes' if metadata.subtitles_url else 'no'}"
        )
        return metadata

    def parse_subtitles(self, url: str) -> List[SubtitleFragment]:
        try:
            response = requests.get(url, timeout=self.config.REQUEST_TIMEOUT)
            response.raise_for_status()

            root = ET.fromstring(response.text)

        except Exception as e:
            logger.error(f"Error parsing subtitle document: {e}")
            raise SubtitleParseError("Failed to parse XML content") from e

        # Match on local name so namespaced timed-text documents still parse
        fragments = [
            SubtitleFragment(text="".join(element.itertext()))
            for element in root.iter()
            if isinstance(element.tag, str) and element.tag.rsplit("}", 1)[-1] == "text"
        ]

        logger.debug(f"Parsed {len(fragments)} subtitle fragments")
        return fragments

    def download_transcript(
        self, video_id: str, language: Optional[str] = None
    ) -> str:
        metadata = self.get_video_metadata(video_id, language)
        if not metadata.subtitles_url:
            return ""

        return build_transcript(self.parse_subtitles(metadata.subtitles_url))


def build_transcript(fragments: List[SubtitleFragment]) -> str:
    """Join subtitle fragments into one space-separated transcript.

    Timed-text documents escape entities twice (``&amp;#39;``), so each
    fragment is unescaped once more after XML parsing. Whitespace inside a
    fragment is collapsed and blank fragments are dropped.
    """
    parts = []
    for fragment in fragments:
        text = re.sub(r"\s+", " ", html.unescape(fragment.text)).strip()
        if text:
            parts.append(text)

    return " ".join(parts)
