"""Data models shared by the deck pipeline stages."""

from dataclasses import dataclass
from typing import List, Optional

from pydantic import BaseModel, Field


@dataclass
class VideoMetadata:
    length: Optional[int] = None  # seconds
    subtitles_url: Optional[str] = None


@dataclass
class SubtitleFragment:
    text: str = ""


@dataclass
class GeneratedFile:
    file_name: str
    file_path: str


# ---------------------------------------------------------------------------
# Video-info API response
# ---------------------------------------------------------------------------


class SubtitleTrack(BaseModel):
    languageCode: Optional[str] = None
    url: Optional[str] = None


class SubtitleList(BaseModel):
    subtitles: List[SubtitleTrack] = Field(default_factory=list)


class VideoInfoResponse(BaseModel):
    lengthSeconds: Optional[int] = None
    subtitles: Optional[SubtitleList] = None

    def find_subtitles_url(self, language: str) -> Optional[str]:
        if self.subtitles is None:
            return None

        for track in self.subtitles.subtitles:
            if track.languageCode == language:
                return track.url or None

        return None


# ---------------------------------------------------------------------------
# Structured model output
# ---------------------------------------------------------------------------


class TitleDescription(BaseModel):
    title: str
    description: str


class SlideContent(BaseModel):
    title: str
    content: List[str]


class SlideDeckContent(BaseModel):
    # Field name is part of the JSON schema the model is asked to follow
    arrayOfObjects: List[SlideContent]
