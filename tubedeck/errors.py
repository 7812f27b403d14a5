"""
Error kinds raised by each stage of the deck pipeline.

Every stage collapses its underlying failures (network errors, malformed
responses, missing structured output) into one error type so callers can
branch on the failing stage instead of matching message strings.
"""

from enum import Enum


class ErrorKind(str, Enum):
    METADATA_FETCH = "metadata_fetch"
    SUBTITLE_PARSE = "subtitle_parse"
    GENERATION = "generation"
    SLIDE_CONVERSION = "slide_conversion"
    RENDER = "render"


class TubeDeckError(Exception):
    kind: ErrorKind

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MetadataFetchError(TubeDeckError):
    kind = ErrorKind.METADATA_FETCH


class NoSubtitlesError(MetadataFetchError):
    """The video has no subtitle track in the requested language"""


class SubtitleParseError(TubeDeckError):
    kind = ErrorKind.SUBTITLE_PARSE


class GenerationError(TubeDeckError):
    kind = ErrorKind.GENERATION


class SlideConversionError(TubeDeckError):
    kind = ErrorKind.SLIDE_CONVERSION


class RenderError(TubeDeckError):
    kind = ErrorKind.RENDER
