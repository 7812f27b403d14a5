"""
tube-deck: generate PowerPoint decks from YouTube video transcripts

Fetches a video's English subtitle track, condenses the transcript into
slide content with OpenAI structured outputs and renders it with python-pptx.
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .config import Config
from .downloader import TranscriptDownloader, build_transcript
from .summarizer import DeckSummarizer
from .renderer import DeckRenderer
from .pipeline import DeckPipeline, DeckResult

__all__ = [
    "Config",
    "TranscriptDownloader",
    "build_transcript",
    "DeckSummarizer",
    "DeckRenderer",
    "DeckPipeline",
    "DeckResult",
]
