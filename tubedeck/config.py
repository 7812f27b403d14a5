import os
import re
import tempfile
from typing import Optional
from dotenv import load_dotenv

load_dotenv()


class Config:
    def __init__(self):
        self.OPENAI_API_KEY: str = os.getenv("OPENAI_API_KEY", "")
        self.OPENAI_MODEL: str = os.getenv("OPENAI_MODEL", "gpt-4o-mini")
        self.OPENAI_TIMEOUT: int = int(os.getenv("OPENAI_TIMEOUT", "30"))

        self.RAPID_API_KEY: str = os.getenv("RAPID_API_KEY", "")
        self.RAPID_API_HOST: str = os.getenv("RAPID_API_HOST", "yt-api.p.rapidapi.com")
        self.REQUEST_TIMEOUT: int = int(os.getenv("REQUEST_TIMEOUT", "30"))

        self.LOG_LEVEL: str = os.getenv("LOG_LEVEL", "INFO")

        self.SLIDE_COUNT: int = int(os.getenv("SLIDE_COUNT", "10"))
        self.DEFAULT_LANGUAGE: str = os.getenv("DEFAULT_LANGUAGE", "en")
        self.DEFAULT_USER_ID: str = os.getenv("DEFAULT_USER_ID", "anonymous")

        self.OUTPUT_DIR: str = os.getenv("OUTPUT_DIR", tempfile.gettempdir())

    def validate(self, require_openai: bool = True) -> None:
        if require_openai and not self.OPENAI_API_KEY:
            raise ValueError("OPENAI_API_KEY environment variable is required")

        if not self.RAPID_API_KEY:
            raise ValueError("RAPID_API_KEY environment variable is required")

        if self.SLIDE_COUNT < 1:
            raise ValueError("SLIDE_COUNT must be at least 1")

        os.makedirs(self.OUTPUT_DIR, exist_ok=True)

    @property
    def video_info_url(self) -> str:
        return f"https://{self.RAPID_API_HOST}/video/info"

    def get_output_path(self, file_name: str, output_dir: Optional[str] = None) -> str:
        """Get the path a generated presentation is written to"""
        return os.path.join(output_dir or self.OUTPUT_DIR, file_name)

    @classmethod
    def get_video_id_from_url(cls, url: str) -> str:
        url = url.strip()

        # If it's already just a video ID (11 characters, alphanumeric + - and _)
        if re.match(r'^[a-zA-Z0-9_-]{11}$', url):
            return url

        patterns = [
            r'(?:youtube\.com/watch\?v=|youtu\.be/|youtube\.com/embed/|youtube\.com/shorts/)([^&\n?#/]+)',
            r'youtube\.com/watch\?.*v=([^&\n?#]+)'
        ]

        for pattern in patterns:
            match = re.search(pattern, url)
            if match:
                return match.group(1)

        raise ValueError(f"Could not extract video ID from URL: {url}")
