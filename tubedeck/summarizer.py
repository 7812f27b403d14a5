from typing import List, Tuple

from openai import OpenAI

from tubedeck.config import Config
from tubedeck.errors import GenerationError, SlideConversionError
from tubedeck.models import SlideContent, SlideDeckContent, TitleDescription
from tubedeck.utils.logger import get_logger

logger = get_logger(__name__)

TITLE_SYSTEM_PROMPT = (
    "You are a helpful assistant designed to generate titles and descriptions"
)

SLIDES_SYSTEM_PROMPT = (
    "You are a helpful assistant designed to convert text into objects. "
    "You output JSON based on a schema I provide."
)


class DeckSummarizer:
    def __init__(self, config: Config):
        self.config = config
        self.client = OpenAI(
            api_key=config.OPENAI_API_KEY, timeout=config.OPENAI_TIMEOUT
        )
        self.model = config.OPENAI_MODEL

    def create_title_and_description(self, transcript: str) -> TitleDescription:
        prompt = self._create_title_prompt(transcript)

        logger.debug(
            f"Requesting title and description from {self.model} "
            f"({len(transcript)} transcript characters)"
        )

        try:
            completion = self.client.chat.completions.parse(
                model=self.model,
                messages=[
                    {"role": "system", "content": TITLE_SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                response_format=TitleDescription,
            )
            message = completion.choices[0].message
            if message.refusal:
                logger.warning(f"Model refused title request: {message.refusal}")

            result = message.parsed
            if not result:
                raise ValueError("Completion contained no parsed title and description")

        except Exception as e:
            logger.error(
                f"Title generation failed: {type(e).__name__}: {e}"
            )
            raise GenerationError("Failed to generate title and description") from e

        logger.info(f"Generated title: {result.title}")
        return result

    def convert_to_slides(
        self, text: str, slide_count: int = 10
    ) -> List[SlideContent]:
        if slide_count < 1:
            raise ValueError("Slide count must be at least 1")

        prompt = self._create_slides_prompt(text, slide_count)

        logger.debug(
            f"Requesting {slide_count} slides from {self.model} "
            f"({len(text)} transcript characters)"
        )

        try:
            completion = self.client.chat.completions.parse(
                model=self.model,
                messages=[
                    {"role": "system", "content": SLIDES_SYSTEM_PROMPT},
                    {"role": "user", "content": prompt},
                ],
                response_format=SlideDeckContent,
            )
            message = completion.choices[0].message
            if message.refusal:
                logger.warning(f"Model refused slide request: {message.refusal}")

            result = message.parsed
            if not result:
                raise ValueError("Completion contained no parsed slides")

        except Exception as e:
            logger.error(
                f"Slide conversion failed: {type(e).__name__}: {e}"
            )
            raise SlideConversionError("Failed to convert text to objects") from e

        slides = result.arrayOfObjects
        if len(slides) != slide_count:
            logger.warning(
                f"Requested {slide_count} slides but model returned {len(slides)}"
            )

        logger.info(f"Converted transcript into {len(slides)} slides")
        return slides

    def _create_title_prompt(self, transcript: str) -> str:
        return f"""Generate a title and description for this Powerpoint presentation based on the following transcript.
Requirements:
- Title should be fewer than 20 words
- description should be fewer than 35 words
- Focus on content rather than speaker
- make sure the output is in English

Transcript: {transcript}"""

    def _create_slides_prompt(self, text: str, slide_count: int) -> str:
        return f"""Condense and tidy up the following text to make it suitable for a Powerpoint presentation. Transform it
into an array of objects. I have provided the schema for the output. Make sure that the content array has between 3 and 4 items,
and each content string should be between 160 and 170 characters. You can add to the content based on the transcript.
The length of the array should be {slide_count}.
The text to process is as follows: {text}"""

    @staticmethod
    def dry_run(
        slide_count: int = 10,
    ) -> Tuple[TitleDescription, List[SlideContent]]:
        logger.info("Running in dry-run mode - no API calls will be made")

        title_description = TitleDescription(
            title="[DRY RUN] Presentation title",
            description="[DRY RUN] This would be a short description of the video content.",
        )

        slides = [
            SlideContent(
                title=f"[DRY RUN] Slide {i}",
                content=[
                    "[DRY RUN] Key point 1",
                    "[DRY RUN] Key point 2",
                    "[DRY RUN] Key point 3",
                ],
            )
            for i in range(1, slide_count + 1)
        ]

        return title_description, slides
