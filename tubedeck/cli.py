#!/usr/bin/env python3

import argparse
import os
import subprocess
import sys
from pathlib import Path

from dotenv import load_dotenv

from tubedeck.config import Config
from tubedeck.errors import TubeDeckError
from tubedeck.pipeline import DeckPipeline
from tubedeck.utils.logger import setup_logger

COMMANDS = ("init", "config")


def get_config_dir():
    """Get the configuration directory for tube-deck"""
    return Path.home() / ".tube-deck"


def init_command():
    """Prompt for API keys and write the user .env file"""
    config_dir = get_config_dir()
    config_dir.mkdir(exist_ok=True)
    env_path = config_dir / ".env"

    if env_path.exists():
        response = input(f"{env_path} already exists. Overwrite? (y/N): ").strip().lower()
        if response != 'y':
            print("Keeping existing configuration")
            return

    openai_key = input("OpenAI API key: ").strip()
    rapid_key = input("RapidAPI key (yt-api): ").strip()

    if not openai_key or not rapid_key:
        print("Both API keys are required, nothing written")
        return

    config_content = f"""OPENAI_API_KEY={openai_key}
RAPID_API_KEY={rapid_key}

OPENAI_MODEL=gpt-4o-mini
OPENAI_TIMEOUT=30
RAPID_API_HOST=yt-api.p.rapidapi.com
REQUEST_TIMEOUT=30
LOG_LEVEL=INFO

SLIDE_COUNT=10
DEFAULT_LANGUAGE=en
DEFAULT_USER_ID=anonymous
"""

    with open(env_path, 'w') as f:
        f.write(config_content)

    print(f"Configuration saved to {env_path}")


def config_command():
    """Open the user .env file in $EDITOR"""
    env_path = get_config_dir() / ".env"

    if not env_path.exists():
        print(f"No configuration at {env_path}, run 'tube-deck init' first")
        return

    editor = os.environ.get('EDITOR', 'nano')
    try:
        subprocess.run([editor, str(env_path)], check=True)
    except (subprocess.CalledProcessError, FileNotFoundError):
        print(f"Could not open editor '{editor}', edit {env_path} manually")


def build_parser():
    parser = argparse.ArgumentParser(
        prog="tube-deck",
        description="Generate PowerPoint decks from YouTube video transcripts",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  tube-deck init                                    # Setup with API key prompts
  tube-deck config                                  # Edit configuration file
  tube-deck "https://www.youtube.com/watch?v=VIDEO_ID"
  tube-deck VIDEO_ID --slides 8 --user-id t42
  tube-deck "https://youtu.be/VIDEO_ID" --dry-run --output-dir decks
        """
    )

    # 'init' and 'config' are matched against this positional in main()
    parser.add_argument(
        "url_or_id",
        nargs='?',
        help="YouTube URL or video ID, or one of: " + ", ".join(COMMANDS)
    )

    parser.add_argument(
        "--slides",
        type=int,
        help="Number of content slides to generate (default: 10)"
    )

    parser.add_argument(
        "--user-id",
        help="User identifier embedded in the output file name"
    )

    parser.add_argument(
        "--language",
        help="Subtitle language code (default: en)"
    )

    parser.add_argument(
        "--model",
        help="OpenAI model used for generation (default: gpt-4o-mini)"
    )

    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Skip OpenAI calls and render placeholder slides"
    )

    parser.add_argument(
        "--log-level",
        choices=["DEBUG", "INFO", "WARNING", "ERROR"],
        help="Logging level"
    )

    parser.add_argument(
        "--output-dir",
        help="Directory the presentation is written to (default: system temp dir)"
    )

    return parser


def parse_arguments(argv=None):
    return build_parser().parse_args(argv)


def validate_args(args, config):
    if args.slides is not None:
        if args.slides < 1:
            raise ValueError("Slide count must be at least 1")
        config.SLIDE_COUNT = args.slides

    if args.language:
        config.DEFAULT_LANGUAGE = args.language

    if args.model:
        config.OPENAI_MODEL = args.model

    if args.user_id:
        config.DEFAULT_USER_ID = args.user_id

    if args.log_level:
        config.LOG_LEVEL = args.log_level

    if args.output_dir:
        config.OUTPUT_DIR = args.output_dir


def load_config_from_user_dir():
    """Load configuration from user's config directory"""
    env_path = get_config_dir() / ".env"

    if env_path.exists():
        load_dotenv(env_path)
        print(f"Loaded configuration from: {env_path}")


def main(argv=None):
    try:
        args = parse_arguments(argv)

        if args.url_or_id == 'init':
            init_command()
            return

        if args.url_or_id == 'config':
            config_command()
            return

        if not args.url_or_id:
            print("Error: YouTube URL or video ID is required")
            print("Run 'tube-deck --help' for usage information")
            print("Run 'tube-deck init' to initialize configuration")
            sys.exit(1)

        load_config_from_user_dir()

        try:
            config = Config()
            validate_args(args, config)
            config.validate(require_openai=not args.dry_run)
        except ValueError as e:
            print(f"Configuration error: {e}")
            print("Run 'tube-deck init' to set up configuration")
            sys.exit(1)

        logger = setup_logger(config.LOG_LEVEL)
        logger.info("Starting tube-deck processing")

        try:
            video_id = config.get_video_id_from_url(args.url_or_id)
        except ValueError as e:
            logger.error(f"Invalid URL or video ID: {e}")
            sys.exit(1)

        logger.info(f"Processing video: {video_id}")
        logger.info(f"Slides: {config.SLIDE_COUNT}, model: {config.OPENAI_MODEL}")

        pipeline = DeckPipeline(config, dry_run=args.dry_run)

        try:
            result = pipeline.run(video_id, user_id=config.DEFAULT_USER_ID)
        except TubeDeckError as e:
            logger.error(f"Failed to create presentation ({e.kind.value}): {e}")
            sys.exit(1)
        except ValueError as e:
            logger.error(f"Failed to create presentation: {e}")
            sys.exit(1)

        print("\nProcessing complete")
        print(f"Title: {result.title_description.title}")
        print(f"Content slides: {len(result.slides)}")
        print(f"Presentation saved to: {result.output.file_path}")

        logger.info("Processing completed successfully")

    except KeyboardInterrupt:
        print("\nProcessing interrupted by user")
        sys.exit(1)


if __name__ == "__main__":
    main()
