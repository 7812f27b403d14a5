"""
Shared fixtures for tube-deck tests. No test touches the network.
"""

from unittest.mock import MagicMock

import pytest

from tubedeck.config import Config


@pytest.fixture
def config(tmp_path):
    """Config with fake credentials that writes decks under tmp_path."""
    cfg = Config()
    cfg.OPENAI_API_KEY = "test-openai-key"
    cfg.RAPID_API_KEY = "test-rapid-key"
    cfg.OPENAI_MODEL = "gpt-4o-mini"
    cfg.DEFAULT_LANGUAGE = "en"
    cfg.SLIDE_COUNT = 10
    cfg.OUTPUT_DIR = str(tmp_path / "decks")
    return cfg


@pytest.fixture
def subtitle_xml():
    return (
        '<?xml version="1.0" encoding="utf-8" ?>'
        "<transcript>"
        '<text start="0.0" dur="2.1">Welcome to the lecture</text>'
        '<text start="2.1" dur="3.0">today we&amp;#39;ll cover photosynthesis</text>'
        '<text start="5.1" dur="1.0"></text>'
        '<text start="6.1" dur="2.4">and the Calvin cycle</text>'
        "</transcript>"
    )


def make_completion(parsed, refusal=None):
    """Build a fake ``chat.completions.parse`` result."""
    message = MagicMock()
    message.parsed = parsed
    message.refusal = refusal

    choice = MagicMock()
    choice.message = message

    completion = MagicMock()
    completion.choices = [choice]
    return completion


def make_response(json_data=None, text="", status_error=None):
    """Build a fake ``requests`` response."""
    response = MagicMock()
    response.json.return_value = json_data
    response.text = text
    if status_error is not None:
        response.raise_for_status.side_effect = status_error
    return response


@pytest.fixture
def fake_completion():
    return make_completion


@pytest.fixture
def fake_response():
    return make_response
