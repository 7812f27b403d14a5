"""Tests for rendering generated content into a .pptx deck."""

import os
import uuid
from unittest.mock import patch

import pytest
from pptx import Presentation
from pptx.oxml.ns import qn
from pptx.util import Inches

from tubedeck.errors import RenderError
from tubedeck.models import SlideContent, TitleDescription
from tubedeck.renderer import DeckRenderer


@pytest.fixture
def title_description():
    return TitleDescription(
        title="How Plants Turn Light Into Energy",
        description="An overview of the light reactions and the Calvin cycle.",
    )


@pytest.fixture
def slides():
    return [
        SlideContent(
            title="Light Reactions",
            content=[
                "Chlorophyll absorbs light in the thylakoid membranes.",
                "Water is split and oxygen is released.",
                "ATP and NADPH carry the energy forward.",
            ],
        ),
        SlideContent(
            title="Calvin Cycle",
            content=[
                "Carbon dioxide is fixed by RuBisCO.",
                "ATP and NADPH reduce 3-PGA to G3P.",
                "RuBP is regenerated to keep the cycle going.",
                "G3P leaves the cycle to build glucose.",
            ],
        ),
    ]


class TestCreatePresentation:
    def test_title_slide_plus_one_per_entry(
        self, config, title_description, slides
    ) -> None:
        output = DeckRenderer(config).create_presentation(
            title_description, slides, "user-42"
        )

        prs = Presentation(output.file_path)
        assert len(prs.slides) == len(slides) + 1

    def test_empty_slide_list_gives_title_only(
        self, config, title_description
    ) -> None:
        output = DeckRenderer(config).create_presentation(
            title_description, [], "user-42"
        )

        assert len(Presentation(output.file_path).slides) == 1

    def test_file_name_embeds_user_id(
        self, config, title_description, slides
    ) -> None:
        output = DeckRenderer(config).create_presentation(
            title_description, slides, "user-42"
        )

        assert "user-42" in output.file_path
        assert output.file_name.startswith("presentation-")
        assert output.file_name.endswith("-userId=user-42.pptx")
        assert os.path.dirname(output.file_path) == config.OUTPUT_DIR
        assert os.path.isfile(output.file_path)

    def test_each_call_gets_a_new_file(
        self, config, title_description, slides
    ) -> None:
        renderer = DeckRenderer(config)
        first = renderer.create_presentation(title_description, slides, "u1")
        second = renderer.create_presentation(title_description, slides, "u1")

        assert first.file_path != second.file_path

    def test_existing_path_draws_new_id(
        self, config, title_description, slides
    ) -> None:
        taken = uuid.UUID("00000000-0000-4000-8000-000000000001")
        fresh = uuid.UUID("00000000-0000-4000-8000-000000000002")
        os.makedirs(config.OUTPUT_DIR, exist_ok=True)
        taken_path = os.path.join(
            config.OUTPUT_DIR, f"presentation-{taken}-userId=u1.pptx"
        )
        with open(taken_path, "wb") as f:
            f.write(b"existing")

        with patch("tubedeck.renderer.uuid.uuid4", side_effect=[taken, fresh]):
            output = DeckRenderer(config).create_presentation(
                title_description, slides, "u1"
            )

        assert output.file_name == f"presentation-{fresh}-userId=u1.pptx"
        with open(taken_path, "rb") as f:
            assert f.read() == b"existing"

    def test_output_dir_override(
        self, config, title_description, slides, tmp_path
    ) -> None:
        target = tmp_path / "custom"

        output = DeckRenderer(config).create_presentation(
            title_description, slides, "u1", output_dir=str(target)
        )

        assert os.path.dirname(output.file_path) == str(target)

    def test_write_failure(self, config, title_description, slides, tmp_path) -> None:
        blocker = tmp_path / "not-a-directory"
        blocker.write_text("file in the way")
        config.OUTPUT_DIR = str(blocker)

        with pytest.raises(RenderError, match="Failed to create Powerpoint presentation"):
            DeckRenderer(config).create_presentation(title_description, slides, "u1")


class TestSlideLayout:
    @pytest.fixture
    def deck(self, config, title_description, slides):
        output = DeckRenderer(config).create_presentation(
            title_description, slides, "user-42"
        )
        return Presentation(output.file_path)

    def test_title_slide_text(self, deck, title_description) -> None:
        texts = [shape.text_frame.text for shape in deck.slides[0].shapes]
        assert texts == [title_description.title, title_description.description]

    def test_title_slide_fonts(self, deck) -> None:
        title_run = deck.slides[0].shapes[0].text_frame.paragraphs[0].runs[0]
        assert title_run.font.size.pt == 33
        assert title_run.font.bold is True
        assert title_run.font.name == "Helvetica"
        assert str(title_run.font.color.rgb) == "003366"

    def test_content_slide_heading_and_bullets(self, deck, slides) -> None:
        for slide, content in zip(list(deck.slides)[1:], slides):
            shapes = list(slide.shapes)
            assert shapes[0].text_frame.text == content.title
            assert [s.text_frame.text for s in shapes[1:]] == content.content

    def test_bullets_stacked_one_inch_apart(self, deck) -> None:
        bullets = list(deck.slides[2].shapes)[1:]
        tops = [shape.top for shape in bullets]
        assert tops[0] == Inches(1.8)
        assert all(b - a == Inches(1) for a, b in zip(tops, tops[1:]))
        assert all(shape.left == Inches(1) for shape in bullets)

    def test_bullet_marker(self, deck) -> None:
        paragraph = list(deck.slides[1].shapes)[1].text_frame.paragraphs[0]
        assert paragraph._p.pPr.find(qn("a:buChar")) is not None
