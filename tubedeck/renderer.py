import os
import uuid
from typing import List, Optional

from pptx import Presentation
from pptx.dml.color import RGBColor
from pptx.enum.text import PP_PARAGRAPH_ALIGNMENT
from pptx.oxml.ns import qn
from pptx.util import Emu, Inches, Pt

from tubedeck.config import Config
from tubedeck.errors import RenderError
from tubedeck.models import GeneratedFile, SlideContent, TitleDescription
from tubedeck.utils.logger import get_logger

logger = get_logger(__name__)

SLIDE_WIDTH = Inches(10)
SLIDE_HEIGHT = Inches(5.625)
BLANK_LAYOUT = 6

TITLE_COLOR = RGBColor.from_string("003366")
SUBTITLE_COLOR = RGBColor.from_string("888888")
BODY_COLOR = RGBColor.from_string("333333")
WHITE = RGBColor.from_string("FFFFFF")

BULLET_TOP = Inches(1.8)
BULLET_STEP = Inches(1)


def _add_text(
    slide,
    text: str,
    left: int,
    top: int,
    width: int,
    height: int,
    font_size: int,
    color: RGBColor,
    font_name: str,
    align=PP_PARAGRAPH_ALIGNMENT.CENTER,
    bold: bool = False,
    bullet: bool = False,
):
    box = slide.shapes.add_textbox(left, top, width, height)
    tf = box.text_frame
    tf.word_wrap = True

    p = tf.paragraphs[0]
    p.alignment = align
    if bullet:
        _set_bullet(p)

    run = p.add_run()
    run.text = text
    run.font.name = font_name
    run.font.size = Pt(font_size)
    run.font.bold = bold
    run.font.color.rgb = color
    return box


def _set_bullet(paragraph, char: str = "•") -> None:
    pPr = paragraph._p.get_or_add_pPr()
    pPr.set("marL", str(Inches(0.25)))
    pPr.set("indent", str(-Inches(0.25)))
    bu_char = pPr.makeelement(qn("a:buChar"), {"char": char})
    pPr.append(bu_char)


class DeckRenderer:
    def __init__(self, config: Config):
        self.config = config

    def create_presentation(
        self,
        title_description: TitleDescription,
        slides: List[SlideContent],
        user_id: str,
        output_dir: Optional[str] = None,
    ) -> GeneratedFile:
        prs = Presentation()
        prs.slide_width = SLIDE_WIDTH
        prs.slide_height = SLIDE_HEIGHT

        self._title_slide(prs, title_description)
        for slide_content in slides:
            self._content_slide(prs, slide_content)

        try:
            output_dir = output_dir or self.config.OUTPUT_DIR
            os.makedirs(output_dir, exist_ok=True)

            file_name, file_path = self._new_output_path(user_id, output_dir)
            prs.save(file_path)

        except Exception as e:
            logger.error(f"Error writing presentation: {e}")
            raise RenderError("Failed to create Powerpoint presentation") from e

        logger.info(f"Saved presentation with {len(prs.slides)} slides to {file_path}")
        return GeneratedFile(file_name=file_name, file_path=file_path)

    def _new_output_path(self, user_id: str, output_dir: str):
        while True:
            file_name = f"presentation-{uuid.uuid4()}-userId={user_id}.pptx"
            file_path = self.config.get_output_path(file_name, output_dir)
            if not os.path.exists(file_path):
                return file_name, file_path
            logger.debug(f"Output path already exists, drawing a new id: {file_path}")

    def _title_slide(self, prs: Presentation, title_description: TitleDescription):
        slide = prs.slides.add_slide(prs.slide_layouts[BLANK_LAYOUT])

        fill = slide.background.fill
        fill.solid()
        fill.fore_color.rgb = WHITE

        _add_text(
            slide,
            title_description.title,
            left=0,
            top=Emu(int(SLIDE_HEIGHT * 0.40)),
            width=SLIDE_WIDTH,
            height=Inches(1),
            font_size=33,
            color=TITLE_COLOR,
            font_name="Helvetica",
            bold=True,
        )
        _add_text(
            slide,
            title_description.description,
            left=0,
            top=Emu(int(SLIDE_HEIGHT * 0.58)),
            width=SLIDE_WIDTH,
            height=Inches(0.75),
            font_size=18,
            color=SUBTITLE_COLOR,
            font_name="Helvetica",
        )
        return slide

    def _content_slide(self, prs: Presentation, slide_content: SlideContent):
        slide = prs.slides.add_slide(prs.slide_layouts[BLANK_LAYOUT])

        _add_text(
            slide,
            slide_content.title,
            left=Inches(0.5),
            top=Inches(0.5),
            width=Inches(8.5),
            height=Inches(1),
            font_size=32,
            color=TITLE_COLOR,
            font_name="Arial",
            bold=True,
        )

        for index, bullet in enumerate(slide_content.content):
            _add_text(
                slide,
                bullet,
                left=Inches(1),
                top=BULLET_TOP + index * BULLET_STEP,
                width=Inches(8),
                height=Inches(0.75),
                font_size=15,
                color=BODY_COLOR,
                font_name="Arial",
                align=PP_PARAGRAPH_ALIGNMENT.LEFT,
                bullet=True,
            )
        return slide
