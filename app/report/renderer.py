"""PDF layout for plant analysis reports."""

import io
from typing import BinaryIO
from xml.sax.saxutils import escape

from PIL import Image as PILImage
from reportlab.lib.colors import HexColor
from reportlab.lib.enums import TA_CENTER, TA_JUSTIFY
from reportlab.lib.pagesizes import LETTER
from reportlab.lib.styles import ParagraphStyle
from reportlab.platypus import Flowable, Image, Paragraph, SimpleDocTemplate, Spacer

from app.logging.logger import Log
from app.report.exceptions import ImageAcquisitionError, ReportRenderError
from app.report.image_loader import ImageLoader
from app.report.layout import parse_blocks
from app.report.models import LabeledBlock, ReportRequest

REPORT_TITLE = "Plant Analysis Report"
PAGE_MARGIN = 50
IMAGE_MAX_WIDTH = 350
IMAGE_MAX_HEIGHT = 120

TITLE_STYLE = ParagraphStyle(
    "ReportTitle",
    fontName="Helvetica-Bold",
    fontSize=26,
    leading=32,
    textColor=HexColor("#2d6a4f"),
    alignment=TA_CENTER,
    spaceBefore=24,
    spaceAfter=24,
)
LABEL_STYLE = ParagraphStyle(
    "ReportLabel",
    fontName="Helvetica-Bold",
    fontSize=14,
    leading=18,
    textColor=HexColor("#1b4332"),
    spaceBefore=6,
)
DESCRIPTION_STYLE = ParagraphStyle(
    "ReportDescription",
    fontName="Helvetica",
    fontSize=12,
    leading=18,
    textColor=HexColor("#333333"),
    alignment=TA_JUSTIFY,
    spaceAfter=10,
)
BODY_STYLE = ParagraphStyle(
    "ReportBody",
    parent=DESCRIPTION_STYLE,
    spaceAfter=0,
)


class ReportRenderer:
    """Lays out analysis text and an optional image into a PDF."""

    def __init__(self, *, image_loader: ImageLoader) -> None:
        self._image_loader = image_loader

    def render(self, request: ReportRequest, output: BinaryIO) -> None:
        """Write the complete PDF for the request into output.

        Raises:
            ReportRenderError: if the document cannot be built.
        """
        story = self.build_story(request)
        doc = SimpleDocTemplate(
            output,
            pagesize=LETTER,
            leftMargin=PAGE_MARGIN,
            rightMargin=PAGE_MARGIN,
            topMargin=PAGE_MARGIN,
            bottomMargin=PAGE_MARGIN,
            title=REPORT_TITLE,
            invariant=1,
        )
        try:
            doc.build(story)
        except Exception as exc:
            raise ReportRenderError(f"PDF build failed: {exc}") from exc

    def build_story(self, request: ReportRequest) -> list[Flowable]:
        """Image (when available), title, then one entry per text block."""
        story: list[Flowable] = []
        if request.image:
            story.extend(self._image_flowables(request.image))
        story.append(Paragraph(f"<u>{REPORT_TITLE}</u>", TITLE_STYLE))

        for block in parse_blocks(request.results):
            if isinstance(block, LabeledBlock):
                story.append(Paragraph(escape(f"{block.label}:"), LABEL_STYLE))
                if block.description:
                    story.append(Paragraph(escape(block.description), DESCRIPTION_STYLE))
            else:
                story.append(Paragraph(escape(block.text), BODY_STYLE))
        return story

    def _image_flowables(self, reference: str) -> list[Flowable]:
        try:
            png_bytes = self._image_loader.load_png(reference)
        except ImageAcquisitionError as exc:
            Log.warning(f"Report image skipped: {exc}")
            return []

        with PILImage.open(io.BytesIO(png_bytes)) as img:
            width, height = img.size
        scale = min(IMAGE_MAX_WIDTH / width, IMAGE_MAX_HEIGHT / height)
        image = Image(io.BytesIO(png_bytes), width=width * scale, height=height * scale)
        image.hAlign = "CENTER"
        return [image, Spacer(1, 24)]
