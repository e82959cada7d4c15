from app.config.settings import Settings
from app.logging.logger import Log
from app.report.base import BaseReportWriter
from app.report.exceptions import InvalidReportRequestError, ReportRenderError
from app.report.factory import ReportWriterFactory
from app.report.image_loader import ImageLoader
from app.report.models import RenderedDocument, ReportRequest
from app.report.renderer import ReportRenderer


class ReportService:
    """Validates a report request, renders it and hands back the document."""

    def __init__(self, renderer: ReportRenderer, writer: BaseReportWriter) -> None:
        self._renderer = renderer
        self._writer = writer

    def build(self, request: ReportRequest) -> RenderedDocument:
        """Render the request through the configured writer.

        Raises:
            InvalidReportRequestError: if the analysis text is missing or blank.
            ReportRenderError: if the PDF cannot be built or written.
        """
        if not request.results or not request.results.strip():
            raise InvalidReportRequestError("No analysis data provided")

        Log.info(
            f"Rendering report: {len(request.results)} chars, "
            f"image={'yes' if request.image else 'no'}"
        )
        try:
            document = self._writer.write(
                lambda output: self._renderer.render(request, output)
            )
        except OSError as exc:
            raise ReportRenderError(f"Report output failed: {exc}") from exc
        Log.info(f"Report rendered ({type(self._writer).__name__})")
        return document


def build_report_service(settings: Settings) -> ReportService:
    """Build a ReportService with the configured image loader and writer."""
    image_loader = ImageLoader(timeout_seconds=settings.image_fetch_timeout_seconds)
    return ReportService(
        renderer=ReportRenderer(image_loader=image_loader),
        writer=ReportWriterFactory.create(settings),
    )
