import io

from app.report.base import BaseReportWriter, RenderFn
from app.report.models import RenderedDocument


class MemoryReportWriter(BaseReportWriter):
    """Accumulates the document in memory and returns the bytes."""

    def write(self, render: RenderFn) -> RenderedDocument:
        buf = io.BytesIO()
        render(buf)
        return RenderedDocument(content=buf.getvalue())
