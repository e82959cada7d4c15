import os
import tempfile
from pathlib import Path

from app.report.base import BaseReportWriter, RenderFn
from app.report.models import RenderedDocument


class TempFileReportWriter(BaseReportWriter):
    """Stages the document in a uniquely named file under output_dir.

    The caller owns the returned path and must call RenderedDocument.cleanup()
    once the file has been delivered.
    """

    def __init__(self, output_dir: Path) -> None:
        self._output_dir = output_dir

    def write(self, render: RenderFn) -> RenderedDocument:
        self._output_dir.mkdir(parents=True, exist_ok=True)
        fd, name = tempfile.mkstemp(prefix="Plant_Report_", suffix=".pdf", dir=self._output_dir)
        path = Path(name)
        try:
            with os.fdopen(fd, "wb") as fh:
                render(fh)
        except BaseException:
            path.unlink(missing_ok=True)
            raise
        return RenderedDocument(path=path)
