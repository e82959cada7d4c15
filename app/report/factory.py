from pathlib import Path

from app.config.settings import Settings
from app.report.base import BaseReportWriter
from app.report.memory_writer import MemoryReportWriter
from app.report.tempfile_writer import TempFileReportWriter


class ReportWriterFactory:
    """Creates the report output strategy based on settings."""

    MODES: tuple[str, ...] = ("memory", "tempfile")

    @classmethod
    def create(cls, settings: Settings) -> BaseReportWriter:
        mode = settings.report_output_mode.lower()
        if mode == "memory":
            return MemoryReportWriter()
        if mode == "tempfile":
            return TempFileReportWriter(Path(settings.report_output_dir))
        raise ValueError(
            f"Unknown report output mode '{mode}'. Choose from: {list(cls.MODES)}"
        )
