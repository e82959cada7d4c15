from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class ReportRequest:
    """Analysis text plus an optional image reference (data URI or URL)."""

    results: str
    image: str | None = None


@dataclass(frozen=True)
class LabeledBlock:
    """A 'Label: description' line."""

    label: str
    description: str


@dataclass(frozen=True)
class PlainBlock:
    """A line without a label."""

    text: str


ReportBlock = LabeledBlock | PlainBlock


@dataclass(frozen=True)
class RenderedDocument:
    """A finished PDF, either held in memory or staged in a temporary file."""

    content: bytes = b""
    path: Path | None = None

    def cleanup(self) -> None:
        """Delete the staged file, if any."""
        if self.path is not None:
            self.path.unlink(missing_ok=True)
