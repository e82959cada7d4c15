import base64
from dataclasses import dataclass, field


@dataclass(frozen=True)
class UploadedImage:
    """Image payload received from the client, held in memory only."""

    data: bytes
    mime_type: str

    def to_base64(self) -> str:
        return base64.b64encode(self.data).decode("ascii")


@dataclass(frozen=True)
class DirectText:
    """Provider response exposing its text directly."""

    text: str


@dataclass(frozen=True)
class CandidateList:
    """Provider response holding candidates, each a list of text fragments."""

    candidates: list[list[str]] = field(default_factory=list)


@dataclass(frozen=True)
class Unrecognized:
    """Provider response with neither a text accessor nor candidates."""

    raw: object = None


AnalysisResponse = DirectText | CandidateList | Unrecognized


@dataclass(frozen=True)
class AnalysisResult:
    """Output of the analyze relay."""

    results: str
    image: str
    success: bool = True
