from abc import ABC, abstractmethod
from collections.abc import Callable
from typing import BinaryIO

from app.report.models import RenderedDocument

RenderFn = Callable[[BinaryIO], None]


class BaseReportWriter(ABC):
    """Contract for report output strategies."""

    @abstractmethod
    def write(self, render: RenderFn) -> RenderedDocument:
        """Run render against a fresh output stream owned by this request.

        Returns:
            RenderedDocument holding either the bytes or a staged file path.

        Raises:
            Whatever render raises; nothing partial is left behind.
        """
