class ReportError(Exception):
    """Base exception for all report-related errors."""


class InvalidReportRequestError(ReportError):
    """Raised when a report is requested without analysis text."""


class ReportRenderError(ReportError):
    """Raised when the PDF document cannot be built or written."""


class ImageAcquisitionError(ReportError):
    """Raised when a report image cannot be decoded, fetched or converted."""
