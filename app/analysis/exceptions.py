class AnalysisError(Exception):
    """Raised when plant analysis fails."""


class InvalidImageError(AnalysisError):
    """Raised when the uploaded payload is missing or is not a decodable image."""


class AnalysisNetworkError(AnalysisError):
    """Raised when the AI provider call fails due to network/infrastructure issues."""
