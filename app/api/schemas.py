from pydantic import BaseModel


class AnalyzeResponse(BaseModel):
    success: bool = True
    results: str
    image: str


class DownloadRequest(BaseModel):
    results: str | None = None
    image: str | None = None


class ErrorResponse(BaseModel):
    error: str
