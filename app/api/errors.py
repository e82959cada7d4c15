"""Translates domain exceptions into JSON error responses."""

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse

from app.analysis.exceptions import AnalysisError, InvalidImageError
from app.logging.logger import Log
from app.report.exceptions import InvalidReportRequestError, ReportError


def _error(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content={"error": message})


def register_exception_handlers(app: FastAPI) -> None:
    """Map client input errors to 400 and capability/render failures to 500."""

    @app.exception_handler(InvalidImageError)
    async def invalid_image(request: Request, exc: InvalidImageError) -> JSONResponse:
        Log.warning(f"{request.url.path} rejected: {exc}")
        return _error(400, str(exc))

    @app.exception_handler(InvalidReportRequestError)
    async def invalid_report_request(
        request: Request, exc: InvalidReportRequestError
    ) -> JSONResponse:
        Log.warning(f"{request.url.path} rejected: {exc}")
        return _error(400, str(exc))

    @app.exception_handler(RequestValidationError)
    async def invalid_body(request: Request, exc: RequestValidationError) -> JSONResponse:
        Log.warning(f"{request.url.path} rejected: invalid request body")
        return _error(400, "Invalid request body")

    @app.exception_handler(AnalysisError)
    async def analysis_failed(request: Request, exc: AnalysisError) -> JSONResponse:
        Log.error(f"{request.url.path} analysis failed: {exc}")
        return _error(500, str(exc))

    @app.exception_handler(ReportError)
    async def report_failed(request: Request, exc: ReportError) -> JSONResponse:
        Log.error(f"{request.url.path} report generation failed: {exc}")
        return _error(500, "Failed to generate PDF.")
