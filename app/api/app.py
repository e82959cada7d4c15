from fastapi import FastAPI, File, UploadFile
from fastapi.responses import FileResponse, Response
from starlette.background import BackgroundTask

from app.analysis.analyzer import PlantAnalyzer
from app.analysis.exceptions import InvalidImageError
from app.analysis.factory import AnalyzerFactory
from app.analysis.models import UploadedImage
from app.api.errors import register_exception_handlers
from app.api.schemas import AnalyzeResponse, DownloadRequest, ErrorResponse
from app.config.settings import Settings
from app.report.models import ReportRequest
from app.report.service import ReportService, build_report_service

REPORT_FILENAME = "Plant_Analysis_Report.pdf"
_ERROR_RESPONSES: dict[int | str, dict[str, object]] = {
    400: {"model": ErrorResponse},
    500: {"model": ErrorResponse},
}


def create_app(
    settings: Settings,
    analyzer: PlantAnalyzer | None = None,
    report_service: ReportService | None = None,
) -> FastAPI:
    """Build the HTTP app. Dependencies are created once and shared read-only."""
    plant_analyzer = analyzer or AnalyzerFactory.create(settings)
    reports = report_service or build_report_service(settings)

    app = FastAPI(
        title="PlantScan",
        description="Plant photo analysis and PDF report generation",
        version="1.0.0",
    )
    register_exception_handlers(app)

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "model": plant_analyzer.model}

    # Sync handlers run in the worker thread pool, so a slow provider call
    # or image fetch does not block other requests.
    @app.post("/analyze", response_model=AnalyzeResponse, responses=_ERROR_RESPONSES)
    def analyze(image: UploadFile | None = File(None)) -> AnalyzeResponse:
        if image is None:
            raise InvalidImageError("No file uploaded")
        upload = UploadedImage(
            data=image.file.read(),
            mime_type=image.content_type or "",
        )
        result = plant_analyzer.analyze(upload)
        return AnalyzeResponse(success=result.success, results=result.results, image=result.image)

    @app.post("/download", response_class=Response, responses=_ERROR_RESPONSES)
    def download(payload: DownloadRequest) -> Response:
        document = reports.build(
            ReportRequest(results=payload.results or "", image=payload.image)
        )
        headers = {"Content-Disposition": f'attachment; filename="{REPORT_FILENAME}"'}
        if document.path is not None:
            return FileResponse(
                document.path,
                media_type="application/pdf",
                headers=headers,
                background=BackgroundTask(document.cleanup),
            )
        return Response(content=document.content, media_type="application/pdf", headers=headers)

    return app
