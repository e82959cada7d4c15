import httpx
import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.analysis.factory import AnalyzerFactory
from app.api.app import create_app
from app.config.settings import Settings
from app.report.image_loader import ImageLoader
from app.report.memory_writer import MemoryReportWriter
from app.report.renderer import ReportRenderer
from app.report.service import ReportService


def _unreachable(request: httpx.Request) -> httpx.Response:
    raise httpx.ConnectError("connection refused", request=request)


@pytest.fixture()
def test_settings() -> Settings:
    return Settings(analysis_provider="example", report_output_mode="memory")


@pytest.fixture()
def offline_report_service() -> ReportService:
    """Report service whose URL fetches always fail to connect."""
    loader = ImageLoader(timeout_seconds=1, transport=httpx.MockTransport(_unreachable))
    return ReportService(ReportRenderer(image_loader=loader), MemoryReportWriter())


@pytest.fixture()
def app(test_settings: Settings, offline_report_service: ReportService) -> FastAPI:
    return create_app(
        test_settings,
        analyzer=AnalyzerFactory.create(test_settings),
        report_service=offline_report_service,
    )


@pytest.fixture()
def client(app: FastAPI) -> TestClient:
    return TestClient(app)
