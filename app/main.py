import uvicorn

from app.api.app import create_app
from app.config.settings import Settings
from app.logging.logger import Log


def main() -> None:
    """Entry point: load settings -> configure logging -> build app -> serve."""
    settings = Settings()
    Log.configure(settings.log_level)

    app = create_app(settings)
    Log.info(
        f"PlantScan starting on http://{settings.host}:{settings.port} "
        f"(provider={settings.analysis_provider}, output={settings.report_output_mode})"
    )
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
