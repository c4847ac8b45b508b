import uvicorn

from invoice_dashboard.api.app import build_app
from invoice_dashboard.config.settings import Settings
from invoice_dashboard.database.connection import apply_schema, close_pool, init_pool
from invoice_dashboard.logging.logger import Log


def main() -> None:
    """Entry point: initialize pool -> ensure schema -> serve the API."""
    settings = Settings()
    Log.configure(settings.log_level)
    init_pool(settings)

    try:
        apply_schema()
        app = build_app(settings)
        Log.info(f"Serving on {settings.api_host}:{settings.api_port} ({settings.app_env})")
        uvicorn.run(app, host=settings.api_host, port=settings.api_port, log_config=None)
    finally:
        close_pool()


if __name__ == "__main__":
    main()
