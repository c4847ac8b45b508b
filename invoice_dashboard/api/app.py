"""FastAPI application factory and error mapping."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from invoice_dashboard import __version__
from invoice_dashboard.analyst.analyst import AnalystQueryClient
from invoice_dashboard.analyst.exceptions import EmptyAnswerError, NoDataError
from invoice_dashboard.api.routes import analyst, analytics, invoices, review
from invoice_dashboard.config.settings import Settings
from invoice_dashboard.database.exceptions import (
    InvoiceNotFoundError,
    StorageConflictError,
    StorageError,
)
from invoice_dashboard.database.repositories.invoice_repository import InvoiceRepository
from invoice_dashboard.extraction.exceptions import ExtractionError, MissingInputError
from invoice_dashboard.ingestion.exceptions import FileTooLargeError, IngestionError
from invoice_dashboard.llm.exceptions import ModelError
from invoice_dashboard.llm.factory import ModelClientFactory
from invoice_dashboard.logging.logger import Log
from invoice_dashboard.processor.processor import InvoiceProcessor, build_analyst, build_processor
from invoice_dashboard.review.exceptions import InvalidReviewTransitionError
from invoice_dashboard.review.store import ReviewStore
from invoice_dashboard.session.context import AuthRequiredError

# Starlette resolves handlers along the exception MRO, so subclasses listed
# here take precedence over their bases.
ERROR_STATUS_CODES: dict[type[Exception], int] = {
    AuthRequiredError: 401,
    FileTooLargeError: 413,
    IngestionError: 415,
    MissingInputError: 422,
    ExtractionError: 502,
    ModelError: 502,
    NoDataError: 404,
    EmptyAnswerError: 502,
    InvoiceNotFoundError: 404,
    StorageConflictError: 409,
    StorageError: 503,
    InvalidReviewTransitionError: 409,
}


async def _handle_domain_error(request: Request, exc: Exception) -> JSONResponse:
    status_code = next(
        ERROR_STATUS_CODES[cls] for cls in type(exc).__mro__ if cls in ERROR_STATUS_CODES
    )
    if status_code >= 500:
        Log.error(f"{request.method} {request.url.path} failed: {exc}")
    else:
        Log.warning(f"{request.method} {request.url.path} rejected: {exc}")
    return JSONResponse(
        status_code=status_code,
        content={"detail": str(exc), "error": type(exc).__name__},
    )


def create_app(
    settings: Settings,
    *,
    processor: InvoiceProcessor,
    analyst_client: AnalystQueryClient,
    repository: InvoiceRepository,
    review_store: ReviewStore | None = None,
) -> FastAPI:
    app = FastAPI(title="Invoice Dashboard", version=__version__)
    app.state.settings = settings
    app.state.processor = processor
    app.state.analyst = analyst_client
    app.state.repository = repository
    app.state.review_store = review_store if review_store is not None else ReviewStore()

    for error_cls in ERROR_STATUS_CODES:
        app.add_exception_handler(error_cls, _handle_domain_error)

    app.include_router(review.router, prefix="/api/v1/review", tags=["Review"])
    app.include_router(invoices.router, prefix="/api/v1", tags=["Invoices"])
    app.include_router(analytics.router, prefix="/api/v1", tags=["Analytics"])
    app.include_router(analyst.router, prefix="/api/v1/analyst", tags=["Analyst"])

    @app.get("/health")
    def health() -> dict[str, str]:
        return {"status": "ok", "service": "Invoice Dashboard"}

    return app


def build_app(settings: Settings) -> FastAPI:
    """Wire the configured adapters into an application."""
    client = ModelClientFactory.create(settings)
    return create_app(
        settings,
        processor=build_processor(settings, client),
        analyst_client=build_analyst(settings, client),
        repository=InvoiceRepository(),
    )
