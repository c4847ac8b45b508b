from fastapi import Header, Request

from invoice_dashboard.analyst.analyst import AnalystQueryClient
from invoice_dashboard.config.settings import Settings
from invoice_dashboard.database.repositories.invoice_repository import InvoiceRepository
from invoice_dashboard.processor.processor import InvoiceProcessor
from invoice_dashboard.review.store import ReviewStore
from invoice_dashboard.session.context import UserContext


def get_user(x_user_id: str | None = Header(default=None)) -> UserContext:
    """Identity forwarded by the authenticating proxy in ``X-User-Id``."""
    return UserContext.from_identity(x_user_id)


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_processor(request: Request) -> InvoiceProcessor:
    return request.app.state.processor


def get_analyst(request: Request) -> AnalystQueryClient:
    return request.app.state.analyst


def get_repository(request: Request) -> InvoiceRepository:
    return request.app.state.repository


def get_review_store(request: Request) -> ReviewStore:
    return request.app.state.review_store
