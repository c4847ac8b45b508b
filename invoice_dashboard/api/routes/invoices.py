from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends

from invoice_dashboard.analytics.summary import summarize_dashboard
from invoice_dashboard.api.dependencies import get_repository, get_settings, get_user
from invoice_dashboard.config.settings import Settings
from invoice_dashboard.database.repositories.invoice_repository import InvoiceRepository
from invoice_dashboard.session.context import UserContext

router = APIRouter()


@router.get("/invoices")
def list_invoices(
    user: UserContext = Depends(get_user),
    repository: InvoiceRepository = Depends(get_repository),
) -> list[dict[str, Any]]:
    return [asdict(invoice) for invoice in repository.find_all(user.user_id)]


@router.delete("/invoices")
def delete_all_invoices(
    user: UserContext = Depends(get_user),
    repository: InvoiceRepository = Depends(get_repository),
) -> dict[str, int]:
    return {"deleted": repository.delete_all(user.user_id)}


@router.delete("/invoices/{invoice_pk}")
def delete_invoice(
    invoice_pk: int,
    user: UserContext = Depends(get_user),
    repository: InvoiceRepository = Depends(get_repository),
) -> dict[str, int]:
    repository.delete(user.user_id, invoice_pk)
    return {"deleted": 1}


@router.get("/invoices/recent")
def recent_invoices(
    user: UserContext = Depends(get_user),
    repository: InvoiceRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
) -> list[dict[str, Any]]:
    invoices = repository.find_recent(user.user_id, settings.recent_invoices_limit)
    return [asdict(invoice) for invoice in invoices]


@router.get("/invoices/vendors")
def vendors(
    user: UserContext = Depends(get_user),
    repository: InvoiceRepository = Depends(get_repository),
) -> list[str]:
    return repository.list_vendors(user.user_id)


@router.get("/dashboard")
def dashboard(
    user: UserContext = Depends(get_user),
    repository: InvoiceRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
) -> dict[str, Any]:
    """Cumulative total, invoice count and the latest saved invoices."""
    totals = summarize_dashboard(repository.find_amounts(user.user_id))
    recent = repository.find_recent(user.user_id, settings.recent_invoices_limit)
    return {**asdict(totals), "recent": [asdict(invoice) for invoice in recent]}
