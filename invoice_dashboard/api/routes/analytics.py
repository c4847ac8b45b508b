from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends, Query

from invoice_dashboard.analytics.summary import build_analytics, since_for_range
from invoice_dashboard.api.dependencies import get_repository, get_user
from invoice_dashboard.database.repositories.invoice_repository import InvoiceRepository
from invoice_dashboard.session.context import UserContext

router = APIRouter()


@router.get("/analytics")
def analytics(
    days: int | None = Query(default=None, ge=0),
    vendor: str | None = Query(default=None),
    user: UserContext = Depends(get_user),
    repository: InvoiceRepository = Depends(get_repository),
) -> dict[str, Any]:
    records = repository.find_projection(
        user.user_id,
        since=since_for_range(days),
        vendor=vendor or None,
    )
    return asdict(build_analytics(records))
