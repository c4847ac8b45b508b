from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class InvoiceRecord:
    """Row to insert into the invoices table."""

    user_id: str
    vendor: str | None
    invoice_id: str
    amount: float
    date: str | None
    raw_text: str | None


@dataclass(frozen=True)
class StoredInvoice:
    """Represents a persisted row from the invoices table."""

    id: int
    user_id: str
    vendor: str | None
    invoice_id: str
    amount: float
    date: str | None
    raw_text: str | None
    created_at: datetime | None = None
