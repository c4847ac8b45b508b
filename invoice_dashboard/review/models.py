import copy
import math
import re
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, ClassVar

from invoice_dashboard.database.models import InvoiceRecord
from invoice_dashboard.extraction.models import ExtractionResult


class ReviewStatus(str, Enum):
    EMPTY = "empty"
    POPULATED = "populated"
    EDITING = "editing"
    SAVED = "saved"


_LEADING_NUMBER = re.compile(r"\s*([+-]?(?:\d+\.?\d*|\.\d+)(?:[eE][+-]?\d+)?)")


def parse_amount(value: Any) -> float:
    """Leading numeric prefix of a possibly user-typed amount; 0 otherwise.

    ``"450.75 USD"`` reads as 450.75. Booleans, NaN and infinities read as 0.
    """
    if value is None or isinstance(value, bool):
        return 0.0
    if isinstance(value, (int, float)):
        amount = float(value)
    else:
        match = _LEADING_NUMBER.match(str(value))
        if match is None:
            return 0.0
        amount = float(match.group(1))
    return amount if math.isfinite(amount) else 0.0


@dataclass
class EditableInvoiceDraft:
    """Mutable working copy of an extraction result."""

    EDITABLE_FIELDS: ClassVar[frozenset[str]] = frozenset(
        {"vendor_name", "invoice_id", "invoice_date", "total_amount", "currency", "raw_text"}
    )

    values: dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_result(cls, result: ExtractionResult) -> "EditableInvoiceDraft":
        return cls(values=copy.deepcopy(result.to_dict()))

    def update(self, changes: dict[str, Any]) -> None:
        unknown = set(changes) - self.EDITABLE_FIELDS
        if unknown:
            raise ValueError(f"Fields are not editable: {sorted(unknown)}")
        self.values.update(changes)

    def to_record(self, user_id: str) -> InvoiceRecord:
        def text(name: str) -> str | None:
            value = self.values.get(name)
            return None if value is None else str(value)

        return InvoiceRecord(
            user_id=user_id,
            vendor=text("vendor_name"),
            invoice_id=text("invoice_id") or "",
            amount=parse_amount(self.values.get("total_amount")),
            date=text("invoice_date"),
            raw_text=text("raw_text"),
        )
