from collections.abc import Mapping
from dataclasses import dataclass
from types import MappingProxyType
from typing import Any

CANONICAL_FIELDS = (
    "vendor_name",
    "invoice_id",
    "invoice_date",
    "total_amount",
    "currency",
    "raw_text",
)


@dataclass(frozen=True)
class ExtractionResult:
    """Repaired model output.

    Only ``total_amount`` (always numeric) and ``raw_text`` (backfilled from
    caller text) are guaranteed. Every other key is passed through exactly as
    the model returned it, so canonical fields may be absent and unknown keys
    may be present.
    """

    payload: Mapping[str, Any]

    def __post_init__(self) -> None:
        object.__setattr__(self, "payload", MappingProxyType(dict(self.payload)))

    @property
    def vendor_name(self) -> Any:
        return self.payload.get("vendor_name")

    @property
    def invoice_id(self) -> Any:
        return self.payload.get("invoice_id")

    @property
    def invoice_date(self) -> Any:
        return self.payload.get("invoice_date")

    @property
    def total_amount(self) -> int | float:
        return self.payload.get("total_amount", 0)

    @property
    def currency(self) -> Any:
        return self.payload.get("currency")

    @property
    def raw_text(self) -> Any:
        return self.payload.get("raw_text")

    @property
    def missing_fields(self) -> list[str]:
        return [name for name in CANONICAL_FIELDS if name not in self.payload]

    @property
    def extras(self) -> dict[str, Any]:
        return {k: v for k, v in self.payload.items() if k not in CANONICAL_FIELDS}

    def to_dict(self) -> dict[str, Any]:
        return dict(self.payload)
