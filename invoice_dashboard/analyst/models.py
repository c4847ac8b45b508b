from dataclasses import asdict, dataclass


@dataclass(frozen=True)
class AnalystRecord:
    """Projection of a saved invoice exposed to the analyst prompt."""

    vendor: str | None
    date: str | None
    amount: float | None

    def to_dict(self) -> dict[str, object]:
        return asdict(self)
