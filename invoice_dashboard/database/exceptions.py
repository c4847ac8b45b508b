class StorageError(Exception):
    """Base exception for invoice persistence errors."""


class StorageConflictError(StorageError):
    """Raised when the user already saved an invoice with the same identifier."""

    def __init__(self, invoice_id: str) -> None:
        self.invoice_id = invoice_id
        super().__init__("This invoice ID has already been saved.")


class StorageFailureError(StorageError):
    """Raised when the database rejects or cannot serve a request."""


class InvoiceNotFoundError(StorageError):
    """Raised when the user has no saved invoice with the given id."""

    def __init__(self, invoice_pk: int) -> None:
        self.invoice_pk = invoice_pk
        super().__init__(f"Invoice {invoice_pk} not found.")
