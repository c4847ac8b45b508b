"""Review stage between extraction and persistence."""

from typing import Any

from invoice_dashboard.database.exceptions import StorageConflictError, StorageError
from invoice_dashboard.database.models import StoredInvoice
from invoice_dashboard.database.repositories.invoice_repository import InvoiceRepository
from invoice_dashboard.extraction.models import ExtractionResult
from invoice_dashboard.logging.logger import Log
from invoice_dashboard.review.exceptions import InvalidReviewTransitionError
from invoice_dashboard.review.models import EditableInvoiceDraft, ReviewStatus
from invoice_dashboard.session.context import UserContext


class ReviewState:
    """Holds the last extraction result and its editable draft.

    Transitions::

        EMPTY -> POPULATED            populate()
        POPULATED -> EDITING          begin_edit()
        EDITING -> POPULATED          cancel_edit(), draft reverts
        POPULATED | EDITING -> SAVED  save()

    ``populate`` is accepted in every state and starts a fresh cycle.
    """

    def __init__(self) -> None:
        self._result: ExtractionResult | None = None
        self._draft: EditableInvoiceDraft | None = None
        self._status = ReviewStatus.EMPTY
        self._saved: StoredInvoice | None = None
        self.last_error: str | None = None

    @property
    def status(self) -> ReviewStatus:
        return self._status

    @property
    def result(self) -> ExtractionResult | None:
        return self._result

    @property
    def draft(self) -> EditableInvoiceDraft | None:
        return self._draft

    @property
    def saved_invoice(self) -> StoredInvoice | None:
        return self._saved

    def populate(self, result: ExtractionResult) -> None:
        self._result = result
        self._draft = EditableInvoiceDraft.from_result(result)
        self._saved = None
        self.last_error = None
        self._status = ReviewStatus.POPULATED

    def begin_edit(self) -> None:
        self._require(ReviewStatus.POPULATED, action="edit")
        self._status = ReviewStatus.EDITING

    def update_draft(self, changes: dict[str, Any]) -> EditableInvoiceDraft:
        self._require(ReviewStatus.EDITING, action="change fields")
        draft = self._require_draft()
        draft.update(changes)
        return draft

    def cancel_edit(self) -> None:
        self._require(ReviewStatus.EDITING, action="cancel")
        if self._result is None:
            raise InvalidReviewTransitionError("No extraction result to revert to")
        self._draft = EditableInvoiceDraft.from_result(self._result)
        self._status = ReviewStatus.POPULATED

    def save(self, repository: InvoiceRepository, user: UserContext) -> StoredInvoice:
        """Persist the draft. On failure the state is left as it was.

        Raises:
            StorageConflictError: duplicate invoice identifier for this user.
            StorageFailureError: any other persistence failure.
        """
        self._require(ReviewStatus.POPULATED, ReviewStatus.EDITING, action="save")
        record = self._require_draft().to_record(user.user_id)
        self.last_error = None
        try:
            stored = repository.insert(record)
        except StorageConflictError as exc:
            self.last_error = str(exc)
            Log.warning(f"Duplicate invoice {exc.invoice_id!r} for user {user.user_id}")
            raise
        except StorageError as exc:
            self.last_error = str(exc)
            Log.error(f"Saving invoice for user {user.user_id} failed: {exc}")
            raise

        self._saved = stored
        self._status = ReviewStatus.SAVED
        return stored

    def _require_draft(self) -> EditableInvoiceDraft:
        if self._draft is None:
            raise InvalidReviewTransitionError("No draft to work on")
        return self._draft

    def _require(self, *allowed: ReviewStatus, action: str) -> None:
        if self._status not in allowed:
            raise InvalidReviewTransitionError(
                f"Cannot {action} while review is {self._status.value}"
            )
