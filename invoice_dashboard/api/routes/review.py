from dataclasses import asdict
from typing import Any

from fastapi import APIRouter, Depends, File, Form, HTTPException, UploadFile
from pydantic import BaseModel

from invoice_dashboard.api.dependencies import (
    get_processor,
    get_repository,
    get_review_store,
    get_user,
)
from invoice_dashboard.database.repositories.invoice_repository import InvoiceRepository
from invoice_dashboard.extraction.exceptions import MissingInputError
from invoice_dashboard.processor.processor import InvoiceProcessor
from invoice_dashboard.review.state import ReviewState
from invoice_dashboard.review.store import ReviewStore
from invoice_dashboard.session.context import UserContext

router = APIRouter()


class DraftUpdate(BaseModel):
    vendor_name: str | None = None
    invoice_id: str | None = None
    invoice_date: str | None = None
    total_amount: float | str | None = None
    currency: str | None = None
    raw_text: str | None = None


def review_payload(state: ReviewState) -> dict[str, Any]:
    return {
        "status": state.status.value,
        "result": state.result.to_dict() if state.result is not None else None,
        "draft": dict(state.draft.values) if state.draft is not None else None,
        "saved_invoice": asdict(state.saved_invoice) if state.saved_invoice is not None else None,
        "last_error": state.last_error,
    }


@router.post("/extract")
def extract_invoice(
    file: UploadFile | None = File(default=None),
    text: str | None = Form(default=None),
    user: UserContext = Depends(get_user),
    processor: InvoiceProcessor = Depends(get_processor),
    store: ReviewStore = Depends(get_review_store),
) -> dict[str, Any]:
    """Run extraction on an upload or pasted text and start a new review."""
    if file is not None and text:
        raise MissingInputError("Provide either a file or text to parse, not both.")
    if file is not None:
        data = file.file.read()
        result = processor.process_upload(
            file.filename or "upload",
            file.content_type or "",
            data,
        )
    else:
        result = processor.process_text(text or "")

    state = store.get(user.user_id)
    state.populate(result)
    return review_payload(state)


@router.get("")
def get_review(
    user: UserContext = Depends(get_user),
    store: ReviewStore = Depends(get_review_store),
) -> dict[str, Any]:
    return review_payload(store.peek(user.user_id))


@router.delete("")
def discard_review(
    user: UserContext = Depends(get_user),
    store: ReviewStore = Depends(get_review_store),
) -> dict[str, Any]:
    store.discard(user.user_id)
    return review_payload(store.peek(user.user_id))


@router.post("/edit")
def begin_edit(
    user: UserContext = Depends(get_user),
    store: ReviewStore = Depends(get_review_store),
) -> dict[str, Any]:
    state = store.peek(user.user_id)
    state.begin_edit()
    return review_payload(state)


@router.patch("/draft")
def update_draft(
    changes: DraftUpdate,
    user: UserContext = Depends(get_user),
    store: ReviewStore = Depends(get_review_store),
) -> dict[str, Any]:
    state = store.peek(user.user_id)
    try:
        state.update_draft(changes.model_dump(exclude_unset=True))
    except ValueError as exc:
        raise HTTPException(status_code=422, detail=str(exc)) from exc
    return review_payload(state)


@router.post("/cancel")
def cancel_edit(
    user: UserContext = Depends(get_user),
    store: ReviewStore = Depends(get_review_store),
) -> dict[str, Any]:
    state = store.peek(user.user_id)
    state.cancel_edit()
    return review_payload(state)


@router.post("/save")
def save_review(
    user: UserContext = Depends(get_user),
    store: ReviewStore = Depends(get_review_store),
    repository: InvoiceRepository = Depends(get_repository),
) -> dict[str, Any]:
    state = store.peek(user.user_id)
    state.save(repository, user)
    return review_payload(state)
