from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field, field_validator

from invoice_dashboard.analyst.analyst import AnalystQueryClient
from invoice_dashboard.api.dependencies import (
    get_analyst,
    get_repository,
    get_settings,
    get_user,
)
from invoice_dashboard.config.settings import Settings
from invoice_dashboard.database.repositories.invoice_repository import InvoiceRepository
from invoice_dashboard.session.context import UserContext

router = APIRouter()


class AskRequest(BaseModel):
    question: str = Field(min_length=1)

    @field_validator("question", mode="before")
    @classmethod
    def strip_question(cls, value: object) -> object:
        return value.strip() if isinstance(value, str) else value


class AskResponse(BaseModel):
    answer: str


@router.post("/ask", response_model=AskResponse)
def ask(
    body: AskRequest,
    user: UserContext = Depends(get_user),
    analyst: AnalystQueryClient = Depends(get_analyst),
    repository: InvoiceRepository = Depends(get_repository),
    settings: Settings = Depends(get_settings),
) -> AskResponse:
    records = repository.find_projection(user.user_id, limit=settings.analyst_max_records)
    return AskResponse(answer=analyst.ask(body.question, records))


@router.get("/suggestions")
def suggestions() -> list[str]:
    return list(AnalystQueryClient.SUGGESTED_QUESTIONS)
