"""Few-shot financial question answering over saved invoices."""

import json
from collections.abc import Sequence
from pathlib import Path
from string import Template
from typing import ClassVar

from invoice_dashboard.analyst.exceptions import EmptyAnswerError, NoDataError
from invoice_dashboard.analyst.models import AnalystRecord
from invoice_dashboard.llm.client_base import BaseModelClient
from invoice_dashboard.logging.logger import Log
from invoice_dashboard.prompt_loader import load_prompt


class AnalystQueryClient:
    """Answers free-text questions about a bounded set of invoice records.

    The prompt carries three fixed worked examples (an aggregation, a refusal
    and a ranking) ahead of the user's data. The answer is unstructured prose.
    """

    SUGGESTED_QUESTIONS: ClassVar[tuple[str, ...]] = (
        "What is my total spending across all invoices?",
        "Who is my top vendor by total spending?",
        "What is the average amount of an invoice?",
        "How many invoices do I have from [Vendor Name]?",
    )

    def __init__(
        self,
        *,
        client: BaseModelClient,
        model: str,
        temperature: float = 0.0,
        prompt_path: Path | None = None,
    ) -> None:
        self._client = client
        self._model = model
        self._temperature = temperature
        self._template = Template(load_prompt("analyst_prompt.txt", prompt_path))

    def ask(self, question: str, records: Sequence[AnalystRecord]) -> str:
        """Return the model's answer to ``question`` about ``records``.

        Raises:
            NoDataError: if ``records`` is empty. The model is not called.
            EmptyAnswerError: if the model answers with blank text.
        """
        if not records:
            raise NoDataError("No invoice data found to analyze.")

        prompt = self.build_prompt(question, records)
        Log.debug(f"Analyst prompt:\n{prompt}")

        answer = self._client.generate(
            model=self._model,
            temperature=self._temperature,
            prompt=prompt,
        )
        if not answer or not answer.strip():
            raise EmptyAnswerError("The AI returned an empty answer.")

        Log.info(f"Analyst answered over {len(records)} records")
        return answer.strip()

    def build_prompt(self, question: str, records: Sequence[AnalystRecord]) -> str:
        data_context = json.dumps(
            [record.to_dict() for record in records],
            indent=2,
            ensure_ascii=False,
        )
        # safe_substitute leaves literal dollar amounts in the examples alone.
        return self._template.safe_substitute(data_context=data_context, question=question)
