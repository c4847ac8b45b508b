"""Parsing and repair of raw extraction responses."""

import json
import re
from collections.abc import Mapping
from typing import Any

from invoice_dashboard.extraction.exceptions import EmptyResponseError, MalformedResponseError

_OPENING_FENCE = re.compile(r"^```[\w+-]*[ \t]*\n?")
_CLOSING_FENCE = re.compile(r"\n?[ \t]*```$")


def strip_code_fence(raw: str) -> str:
    """Remove a markdown code fence wrapped around the whole response."""
    cleaned = raw.strip()
    cleaned = _OPENING_FENCE.sub("", cleaned, count=1)
    cleaned = _CLOSING_FENCE.sub("", cleaned, count=1)
    return cleaned.strip()


def _reject_constant(name: str) -> Any:
    raise ValueError(f"non-standard JSON constant {name}")


def parse_response(raw: str) -> dict[str, Any]:
    """Turn raw model text into a JSON object.

    Raises:
        EmptyResponseError: if nothing is left after fence stripping.
        MalformedResponseError: if the text is not a single JSON object.
    """
    cleaned = strip_code_fence(raw)
    if not cleaned:
        raise EmptyResponseError("The AI returned an empty response.")
    try:
        parsed = json.loads(cleaned, parse_constant=_reject_constant)
    except ValueError as exc:
        raise MalformedResponseError(f"Invalid JSON response: {exc}") from exc
    if not isinstance(parsed, dict):
        raise MalformedResponseError("JSON response must be an object")
    return parsed


def is_number(value: object) -> bool:
    return isinstance(value, (int, float)) and not isinstance(value, bool)


def repair_payload(payload: Mapping[str, Any], source_text: str | None = None) -> dict[str, Any]:
    """Apply the two output guarantees and leave everything else untouched.

    ``raw_text`` falls back to ``source_text`` when the model left it falsy,
    and a non-numeric ``total_amount`` becomes ``0``.
    """
    repaired = dict(payload)
    if source_text and not repaired.get("raw_text"):
        repaired["raw_text"] = source_text
    if not is_number(repaired.get("total_amount")):
        repaired["total_amount"] = 0
    return repaired
