"""
Parsing of model text output.

Models often wrap JSON in markdown fences; everything here strips those
first. Parsers for structured answers never raise on malformed output:
missing or unparseable values come back as empty strings.

Dependencies: json, re
System role: Tolerant decoding of Gemini responses
"""

import json
import logging
import re
from typing import Any

from agrideck.observability.log_utils import safe_log_value

logger = logging.getLogger(__name__)

_LEADING_FENCE = re.compile(r"^```(?:json)?\s*", re.IGNORECASE)
_TRAILING_FENCE = re.compile(r"\s*```$")


def strip_code_fences(text: str) -> str:
    """Remove a leading ``` / ```json marker and a trailing ``` from text."""
    cleaned = _LEADING_FENCE.sub("", text.strip())
    return _TRAILING_FENCE.sub("", cleaned).strip()


def parse_json(text: str) -> Any | None:
    """Decode JSON from (possibly fenced) model output; None when invalid."""
    try:
        return json.loads(strip_code_fences(text))
    except json.JSONDecodeError:
        logger.warning(
            f"{__name__}:parse_json - unparseable model output",
            extra={"text": safe_log_value(text, max_length=200)},
        )
        return None


def _clean(value: Any) -> str:
    return value.strip() if isinstance(value, str) else ""


def parse_mandi_translation(text: str) -> dict[str, str]:
    """Extract {"name", "district"} from a single mandi response."""
    parsed = parse_json(text)
    if not isinstance(parsed, dict):
        return {"name": "", "district": ""}
    return {"name": _clean(parsed.get("name")), "district": _clean(parsed.get("district"))}


def _index_of(entry: Any, count: int) -> int | None:
    if not isinstance(entry, dict):
        return None
    try:
        index = int(entry.get("index"))
    except (TypeError, ValueError):
        return None
    return index if 1 <= index <= count else None


def parse_batch(text: str, count: int, fields: tuple[str, ...]) -> list[dict[str, str]]:
    """
    Decode a batch answer into exactly count entries, in input order.

    Entries are matched by the 1-based "index" the model echoes; an
    entry without a usable index is taken by position.

    Args:
        text: Raw model output, expected to be a JSON array
        count: Number of input items
        fields: Keys to extract from each entry

    Returns:
        List of length count of {field: str}; unmatched entries are all ""
    """
    parsed = parse_json(text)
    if isinstance(parsed, dict):
        parsed = parsed.get("translations")
    if not isinstance(parsed, list):
        parsed = []

    by_index: dict[int, dict] = {}
    for entry in parsed:
        index = _index_of(entry, count)
        if index is not None:
            by_index.setdefault(index, entry)

    results = []
    for position in range(count):
        entry = by_index.get(position + 1)
        if entry is None and position < len(parsed) and _index_of(parsed[position], count) is None:
            entry = parsed[position]
        if not isinstance(entry, dict):
            entry = {}
        results.append({name: _clean(entry.get(name)) for name in fields})
    return results
